# MISE-DASHBOARD/app/domains/air/client.py

import httpx

from app.core.config import settings
from app.core.data_portal import DataPortalClient

class AirKoreaClient(DataPortalClient):
    """에어코리아 대기오염정보(시도별 실시간) / 측정소정보(측정소 목록)"""

    def __init__(self, http: httpx.AsyncClient, api_key: str | None = None):
        super().__init__(http, api_key)
        self.realtime_url = f"{settings.AIRKOREA_BASE_URL}/getCtprvnRltmMesureDnsty"
        self.station_url = f"{settings.STATION_BASE_URL}/getMsrstnList"

    async def fetch_sido_realtime(self, sido_name: str) -> list:
        params = {
            'returnType': 'json',
            'numOfRows': '200',
            'pageNo': '1',
            'sidoName': sido_name,
            'ver': '1.3',
        }
        body = await self._get_body(self.realtime_url, params)
        return self._items(body)

    async def fetch_station_list(self, addr: str) -> list:
        params = {
            'returnType': 'json',
            'numOfRows': '500',
            'pageNo': '1',
            'addr': addr,
        }
        body = await self._get_body(self.station_url, params)
        return self._items(body)
