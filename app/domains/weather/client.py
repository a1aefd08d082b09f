# MISE-DASHBOARD/app/domains/weather/client.py

import logging

import httpx

from app.core.config import settings
from app.core.data_portal import DataPortalClient

logger = logging.getLogger(__name__)

class KmaWeatherClient(DataPortalClient):
    """기상청 단기예보 조회서비스 (초단기실황 / 초단기예보)"""

    def __init__(self, http: httpx.AsyncClient, api_key: str | None = None):
        super().__init__(http, api_key)
        self.base_url = settings.KMA_WEATHER_BASE_URL

    async def _fetch(self, operation: str, nx: int, ny: int, base_date: str, base_time: str) -> list:
        params = {
            'dataType': 'JSON',
            'numOfRows': '60',
            'pageNo': '1',
            'base_date': base_date,
            'base_time': base_time,
            'nx': str(nx),
            'ny': str(ny),
        }
        logger.debug(f"📡 기상청 API 요청: {operation} {base_date} {base_time} (nx={nx}, ny={ny})")
        body = await self._get_body(f"{self.base_url}/{operation}", params)
        return self._items(body)

    async def fetch_nowcast(self, nx: int, ny: int, base_date: str, base_time: str) -> list:
        """초단기실황 (T1H, RN1, REH, PTY, WSD, VEC)"""
        return await self._fetch("getUltraSrtNcst", nx, ny, base_date, base_time)

    async def fetch_forecast(self, nx: int, ny: int, base_date: str, base_time: str) -> list:
        """초단기예보 (SKY 하늘상태 등)"""
        return await self._fetch("getUltraSrtFcst", nx, ny, base_date, base_time)


class LivingWeatherClient(DataPortalClient):
    """기상청 생활기상지수 조회서비스 (자외선지수)"""

    def __init__(self, http: httpx.AsyncClient, api_key: str | None = None):
        super().__init__(http, api_key)
        self.base_url = settings.LIVING_WEATHER_BASE_URL

    async def fetch_uv_index(self, area_no: str, time: str) -> list:
        params = {
            'dataType': 'JSON',
            'numOfRows': '10',
            'pageNo': '1',
            'areaNo': area_no,
            'time': time,
        }
        body = await self._get_body(f"{self.base_url}/getUVIdxV4", params)
        return self._items(body)
