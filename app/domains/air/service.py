# MISE-DASHBOARD/app/domains/air/service.py

import asyncio
import logging

import httpx

from app.core.cache import TTLCache
from app.core.exceptions import UpstreamAPIError
from app.domains.air.client import AirKoreaClient

logger = logging.getLogger(__name__)

class AirQualityService:
    def __init__(self, client: AirKoreaClient, cache: TTLCache):
        self.client = client
        self.cache = cache

    async def get_realtime(self, sido_name: str) -> list:
        """시도별 실시간 측정정보. 실패는 UpstreamAPIError 로 올립니다."""
        cache_key = f"sido_{sido_name}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            items = await self.client.fetch_sido_realtime(sido_name)
        except UpstreamAPIError as e:
            logger.warning(f"⚠️ 시도별 데이터 결과 에러 [{sido_name}]: {e.message}")
            raise
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ 시도별 데이터 조회 실패 [{sido_name}]: {e}")
            raise UpstreamAPIError(str(e)) from e

        self.cache.set(cache_key, items)
        return items

    async def _realtime_or_empty(self, sido_name: str) -> list:
        try:
            return await self.get_realtime(sido_name)
        except UpstreamAPIError:
            return []
        except Exception as e:
            logger.error(f"❌ 시도 데이터 조회 실패 [{sido_name}]: {e}", exc_info=True)
            return []

    async def get_realtime_bulk(self, sido_names: list[str]) -> dict[str, list]:
        """여러 시도를 동시에 조회. 한 시도의 실패는 빈 리스트로 대체됩니다."""
        results = await asyncio.gather(*(self._realtime_or_empty(name) for name in sido_names))
        return dict(zip(sido_names, results))

    async def get_station_list(self, sido_name: str) -> list:
        """측정소 목록 (주소 포함). 실패 시 빈 리스트, 캐시하지 않음."""
        cache_key = f"stlist_{sido_name}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            items = await self.client.fetch_station_list(sido_name)
        except UpstreamAPIError as e:
            logger.warning(f"⚠️ 측정소 목록 결과 에러 [{sido_name}]: {e.message}")
            return []
        except Exception as e:
            logger.error(f"❌ 측정소 목록 조회 실패 [{sido_name}]: {e}", exc_info=True)
            return []

        self.cache.set(cache_key, items)
        return items
