# MISE-DASHBOARD/app/domains/geo/service.py

import logging
from pathlib import Path

import httpx

from app.core.config import settings
from app.core.exceptions import UpstreamAPIError

logger = logging.getLogger(__name__)

class GeoDataService:
    """
    행정구역 지도(TopoJSON)
    - 로컬 사본이 있으면 그대로 사용하고 다시 받지 않음
    - 없으면 원본에서 받아 파일로 저장 후 반환
    """

    def __init__(self, http: httpx.AsyncClient, cache_file: str | None = None, source_url: str | None = None):
        self.http = http
        self.cache_file = Path(cache_file or settings.GEO_CACHE_FILE)
        self.source_url = source_url or settings.GEO_SOURCE_URL

    async def get_topology(self) -> str:
        if self.cache_file.exists():
            try:
                return self.cache_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                # 읽기 실패 시 원본에서 다시 받음
                logger.warning(f"⚠️ 지도 캐시 파일 읽기 실패, 다시 다운로드합니다: {e}")

        try:
            logger.info("🗺️ 행정구역 지도 데이터 다운로드 중...")
            response = await self.http.get(self.source_url, follow_redirects=True)
            response.raise_for_status()
            text = response.text
            self.cache_file.write_text(text, encoding="utf-8")
            logger.info("✅ 행정구역 지도 데이터 캐시 완료")
            return text
        except (httpx.HTTPError, OSError) as e:
            logger.error(f"❌ 지도 데이터 다운로드 실패: {e}")
            raise UpstreamAPIError("지도 데이터를 불러올 수 없습니다") from e
