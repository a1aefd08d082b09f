# MISE-DASHBOARD/app/core/lifespan.py

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.core.cache import TTLCache
from app.core.config import settings

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup] 업스트림 공용 HTTP 클라이언트와 응답 캐시 준비
    app.state.http = httpx.AsyncClient()
    app.state.cache = TTLCache(ttl_seconds=settings.CACHE_TTL_SECONDS)
    logger.info(f"🚀 서버 시작: 응답 캐시 {settings.CACHE_TTL_SECONDS:.0f}초")

    yield # 서버 실행 중

    # [Shutdown]
    logger.info("🛑 서버 종료: HTTP 클라이언트를 닫습니다.")
    await app.state.http.aclose()
    app.state.cache.clear()
