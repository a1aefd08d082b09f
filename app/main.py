# MISE-DASHBOARD/app/main.py
import logging
from pathlib import Path

from fastapi import FastAPI, Request, HTTPException
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError # 데이터 검증
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder

from app.core.config import settings
from app.core.exceptions import UpstreamAPIError
from app.core.logger import setup_logging
from app.core.lifespan import lifespan
from app.middleware import APIAccessLoggerMiddleware

# 라우터 임포트
from app.domains.air.router import router as air_router
from app.domains.weather.router import router as weather_router
from app.domains.geo.router import router as geo_router

# 로깅 설정 활성화
setup_logging()
logger = logging.getLogger("api_monitor")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="에어코리아 / 기상청 공공데이터 프록시 API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_middleware(
    APIAccessLoggerMiddleware,
)

app.include_router(air_router, prefix="/api", tags=["Air Quality"])
app.include_router(weather_router, prefix="/api", tags=["Weather"])
app.include_router(geo_router, prefix="/api", tags=["Geo"])


@app.get("/health")
def health_check():
    return {"status": "ok", "message": "Dashboard Server is Running"}


# ==========================================================
# 전역 에러 핸들러 설정
# ==========================================================

# 예상치 못한 시스템 에러(500)는 APIAccessLoggerMiddleware 에서 로그를 남기고 종결합니다.

# 1. 공공데이터 API 실패 (resultCode != '00', 통신/파싱 실패)
@app.exception_handler(UpstreamAPIError)
async def upstream_exception_handler(request: Request, exc: UpstreamAPIError):
    return JSONResponse(
        status_code=500,
        content={
            "status": "error",
            "error": exc.message,
        },
    )

# 2. 우리가 의도한 에러 (HTTPException)
# 예: lat/lng 누락, sido 파라미터 누락
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "fail",
            "error": exc.detail,
            "code": exc.status_code
        },
        headers=exc.headers,
    )

# 3. 데이터 형식이 틀렸을 때 (Validation Error)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    error_details = exc.errors()
    logger.error(f"❌ VALIDATION_ERROR | {request.url} | Details: {error_details}")

    return JSONResponse(
        status_code=422,
        content={
            "status": "fail",
            "error": "입력 값이 올바르지 않습니다.",
            "details": jsonable_encoder(error_details)
        },
    )
# ==========================================================

# 대시보드 정적 파일 (라우터보다 뒤에 마운트해야 /api 가 가려지지 않음)
if Path(settings.STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
