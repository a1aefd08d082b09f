# MISE-DASHBOARD/app/core/config.py

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "미세먼지 대시보드"

    # 공공데이터포털 인증키 (에어코리아 / 기상청 공용)
    DATA_API_KEY: str = ""

    # 에어코리아 대기오염정보 / 측정소정보
    AIRKOREA_BASE_URL: str = "https://apis.data.go.kr/B552584/ArpltnInforInqireSvc"
    STATION_BASE_URL: str = "https://apis.data.go.kr/B552584/MsrstnInfoInqireSvc"

    # 기상청 초단기실황/예보, 생활기상지수(자외선)
    KMA_WEATHER_BASE_URL: str = "https://apis.data.go.kr/1360000/VilageFcstInfoService_2.0"
    LIVING_WEATHER_BASE_URL: str = "https://apis.data.go.kr/1360000/LivingWthrIdxServiceV4"

    # 행정구역 지도(TopoJSON) 원본 및 로컬 사본
    GEO_SOURCE_URL: str = (
        "https://raw.githubusercontent.com/southkorea/southkorea-maps/master/"
        "kostat/2018/json/skorea-municipalities-2018-topo.json"
    )
    GEO_CACHE_FILE: str = "geo-cache.json"

    # 응답 캐시 유효시간 (10분)
    CACHE_TTL_SECONDS: float = 600.0

    # 대시보드 정적 파일
    STATIC_DIR: str = "public"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
