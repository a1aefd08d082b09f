# MISE-DASHBOARD/app/core/dependencies.py

import httpx
from fastapi import Depends, Request

from app.core.cache import TTLCache
from app.domains.air.client import AirKoreaClient
from app.domains.air.service import AirQualityService
from app.domains.geo.service import GeoDataService
from app.domains.weather.client import KmaWeatherClient, LivingWeatherClient
from app.domains.weather.service import WeatherService

# lifespan 에서 app.state 에 올려둔 공용 객체를 핸들러로 주입합니다.

def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache

def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http

def get_air_service(
    http: httpx.AsyncClient = Depends(get_http_client),
    cache: TTLCache = Depends(get_cache),
) -> AirQualityService:
    return AirQualityService(AirKoreaClient(http), cache)

def get_weather_service(
    http: httpx.AsyncClient = Depends(get_http_client),
    cache: TTLCache = Depends(get_cache),
) -> WeatherService:
    return WeatherService(KmaWeatherClient(http), LivingWeatherClient(http), cache)

def get_geo_service(http: httpx.AsyncClient = Depends(get_http_client)) -> GeoDataService:
    return GeoDataService(http)
