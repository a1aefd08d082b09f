# MISE-DASHBOARD/app/domains/weather/router.py

import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_weather_service
from app.domains.weather.schemas import WeatherResult
from app.domains.weather.service import WeatherService

router = APIRouter()

def _parse_coordinate(value: Optional[str]) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None

@router.get("/weather", response_model=WeatherResult)
async def get_weather(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    service: WeatherService = Depends(get_weather_service),
):
    """
    위경도 -> 기상청 격자 변환 후 현재 날씨 + 체감온도 + 자외선지수
    - 같은 격자는 10분간 캐시된 결과를 반환합니다.
    """
    lat_value = _parse_coordinate(lat)
    lng_value = _parse_coordinate(lng)
    if lat_value is None or lng_value is None:
        raise HTTPException(status_code=400, detail="lat, lng 파라미터 필요")

    return await service.get_weather(lat_value, lng_value)
