# MISE-DASHBOARD/app/domains/weather/schemas.py
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class WeatherResult(BaseModel):
    # 대시보드는 camelCase 키를 사용 (windSpeed, precipitationType ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    temperature: Optional[float] = None     # 기온 (T1H)
    humidity: Optional[int] = None          # 습도 (REH)
    wind_speed: Optional[float] = None      # 풍속 m/s (WSD)
    wind_direction: Optional[int] = None    # 풍향 deg (VEC)
    precipitation: str = "0"                # 1시간 강수량 (RN1)
    precipitation_type: str = "none"        # 강수형태 (PTY)
    sky: str = "clear"                      # 하늘상태 (SKY, 강수 시 강수형태로 대체)
    wind_chill: Optional[float] = None
    uv_index: Optional[int] = None
    uv_grade: Optional[str] = None
    base_time: str                          # "HH:00" 실황 기준 시각

class UVLookup(BaseModel):
    """자외선지수 조회 결과. 실패해도 예외 대신 warning 에 사유를 남깁니다."""
    area_no: Optional[str] = None
    index: Optional[int] = None
    grade: Optional[str] = None
    warning: Optional[str] = None
