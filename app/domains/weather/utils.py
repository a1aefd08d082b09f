# MISE-DASHBOARD/app/domains/weather/utils.py

import math
from datetime import datetime, timedelta

import pytz

KST = pytz.timezone("Asia/Seoul")

# 초단기실황 강수형태(PTY) 코드
PRECIPITATION_TYPES = {
    0: "none",
    1: "rain",
    2: "rain-snow",
    3: "snow",
    5: "raindrop",
    6: "raindrop-snow-flurry",
    7: "snow-flurry",
}
NO_PRECIPITATION = "none"

# 초단기예보 하늘상태(SKY) 코드
SKY_STATES = {"1": "clear", "3": "mostly-cloudy", "4": "overcast"}
DEFAULT_SKY = "clear"


def calculate_wind_chill(temp: float, wind_speed_ms: float) -> float:
    """
    체감온도 (기온 10°C 이하 + 풍속 4.8km/h 이상일 때만 적용)
    소수 첫째 자리에서 반올림(half-up)
    """
    v = wind_speed_ms * 3.6
    if temp <= 10 and v >= 4.8:
        chill = 13.12 + 0.6215 * temp - 11.37 * pow(v, 0.16) + 0.3965 * temp * pow(v, 0.16)
        return math.floor(chill * 10 + 0.5) / 10
    return temp


def uv_grade(index: int) -> str:
    if index <= 2:
        return "low"
    elif index <= 5:
        return "moderate"
    elif index <= 7:
        return "high"
    elif index <= 10:
        return "very-high"
    return "extreme"


def precipitation_type(code) -> str:
    try:
        return PRECIPITATION_TYPES.get(int(code), NO_PRECIPITATION)
    except (TypeError, ValueError):
        return NO_PRECIPITATION


def sky_state(code) -> str:
    return SKY_STATES.get(str(code), DEFAULT_SKY)


def resolve_sky(sky: str, precip_type: str) -> str:
    """강수가 있으면 하늘상태 대신 강수형태를 표시"""
    if precip_type != NO_PRECIPITATION:
        return precip_type
    return sky


def now_kst() -> datetime:
    return datetime.now(KST)


def nowcast_base(now: datetime) -> tuple[str, str]:
    """초단기실황: 매시 정각 발표, 40분 이후 제공 -> 40분 전이면 직전 정시 사용"""
    base = now.replace(minute=0, second=0, microsecond=0)
    if now.minute < 40:
        base -= timedelta(hours=1)
    return base.strftime("%Y%m%d"), base.strftime("%H00")


def forecast_base(now: datetime) -> tuple[str, str]:
    """초단기예보: 매시 30분 발표, 45분 이후 제공"""
    base = now.replace(minute=0, second=0, microsecond=0)
    if now.minute < 45:
        base -= timedelta(hours=1)
    return base.strftime("%Y%m%d"), base.strftime("%H30")


def uv_time(now: datetime) -> str:
    return now.strftime("%Y%m%d%H")
