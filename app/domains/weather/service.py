# MISE-DASHBOARD/app/domains/weather/service.py

import logging
from datetime import datetime
from typing import Callable, Optional

import httpx

from app.core.cache import TTLCache
from app.core.exceptions import UpstreamAPIError
from app.domains.weather.client import KmaWeatherClient, LivingWeatherClient
from app.domains.weather.schemas import UVLookup, WeatherResult
from app.domains.weather.utils import (
    calculate_wind_chill,
    forecast_base,
    now_kst,
    nowcast_base,
    precipitation_type,
    resolve_sky,
    sky_state,
    uv_grade,
    uv_time,
)
from app.utils.location import SIDO_UV_AREA_CODES, find_nearest_sido, map_to_grid

logger = logging.getLogger(__name__)


def _to_float(value) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_int(value) -> Optional[int]:
    number = _to_float(value)
    if number is None:
        return None
    try:
        return int(number)
    except (ValueError, OverflowError):
        return None


class WeatherService:
    def __init__(
        self,
        weather_client: KmaWeatherClient,
        uv_client: LivingWeatherClient,
        cache: TTLCache,
        now: Callable[[], datetime] = now_kst,
    ):
        self.weather_client = weather_client
        self.uv_client = uv_client
        self.cache = cache
        self._now = now

    async def get_weather(self, lat: float, lng: float) -> WeatherResult:
        nx, ny = map_to_grid(lat, lng)
        cache_key = f"weather_{nx}_{ny}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        now = self._now()
        try:
            result = await self._assemble(nx, ny, now)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ 날씨 데이터 조회 실패: {e}", extra={"context": {"nx": nx, "ny": ny}})
            raise UpstreamAPIError(str(e)) from e

        # 4) 자외선지수 (실패해도 날씨 응답은 그대로 반환)
        uv = await self.lookup_uv(lat, lng, now)
        if uv.warning:
            logger.warning(f"⚠️ 자외선지수 조회 생략: {uv.warning}", extra={"context": {"area_no": uv.area_no}})
        result.uv_index = uv.index
        result.uv_grade = uv.grade

        self.cache.set(cache_key, result)
        return result

    async def _assemble(self, nx: int, ny: int, now: datetime) -> WeatherResult:
        ncst_date, ncst_time = nowcast_base(now)
        fcst_date, fcst_time = forecast_base(now)

        result = WeatherResult(base_time=f"{ncst_time[:2]}:{ncst_time[2:]}")

        # 1) 초단기실황
        try:
            items = await self.weather_client.fetch_nowcast(nx, ny, ncst_date, ncst_time)
        except UpstreamAPIError as e:
            logger.warning(f"⚠️ 초단기실황 결과 에러: {e.message}", extra={"context": {"nx": nx, "ny": ny}})
            items = []
        self._apply_nowcast(result, items)

        # 2) 초단기예보 (SKY)
        try:
            items = await self.weather_client.fetch_forecast(nx, ny, fcst_date, fcst_time)
        except UpstreamAPIError as e:
            logger.warning(f"⚠️ 초단기예보 결과 에러: {e.message}", extra={"context": {"nx": nx, "ny": ny}})
            items = []
        sky_item = next((item for item in items if item.get('category') == 'SKY'), None)
        if sky_item:
            result.sky = sky_state(sky_item.get('fcstValue'))

        result.sky = resolve_sky(result.sky, result.precipitation_type)

        # 3) 체감온도
        if result.temperature is not None and result.wind_speed is not None:
            result.wind_chill = calculate_wind_chill(result.temperature, result.wind_speed)

        return result

    @staticmethod
    def _apply_nowcast(result: WeatherResult, items: list):
        for item in items:
            category = item.get('category')
            value = item.get('obsrValue')
            if category == 'T1H':
                result.temperature = _to_float(value)
            elif category == 'RN1':
                if value is not None:
                    result.precipitation = str(value)
            elif category == 'REH':
                result.humidity = _to_int(value)
            elif category == 'PTY':
                result.precipitation_type = precipitation_type(value)
            elif category == 'WSD':
                result.wind_speed = _to_float(value)
            elif category == 'VEC':
                result.wind_direction = _to_int(value)

    async def lookup_uv(self, lat: float, lng: float, now: Optional[datetime] = None) -> UVLookup:
        """가장 가까운 시도의 자외선지수. 어떤 실패도 밖으로 던지지 않습니다."""
        sido = find_nearest_sido(lat, lng)
        area_no = SIDO_UV_AREA_CODES.get(sido)
        if not area_no:
            return UVLookup(warning=f"{sido}: 행정구역코드 없음")

        now = now or self._now()
        try:
            items = await self.uv_client.fetch_uv_index(area_no, uv_time(now))
        except Exception as e:
            return UVLookup(area_no=area_no, warning=f"자외선지수 조회 실패: {e}")

        if not items:
            return UVLookup(area_no=area_no, warning="자외선지수 데이터 없음")

        raw = items[0].get('h0') or items[0].get('h3') or '0'
        index = _to_int(raw)
        if index is None:
            return UVLookup(area_no=area_no, warning=f"자외선지수 값 해석 실패: {raw!r}")

        return UVLookup(area_no=area_no, index=index, grade=uv_grade(index))
