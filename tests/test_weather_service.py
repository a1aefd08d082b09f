import unittest
from datetime import datetime

import httpx

from app.core.cache import TTLCache
from app.core.exceptions import UpstreamAPIError
from app.domains.weather.client import KmaWeatherClient, LivingWeatherClient
from app.domains.weather.service import WeatherService
from app.domains.weather.utils import KST, calculate_wind_chill

FIXED_NOW = KST.localize(datetime(2026, 10, 19, 14, 30))


def _envelope(items, code="00", msg="NORMAL_SERVICE"):
    return {
        "response": {
            "header": {"resultCode": code, "resultMsg": msg},
            "body": {"items": {"item": items}},
        }
    }


NOWCAST_ITEMS = [
    {"category": "T1H", "obsrValue": "5.0"},
    {"category": "RN1", "obsrValue": "0.5"},
    {"category": "REH", "obsrValue": "60"},
    {"category": "PTY", "obsrValue": "1"},
    {"category": "WSD", "obsrValue": "5.0"},
    {"category": "VEC", "obsrValue": "270"},
]
FORECAST_ITEMS = [
    {"category": "LGT", "fcstValue": "0"},
    {"category": "SKY", "fcstValue": "1"},
]


class FakeUpstream:
    """요청 경로별로 응답을 돌려주는 가짜 공공데이터 API"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.nowcast = _envelope(NOWCAST_ITEMS)
        self.forecast = _envelope(FORECAST_ITEMS)
        self.uv = _envelope([{"code": "A07", "h0": "3", "h3": "4"}])
        self.nowcast_error: Exception | None = None
        self.uv_raw: str | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("getUltraSrtNcst"):
            if self.nowcast_error:
                raise self.nowcast_error
            return httpx.Response(200, json=self.nowcast)
        if path.endswith("getUltraSrtFcst"):
            return httpx.Response(200, json=self.forecast)
        if path.endswith("getUVIdxV4"):
            if self.uv_raw is not None:
                return httpx.Response(200, text=self.uv_raw)
            return httpx.Response(200, json=self.uv)
        return httpx.Response(404)

    def calls_to(self, operation: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(operation)]


class TestWeatherService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.upstream = FakeUpstream()
        self.http = httpx.AsyncClient(transport=httpx.MockTransport(self.upstream))
        self.cache = TTLCache()
        self.service = WeatherService(
            KmaWeatherClient(self.http, api_key="test-key"),
            LivingWeatherClient(self.http, api_key="test-key"),
            self.cache,
            now=lambda: FIXED_NOW,
        )

    async def asyncTearDown(self):
        await self.http.aclose()

    async def test_assembles_weather_result(self):
        result = await self.service.get_weather(37.5665, 126.978)

        self.assertEqual(result.temperature, 5.0)
        self.assertEqual(result.humidity, 60)
        self.assertEqual(result.wind_speed, 5.0)
        self.assertEqual(result.wind_direction, 270)
        self.assertEqual(result.precipitation, "0.5")
        self.assertEqual(result.precipitation_type, "rain")
        # 강수형태가 하늘상태를 덮어씀
        self.assertEqual(result.sky, "rain")
        self.assertEqual(result.wind_chill, calculate_wind_chill(5.0, 5.0))
        self.assertEqual(result.uv_index, 3)
        self.assertEqual(result.uv_grade, "moderate")
        self.assertEqual(result.base_time, "13:00")

    async def test_request_parameters(self):
        await self.service.get_weather(37.5665, 126.978)

        ncst = self.upstream.calls_to("getUltraSrtNcst")[0].url.params
        self.assertEqual(ncst["nx"], "60")
        self.assertEqual(ncst["ny"], "127")
        self.assertEqual(ncst["base_date"], "20261019")
        self.assertEqual(ncst["base_time"], "1300")
        self.assertEqual(ncst["serviceKey"], "test-key")

        fcst = self.upstream.calls_to("getUltraSrtFcst")[0].url.params
        self.assertEqual(fcst["base_time"], "1330")

        uv = self.upstream.calls_to("getUVIdxV4")[0].url.params
        self.assertEqual(uv["areaNo"], "1100000000")
        self.assertEqual(uv["time"], "2026101914")

    async def test_result_is_cached_per_grid_cell(self):
        first = await self.service.get_weather(37.5665, 126.978)
        second = await self.service.get_weather(37.5665, 126.978)

        self.assertIs(first, second)
        self.assertEqual(len(self.upstream.calls_to("getUltraSrtNcst")), 1)
        self.assertIsNotNone(self.cache.get("weather_60_127"))

    async def test_sky_from_forecast_when_no_precipitation(self):
        self.upstream.nowcast = _envelope([
            {"category": "T1H", "obsrValue": "20.0"},
            {"category": "PTY", "obsrValue": "0"},
        ])
        self.upstream.forecast = _envelope([{"category": "SKY", "fcstValue": "4"}])

        result = await self.service.get_weather(37.5665, 126.978)

        self.assertEqual(result.sky, "overcast")
        self.assertEqual(result.precipitation_type, "none")
        # 풍속 없으면 체감온도 계산 안 함
        self.assertIsNone(result.wind_chill)

    async def test_envelope_errors_leave_defaults(self):
        self.upstream.nowcast = _envelope([], code="03", msg="NO_DATA")
        self.upstream.forecast = _envelope([], code="03", msg="NO_DATA")

        result = await self.service.get_weather(37.5665, 126.978)

        self.assertIsNone(result.temperature)
        self.assertIsNone(result.humidity)
        self.assertEqual(result.precipitation, "0")
        self.assertEqual(result.precipitation_type, "none")
        self.assertEqual(result.sky, "clear")
        self.assertIsNone(result.wind_chill)

    async def test_rainfall_without_value_stays_zero(self):
        self.upstream.nowcast = _envelope([
            {"category": "RN1"},
            {"category": "T1H", "obsrValue": "12.0"},
        ])

        result = await self.service.get_weather(37.5665, 126.978)

        self.assertEqual(result.precipitation, "0")
        self.assertEqual(result.temperature, 12.0)

    async def test_network_failure_raises_upstream_error(self):
        self.upstream.nowcast_error = httpx.ConnectError("connection refused")

        with self.assertRaises(UpstreamAPIError):
            await self.service.get_weather(37.5665, 126.978)
        self.assertIsNone(self.cache.get("weather_60_127"))

    async def test_uv_failure_does_not_fail_weather(self):
        self.upstream.uv_raw = "<OpenAPI_ServiceResponse>SERVICE ERROR</OpenAPI_ServiceResponse>"

        result = await self.service.get_weather(37.5665, 126.978)

        self.assertEqual(result.temperature, 5.0)
        self.assertIsNone(result.uv_index)
        self.assertIsNone(result.uv_grade)


class TestLookupUv(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.upstream = FakeUpstream()
        self.http = httpx.AsyncClient(transport=httpx.MockTransport(self.upstream))
        self.service = WeatherService(
            KmaWeatherClient(self.http, api_key="k"),
            LivingWeatherClient(self.http, api_key="k"),
            TTLCache(),
            now=lambda: FIXED_NOW,
        )

    async def asyncTearDown(self):
        await self.http.aclose()

    async def test_uses_nearest_region_code(self):
        uv = await self.service.lookup_uv(35.1796, 129.0756)
        self.assertEqual(uv.area_no, "2600000000")
        self.assertEqual(uv.index, 3)
        self.assertIsNone(uv.warning)

    async def test_falls_back_to_h3(self):
        self.upstream.uv = _envelope([{"h0": "", "h3": "11"}])
        uv = await self.service.lookup_uv(37.5665, 126.978)
        self.assertEqual(uv.index, 11)
        self.assertEqual(uv.grade, "extreme")

    async def test_records_warning_on_envelope_error(self):
        self.upstream.uv = _envelope([], code="99", msg="LIMITED")
        uv = await self.service.lookup_uv(37.5665, 126.978)
        self.assertIsNone(uv.index)
        self.assertIn("LIMITED", uv.warning)

    async def test_records_warning_on_empty_items(self):
        self.upstream.uv = _envelope([])
        uv = await self.service.lookup_uv(37.5665, 126.978)
        self.assertIsNone(uv.index)
        self.assertIsNotNone(uv.warning)

    async def test_records_warning_on_unparsable_value(self):
        self.upstream.uv = _envelope([{"h0": "n/a"}])
        uv = await self.service.lookup_uv(37.5665, 126.978)
        self.assertIsNone(uv.index)
        self.assertIn("n/a", uv.warning)


if __name__ == "__main__":
    unittest.main()
