# MISE-DASHBOARD/app/core/data_portal.py

import logging
from urllib.parse import unquote # 키 디코딩용

import httpx

from app.core.config import settings
from app.core.exceptions import UpstreamAPIError

logger = logging.getLogger(__name__)

SUCCESS_CODE = "00"


def unwrap_envelope(payload: dict) -> dict:
    """
    공공데이터포털 공통 응답 구조에서 body를 꺼냅니다.
    { "response": { "header": {"resultCode", "resultMsg"}, "body": {...} } }
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("response"), dict):
        raise UpstreamAPIError("API 응답 형식 오류")
    response = payload["response"]
    header = response.get("header")
    if not isinstance(header, dict):
        header = {}
    if header.get("resultCode") != SUCCESS_CODE:
        raise UpstreamAPIError(header.get("resultMsg") or "API 오류", header.get("resultCode"))
    body = response.get("body")
    return body if isinstance(body, dict) else {}


class DataPortalClient:
    """data.go.kr 계열 API 공용 클라이언트 (재시도 없음, 타임아웃은 httpx 기본값)"""

    def __init__(self, http: httpx.AsyncClient, api_key: str | None = None):
        self.http = http
        # .env 의 키가 인코딩된 상태라면 디코딩해서 사용해야 이중 인코딩을 피할 수 있음
        self.api_key = unquote(api_key if api_key is not None else settings.DATA_API_KEY)

    async def _get_body(self, url: str, params: dict) -> dict:
        query = {"serviceKey": self.api_key, **params}
        response = await self.http.get(url, params=query)
        # 인증키 오류 등은 XML로 내려오기도 하므로 여기서 ValueError(JSON 파싱 실패)가 날 수 있음
        payload = response.json()
        return unwrap_envelope(payload)

    @staticmethod
    def _items(body: dict) -> list:
        """기상청 계열: body.items.item / 에어코리아 계열: body.items"""
        items = body.get("items")
        if isinstance(items, dict):
            items = items.get("item")
        return items if isinstance(items, list) else []
