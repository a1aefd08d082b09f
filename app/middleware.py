# MISE-DASHBOARD/app/middleware.py
import time
import logging
import json
from fastapi import Request
from fastapi.responses import JSONResponse # 에러 응답 처리를 위해 필요
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("api_monitor")

class APIAccessLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        url = str(request.url)
        method = request.method

        try:
            response = await call_next(request)

            duration = time.time() - start_time

            # 400번대 이상 (파라미터 누락, 업스트림 실패 등)
            if response.status_code >= 400:
                error_log = {
                    "event": "HTTP_ERROR",
                    "status": response.status_code,
                    "method": method,
                    "url": url,
                    "duration": f"{duration:.4f}s"
                }
                logger.warning(json.dumps(error_log, ensure_ascii=False))
            elif request.url.path.startswith("/api"):
                # 정적 파일 요청은 정상 로그에서 제외
                logger.info(f"SUCCESS | {method} {url} | Time: {duration:.4f}s")

            return response

        except Exception as e:
            duration = time.time() - start_time

            critical_log = {
                "event": "SYSTEM_CRITICAL_ERROR",
                "method": method,
                "url": url,
                "error_type": type(e).__name__,
                "error_message": str(e),
                "duration": f"{duration:.4f}s"
            }
            logger.error(json.dumps(critical_log, ensure_ascii=False), exc_info=True)

            # 예외를 다시 raise하지 않고 500 응답으로 종결 (Uvicorn 중복 로그 방지)
            return JSONResponse(
                status_code=500,
                content={"status": "error", "error": "Internal Server Error", "support_id": f"{time.time()}"}
            )
