import logging
import os
import json
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime

from app.core.config import settings

_configured = False

class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # extra={"context": {...}} 로 넘긴 값(시도명, 격자좌표 등)은 그대로 병합
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            log_record.update(context)

        # 에러 발생 시 파일 위치와 상세 스택 정보 추가
        if record.levelno >= logging.ERROR:
            log_record["location"] = f"{record.pathname}:{record.lineno}"
            if record.exc_info:
                log_record["stack_trace"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False, default=str)

def setup_logging(log_dir: str | None = None, level: str | None = None):
    global _configured
    if _configured:
        return

    log_dir = log_dir or settings.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level or settings.LOG_LEVEL)

    # 업스트림 호출마다 찍히는 httpx INFO 로그는 차단
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.ERROR)
    logging.getLogger("watchfiles").setLevel(logging.ERROR)

    # 파일 핸들러 (운영용: 7일 보관)
    file_handler = TimedRotatingFileHandler(
        filename=os.path.join(log_dir, "server.log"),
        when="midnight", interval=1, backupCount=7, encoding="utf-8"
    )
    file_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(file_handler)

    # 콘솔 핸들러 (개발용)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JsonFormatter())
    root_logger.addHandler(console_handler)

    _configured = True
