import json
import logging
from datetime import datetime

from backend import config

_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        logging.basicConfig(
            level=getattr(logging, config.LOG_LEVEL, logging.INFO),
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
        _configured = True
    return logging.getLogger(name)


_debug_logger = get_logger("fridge_feast.debug")


def log_debug(event: str, data: dict):
    """
    AI_DEBUG_MODE=true 일 때만 요청 형태(모델, 길이 등)를 JSON 한 줄로 남긴다.
    키나 이미지 바이트는 넣지 말 것.
    """
    if not config.AI_DEBUG_MODE:
        return

    entry = {
        "timestamp": datetime.now().isoformat(),
        "event": event,
        "data": data,
    }
    _debug_logger.info(json.dumps(entry, default=str))
