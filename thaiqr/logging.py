import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from thaiqr.config import CodecSettings, get_settings

LOGGER_NAME = "thaiqr.codec"

_setup_lock = threading.Lock()

REDACTED_KEYS = frozenset({
    "payload",
    "mobile_number",
    "national_id",
    "ewallet_id",
    "national_ewallet_id",
    "bank_account",
    "consumer_id",
})


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)


def create_logger(name: str, ring_size: int, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    with _setup_lock:
        if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
            return logger
        logger.setLevel(level.upper())
        handler = RingBufferHandler(max_entries=ring_size)
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(settings: Optional[CodecSettings] = None) -> logging.Logger:
    settings = settings or get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level)


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    cleaned = {}
    for key, value in details.items():
        if key in REDACTED_KEYS and value:
            cleaned[key] = "***"
        else:
            cleaned[key] = value
    return cleaned


def log_event(event: str, details: Optional[dict] = None, level: int = logging.INFO) -> None:
    settings = get_settings()
    logger = get_logger(settings)
    details = redact(details) if settings.redact_logs else dict(details or {})
    logger.log(level, event, extra={"details": details})


def get_recent_events() -> List[Dict]:
    for handler in get_logger().handlers:
        if isinstance(handler, RingBufferHandler):
            return handler.get_events()
    return []
