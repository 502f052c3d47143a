import json
import logging
import sys
import datetime

from .config import settings


def _ts() -> str:
    """UTC timestamp with millisecond precision."""
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def setup_logger(level: str | None = None) -> logging.Logger:
    """Return the package logger, configuring it on first use."""
    logger = logging.getLogger("multiform_validator")
    if logger.handlers:
        return logger
    level = level or settings.LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def jlog(logger: logging.Logger, level: str, event: str, **payload) -> None:
    """Emit a structured JSON log line."""
    record = {"ts": _ts(), "level": level.upper(), "event": event, **payload}
    msg = json.dumps(record, ensure_ascii=False, default=str)
    match level.upper():
        case "ERROR":
            logger.error(msg)
        case "WARN" | "WARNING":
            logger.warning(msg)
        case "DEBUG":
            logger.debug(msg)
        case _:
            logger.info(msg)
