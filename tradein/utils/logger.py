"""
Structured JSON logging for the estimator.

``logger`` is the one adapter every module imports. Keyword arguments passed
to a log call become top-level fields of the JSON line, so
``logger.info("Loaded historical source", records=23)`` emits
``{"message": "Loaded historical source", "records": 23, ...}``.
"""

import logging
import os

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "tradein"

# Keyword arguments that belong to logging itself rather than to the record
_LOGGING_KWARGS = ("exc_info", "stack_info", "stacklevel")


class CallerLocationFilter(logging.Filter):
    """Tag error records with the ``file:line`` that logged them."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= logging.ERROR:
            record.file = f"{record.pathname}:{record.lineno}"
        return True


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(message)s",
            rename_fields={"asctime": "@timestamp", "levelname": "log_level"},
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(CallerLocationFilter())
    return handler


class StructuredLogger(logging.LoggerAdapter):
    """LoggerAdapter that turns keyword arguments into structured fields."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        passthrough = {
            name: kwargs.pop(name) for name in _LOGGING_KWARGS if name in kwargs
        }
        if kwargs:
            passthrough["extra"] = kwargs
        return msg, passthrough


def get_logger(name: str = LOGGER_NAME) -> StructuredLogger:
    """Return the adapter for ``name``, attaching the JSON handler once."""
    base = logging.getLogger(name)
    if not base.handlers:
        base.setLevel(_level_from_env())
        base.addHandler(_json_handler())
    return StructuredLogger(base, {})


logger = get_logger()
logger.debug(
    "Logging configured",
    effective_level=logging.getLevelName(logger.logger.getEffectiveLevel()),
)
