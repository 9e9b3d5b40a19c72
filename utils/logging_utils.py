"""
Central logging configuration for Walkcast.

Call ``setup_logging()`` once from an entrypoint (``run_server.py``), and get
per-module loggers with ``get_tagged_logger(__name__, tag="best_times")``.
Every record carries a ``job_name`` and a ``tag`` field; INFO and below go to
stdout, WARNING and above to stderr.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Mapping, Optional


# Early logs (before setup_logging) still get timestamps and levels.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(job_name)s | %(tag)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED: bool = False


def _tag_for(logger_name: str) -> str:
    """Last dotted segment of a logger name ("walkcast.weather" -> "weather")."""
    return logger_name.rsplit(".", 1)[-1] if logger_name else "-"


class RecordContextFilter(logging.Filter):
    """
    Stamp `tag` and `job_name` onto records that do not already carry them.

    Tagged adapters supply their own `tag`; plain loggers fall back to the
    last segment of the logger name.
    """

    def __init__(self, job_name: Optional[str] = None) -> None:
        super().__init__()
        self.job_name = job_name or "-"

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "tag"):
            record.tag = _tag_for(record.name)
        if not hasattr(record, "job_name"):
            record.job_name = self.job_name
        return True


class BelowLevelFilter(logging.Filter):
    """Pass only records strictly below `level` (keeps warnings off stdout)."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno < self.level


def _stream_handler(stream: str, level: str, filters: list[str]) -> dict[str, Any]:
    return {
        "class": "logging.StreamHandler",
        "formatter": "standard",
        "filters": filters,
        "level": level,
        "stream": f"ext://sys.{stream}",
    }


def build_logging_config(
    *,
    level: str | int = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    job_name: Optional[str] = None,
) -> Mapping[str, Any]:
    """
    Build a dictConfig-style logging configuration.

    Parameters
    ----------
    level:
        Root logger level (e.g., "DEBUG", "INFO", logging.INFO).
    log_format, date_format:
        Formatter patterns for messages and timestamps.
    job_name:
        Logical name for this process, used for the `job_name` field.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "context": {"()": RecordContextFilter, "job_name": job_name},
            "below_warning": {"()": BelowLevelFilter, "level": logging.WARNING},
        },
        "formatters": {
            "standard": {"format": log_format, "datefmt": date_format},
        },
        "handlers": {
            "stdout": _stream_handler("stdout", "DEBUG", ["context", "below_warning"]),
            "stderr": _stream_handler("stderr", "WARNING", ["context"]),
        },
        "root": {"level": level, "handlers": ["stdout", "stderr"]},
    }


def setup_logging(
    *,
    level: str | int = "INFO",
    job_name: Optional[str] = None,
    override_existing: bool = False,
    **format_options: str,
) -> None:
    """
    Configure application-wide logging once per process.

    Repeated calls are no-ops unless `override_existing` is True.
    `format_options` are passed through to build_logging_config.
    """
    global _CONFIGURED

    if _CONFIGURED and not override_existing:
        return
    logging.config.dictConfig(build_logging_config(level=level, job_name=job_name, **format_options))
    _CONFIGURED = True


def get_tagged_logger(name: str, *, tag: Optional[str] = None) -> logging.LoggerAdapter:
    """Return a LoggerAdapter whose records carry `tag` (default: last segment of `name`)."""
    return logging.LoggerAdapter(logging.getLogger(name), {"tag": tag or _tag_for(name)})
