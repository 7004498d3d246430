"""Centralised logging configuration for the sketch generation backend."""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Dict

from core.utils.env import get_env

_PATH_TRIM_PREFIXES = ("/app/",)
_ORIGINAL_LOG_RECORD_FACTORY = logging.getLogRecordFactory()
_LOG_RECORD_FACTORY_CONFIGURED = False

_LOGGING_CONFIGURED = False

# Third-party loggers capped at WARNING; the Google SDK is silenced entirely.
_NOISY_LOGGERS = (
    "PIL",
    "PIL.PngImagePlugin",
    "PIL.Image",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
    "httpx",
    "h11",
    "multipart",
    "python_multipart",
)
_SILENCED_LOGGERS = ("grpc", "google", "google.genai")


class _DataUrlFilter(logging.Filter):
    """Collapse inline base64 payloads that would otherwise flood the log."""

    _MAX_MESSAGE = 4000

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if "base64," in message and len(message) > self._MAX_MESSAGE:
            record.msg = message[: self._MAX_MESSAGE] + "... [truncated]"
            record.args = ()
        return True


def _resolve_level(value: str | None, default: str) -> str:
    value = (value or "").strip().upper()
    if value and getattr(logging, value, None) is not None:
        return value
    return default


def _install_log_record_factory() -> None:
    """Install a log record factory that exposes trimmed paths."""

    global _LOG_RECORD_FACTORY_CONFIGURED
    if _LOG_RECORD_FACTORY_CONFIGURED:
        return

    def factory(*args, **kwargs):
        record = _ORIGINAL_LOG_RECORD_FACTORY(*args, **kwargs)
        pathname = getattr(record, "pathname", "") or ""
        for prefix in _PATH_TRIM_PREFIXES:
            if pathname.startswith(prefix):
                record.shortpathname = pathname[len(prefix):]
                break
        else:
            record.shortpathname = pathname
        return record

    logging.setLogRecordFactory(factory)
    _LOG_RECORD_FACTORY_CONFIGURED = True


def setup_logging(force: bool = False) -> None:
    """Configure root/application loggers for console and, in containers, file output."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    inside_docker = bool(get_env("BACKEND_LOG_DIR")) or (get_env("NODE_ENV") == "production")

    log_level = _resolve_level(get_env("BACKEND_LOG_LEVEL", default="INFO"), "INFO")
    console_level = _resolve_level(get_env("BACKEND_LOG_CONSOLE_LEVEL"), log_level)
    file_level = _resolve_level(get_env("BACKEND_LOG_FILE_LEVEL"), log_level)
    access_level = _resolve_level(get_env("BACKEND_ACCESS_LOG_LEVEL"), "WARNING")

    handlers: Dict[str, object] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": console_level,
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    }
    root_handlers = ["console"]

    if inside_docker:
        log_dir = Path(get_env("BACKEND_LOG_DIR", default="/storage/logs") or "/storage/logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / (get_env("BACKEND_LOG_FILE", default="backend.log") or "backend.log")
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": file_level,
            "formatter": "standard",
            "filename": str(log_file),
            "when": "midnight",
            "backupCount": int(get_env("BACKEND_LOG_RETENTION", default="7") or "7"),
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    use_milliseconds = (
        (get_env("BACKEND_LOG_TIME_MS", default="false") or "false").lower()
        in {"1", "true", "yes", "on"}
    )
    location_fmt = "%(shortpathname)s:%(lineno)d"
    if use_milliseconds:
        fmt = "%(asctime)s.%(msecs)03d %(levelname)s [{location}] - %(message)s".format(location=location_fmt)
    else:
        fmt = "%(asctime)s %(levelname)s [{location}] - %(message)s".format(location=location_fmt)

    config: Dict[str, object] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "filters": {
            "data_urls": {"()": _DataUrlFilter},
        },
        "handlers": handlers,
        "root": {
            "level": log_level,
            "handlers": root_handlers,
        },
        "loggers": {
            "uvicorn": {
                "level": "WARNING",
                "handlers": root_handlers,
                "propagate": False,
            },
            "uvicorn.error": {
                "level": "WARNING",
                "handlers": root_handlers,
                "propagate": False,
            },
            "uvicorn.access": {
                "level": access_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }
    for handler in handlers.values():
        handler["filters"] = ["data_urls"]  # type: ignore[index]

    _install_log_record_factory()

    logging.config.dictConfig(config)
    logging.captureWarnings(True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name in _SILENCED_LOGGERS:
        logging.getLogger(name).setLevel(logging.CRITICAL)

    _LOGGING_CONFIGURED = True


__all__ = ["setup_logging"]
