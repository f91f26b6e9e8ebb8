"""Logging configuration for TalentMatch."""
import logging
import logging.config
from pathlib import Path
from typing import Any, Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Engine/pool chatter drowns registry events at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.orm")


def build_logging_config(level: str, log_file: Optional[str] = None) -> dict[str, Any]:
    """
    Build a ``logging.config.dictConfig`` mapping.

    Args:
        level: Root log level name
        log_file: Optional path for a rotating file handler (10 MB x 5)

    Returns:
        dictConfig-compatible dict
    """
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "registry",
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "registry",
            "filename": str(log_file),
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 5,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "registry": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {
            "level": level.upper(),
            "handlers": list(handlers),
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
    }


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure application-wide logging.

    Level and file default to ``settings.log_level`` / ``settings.log_file``.
    Does nothing if the root logger already has handlers, so scripts and an
    embedding service can both call it.
    """
    if logging.getLogger().handlers:
        return

    level = level or settings.log_level
    if not hasattr(logging, level.upper()):
        level = "INFO"
    log_file = log_file or settings.log_file
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_config(level, log_file))
