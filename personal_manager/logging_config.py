import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import List, Optional


APP_LOGGER_NAME = "personal_manager"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Kept at THIRD_PARTY_LOG_LEVEL so SQL echo and access logs don't drown the app's own output
THIRD_PARTY_LOGGERS = [
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "sqlalchemy.pool",
    "sqlalchemy.orm",
    "alembic",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
]


def _level(name: str, fallback: int) -> int:
    return getattr(logging, name.upper(), fallback)


def _build_handlers(level: int, log_file: Optional[str], max_file_size: int, backup_count: int) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
        ))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    app_log_level: Optional[str] = None,
    third_party_log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure the ``personal_manager`` logger tree.

    Arguments fall back to APP_LOG_LEVEL (INFO), THIRD_PARTY_LOG_LEVEL (WARNING)
    and LOG_FILE (console only when unset). Calling it again replaces the
    handlers instead of stacking them.
    """
    app_level = _level(app_log_level or os.getenv("APP_LOG_LEVEL", "INFO"), logging.INFO)
    third_party_level = _level(third_party_log_level or os.getenv("THIRD_PARTY_LOG_LEVEL", "WARNING"), logging.WARNING)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)
    app_logger.handlers.clear()
    for handler in _build_handlers(app_level, log_file or os.getenv("LOG_FILE"), max_file_size, backup_count):
        app_logger.addHandler(handler)
    app_logger.propagate = False

    for logger_name in THIRD_PARTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(third_party_level)

    return app_logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """Logger under the app namespace, e.g. ``personal_manager.crud.base``"""
    if name == APP_LOGGER_NAME or name.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def log_request(logger: logging.Logger, method: str, path: str, status_code: int, duration_ms: float) -> None:
    """One line per handled request; server errors are logged at WARNING"""
    level = logging.WARNING if status_code >= 500 else logging.INFO
    logger.log(level, f"{method} {path} -> {status_code} ({duration_ms:.1f}ms)")
