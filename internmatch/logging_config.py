"""Logging configuration for Internmatch."""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "internmatch.console"
FILE_HANDLER_NAME = "internmatch.file"

# Library loggers kept at WARNING; uvicorn.error stays at the app level
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access", "httpx", "asyncio")


def _has_handler(root: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in root.handlers)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure application-wide logging.

    Called by the API app factory and every script. Level and log file
    default to ``settings.log_level`` / ``settings.log_file``. Handlers
    installed by a host process (uvicorn, pytest) are left alone; only
    the Internmatch handlers are added, and only once.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR); unknown names mean INFO
        log_file: Optional path for a rotating file handler
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        root.setLevel(numeric_level)
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER_NAME)
        console.setFormatter(fmt)
        root.addHandler(console)

    if log_file and not _has_handler(root, FILE_HANDLER_NAME):
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.getLogger("uvicorn.error").setLevel(numeric_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
