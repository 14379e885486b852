"""Root logger setup: stderr always, rotating combined/error files when LOG_DIR is set."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"

# 5 MB per file, 5 backups
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


def configure_logging(settings: "Settings") -> None:
    """Configure the root logger from LOG_LEVEL and LOG_DIR. Safe to call more than once."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        combined = RotatingFileHandler(
            log_dir / "combined.log",
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        errors = RotatingFileHandler(
            log_dir / "error.log",
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        errors.setLevel(logging.ERROR)
        handlers.extend([combined, errors])

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
        force=True,
    )
