# /school_admin/logging_config.py

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configures the root logger once at startup. Every module uses its own
    `logging.getLogger(__name__)` and inherits these handlers.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level)

    # Uvicorn's reloader can call this twice; don't stack handlers.
    if _configured:
        return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=10240, backupCount=10)
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT + " [in %(pathname)s:%(lineno)d]"
        ))
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    _configured = True
    logging.getLogger(__name__).info("Logging configured (level=%s, file=%s)", level, log_file or "-")
