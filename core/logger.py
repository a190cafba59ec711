import logging
import os
from typing import Optional

from core.config import Settings

LOGGER_NAME = "a2aProtocol"

formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(name)s | %(module)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the 'a2aProtocol' root logger: console output, plus a UTF-8 log file
    when settings.log_file is set. Safe to call more than once.
    """
    settings = settings or Settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    # Add handlers if not already added
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if settings.log_file:
        log_path = os.path.abspath(settings.log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path for h in logger.handlers
        )
        if not already_attached:
            log_dir = os.path.dirname(log_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(settings.log_level)

    return logger
