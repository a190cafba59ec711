"""
Runtime settings, read from the environment (and a .env file when present).
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(f"a2aProtocol.{__name__}")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "INFO"
    log_file: Optional[str] = None
    strict_validation: bool = True

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def _parse_bool(raw: str, name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got '{raw}'")


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build Settings from A2A_LOG_LEVEL, A2A_LOG_FILE and A2A_STRICT_VALIDATION.

    Values already present in the process environment win over the .env file.
    """
    load_dotenv(dotenv_path=dotenv_path)

    strict_raw = os.getenv("A2A_STRICT_VALIDATION")
    settings = Settings(
        log_level=os.getenv("A2A_LOG_LEVEL", "INFO"),
        log_file=os.getenv("A2A_LOG_FILE") or None,
        strict_validation=True if strict_raw is None else _parse_bool(strict_raw, "A2A_STRICT_VALIDATION"),
    )
    logger.debug(f"Settings loaded: {settings}")
    return settings
