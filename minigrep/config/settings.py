"""Configuration settings for minigrep."""

import os
import logging
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_flag_env(key: str, default: bool = False) -> bool:
    """Read an on/off toggle; only the exact value "1" turns it on."""
    value = os.getenv(key)
    if value is None:
        return default
    return value == "1"


def _get_log_level_env(key: str, default: str = "INFO") -> str:
    """Safely get a logging level name from environment variable with validation."""
    value = os.getenv(key, default).strip().upper()
    if value not in VALID_LOG_LEVELS:
        logger.warning(f"Invalid {key}={value}, using default {default}")
        return default
    return value


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Search
    ignore_case: bool = field(
        default_factory=lambda: _get_flag_env("MINIGREP_IGNORE_CASE")
    )

    # File reading
    encoding: str = field(
        default_factory=lambda: os.getenv("MINIGREP_ENCODING", "utf-8")
    )

    # Output - the CLI echoes the parsed query and filename unless disabled
    debug: bool = field(
        default_factory=lambda: _get_flag_env("MINIGREP_DEBUG", default=True)
    )
    log_level: str = field(
        default_factory=lambda: _get_log_level_env("MINIGREP_LOG_LEVEL", "INFO")
    )


settings = Settings()
