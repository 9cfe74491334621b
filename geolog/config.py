"""Process-wide settings for geolog.

Settings come from environment variables and are read once per call to
load_settings(). The Settings object doubles as the SettingsProvider handed
to the template environment.
"""

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

APP_NAME = "geolog"
APP_DESCRIPTION = "Log signature template resolution"
VERSION = "1.0.0"

DEFAULT_TIMEZONE = "UTC"
DEFAULT_TIME_FORMAT = "12h"
VALID_TIME_FORMATS = {"12h", "24h"}


@dataclass(frozen=True)
class Settings:
    """User-level configuration consulted during template resolution."""

    user_name: str = ""
    signature: str = ""
    timezone: str = DEFAULT_TIMEZONE
    time_format: str = DEFAULT_TIME_FORMAT
    log_level: str = "INFO"

    def get_user_name(self) -> str:
        return self.user_name

    def get_signature(self) -> str:
        return self.signature


def load_settings() -> Settings:
    """Build Settings from GEOLOG_* environment variables."""
    time_format = os.environ.get("GEOLOG_TIME_FORMAT", DEFAULT_TIME_FORMAT).strip().lower()
    if time_format not in VALID_TIME_FORMATS:
        logger.warning("[CONFIG] Unknown time format '%s', using 12h", time_format)
        time_format = DEFAULT_TIME_FORMAT

    return Settings(
        user_name=os.environ.get("GEOLOG_USER_NAME", ""),
        signature=os.environ.get("GEOLOG_SIGNATURE", ""),
        timezone=os.environ.get("GEOLOG_TIMEZONE", DEFAULT_TIMEZONE).strip() or DEFAULT_TIMEZONE,
        time_format=time_format,
        log_level=os.environ.get("GEOLOG_LOG_LEVEL", "INFO").upper(),
    )


def get_user_timezone_str() -> str:
    """Get the configured timezone name."""
    return load_settings().timezone


def get_user_timezone() -> ZoneInfo:
    """Get the configured timezone, falling back to UTC if it is unknown."""
    tz_name = get_user_timezone_str()
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("[CONFIG] Unknown timezone '%s', using %s", tz_name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def get_time_format() -> str:
    """Get the configured time format ('12h' or '24h')."""
    return load_settings().time_format
