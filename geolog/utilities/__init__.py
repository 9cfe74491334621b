"""Utilities - timezone formatting, logging."""

from geolog.utilities.logging import setup_logging
from geolog.utilities.tz import UserTimeFormatter, now_user

__all__ = [
    "UserTimeFormatter",
    "now_user",
    "setup_logging",
]
