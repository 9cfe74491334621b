"""Core data types for geolog.

All data structures are frozen dataclasses with attribute access.
Caches and trackables are read-only views of the host application's
domain objects: only the fields the log templates read are modeled.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cache:
    """A geocache, as seen by log templates."""

    geocode: str  # e.g., "GC1234", "OC5678"
    name: str = ""
    owner_display_name: str = ""
    url: str | None = None


@dataclass(frozen=True)
class Trackable:
    """A trackable item (travel bug, geocoin)."""

    geocode: str  # e.g., "TB1234"
    name: str = ""
    owner: str = ""
    url: str | None = None


@dataclass(frozen=True)
class LogEntry:
    """A previously written log."""

    text: str
    author: str = ""
    log_type: str = ""  # "found_it" | "didnt_find_it" | "note" | ...

    @property
    def display_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class LogContext:
    """Context for a single template resolution.

    Some templates need information about what is being logged. Every field
    is optional; templates resolve missing data to an empty string.
    """

    cache: Cache | None = None
    trackable: Trackable | None = None
    log_entry: LogEntry | None = None

    # No network access allowed (login is never attempted)
    offline: bool = False

    @classmethod
    def for_cache(
        cls,
        cache: Cache | None,
        log_entry: LogEntry | None = None,
        offline: bool = False,
    ) -> "LogContext":
        """Context for logging a cache."""
        return cls(cache=cache, log_entry=log_entry, offline=offline)

    @classmethod
    def for_trackable(
        cls,
        trackable: Trackable | None,
        log_entry: LogEntry | None = None,
    ) -> "LogContext":
        """Context for logging a trackable (never offline)."""
        return cls(trackable=trackable, log_entry=log_entry)
