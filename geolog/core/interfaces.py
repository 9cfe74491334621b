"""Collaborator interfaces consumed by the template engine.

Connectors, settings and formatting belong to the host application.
Templates only see them through these protocols, injected via
TemplateEnvironment.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from geolog.core.types import Cache


class Connector(Protocol):
    """A geocaching platform connector."""

    name: str

    def can_handle(self, geocode: str) -> bool:
        """Whether this connector serves the given geocode."""
        ...


@runtime_checkable
class LoginCapable(Protocol):
    """Connector capability: account login and found-count.

    get_caches_found() returns a negative value when the count is unknown.
    """

    def get_user_name(self) -> str: ...

    def get_caches_found(self) -> int: ...

    def login(self) -> bool:
        """Log in and refresh account data. Returns True on success."""
        ...


class ConnectorLookup(Protocol):
    """Finds the connector responsible for a cache."""

    def get_connector(self, cache: Cache) -> Connector | None: ...


class SettingsProvider(Protocol):
    """Read access to user settings."""

    def get_user_name(self) -> str: ...

    def get_signature(self) -> str: ...


class DateTimeFormatter(Protocol):
    """Host date/time display conventions."""

    def format_full_date(self, dt: datetime) -> str: ...

    def format_time(self, dt: datetime) -> str: ...
