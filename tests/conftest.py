"""Shared fixtures: collaborator doubles for template resolution."""

from datetime import UTC, datetime

import pytest

from geolog.core import Cache, LogContext, LogEntry, Trackable
from geolog.templates import TemplateEnvironment

FIXED_NOW = datetime(2026, 10, 18, 19, 30, tzinfo=UTC)


class FakeSettings:
    """SettingsProvider with fixed values."""

    def __init__(self, user_name: str = "settings-user", signature: str = ""):
        self.user_name = user_name
        self.signature = signature

    def get_user_name(self) -> str:
        return self.user_name

    def get_signature(self) -> str:
        return self.signature


class FakeLoginConnector:
    """Login-capable connector that records login attempts."""

    def __init__(
        self,
        name: str = "gc",
        prefix: str = "GC",
        user_name: str = "alice",
        found: int = 41,
        found_after_login: int | None = None,
        login_error: Exception | None = None,
    ):
        self.name = name
        self.prefix = prefix
        self.user_name = user_name
        self.found = found
        self.found_after_login = found_after_login
        self.login_error = login_error
        self.login_calls = 0
        self.found_reads = 0

    def can_handle(self, geocode: str) -> bool:
        return geocode.upper().startswith(self.prefix)

    def get_user_name(self) -> str:
        return self.user_name

    def get_caches_found(self) -> int:
        self.found_reads += 1
        return self.found

    def login(self) -> bool:
        self.login_calls += 1
        if self.login_error:
            raise self.login_error
        if self.found_after_login is not None:
            self.found = self.found_after_login
        return True


class FakePlainConnector:
    """Connector without accounts."""

    def __init__(self, name: str = "oc", prefix: str = "OC"):
        self.name = name
        self.prefix = prefix

    def can_handle(self, geocode: str) -> bool:
        return geocode.upper().startswith(self.prefix)


class FakeLookup:
    """ConnectorLookup returning one connector for every cache."""

    def __init__(self, connector=None):
        self.connector = connector
        self.lookups = 0

    def get_connector(self, cache: Cache):
        self.lookups += 1
        return self.connector


class FixedFormatter:
    """ISO-ish formatting, independent of locale and configuration."""

    def format_full_date(self, dt: datetime) -> str:
        return dt.strftime("%Y-%m-%d")

    def format_time(self, dt: datetime) -> str:
        return dt.strftime("%H:%M")


@pytest.fixture
def settings():
    return FakeSettings()


@pytest.fixture
def connector():
    return FakeLoginConnector()


@pytest.fixture
def lookup(connector):
    return FakeLookup(connector)


@pytest.fixture
def env(settings, lookup):
    return TemplateEnvironment(
        settings=settings,
        connectors=lookup,
        formatter=FixedFormatter(),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def make_connector():
    """Factory for login-capable connectors: make_connector(found=0, found_after_login=5)."""
    return FakeLoginConnector


@pytest.fixture
def make_plain_connector():
    """Factory for connectors without accounts."""
    return FakePlainConnector


@pytest.fixture
def make_env():
    """Factory for environments around one connector (or none).

    Usage:
        env = make_env(make_connector(found=0), signature="#[NUMBER]")
        env = make_env(connectors=failing_lookup)
    """

    def _make_env(connector=None, *, user_name="settings-user", signature="", connectors=None):
        return TemplateEnvironment(
            settings=FakeSettings(user_name=user_name, signature=signature),
            connectors=connectors if connectors is not None else FakeLookup(connector),
            formatter=FixedFormatter(),
            clock=lambda: FIXED_NOW,
        )

    return _make_env


@pytest.fixture
def cache():
    return Cache(
        geocode="GC1234",
        name="Hidden Lake",
        owner_display_name="bob",
        url="https://coord.info/GC1234",
    )


@pytest.fixture
def trackable():
    return Trackable(
        geocode="TB5678",
        name="Travelling Duck",
        owner="carol",
        url="https://coord.info/TB5678",
    )


@pytest.fixture
def cache_ctx(cache):
    return LogContext.for_cache(cache)


@pytest.fixture
def log_entry():
    return LogEntry(text="Found it after a long search.", author="alice", log_type="found_it")
