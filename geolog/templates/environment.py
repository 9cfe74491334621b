"""Collaborators available to template resolvers."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from geolog.config import load_settings
from geolog.connectors import get_connector_registry
from geolog.core import ConnectorLookup, DateTimeFormatter, SettingsProvider
from geolog.utilities.tz import UserTimeFormatter, now_user


@dataclass(frozen=True)
class TemplateEnvironment:
    """Injected collaborators for one or more resolutions.

    Replaces process-wide lookups (settings, connector factory, clock) so
    resolution can be driven with test doubles.
    """

    settings: SettingsProvider
    connectors: ConnectorLookup
    formatter: DateTimeFormatter
    clock: Callable[[], datetime] = field(default=now_user)


def default_environment() -> TemplateEnvironment:
    """Environment backed by configured settings and registered connectors."""
    return TemplateEnvironment(
        settings=load_settings(),
        connectors=get_connector_registry(),
        formatter=UserTimeFormatter(),
    )
