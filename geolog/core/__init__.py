"""Core types and interfaces for geolog.

All data structures are dataclasses with attribute access.
Collaborators (connectors, settings, formatters) implement the protocols
in geolog.core.interfaces.
"""

from geolog.core.interfaces import (
    Connector,
    ConnectorLookup,
    DateTimeFormatter,
    LoginCapable,
    SettingsProvider,
)
from geolog.core.types import Cache, LogContext, LogEntry, Trackable

__all__ = [
    # Types
    "Cache",
    "LogContext",
    "LogEntry",
    "Trackable",
    # Interfaces
    "Connector",
    "ConnectorLookup",
    "DateTimeFormatter",
    "LoginCapable",
    "SettingsProvider",
]
