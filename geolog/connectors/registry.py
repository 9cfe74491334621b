"""Default lookup from a cache to the connector of its platform.

Hosts register connector instances at startup:

    get_connector_registry().register(GCConnector(), priority=0)

Template resolution reaches connectors only through the ConnectorLookup
protocol, so tests and hosts can inject their own lookup instead.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geolog.core import Cache, Connector

logger = logging.getLogger(__name__)


class ConnectorRegistry:
    """Connectors keyed by name, consulted in priority order.

    Lower priority values are asked first, so a specific connector can
    claim geocodes before a catch-all one.
    """

    def __init__(self) -> None:
        self._connectors: dict[str, tuple[int, "Connector"]] = {}

    def register(self, connector: "Connector", priority: int = 100) -> None:
        if connector.name in self._connectors:
            logger.warning("[CONNECTORS] '%s' already registered, replacing", connector.name)
        self._connectors[connector.name] = (priority, connector)
        logger.debug("[CONNECTORS] Registered %s (priority=%d)", connector.name, priority)

    def connector_names(self) -> list[str]:
        """Registered names, in lookup order."""
        return [c.name for c in self._ordered()]

    def get_connector(self, cache: "Cache") -> "Connector | None":
        """First connector that handles the cache's geocode."""
        for connector in self._ordered():
            if connector.can_handle(cache.geocode):
                return connector
        logger.debug("[CONNECTORS] No connector for %s", cache.geocode)
        return None

    def _ordered(self) -> list["Connector"]:
        entries = sorted(self._connectors.values(), key=lambda entry: entry[0])
        return [connector for _, connector in entries]


_registry = ConnectorRegistry()


def get_connector_registry() -> ConnectorRegistry:
    """Process-wide registry used by the default template environment."""
    return _registry
