"""Platform connectors and the default geocode lookup."""

from geolog.connectors.registry import ConnectorRegistry, get_connector_registry

__all__ = ["ConnectorRegistry", "get_connector_registry"]
