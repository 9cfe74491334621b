"""API route modules."""

from geolog.api.routes import health, templates

__all__ = ["health", "templates"]
