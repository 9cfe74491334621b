"""HTTP API for log templates."""

from geolog.api.app import create_app

__all__ = ["create_app"]
