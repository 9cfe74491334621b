"""FastAPI dependencies."""

from geolog.templates import TemplateEngine, default_environment


def get_engine() -> TemplateEngine:
    """Template engine for one request, with current settings."""
    return TemplateEngine(default_environment())
