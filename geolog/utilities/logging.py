"""Logging setup for geolog.

Modules log through logging.getLogger(__name__); this only configures the
root handler once for the application.
"""

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(log_level: str | None = None) -> None:
    """Configure console logging.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
            Defaults to the GEOLOG_LOG_LEVEL setting.
    """
    global _configured
    if _configured:
        return

    if log_level is None:
        from geolog.config import load_settings

        log_level = load_settings().log_level

    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Keep access logs quiet unless debugging
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.WARNING))

    _configured = True
