"""geolog - log signature templates for geocaching logs."""

from geolog.config import VERSION

__version__ = VERSION
