"""Found-count resolution for the NUMBER templates.

The count comes from the cache's connector. A count of zero usually means
the account data was never loaded, so a single login is attempted to
refresh it, unless the context is offline.
"""

import logging

from geolog.core import LogContext, LoginCapable
from geolog.templates.environment import TemplateEnvironment

logger = logging.getLogger(__name__)


def get_counter(ctx: LogContext, env: TemplateEnvironment, increment_counter: bool) -> str:
    """Resolve the found-count for ctx's cache.

    Args:
        ctx: Log context (only the cache and offline flag are read)
        env: Template environment providing the connector lookup
        increment_counter: Return count + 1 (the number of the log being written)

    Returns:
        The count as text, or "" if there is no cache, the count is unknown,
        or it could not be loaded.
    """
    cache = ctx.cache
    if cache is None:
        return ""

    try:
        connector = env.connectors.get_connector(cache)
        login = connector if isinstance(connector, LoginCapable) else None
        current = login.get_caches_found() if login else 0

        # try updating the login information, if the counter is zero
        if current == 0:
            if ctx.offline:
                logger.debug("[COUNTER] Offline, not logging in for %s", cache.geocode)
                return ""
            if login is not None:
                logger.debug("[COUNTER] Found count is 0 for %s, logging in", cache.geocode)
                login.login()
                current = login.get_caches_found()
    except Exception as e:
        logger.warning("[COUNTER] Could not load found count for %s: %s", cache.geocode, e)
        return ""

    if current >= 0:
        return str(current + 1 if increment_counter else current)
    return ""
