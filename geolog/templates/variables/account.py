"""Account templates: user name and found-count.

These read the logged-in account of the cache's connector where one
exists, and fall back to the configured user name otherwise.
"""

import logging

from geolog.core import LogContext, LoginCapable
from geolog.templates.counter import get_counter
from geolog.templates.environment import TemplateEnvironment
from geolog.templates.registry import TemplateScope, register_template

logger = logging.getLogger(__name__)


@register_template(
    token="USER",
    label="init_signature_template_user",
    description="User name on the cache's platform, or the configured user name",
)
def extract_user(ctx: LogContext, env: TemplateEnvironment) -> str:
    if ctx.cache:
        try:
            connector = env.connectors.get_connector(ctx.cache)
            if isinstance(connector, LoginCapable):
                return connector.get_user_name() or ""
        except Exception as e:
            logger.warning("[USER] Could not read account for %s: %s", ctx.cache.geocode, e)
    return env.settings.get_user_name() or ""


@register_template(
    token="NUMBER",
    label="init_signature_template_number",
    description="Find number of this log (found count + 1)",
)
def extract_number(ctx: LogContext, env: TemplateEnvironment) -> str:
    return get_counter(ctx, env, increment_counter=True)


@register_template(
    token="NUMBER$NOINC",
    label=None,
    scope=TemplateScope.INTERNAL,
    description="Found count without increment, for re-rendering a preview",
)
def extract_number_no_increment(ctx: LogContext, env: TemplateEnvironment) -> str:
    return get_counter(ctx, env, increment_counter=False)
