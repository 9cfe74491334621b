"""Signature template: the user's configured signature, itself templated.

The signature is expanded with a nested engine call. A signature that
mentions SIGNATURE anywhere is rejected instead of expanded; that literal
check is the only recursion guard.
"""

import logging

from geolog.core import LogContext
from geolog.templates.environment import TemplateEnvironment
from geolog.templates.registry import TemplateScope, register_template

logger = logging.getLogger(__name__)

INVALID_SIGNATURE = "invalid signature template"


@register_template(
    token="SIGNATURE",
    label="init_signature",
    scope=TemplateScope.SIGNATURE,
    description="Configured signature, with its own templates resolved",
)
def extract_signature(ctx: LogContext, env: TemplateEnvironment) -> str:
    from geolog.templates.engine import apply_templates

    nested_template = env.settings.get_signature() or ""
    if "SIGNATURE" in nested_template:
        logger.warning("[SIGNATURE] Signature references itself, not expanding")
        return INVALID_SIGNATURE
    return apply_templates(nested_template, ctx, env)
