"""Subject templates: what is being logged.

A trackable takes precedence over a cache. Missing data resolves to "".
"""

from geolog.core import LogContext
from geolog.templates.environment import TemplateEnvironment
from geolog.templates.registry import register_template


@register_template(
    token="OWNER",
    label="init_signature_template_owner",
    description="Owner of the trackable or cache",
)
def extract_owner(ctx: LogContext, env: TemplateEnvironment) -> str:
    if ctx.trackable:
        return ctx.trackable.owner or ""
    if ctx.cache:
        return ctx.cache.owner_display_name or ""
    return ""


@register_template(
    token="NAME",
    label="init_signature_template_name",
    description="Name of the trackable or cache",
)
def extract_name(ctx: LogContext, env: TemplateEnvironment) -> str:
    if ctx.trackable:
        return ctx.trackable.name or ""
    if ctx.cache:
        return ctx.cache.name or ""
    return ""


@register_template(
    token="URL",
    label="init_signature_template_url",
    description="Web page of the trackable or cache",
)
def extract_url(ctx: LogContext, env: TemplateEnvironment) -> str:
    if ctx.trackable:
        return ctx.trackable.url or ""
    if ctx.cache:
        return ctx.cache.url or ""
    return ""


@register_template(
    token="LOG",
    label="init_signature_template_log",
    description="Text of the log being edited",
)
def extract_log(ctx: LogContext, env: TemplateEnvironment) -> str:
    if ctx.log_entry:
        return ctx.log_entry.display_text or ""
    return ""
