"""DateTime templates: current date and time.

Values are computed at resolution time from the environment clock and
formatted with the host's display conventions.
"""

from geolog.core import LogContext
from geolog.templates.environment import TemplateEnvironment
from geolog.templates.registry import register_template


@register_template(
    token="DATE",
    label="init_signature_template_date",
    description="Current date (e.g., 'October 18, 2026')",
)
def extract_date(ctx: LogContext, env: TemplateEnvironment) -> str:
    return env.formatter.format_full_date(env.clock())


@register_template(
    token="TIME",
    label="init_signature_template_time",
    description="Current time (e.g., '7:30 PM')",
)
def extract_time(ctx: LogContext, env: TemplateEnvironment) -> str:
    return env.formatter.format_time(env.clock())


@register_template(
    token="DATETIME",
    label="init_signature_template_datetime",
    description="Current date and time (e.g., 'October 18, 2026 7:30 PM')",
)
def extract_datetime(ctx: LogContext, env: TemplateEnvironment) -> str:
    now = env.clock()
    return f"{env.formatter.format_full_date(now)} {env.formatter.format_time(now)}"
