"""Log template resolution.

Placeholders in log and signature text are resolved against a LogContext:
    "Found [NAME] on [DATE]. #[NUMBER]" -> "Found Hidden Lake on October 18, 2026. #42"

Usage:
    from geolog.core import LogContext
    from geolog.templates import apply_templates

    text = apply_templates("[DATE] [SIGNATURE]", LogContext.for_cache(cache))
"""

from geolog.templates.engine import (
    TemplateEngine,
    TemplateInfo,
    apply_templates,
    apply_templates_no_increment,
    list_templates,
)
from geolog.templates.environment import TemplateEnvironment, default_environment
from geolog.templates.registry import (
    LogTemplate,
    TemplateRegistry,
    TemplateScope,
    all_templates,
    get_registry,
    get_template,
    get_template_by_token,
    register_template,
    templates_with_signature,
    templates_without_signature,
    token_item_id,
)

__all__ = [
    # Main API
    "TemplateEngine",
    "TemplateInfo",
    "apply_templates",
    "apply_templates_no_increment",
    "list_templates",
    # Environment
    "TemplateEnvironment",
    "default_environment",
    # Registry
    "LogTemplate",
    "TemplateRegistry",
    "TemplateScope",
    "all_templates",
    "get_registry",
    "get_template",
    "get_template_by_token",
    "register_template",
    "templates_with_signature",
    "templates_without_signature",
    "token_item_id",
]

# Import all template modules to register them
# This happens automatically when the package is imported
from geolog.templates import variables  # noqa: F401, E402
