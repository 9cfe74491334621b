"""Template substitution engine.

Folds every registered template over the input text, in registry order:

    "[NAME] by [OWNER], find #[NUMBER]" -> "Hidden Lake by alice, find #42"

Each template is applied at most once per call, against the text produced
so far. A value that itself contains a later template's placeholder is
resolved by that later template in the same pass. SIGNATURE relies on this
and on recursing into the engine for its own text.
"""

from dataclasses import dataclass

from geolog.core import LogContext
from geolog.templates.environment import TemplateEnvironment, default_environment
from geolog.templates.registry import (
    LogTemplate,
    all_templates,
    get_template,
    templates_with_signature,
    templates_without_signature,
)

NUMBER_PLACEHOLDER = "[NUMBER]"
NUMBER_NO_INCREMENT_PLACEHOLDER = "[NUMBER$NOINC]"


@dataclass(frozen=True)
class TemplateInfo:
    """What a UI needs to offer a template for insertion."""

    token: str
    label: str
    item_id: int
    description: str = ""


def apply_templates(
    text: str,
    context: LogContext,
    environment: TemplateEnvironment | None = None,
) -> str:
    """Replace every bracketed template token in text.

    Args:
        text: Raw log or signature text
        context: What is being logged
        environment: Collaborators (default: configured settings and connectors)

    Returns:
        Resolved text. Unknown bracketed words are left as they are.
    """
    env = environment or default_environment()
    result = text
    for template in all_templates():
        result = template.apply(result, context, env)
    return result


def apply_templates_no_increment(
    text: str,
    context: LogContext,
    environment: TemplateEnvironment | None = None,
) -> str:
    """Like apply_templates, but [NUMBER] resolves to the found count itself.

    Used to re-render text whose find number was already counted once.
    """
    return apply_templates(
        text.replace(NUMBER_PLACEHOLDER, NUMBER_NO_INCREMENT_PLACEHOLDER),
        context,
        environment,
    )


def list_templates(include_signature: bool) -> list[TemplateInfo]:
    """User-facing templates for presentation, in resolution order."""
    templates = templates_with_signature() if include_signature else templates_without_signature()
    return [
        TemplateInfo(token=t.token, label=t.label, item_id=t.item_id, description=t.description)
        for t in templates
        if t.is_user_facing
    ]


class TemplateEngine:
    """Template resolution bound to one environment.

    Usage:
        engine = TemplateEngine(environment)
        text = engine.apply_templates("[DATE] - TFTC! [SIGNATURE]", LogContext.for_cache(cache))
    """

    def __init__(self, environment: TemplateEnvironment | None = None):
        self._environment = environment

    @property
    def environment(self) -> TemplateEnvironment:
        # Resolved lazily so a default engine picks up current settings
        return self._environment or default_environment()

    def apply_templates(self, text: str, context: LogContext) -> str:
        return apply_templates(text, context, self.environment)

    def apply_templates_no_increment(self, text: str, context: LogContext) -> str:
        return apply_templates_no_increment(text, context, self.environment)

    def list_templates(self, include_signature: bool = True) -> list[TemplateInfo]:
        return list_templates(include_signature)

    def get_template(self, item_id: int) -> LogTemplate | None:
        return get_template(item_id)
