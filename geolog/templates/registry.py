"""Log template registry and registration decorator.

This module provides the central registry for all log templates.
Templates are registered using the @register_template decorator, which
captures metadata alongside the resolver function.

Definitions are registered once at import and never change afterwards.
The template lists handed to the engine are rebuilt on every call, so
resolution always reads the current clock, settings and login state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geolog.core import LogContext
    from geolog.templates.environment import TemplateEnvironment

logger = logging.getLogger(__name__)

# Type alias for resolver functions
Resolver = Callable[["LogContext", "TemplateEnvironment"], str]


class TemplateScope(Enum):
    """Which template lists a template belongs to."""

    STANDARD = auto()  # DATE, USER, NUMBER, ...
    SIGNATURE = auto()  # SIGNATURE (expands the configured signature)
    INTERNAL = auto()  # NUMBER$NOINC - never user facing


def token_item_id(token: str) -> int:
    """Stable item id for a token (31-multiplier string hash, signed 32-bit).

    The same token always yields the same id, across registry constructions
    and processes, so ids can be stored in menus and preferences.
    """
    h = 0
    for char in token:
        h = (31 * h + ord(char)) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


@dataclass(frozen=True)
class LogTemplate:
    """A named, resolvable placeholder."""

    token: str  # bare name, no brackets
    label: str | None  # display label handle, None = not user facing
    scope: TemplateScope
    resolver: Resolver
    description: str = ""

    @property
    def item_id(self) -> int:
        return token_item_id(self.token)

    @property
    def bracketed(self) -> str:
        return f"[{self.token}]"

    @property
    def is_user_facing(self) -> bool:
        return self.label is not None

    def get_value(self, ctx: "LogContext", env: "TemplateEnvironment") -> str:
        return self.resolver(ctx, env)

    def apply(self, text: str, ctx: "LogContext", env: "TemplateEnvironment") -> str:
        """Replace every bracketed occurrence of this token in text.

        The resolver only runs if the token is present: some resolvers have
        side effects (NUMBER may log in) or read external state.
        """
        bracketed = self.bracketed
        if bracketed not in text:
            return text
        return text.replace(bracketed, self.get_value(ctx, env))


class TemplateRegistry:
    """Singleton registry for all log template definitions.

    Templates are registered via the @register_template decorator.
    Registration order is preserved and is the resolution order within a
    scope.
    """

    _instance: "TemplateRegistry | None" = None
    _templates: dict[str, LogTemplate]

    def __new__(cls) -> "TemplateRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._templates = {}
        return cls._instance

    def register(
        self,
        token: str,
        label: str | None,
        scope: TemplateScope,
        resolver: Resolver,
        description: str = "",
    ) -> None:
        """Register a template definition."""
        if token in self._templates:
            logger.warning("[REGISTRY] Template '%s' already registered, overwriting", token)
        self._templates[token] = LogTemplate(
            token=token,
            label=label,
            scope=scope,
            resolver=resolver,
            description=description,
        )

    def get(self, token: str) -> LogTemplate | None:
        """Get a template definition by token."""
        return self._templates.get(token)

    def by_scope(self, scope: TemplateScope) -> list[LogTemplate]:
        """Get all templates in a scope, in registration order."""
        return [t for t in self._templates.values() if t.scope == scope]

    def count(self) -> int:
        """Get total number of registered templates."""
        return len(self._templates)


def register_template(
    token: str,
    label: str | None,
    scope: TemplateScope = TemplateScope.STANDARD,
    description: str = "",
) -> Callable[[Resolver], Resolver]:
    """Decorator to register a template resolver.

    Usage:
        @register_template(
            token="NAME",
            label="init_signature_template_name",
            description="Name of the trackable or cache",
        )
        def extract_name(ctx: LogContext, env: TemplateEnvironment) -> str:
            if ctx.trackable:
                return ctx.trackable.name
            ...
    """

    def decorator(func: Resolver) -> Resolver:
        TemplateRegistry().register(token, label, scope, func, description)
        return func

    return decorator


def get_registry() -> TemplateRegistry:
    """Get the singleton template registry."""
    return TemplateRegistry()


# =============================================================================
# Template lists
# =============================================================================


def templates_without_signature() -> list[LogTemplate]:
    """All user-facing templates, but not the signature template itself."""
    return get_registry().by_scope(TemplateScope.STANDARD)


def templates_with_signature() -> list[LogTemplate]:
    """All user-facing templates, including the signature template."""
    return templates_without_signature() + get_registry().by_scope(TemplateScope.SIGNATURE)


def all_templates() -> list[LogTemplate]:
    """Every template, including internal ones. This is what the engine applies."""
    return templates_with_signature() + get_registry().by_scope(TemplateScope.INTERNAL)


def get_template(item_id: int) -> LogTemplate | None:
    """Look up a template by item id."""
    for template in all_templates():
        if template.item_id == item_id:
            return template
    return None


def get_template_by_token(token: str) -> LogTemplate | None:
    """Look up a template by its bare token."""
    return get_registry().get(token)
