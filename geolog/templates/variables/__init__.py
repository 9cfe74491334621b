"""Log template resolvers.

Each module in this package defines resolvers using the
@register_template decorator:

- datetime: DATE, TIME, DATETIME
- account: USER, NUMBER, NUMBER$NOINC
- subject: OWNER, NAME, URL, LOG
- signature: SIGNATURE

Import order is resolution order within a scope. Keep it.
"""

from geolog.templates.registry import TemplateScope, get_registry

# Import all template modules to trigger registration (noqa: F401 for side-effect imports)
from geolog.templates.variables import (  # noqa: F401
    datetime,
    account,
    subject,
    signature,
)

__all__ = ["TemplateScope", "get_registry"]
