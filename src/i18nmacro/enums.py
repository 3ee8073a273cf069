"""Enumerations for i18nmacro type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so host configuration can pass
plain strings ("production") and compare them directly.

Python 3.13+.
"""

from enum import StrEnum


class Mode(StrEnum):
    """Compilation mode controlling descriptor field retention.

    StrEnum provides automatic string conversion: str(Mode.PRODUCTION) == "production"
    """

    DEVELOPMENT = "development"
    """Keep every non-empty descriptor field (default)."""

    PRODUCTION = "production"
    """Keep only id, values and components needed at runtime."""


class MacroKind(StrEnum):
    """Shape of the invocation a compiled macro turns into.

    StrEnum provides automatic string conversion: str(MacroKind.PLAIN) == "plain"
    """

    PLAIN = "plain"
    """Function-style macro: t`Hello ${name}` -> i18n._({...})"""

    STRUCTURAL = "structural"
    """Component-style macro: <Trans>Hello <b>you</b></Trans> -> <Trans id=... />"""


class PlaceholderKind(StrEnum):
    """Which numbering space a placeholder key belongs to."""

    VALUE = "value"
    """Embedded expression, rendered as {key}."""

    COMPONENT = "component"
    """Structural element, rendered as <key>...</key> or <key/>."""


__all__ = [
    "MacroKind",
    "Mode",
    "PlaceholderKind",
]
