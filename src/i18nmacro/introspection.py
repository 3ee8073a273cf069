"""Message string introspection.

Reads a compiled message string back into its placeholder structure. Used
by descriptor validation and by tooling that needs to know which values
and components a translation must keep.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.enums import PlaceholderKind
from i18nmacro.syntax.grammar import PlaceholderToken, tokenize_message

__all__ = ["MessagePlaceholders", "extract_text", "parse_placeholders"]


@dataclass(frozen=True, slots=True)
class MessagePlaceholders:
    """Placeholder keys referenced by a message, in first-occurrence order.

    Attributes:
        values: Value placeholder keys ({name}, {0})
        components: Component placeholder keys (<0>, <1/>)
    """

    values: tuple[str, ...]
    components: tuple[str, ...]

    @property
    def all_keys(self) -> frozenset[str]:
        """Union of value and component keys, tagged by kind."""
        return frozenset(
            [f"{PlaceholderKind.VALUE}:{key}" for key in self.values]
            + [f"{PlaceholderKind.COMPONENT}:{key}" for key in self.components]
        )


def parse_placeholders(message: str) -> MessagePlaceholders:
    """Collect placeholder keys from a message, checking tag balance.

    Example:
        >>> parse_placeholders("Hello <0>{name}</0><1/>")
        MessagePlaceholders(values=('name',), components=('0', '1'))

    Raises:
        UsageError: If the message violates the grammar or component
            tags are unbalanced
    """
    values: dict[str, None] = {}
    components: dict[str, None] = {}
    open_tags: list[PlaceholderToken] = []

    for token in tokenize_message(message):
        if isinstance(token, str):
            continue
        if token.kind is PlaceholderKind.VALUE:
            values.setdefault(token.key)
            continue
        if token.closing:
            if not open_tags or open_tags[-1].key != token.key:
                raise UsageError(
                    ErrorTemplate.message_syntax(f"unexpected </{token.key}>", token.position)
                )
            open_tags.pop()
            continue
        components.setdefault(token.key)
        if not token.self_closing:
            open_tags.append(token)

    if open_tags:
        unclosed = open_tags[-1]
        raise UsageError(
            ErrorTemplate.message_syntax(f"unclosed <{unclosed.key}>", unclosed.position)
        )
    return MessagePlaceholders(values=tuple(values), components=tuple(components))


def extract_text(message: str) -> str:
    """Return the literal text of a message with placeholder tokens removed.

    Example:
        >>> extract_text("Use '{'braces'}' for <0>{name}</0>")
        'Use {braces} for '
    """
    return "".join(token for token in tokenize_message(message) if isinstance(token, str))
