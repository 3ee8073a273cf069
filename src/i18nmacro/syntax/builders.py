"""Convenience constructors for message trees.

Hosts and tests build trees by hand often enough that the dataclass
constructors get noisy. These helpers accept plain strings where a Text
node is meant:

    >>> trans("Hello ", element("b", "World"), "!", id="greeting")
    Macro(children=(Text(value='Hello ', explicit=False), ...), ...)

Python 3.13+.
"""

from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.enums import MacroKind

from .ast import Element, Expression, Macro, MacroOptions, MessageNode, Text
from .text import is_simple_name

__all__ = ["element", "expr", "forced", "name", "t", "text", "trans"]

type NodeLike = MessageNode | str


def text(value: str) -> Text:
    """Literal text run."""
    return Text(value)


def forced(value: str = " ") -> Text:
    """Explicit text kept verbatim by the whitespace normalizer ({" "})."""
    return Text(value, explicit=True)


def expr(source: object, simple_name: str | None = None) -> Expression:
    """Embedded value; pass simple_name only for bare identifier references.

    Raises:
        UsageError: If simple_name is not a valid identifier
    """
    if simple_name is not None and not is_simple_name(simple_name):
        raise UsageError(ErrorTemplate.unresolvable_reference(simple_name))
    return Expression(source, simple_name)


def name(identifier: str) -> Expression:
    """Bare identifier reference whose source is the identifier itself."""
    return expr(identifier, identifier)


def element(tag: object, *children: NodeLike, self_closing: bool = False) -> Element:
    """Structural element wrapping children."""
    return Element(tag, _nodes(children), self_closing)


def t(
    *children: NodeLike,
    id: str | None = None,  # noqa: A002 - mirrors the macro option name
    context: str | None = None,
    comment: str | None = None,
    location: str | None = None,
) -> Macro:
    """Plain (function-style) macro invocation."""
    options = MacroOptions(id=id, context=context, comment=comment, location=location)
    return Macro(_nodes(children), options, MacroKind.PLAIN)


def trans(
    *children: NodeLike,
    id: str | None = None,  # noqa: A002 - mirrors the macro option name
    context: str | None = None,
    comment: str | None = None,
    location: str | None = None,
) -> Macro:
    """Structural (component-style) macro invocation."""
    options = MacroOptions(id=id, context=context, comment=comment, location=location)
    return Macro(_nodes(children), options, MacroKind.STRUCTURAL)


def _nodes(children: tuple[NodeLike, ...]) -> tuple[MessageNode, ...]:
    return tuple(Text(child) if isinstance(child, str) else child for child in children)
