"""Message tree node definitions.

The host collaborator lowers its concrete syntax (tagged templates, call
forms, markup trees) to these nodes before invoking the compiler. The
compiler never sees host source text.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeIs

from i18nmacro.enums import MacroKind

if TYPE_CHECKING:
    from i18nmacro.compiler.descriptor import MessageDescriptor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Leaves
    "Text",
    "Expression",
    # Structure
    "Element",
    "NestedMessage",
    "Macro",
    "MacroOptions",
    # Type aliases
    "MessageNode",
]

# ============================================================================
# LEAVES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text run.

    Attributes:
        value: Decoded text (entities and source escapes already resolved)
        explicit: True when the host took the text from an explicit string
            container such as JSX {" "}. Explicit text is kept verbatim by the
            whitespace normalizer; it is how a forced space is expressed.

    Example:
        <Trans>keep{" "}<b>this</b></Trans>
        -> Text("keep"), Text(" ", explicit=True), Element(b, ...)
    """

    value: str
    explicit: bool = False

    @staticmethod
    def guard(node: object) -> TypeIs[Text]:
        """Type guard for Text (used in sibling scans)."""
        return isinstance(node, Text)


@dataclass(frozen=True, slots=True)
class Expression:
    """Embedded value.

    ``source`` is the host's own expression object and is opaque to the
    compiler; it is only compared by equality to deduplicate named
    placeholders.

    Attributes:
        source: Host expression (ExternalExpr)
        simple_name: Identifier name when the expression is a bare reference
            (``${name}``); None for anything else (``${user.name}``,
            ``${f()}``), which makes the placeholder positional.
    """

    source: object
    simple_name: str | None = None


# ============================================================================
# STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Element:
    """Structural wrapper such as a markup element.

    Attributes:
        tag: Host element shape (ExternalElementShape), stored verbatim in
            the descriptor's components so the host can rebuild it
        children: Nested content
        self_closing: Element was written as <br /> in the source
    """

    tag: object
    children: tuple[MessageNode, ...] = ()
    self_closing: bool = False

    @staticmethod
    def guard(node: object) -> TypeIs[Element]:
        """Type guard for Element (used in sibling scans)."""
        return isinstance(node, Element)


@dataclass(frozen=True, slots=True)
class NestedMessage:
    """Already-compiled inner macro, opaque at the parent level.

    Produced by the nested macro resolver; flattened as a single anonymous
    value placeholder.

    Attributes:
        descriptor: Independently compiled descriptor of the inner macro
        kind: Invocation shape the inner macro compiles to
    """

    descriptor: MessageDescriptor
    kind: MacroKind = MacroKind.PLAIN


@dataclass(frozen=True, slots=True)
class MacroOptions:
    """Caller-supplied options of one macro call site.

    Attributes:
        id: Explicit message id; bypasses id generation when set
        context: Disambiguation context, part of the generated id
        comment: Translator note, never part of the id
        location: Host call site location used in diagnostics ("app.js:12")
    """

    id: str | None = None
    context: str | None = None
    comment: str | None = None
    location: str | None = None


@dataclass(frozen=True, slots=True)
class Macro:
    """Unresolved macro invocation.

    Either the root of a call site or nested in an expression position of
    another macro, where the resolver compiles it first and replaces it
    with a NestedMessage.

    Examples:
        t`Hello ${name}`
            -> Macro(children=(Text("Hello "), Expression(name, "name")))
        <Trans id="greeting">Hello</Trans>
            -> Macro((Text("Hello"),), MacroOptions(id="greeting"), MacroKind.STRUCTURAL)
    """

    children: tuple[MessageNode, ...]
    options: MacroOptions = field(default_factory=MacroOptions)
    kind: MacroKind = MacroKind.PLAIN

    @staticmethod
    def guard(node: object) -> TypeIs[Macro]:
        """Type guard for Macro (used by the resolver)."""
        return isinstance(node, Macro)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type MessageNode = Text | Expression | Element | NestedMessage | Macro
