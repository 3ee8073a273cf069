"""Flatten a message tree into one message string.

Depth-first, left-to-right traversal that emits literal text and
placeholder tokens while registering every value and component with the
invocation's PlaceholderRegistry:

    Text            -> escaped literal text
    Expression      -> {key}
    NestedMessage   -> {key} (opaque value, never re-flattened)
    Element         -> <key>children</key>, or <key/> when self-closing/empty

Adjacent text runs are merged before escaping, so quoting decisions see
the real neighbouring characters.

Thread-safe: no mutable instance state; all state is local to flatten().
Python 3.13+.
"""

from i18nmacro.constants import MAX_DEPTH
from i18nmacro.core.depth_guard import DepthGuard
from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.syntax.ast import Element, Expression, Macro, MessageNode, NestedMessage, Text
from i18nmacro.syntax.grammar import escape_text

from .registry import PlaceholderRegistry

__all__ = ["MessageFlattener", "flatten"]


class _MessageBuffer:
    """Output accumulator that defers escaping until the next token is known."""

    __slots__ = ("_literal", "_parts")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._literal: list[str] = []

    def text(self, value: str) -> None:
        self._literal.append(value)

    def token(self, token: str) -> None:
        self._flush(followed_by_syntax=True)
        self._parts.append(token)

    def getvalue(self) -> str:
        self._flush(followed_by_syntax=False)
        return "".join(self._parts)

    def _flush(self, *, followed_by_syntax: bool) -> None:
        if self._literal:
            literal = "".join(self._literal)
            self._parts.append(escape_text(literal, followed_by_syntax=followed_by_syntax))
            self._literal.clear()


class MessageFlattener:
    """Converts a normalized message tree into a message string.

    Usage:
        >>> registry = PlaceholderRegistry()
        >>> MessageFlattener().flatten(
        ...     (Text("Hello "), Expression("name", "name")), registry
        ... )
        'Hello {name}'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._max_depth = max_depth

    def flatten(
        self,
        nodes: tuple[MessageNode, ...],
        registry: PlaceholderRegistry,
        *,
        guard: DepthGuard | None = None,
    ) -> str:
        """Flatten sibling nodes, registering placeholders in document order.

        Args:
            nodes: Top-level nodes (already whitespace-normalized if needed)
            registry: Fresh registry owned by this invocation
            guard: Call-site guard to count element levels on, instead of
                a fresh one limited to max_depth

        Returns:
            Raw message string (before id generation)

        Raises:
            UsageError: If an unresolved Macro is encountered or a
                placeholder name conflicts
            DepthLimitExceededError: If elements nest deeper than the limit
        """
        buffer = _MessageBuffer()
        if guard is None:
            guard = DepthGuard(max_depth=self._max_depth)
        self._flatten_children(nodes, registry, buffer, guard)
        return buffer.getvalue()

    def _flatten_children(
        self,
        nodes: tuple[MessageNode, ...],
        registry: PlaceholderRegistry,
        buffer: _MessageBuffer,
        guard: DepthGuard,
    ) -> None:
        for node in nodes:
            match node:
                case Text(value=value):
                    buffer.text(value)
                case Expression(source=source, simple_name=simple_name):
                    if isinstance(source, Macro):
                        raise UsageError(ErrorTemplate.unresolved_macro())
                    key = registry.intern_expression(source, simple_name)
                    buffer.token(f"{{{key}}}")
                case NestedMessage():
                    key = registry.intern_expression(node)
                    buffer.token(f"{{{key}}}")
                case Element(tag=tag, children=children, self_closing=self_closing):
                    # Pre-order: parent is numbered before its children.
                    key = registry.intern_element(tag)
                    if self_closing or not children:
                        buffer.token(f"<{key}/>")
                        continue
                    buffer.token(f"<{key}>")
                    with guard:
                        self._flatten_children(children, registry, buffer, guard)
                    buffer.token(f"</{key}>")
                case Macro():
                    raise UsageError(ErrorTemplate.unresolved_macro())


def flatten(nodes: tuple[MessageNode, ...], registry: PlaceholderRegistry) -> str:
    """Flatten nodes into a message string using a default MessageFlattener."""
    return MessageFlattener().flatten(nodes, registry)
