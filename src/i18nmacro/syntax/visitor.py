"""Walkers over message trees.

Handlers are looked up by node class name, the way ast.NodeVisitor does it:
a subclass defines visit_Element, visit_Text, visit_Macro and so on, and any
node without a handler falls through to generic_visit.

The walk follows the places a node can hold other nodes:

    Element.children, Macro.children    sibling tuples
    Expression.source                   a macro used as an interpolated value

NodeVisitor[T] returns whatever its handlers return. NodeTransformer handlers
return a replacement node, None to drop the node, or a list to splice in
several nodes.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import replace
from typing import ClassVar

from i18nmacro.constants import MAX_DEPTH
from i18nmacro.core.depth_guard import DepthGuard

from .ast import Element, Expression, Macro, MessageNode

__all__ = ["NodeTransformer", "NodeVisitor"]

type TransformerResult = MessageNode | None | list[MessageNode]

_HANDLER_PREFIX = "visit_"


class NodeVisitor[T = MessageNode]:
    """Depth-limited walk over a message tree.

    Subclasses that define __init__ call super().__init__() so the depth
    guard exists before the first visit. Passing depth_guard counts this
    walk's levels on a guard that an enclosing pass already holds.

    Example:
        >>> class CountElements(NodeVisitor):
        ...     def __init__(self) -> None:
        ...         super().__init__()
        ...         self.found = 0
        ...
        ...     def visit_Element(self, node: Element) -> MessageNode:
        ...         self.found += 1
        ...         return self.generic_visit(node)
    """

    __slots__ = ("_depth_guard", "_handlers")

    _handler_names: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._handler_names = {
            attr.removeprefix(_HANDLER_PREFIX): attr
            for attr in dir(cls)
            if attr.startswith(_HANDLER_PREFIX)
        }

    def __init__(
        self, *, max_depth: int | None = None, depth_guard: DepthGuard | None = None
    ) -> None:
        if depth_guard is None:
            depth_guard = DepthGuard(max_depth=MAX_DEPTH if max_depth is None else max_depth)
        self._depth_guard = depth_guard
        self._handlers: dict[type, Callable[[MessageNode], T]] = {}

    def visit(self, node: MessageNode) -> T:
        """Dispatch node to its visit_<ClassName> handler or to generic_visit."""
        handler = self._handlers.get(type(node))
        if handler is None:
            handler = self._bind_handler(type(node))
        return handler(node)

    def _bind_handler(self, node_type: type) -> Callable[[MessageNode], T]:
        attr = self._handler_names.get(node_type.__name__)
        handler = self.generic_visit if attr is None else getattr(self, attr)
        self._handlers[node_type] = handler
        return handler

    def generic_visit(self, node: MessageNode) -> T:
        """Visit every child of node and return node itself.

        Raises:
            DepthLimitExceededError: If the tree nests deeper than max_depth
        """
        with self._depth_guard:
            for child in _children_of(node):
                self.visit(child)
        return node  # type: ignore[return-value]  # T defaults to MessageNode


class NodeTransformer(NodeVisitor[TransformerResult]):
    """Builds a new tree from handler results; the input tree is never mutated.

    Example:
        >>> class DropExplicit(NodeTransformer):
        ...     def visit_Text(self, node: Text) -> Text | None:
        ...         return None if node.explicit else node
    """

    def transform(self, node: MessageNode) -> TransformerResult:
        return self.visit(node)

    def generic_visit(self, node: MessageNode) -> TransformerResult:
        """Rebuild node with transformed children via dataclasses.replace.

        Raises:
            DepthLimitExceededError: If the tree nests deeper than max_depth
        """
        with self._depth_guard:
            if isinstance(node, Element | Macro):
                return replace(node, children=self.transform_children(node.children))
            if isinstance(node, Expression) and isinstance(node.source, Macro):
                return replace(node, source=self.visit(node.source))
        return node

    def transform_children(self, nodes: tuple[MessageNode, ...]) -> tuple[MessageNode, ...]:
        """Transform siblings, dropping None results and splicing lists."""
        rebuilt: list[MessageNode] = []
        for node in nodes:
            outcome = self.visit(node)
            if outcome is None:
                continue
            if isinstance(outcome, list):
                rebuilt.extend(outcome)
            else:
                rebuilt.append(outcome)
        return tuple(rebuilt)


def _children_of(node: MessageNode) -> tuple[MessageNode, ...]:
    match node:
        case Element(children=children) | Macro(children=children):
            return children
        case Expression(source=Macro() as macro):
            return (macro,)
        case _:
            return ()
