"""Nested macro resolution.

Macros can appear inside other macros:

    t`Field ${t`First Name`} is required`

The inner macro must get its own descriptor and id instead of being merged
into the outer message text. The resolver walks the outer tree and, bottom
up, compiles every nested Macro through the full pipeline, replacing it with
a NestedMessage that the flattener treats as one opaque value:

    "Field {0} is required", values={0: <call for "First Name">}

Python 3.13+.
"""

import logging
from collections.abc import Callable

from i18nmacro.core.depth_guard import DepthGuard
from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.syntax.ast import Expression, Macro, MessageNode, NestedMessage
from i18nmacro.syntax.visitor import NodeTransformer

from .descriptor import MessageDescriptor

__all__ = ["NestedMacroResolver"]

logger = logging.getLogger(__name__)

type CompileNested = Callable[[Macro, DepthGuard], MessageDescriptor]


class NestedMacroResolver(NodeTransformer):
    """Replaces nested Macro nodes with compiled NestedMessage nodes.

    A macro is recognized wherever it sits: as a direct child, inside
    element children, or as the source of an Expression slot.

    Element levels and macro levels are counted on the same call-site guard,
    which is also handed to compile_nested, so a macro buried under elements
    inside another macro under elements is limited by its total nesting.

    Attributes:
        compile_nested: Pipeline entry point compiling one macro into a
            descriptor with the call-site guard
    """

    def __init__(self, compile_nested: CompileNested, guard: DepthGuard) -> None:
        super().__init__(depth_guard=guard)
        self._compile_nested = compile_nested

    def resolve(self, nodes: tuple[MessageNode, ...]) -> tuple[MessageNode, ...]:
        """Resolve every nested macro among the given top-level nodes."""
        return self.transform_children(nodes)

    def visit_Macro(self, node: Macro) -> NestedMessage:
        """Compile a nested macro first, bottom-up, into an opaque value."""
        if not node.children and not node.options.id:
            raise UsageError(
                ErrorTemplate.malformed_macro(
                    "nested macro has no message content and no id", node.options.location
                )
            )
        with self._depth_guard:
            descriptor = self._compile_nested(node, self._depth_guard)
        logger.debug("Resolved nested %s macro as %s", node.kind, descriptor.id)
        return NestedMessage(descriptor=descriptor, kind=node.kind)

    def visit_Expression(self, node: Expression) -> MessageNode:
        """Substitute an expression slot holding a macro by its compiled form."""
        if isinstance(node.source, Macro):
            return self.visit_Macro(node.source)
        return node
