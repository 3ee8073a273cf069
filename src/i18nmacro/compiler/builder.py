"""Build the output invocation for a compiled descriptor.

The host splices the returned object back into its source tree:

    MessageCall    plain macros      i18n._({id: "xRRkAE", message: ..., values: {...}})
    ComponentCall  structural macros <Trans id="..." message="..." values={...} components={...}/>

Values that hold a NestedMessage are replaced by the nested macro's own
invocation, recursively, so the host receives a fully built call tree.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from i18nmacro.constants import MAX_DEPTH
from i18nmacro.core.depth_guard import DepthGuard
from i18nmacro.enums import MacroKind
from i18nmacro.syntax.ast import NestedMessage

from .descriptor import MessageDescriptor

__all__ = ["ComponentCall", "MessageCall", "build_call"]

type Invocation = MessageCall | ComponentCall


@dataclass(frozen=True, slots=True)
class MessageCall:
    """Function-style invocation taking one descriptor object.

    Attributes:
        descriptor: Descriptor fields in canonical order, nested values built
    """

    descriptor: dict[str, object] = field(hash=False)

    @property
    def id(self) -> str:
        """Id of the invoked message."""
        return str(self.descriptor["id"])


@dataclass(frozen=True, slots=True)
class ComponentCall:
    """Component-style invocation with discrete named inputs.

    Attributes mirror the descriptor; empty ones are omitted from props().
    """

    id: str
    message: str | None = None
    values: dict[str, object] = field(default_factory=dict, hash=False)
    components: dict[str, object] = field(default_factory=dict, hash=False)
    comment: str | None = None
    context: str | None = None

    def props(self) -> dict[str, object]:
        """Named inputs in emission order: id, message, values, components, comment, context."""
        result: dict[str, object] = {"id": self.id}
        if self.message is not None:
            result["message"] = self.message
        if self.values:
            result["values"] = self.values
        if self.components:
            result["components"] = self.components
        if self.comment is not None:
            result["comment"] = self.comment
        if self.context is not None:
            result["context"] = self.context
        return result


def build_call(
    descriptor: MessageDescriptor,
    kind: MacroKind = MacroKind.PLAIN,
    *,
    max_depth: int = MAX_DEPTH,
) -> Invocation:
    """Construct the invocation for a descriptor.

    Args:
        descriptor: Compiled descriptor (consumed, not modified)
        kind: PLAIN for function-style, STRUCTURAL for component-style
        max_depth: Maximum nested-message depth

    Returns:
        MessageCall or ComponentCall

    Raises:
        DepthLimitExceededError: If nested messages exceed max_depth
    """
    return _build(descriptor, kind, DepthGuard(max_depth=max_depth))


def _build(descriptor: MessageDescriptor, kind: MacroKind, guard: DepthGuard) -> Invocation:
    values = _build_values(descriptor.values, guard)
    match MacroKind(kind):
        case MacroKind.STRUCTURAL:
            return ComponentCall(
                id=descriptor.id,
                message=descriptor.message,
                values=values,
                components=dict(descriptor.components),
                comment=descriptor.comment,
                context=descriptor.context,
            )
        case _:
            payload = descriptor.as_dict()
            if values:
                payload["values"] = values
            return MessageCall(descriptor=payload)


def _build_values(values: Mapping[str, object], guard: DepthGuard) -> dict[str, object]:
    built: dict[str, object] = {}
    for key, value in values.items():
        if isinstance(value, NestedMessage):
            with guard:
                built[key] = _build(value.descriptor, value.kind, guard)
        else:
            built[key] = value
    return built
