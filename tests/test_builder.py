"""Tests for call construction from compiled descriptors."""

from types import MappingProxyType

import pytest

from i18nmacro.compiler.builder import ComponentCall, MessageCall, build_call
from i18nmacro.compiler.descriptor import MessageDescriptor
from i18nmacro.diagnostics import DepthLimitExceededError
from i18nmacro.enums import MacroKind
from i18nmacro.syntax.ast import NestedMessage


class TestMessageCall:
    """Test function-style invocations."""

    def test_plain_descriptor(self) -> None:
        """The call carries the descriptor fields in canonical order."""
        descriptor = MessageDescriptor(
            id="xRRkAE", values={"name": "name"}, message="Variable {name}"
        )
        call = build_call(descriptor)
        assert isinstance(call, MessageCall)
        assert call.id == "xRRkAE"
        assert call.descriptor == {
            "id": "xRRkAE",
            "values": {"name": "name"},
            "message": "Variable {name}",
        }

    def test_nested_value_built_recursively(self) -> None:
        """NestedMessage values become invocations themselves."""
        inner = MessageDescriptor(id="kODvZJ", message="First Name")
        outer = MessageDescriptor(
            id="O8dJMg",
            values={"0": NestedMessage(inner)},
            message="Field {0} is required",
        )
        call = build_call(outer)
        assert isinstance(call, MessageCall)
        nested = call.descriptor["values"]["0"]  # type: ignore[index]
        assert nested == MessageCall(descriptor={"id": "kODvZJ", "message": "First Name"})

    def test_nested_structural_value(self) -> None:
        """A nested structural macro keeps its component shape."""
        inner = MessageDescriptor(id="abc", message="here")
        outer = MessageDescriptor(
            id="def", values={"0": NestedMessage(inner, MacroKind.STRUCTURAL)}
        )
        call = build_call(outer)
        assert isinstance(call, MessageCall)
        assert isinstance(call.descriptor["values"]["0"], ComponentCall)  # type: ignore[index]

    def test_descriptor_not_modified(self) -> None:
        """Building a call leaves the descriptor untouched."""
        nested = NestedMessage(MessageDescriptor(id="in"))
        outer = MessageDescriptor(id="out", values=MappingProxyType({"0": nested}))
        build_call(outer)
        assert outer.values["0"] is nested


class TestComponentCall:
    """Test component-style invocations."""

    def test_props_emission_order(self) -> None:
        """Props follow id, message, values, components, comment, context."""
        descriptor = MessageDescriptor(
            id="abc",
            context="ctx",
            values={"name": "name"},
            components={"0": "b"},
            message="<0>{name}</0>",
            comment="note",
        )
        call = build_call(descriptor, MacroKind.STRUCTURAL)
        assert isinstance(call, ComponentCall)
        assert list(call.props()) == [
            "id",
            "message",
            "values",
            "components",
            "comment",
            "context",
        ]

    def test_props_omit_empty(self) -> None:
        """Stripped descriptors produce only the id prop."""
        call = build_call(MessageDescriptor(id="mY42CM"), MacroKind.STRUCTURAL)
        assert isinstance(call, ComponentCall)
        assert call.props() == {"id": "mY42CM"}

    def test_string_kind_accepted(self) -> None:
        """MacroKind values may be passed as plain strings."""
        call = build_call(MessageDescriptor(id="x"), "structural")  # type: ignore[arg-type]
        assert isinstance(call, ComponentCall)


class TestBuildDepth:
    """Test depth protection for nested values."""

    def test_nesting_beyond_limit(self) -> None:
        """Nested messages deeper than max_depth raise."""
        descriptor = MessageDescriptor(id="leaf")
        for level in range(6):
            descriptor = MessageDescriptor(
                id=f"level{level}", values={"0": NestedMessage(descriptor)}
            )
        with pytest.raises(DepthLimitExceededError):
            build_call(descriptor, max_depth=3)
