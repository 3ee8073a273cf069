"""Tests for NestedMacroResolver."""

import logging

import pytest

from i18nmacro.compiler.descriptor import MessageDescriptor
from i18nmacro.compiler.resolver import NestedMacroResolver
from i18nmacro.core.depth_guard import DepthGuard
from i18nmacro.diagnostics import DepthLimitExceededError, DiagnosticCode, UsageError
from i18nmacro.enums import MacroKind
from i18nmacro.syntax.ast import Element, Expression, Macro, NestedMessage, Text
from i18nmacro.syntax.builders import element, expr, t, trans


class _RecordingCompiler:
    """Stand-in pipeline that records every macro it is asked to compile."""

    def __init__(self) -> None:
        self.seen: list[Macro] = []

    def __call__(self, macro: Macro, guard: DepthGuard) -> MessageDescriptor:
        self.seen.append(macro)
        return MessageDescriptor(id=f"m{len(self.seen)}")


def _resolver(compile_nested: _RecordingCompiler, max_depth: int = 100) -> NestedMacroResolver:
    return NestedMacroResolver(compile_nested, DepthGuard(max_depth=max_depth))


class TestNestedMacroResolver:
    """Test macro replacement."""

    def test_direct_child_macro(self) -> None:
        """A macro among the children becomes a NestedMessage."""
        compiler = _RecordingCompiler()
        nodes = _resolver(compiler).resolve((Text("Field "), t("First Name"), Text("!")))
        assert nodes[1] == NestedMessage(MessageDescriptor(id="m1"), MacroKind.PLAIN)
        assert nodes[0] == Text("Field ")

    def test_macro_in_expression_slot(self) -> None:
        """A macro held by an expression is compiled too."""
        compiler = _RecordingCompiler()
        nodes = _resolver(compiler).resolve((expr(trans("Click")),))
        assert nodes == (NestedMessage(MessageDescriptor(id="m1"), MacroKind.STRUCTURAL),)

    def test_macro_inside_element(self) -> None:
        """Macros nested in element children are found."""
        compiler = _RecordingCompiler()
        nodes = _resolver(compiler).resolve((element("b", t("inner")),))
        assert isinstance(nodes[0].children[0], NestedMessage)  # type: ignore[union-attr]

    def test_plain_nodes_untouched(self) -> None:
        """Trees without macros come back equal."""
        compiler = _RecordingCompiler()
        nodes = (Text("a"), Expression("x", "x"), element("b", "c"))
        assert _resolver(compiler).resolve(nodes) == nodes
        assert compiler.seen == []

    def test_empty_nested_macro_is_malformed(self) -> None:
        """A nested macro with no content and no id is rejected."""
        compiler = _RecordingCompiler()
        with pytest.raises(UsageError) as exc_info:
            _resolver(compiler).resolve((Text("a "), t(location="app.js:9")))
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.MALFORMED_MACRO
        assert diagnostic.location == "app.js:9"

    def test_empty_nested_macro_with_id_accepted(self) -> None:
        """An explicit id is enough for a nested macro."""
        compiler = _RecordingCompiler()
        _resolver(compiler).resolve((t(id="explicit"),))
        assert compiler.seen[0].options.id == "explicit"

    def test_nesting_guard_limits_depth(self) -> None:
        """The shared guard is entered once per nested macro."""
        guard = DepthGuard(max_depth=1)
        guard.current_depth = 1
        resolver = NestedMacroResolver(_RecordingCompiler(), guard)
        with pytest.raises(DepthLimitExceededError):
            resolver.resolve((t("inner"),))

    def test_element_and_macro_levels_share_the_guard(self) -> None:
        """Elements around a nested macro count toward the same limit."""
        nodes = (element("a", element("b", t("inner"))),)
        with pytest.raises(DepthLimitExceededError):
            _resolver(_RecordingCompiler(), max_depth=2).resolve(nodes)
        assert isinstance(
            _resolver(_RecordingCompiler(), max_depth=3).resolve(nodes)[0], Element
        )

    def test_compile_nested_receives_the_resolver_guard(self) -> None:
        """Nested compilation continues counting on the same guard."""
        depths: list[int] = []

        def compile_nested(macro: Macro, guard: DepthGuard) -> MessageDescriptor:
            depths.append(guard.depth)
            return MessageDescriptor(id="m")

        guard = DepthGuard(max_depth=10)
        NestedMacroResolver(compile_nested, guard).resolve((element("a", t("inner")),))
        assert depths == [2]
        assert guard.depth == 0

    def test_logs_resolution(self, caplog: pytest.LogCaptureFixture) -> None:
        """Resolution is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="i18nmacro.compiler.resolver"):
            _resolver(_RecordingCompiler()).resolve((t("inner"),))
        assert "m1" in caplog.text
