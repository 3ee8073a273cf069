"""Tests for the diagnostic system: codes, templates, errors, formatting."""

import json

import pytest

from i18nmacro.diagnostics import (
    ConfigurationError,
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    MacroError,
    OutputFormat,
    UsageError,
    ValidationError,
    ValidationResult,
)


class TestDiagnosticCodes:
    """Test code numbering."""

    def test_codes_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("prefix", "low", "high"),
        [("VALIDATION_", 3000, 3999)],
    )
    def test_validation_range(self, prefix: str, low: int, high: int) -> None:
        """Validation codes live in their own range."""
        for code in DiagnosticCode:
            if code.name.startswith(prefix):
                assert low <= code.value <= high


class TestExceptionHierarchy:
    """Test exception classes."""

    def test_hierarchy(self) -> None:
        """Usage and configuration errors share the MacroError base."""
        assert issubclass(UsageError, MacroError)
        assert issubclass(DepthLimitExceededError, UsageError)
        assert issubclass(ConfigurationError, MacroError)
        assert not issubclass(ConfigurationError, UsageError)

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = UsageError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is stored and formatted into the message."""
        diagnostic = ErrorTemplate.empty_message("app.js:3")
        error = UsageError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[EMPTY_MESSAGE]:")


class TestErrorTemplate:
    """Test template contents."""

    def test_placeholder_name_conflict(self) -> None:
        """Conflict diagnostics name the placeholder."""
        diagnostic = ErrorTemplate.placeholder_name_conflict("x")
        assert diagnostic.code == DiagnosticCode.PLACEHOLDER_NAME_CONFLICT
        assert "'x'" in diagnostic.message

    def test_message_syntax_has_offset_and_url(self) -> None:
        """Grammar diagnostics carry the offset and a help URL."""
        diagnostic = ErrorTemplate.message_syntax("unclosed '{'", 4)
        assert "offset 4" in diagnostic.message
        assert diagnostic.help_url is not None

    def test_depth_exceeded(self) -> None:
        """Depth diagnostics name the limit."""
        diagnostic = ErrorTemplate.depth_exceeded(7)
        assert diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert "7" in diagnostic.message

    def test_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        diagnostic = ErrorTemplate.unresolved_macro()
        assert str(diagnostic) == diagnostic.message


class TestDiagnosticFormatter:
    """Test output formats."""

    def test_rust_format(self) -> None:
        """Rust style lists location, placeholder and help lines."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NAME_CONFLICT,
            message="Placeholder 'x' is bound to two different expressions",
            hint="Rename one",
            location="app.js:12",
            placeholder="x",
        )
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[PLACEHOLDER_NAME_CONFLICT]: "
            "Placeholder 'x' is bound to two different expressions\n"
            "  --> app.js:12\n"
            "  = placeholder: x\n"
            "  = help: Rename one"
        )

    def test_rust_format_help_url(self) -> None:
        """Help URLs are rendered as notes."""
        diagnostic = ErrorTemplate.message_syntax("x", 0)
        assert "  = note: see https://" in DiagnosticFormatter().format(diagnostic)

    def test_warning_color(self) -> None:
        """Color output wraps the severity in ANSI codes."""
        diagnostic = Diagnostic(DiagnosticCode.EMPTY_MESSAGE, "m", severity="warning")
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;33mwarning\033[0m")

    def test_simple_format(self) -> None:
        """Simple format is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = ErrorTemplate.empty_message()
        assert formatter.format(diagnostic) == (
            "EMPTY_MESSAGE: Macro call has an empty message and no explicit id"
        )

    def test_json_format(self) -> None:
        """JSON format is machine readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.empty_message("a.js:1")))
        assert data["code"] == "EMPTY_MESSAGE"
        assert data["code_value"] == 1001
        assert data["location"] == "a.js:1"

    def test_control_characters_escaped(self) -> None:
        """Newlines in quoted content cannot forge report lines."""
        diagnostic = Diagnostic(DiagnosticCode.MESSAGE_SYNTAX, "bad\nerror[FAKE]: x")
        output = DiagnosticFormatter().format(diagnostic)
        assert "\n" not in output
        assert "bad\\nerror" in output

    def test_sanitize_truncates(self) -> None:
        """Long content is truncated when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=5
        )
        diagnostic = Diagnostic(DiagnosticCode.MESSAGE_SYNTAX, "abcdefghij")
        assert formatter.format(diagnostic) == "MESSAGE_SYNTAX: abcde..."

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.unresolved_macro(), ErrorTemplate.depth_exceeded(3)]
        assert formatter.format_all(diagnostics).count("\n\n") == 1

    def test_format_validation_result(self) -> None:
        """Validation results get a summary line."""
        error = ValidationError(
            diagnostic=Diagnostic(DiagnosticCode.VALIDATION_EMPTY_ID, "Descriptor id is empty"),
            message_id="",
        )
        formatter = DiagnosticFormatter()
        assert formatter.format_validation_result(ValidationResult.valid()) == (
            "Validation passed"
        )
        output = formatter.format_validation_result(ValidationResult.invalid((error,)))
        assert output.splitlines()[0] == "Validation failed: 1 error(s)"


class TestValidationTypes:
    """Test ValidationError and ValidationResult."""

    def test_validation_error_format(self) -> None:
        """One-line format includes code and id."""
        error = ValidationError(
            diagnostic=Diagnostic(DiagnosticCode.VALIDATION_UNUSED_VALUE, "Value 'b' unused"),
            message_id="abc",
        )
        assert error.format() == "[VALIDATION_UNUSED_VALUE] abc: Value 'b' unused"

    def test_result_properties(self) -> None:
        """Result exposes counts and codes."""
        result = ValidationResult.valid()
        assert result.is_valid
        assert result.error_count == 0
        assert result.codes == frozenset()
