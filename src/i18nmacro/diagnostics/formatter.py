"""Rendering of diagnostics for terminals, logs and build tools.

Three styles share one set of escaping rules:

    rust     error[EMPTY_MESSAGE]: Macro call has an empty message ...
               --> src/app.js:12
               = help: Add message content or pass an explicit id
    simple   EMPTY_MESSAGE: Macro call has an empty message ...
    json     {"code": "EMPTY_MESSAGE", "code_value": 1001, ...}

Diagnostic messages quote user text (message fragments, placeholder names),
so control characters are escaped before they reach a report line.

Python 3.13+.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)}
_CONTROL_ESCAPES.update({0x09: "\\t", 0x0A: "\\n", 0x0D: "\\r"})

_ANSI_SEVERITY = {
    "error": "\033[1;31merror\033[0m",
    "warning": "\033[1;33mwarning\033[0m",
}


class OutputFormat(StrEnum):
    """Report style produced by DiagnosticFormatter."""

    RUST = "rust"
    """Multi-line, rustc-like (default)."""

    SIMPLE = "simple"
    """One line: CODE: message."""

    JSON = "json"
    """One JSON object per diagnostic."""


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into report text.

    Attributes:
        output_format: Report style
        sanitize: Truncate quoted content longer than max_content_length
        color: Wrap the severity in ANSI color codes
        max_content_length: Truncation threshold used when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.empty_message("app.js:3")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[EMPTY_MESSAGE]: Macro call has an empty message and no explicit id
          --> app.js:3
          = help: Add message content or pass an explicit id
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return self._one_line(diagnostic)
            case OutputFormat.JSON:
                return self._as_json(diagnostic)
            case _:
                return "\n".join(self._rust_lines(diagnostic))

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(diagnostic) for diagnostic in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Render a validation summary followed by one line per finding."""
        if result.is_valid:
            header = "Validation passed"
        else:
            header = f"Validation failed: {result.error_count} error(s)"
        findings = [f"  {self._one_line(error.diagnostic)}" for error in result.errors]
        return "\n".join([header, *findings])

    def _rust_lines(self, diagnostic: Diagnostic) -> Iterator[str]:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        if self.color:
            severity = _ANSI_SEVERITY[severity]
        yield f"{severity}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"
        if diagnostic.location:
            yield f"  --> {self._clean(diagnostic.location)}"
        if diagnostic.placeholder:
            yield f"  = placeholder: {self._clean(diagnostic.placeholder)}"
        if diagnostic.hint:
            yield f"  = help: {self._clean(diagnostic.hint)}"
        if diagnostic.help_url:
            yield f"  = note: see {diagnostic.help_url}"

    def _one_line(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _as_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._truncate(diagnostic.message),
            "severity": diagnostic.severity,
        }
        optional = {
            "location": diagnostic.location,
            "placeholder": diagnostic.placeholder,
            "hint": diagnostic.hint and self._truncate(diagnostic.hint),
            "help_url": diagnostic.help_url,
        }
        payload.update({key: value for key, value in optional.items() if value})
        return json.dumps(payload, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        return self._truncate(text.translate(_CONTROL_ESCAPES))

    def _truncate(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return f"{text[: self.max_content_length]}..."
        return text
