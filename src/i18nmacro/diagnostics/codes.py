"""Numbered diagnostic codes and the Diagnostic record carried by errors.

Code ranges tell a caller how far a failure reaches:

    1xxx  one macro call site fails; the rest of a batch continues
    2xxx  the compiler configuration is unusable; nothing is compiled
    3xxx  findings of descriptor validation; nothing is raised

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Stable numeric identifiers, grouped by range as listed above."""

    # Usage errors (1000-1999)
    EMPTY_MESSAGE = 1001
    MALFORMED_MACRO = 1002
    UNRESOLVABLE_REFERENCE = 1003
    PLACEHOLDER_NAME_CONFLICT = 1004
    UNRESOLVED_MACRO = 1005
    MAX_DEPTH_EXCEEDED = 1006
    MESSAGE_SYNTAX = 1007
    MISSING_METADATA = 1008

    # Configuration errors (2000-2999)
    INVALID_MODE = 2001
    INVALID_EXTRACT = 2002
    UNKNOWN_OPTION = 2003
    INVALID_MAX_DEPTH = 2004

    # Descriptor validation (3000-3999)
    VALIDATION_EMPTY_ID = 3001
    VALIDATION_ORPHAN_PLACEHOLDER = 3002
    VALIDATION_UNUSED_VALUE = 3003
    VALIDATION_UNUSED_COMPONENT = 3004
    VALIDATION_UNPARSEABLE_MESSAGE = 3005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reportable problem, with enough context for editors and build tools.

    Attributes:
        code: Numbered code of the problem
        message: Sentence describing what went wrong
        hint: How to fix it, when there is an obvious fix
        help_url: Link to longer documentation
        location: Call site location supplied by the host (e.g. "app.js:12")
        placeholder: Placeholder key involved, if any
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    location: str | None = None
    placeholder: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Multi-line report in the default DiagnosticFormatter style."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
