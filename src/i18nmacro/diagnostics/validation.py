"""Validation result types for compiled message descriptors.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "ValidationError",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured finding from descriptor validation.

    Attributes:
        diagnostic: Diagnostic describing the finding
        message_id: Id of the descriptor the finding belongs to
    """

    diagnostic: Diagnostic
    message_id: str

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of the finding."""
        return self.diagnostic.code

    def format(self) -> str:
        """Format error as a one-line human-readable string."""
        return f"[{self.code.name}] {self.message_id}: {self.diagnostic.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of validating one descriptor.

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]

    @property
    def is_valid(self) -> bool:
        """True when no errors were found."""
        return not self.errors

    @property
    def error_count(self) -> int:
        """Number of errors found."""
        return len(self.errors)

    @property
    def codes(self) -> frozenset[DiagnosticCode]:
        """Distinct diagnostic codes present in the result."""
        return frozenset(error.code for error in self.errors)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors."""
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[ValidationError, ...]) -> "ValidationResult":
        """Create a result carrying the given errors."""
        return ValidationResult(errors=errors)
