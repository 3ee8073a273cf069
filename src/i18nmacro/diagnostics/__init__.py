"""Diagnostic system for i18nmacro errors.

Numbered codes, error templates, the exception hierarchy and formatters.
Reports read like rustc output: a code, a sentence, a location and a hint.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    DepthLimitExceededError,
    MacroError,
    UsageError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult

__all__ = [
    "ConfigurationError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MacroError",
    "OutputFormat",
    "UsageError",
    "ValidationError",
    "ValidationResult",
]
