"""Descriptor validation.

Checks the structural invariants of a compiled descriptor without raising:
the id is non-empty, and the placeholder keys referenced in the message are
exactly the keys of values and components.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from i18nmacro.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    UsageError,
    ValidationError,
    ValidationResult,
)
from i18nmacro.introspection import parse_placeholders

if TYPE_CHECKING:
    from i18nmacro.compiler.descriptor import MessageDescriptor

__all__ = ["validate_descriptor"]

logger = logging.getLogger(__name__)


def validate_descriptor(descriptor: MessageDescriptor) -> ValidationResult:
    """Validate placeholder completeness and id presence.

    Descriptors stripped for production (message is None) are only checked
    for a non-empty id.

    Example:
        >>> validate_descriptor(MessageDescriptor(id="x", message="{a}")).is_valid
        False

    Returns:
        ValidationResult; never raises for invalid descriptors
    """
    errors: list[ValidationError] = []
    message_id = descriptor.id

    def report(code: DiagnosticCode, text: str, placeholder: str | None = None) -> None:
        diagnostic = Diagnostic(code=code, message=text, placeholder=placeholder)
        errors.append(ValidationError(diagnostic=diagnostic, message_id=message_id))

    if not message_id:
        report(DiagnosticCode.VALIDATION_EMPTY_ID, "Descriptor id is empty")

    if descriptor.message is not None:
        try:
            placeholders = parse_placeholders(descriptor.message)
        except UsageError as error:
            report(DiagnosticCode.VALIDATION_UNPARSEABLE_MESSAGE, str(error))
        else:
            _compare_keys(
                placeholders.values,
                descriptor.values,
                DiagnosticCode.VALIDATION_UNUSED_VALUE,
                "value",
                report,
            )
            _compare_keys(
                placeholders.components,
                descriptor.components,
                DiagnosticCode.VALIDATION_UNUSED_COMPONENT,
                "component",
                report,
            )

    if errors:
        logger.debug("Descriptor %s failed validation: %d error(s)", message_id, len(errors))
        return ValidationResult.invalid(tuple(errors))
    return ValidationResult.valid()


def _compare_keys(
    referenced: tuple[str, ...],
    registered: Mapping[str, object],
    unused_code: DiagnosticCode,
    label: str,
    report: Callable[[DiagnosticCode, str, str | None], None],
) -> None:
    for key in referenced:
        if key not in registered:
            report(
                DiagnosticCode.VALIDATION_ORPHAN_PLACEHOLDER,
                f"Message references {label} '{key}' which has no entry",
                key,
            )
    for key in registered:
        if key not in referenced:
            report(unused_code, f"{label.capitalize()} '{key}' is never referenced", key)
