"""Message descriptors and the descriptor compiler.

A MessageDescriptor is the compiled, immutable record of one translatable
message instance. compile_descriptor() assembles it from the flattener's
output, generating the id and applying mode-dependent field retention:

    development            id, context, values, components, message, comment
    production             id, values, components
    production + extract   same as development

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from i18nmacro.config import CompilerConfig
from i18nmacro.diagnostics import ErrorTemplate, UsageError

from .message_id import generate_message_id

__all__ = ["MessageDescriptor", "compile_descriptor"]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = CompilerConfig()


def _empty_mapping() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """Compiled message, ready to be handed to the call builder.

    Field declaration order is the canonical output order used by as_dict().

    Attributes:
        id: Custom id or generated hash; never empty
        context: Disambiguation context (None when absent or stripped)
        values: Value placeholder key -> host expression (read-only)
        components: Component placeholder key -> host element shape (read-only)
        message: Canonical message string (None when stripped)
        comment: Translator note (None when absent or stripped)
        custom_id: True if id was supplied by the caller
    """

    id: str
    context: str | None = None
    values: Mapping[str, object] = field(default_factory=_empty_mapping, hash=False)
    components: Mapping[str, object] = field(default_factory=_empty_mapping, hash=False)
    message: str | None = None
    comment: str | None = None
    custom_id: bool = False

    def as_dict(self) -> dict[str, object]:
        """Return descriptor fields in canonical order, omitting empty ones.

        Example:
            >>> MessageDescriptor(id="xRRkAE", message="Variable {name}",
            ...                   values={"name": "name"}).as_dict()
            {'id': 'xRRkAE', 'values': {'name': 'name'}, 'message': 'Variable {name}'}
        """
        result: dict[str, object] = {"id": self.id}
        if self.context is not None:
            result["context"] = self.context
        if self.values:
            result["values"] = dict(self.values)
        if self.components:
            result["components"] = dict(self.components)
        if self.message is not None:
            result["message"] = self.message
        if self.comment is not None:
            result["comment"] = self.comment
        return result


def compile_descriptor(
    message: str,
    values: Mapping[str, object],
    components: Mapping[str, object],
    *,
    context: str | None = None,
    comment: str | None = None,
    custom_id: str | None = None,
    config: CompilerConfig | None = None,
    location: str | None = None,
) -> MessageDescriptor:
    """Assemble a MessageDescriptor for one call site.

    Empty strings for context, comment and custom_id count as absent.

    Args:
        message: Flattened message string
        values: Registered value placeholders, in registration order
        components: Registered component placeholders, in registration order
        context: Disambiguation context; part of the generated id
        comment: Translator note; never part of the id
        custom_id: Caller-supplied id; bypasses id generation when set
        config: Compiler configuration (default: development mode)
        location: Host call site location for diagnostics

    Returns:
        Immutable descriptor with mode-dependent field retention applied

    Raises:
        UsageError: If the message is empty/whitespace-only and no
            custom_id was supplied
    """
    effective_config = config if config is not None else _DEFAULT_CONFIG
    context = context or None
    comment = comment or None

    if custom_id:
        message_id = custom_id
    else:
        if not message.strip():
            raise UsageError(ErrorTemplate.empty_message(location))
        message_id = generate_message_id(message, context)

    frozen_values = MappingProxyType(dict(values))
    frozen_components = MappingProxyType(dict(components))

    if effective_config.keeps_metadata:
        descriptor = MessageDescriptor(
            id=message_id,
            context=context,
            values=frozen_values,
            components=frozen_components,
            message=message or None,
            comment=comment,
            custom_id=bool(custom_id),
        )
    else:
        descriptor = MessageDescriptor(
            id=message_id,
            values=frozen_values,
            components=frozen_components,
            custom_id=bool(custom_id),
        )

    logger.debug(
        "Compiled descriptor %s (%d value(s), %d component(s), mode=%s, extract=%s)",
        message_id,
        len(frozen_values),
        len(frozen_components),
        effective_config.mode,
        effective_config.extract,
    )
    return descriptor
