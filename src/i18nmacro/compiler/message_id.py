"""Deterministic message id generation.

    id = base64url(sha256(message + "\\x1f" + context))[:6]

The context is always separated from the message by the ASCII unit
separator, so ("Hello", None) and ("Hello", "my custom") hash different
inputs, and no message/context split can collide with another.

Python 3.13+. Zero external dependencies.
"""

import base64
import hashlib

from i18nmacro.constants import CONTEXT_SEPARATOR, MESSAGE_ID_LENGTH

__all__ = ["generate_message_id"]


def generate_message_id(message: str, context: str | None = None) -> str:
    """Derive a short, URL-safe id from message text and optional context.

    Args:
        message: Final message string (after flattening)
        context: Disambiguation context, or None

    Returns:
        Fixed-length id (MESSAGE_ID_LENGTH characters of [A-Za-z0-9_-])

    Example:
        >>> generate_message_id("Hello") == generate_message_id("Hello", "")
        True
        >>> generate_message_id("Hello") == generate_message_id("Hello", "my custom")
        False
    """
    payload = f"{message}{CONTEXT_SEPARATOR}{context or ''}".encode()
    digest = hashlib.sha256(payload).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")[:MESSAGE_ID_LENGTH]
