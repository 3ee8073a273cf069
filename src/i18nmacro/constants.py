"""Shared constants for i18nmacro.

Values here are read by more than one of the syntax, compiler and extraction
packages:
- Depth limits: nesting bound for normalization, flattening and resolution
- Message grammar: placeholder syntax characters and quoting
- Message ids: digest shaping for generated identifiers

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Message grammar
    "SYNTAX_CHARS",
    "QUOTE_CHAR",
    "JSX_WHITESPACE",
    "INLINE_WHITESPACE",
    # Message ids
    "MESSAGE_ID_LENGTH",
    "CONTEXT_SEPARATOR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Nesting levels allowed in any one message tree pass.
# Used by: whitespace normalizer, flattener, nested macro resolver, call builder.
# Markup nested 100 levels deep inside one translatable message is malformed
# input; this keeps traversal well clear of the interpreter recursion limit.
MAX_DEPTH: int = 100

# ============================================================================
# MESSAGE GRAMMAR
# ============================================================================

# Characters that delimit placeholder tokens: {name} values, <0>...</0> components.
SYNTAX_CHARS: frozenset[str] = frozenset("{}<>")

# ICU-style quoting character. '{' quotes a syntax character, '' is a literal quote.
QUOTE_CHAR: str = "'"

# Whitespace as understood by markup layout. U+00A0 and friends are content.
JSX_WHITESPACE: str = " \t\r\n"

# Whitespace trimmed at line boundaries when collapsing multi-line text.
INLINE_WHITESPACE: str = " \t"

# ============================================================================
# MESSAGE IDS
# ============================================================================

# Generated ids are the first N characters of the base64 digest.
# 6 characters = 36 bits, comfortably collision-free for catalogs of
# thousands of messages.
MESSAGE_ID_LENGTH: int = 6

# ASCII unit separator between message and context in the digest input.
# Cannot be typed into a message by accident, so "a" + ctx "b" never
# collides with "ab" + no context.
CONTEXT_SEPARATOR: str = "\x1f"
