"""Message tree syntax: nodes, traversal, whitespace, grammar.

Python 3.13+.
"""

from .ast import Element, Expression, Macro, MacroOptions, MessageNode, NestedMessage, Text
from .grammar import PlaceholderToken, escape_text, tokenize_message, unescape_text
from .text import decode_entities, decode_template_raw, is_simple_name
from .visitor import NodeTransformer, NodeVisitor
from .whitespace import normalize_whitespace

__all__ = [
    "Element",
    "Expression",
    "Macro",
    "MacroOptions",
    "MessageNode",
    "NestedMessage",
    "NodeTransformer",
    "NodeVisitor",
    "PlaceholderToken",
    "Text",
    "decode_entities",
    "decode_template_raw",
    "escape_text",
    "is_simple_name",
    "normalize_whitespace",
    "tokenize_message",
    "unescape_text",
]
