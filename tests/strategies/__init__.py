"""Hypothesis strategies for i18nmacro property-based testing.

This package provides reusable strategies for generating message trees
across multiple test modules:

- trees: Text runs, expressions, elements and whole macro call sites

Usage:
    from tests.strategies import macros, message_nodes, literal_text
    from tests.strategies.trees import identifiers, structural_macros
"""

from .trees import (
    SYNTAX_HEAVY_CHARS,
    elements,
    expressions,
    identifiers,
    literal_text,
    macros,
    message_nodes,
    plain_macros,
    structural_macros,
    text_nodes,
)

__all__ = [
    "SYNTAX_HEAVY_CHARS",
    "elements",
    "expressions",
    "identifiers",
    "literal_text",
    "macros",
    "message_nodes",
    "plain_macros",
    "structural_macros",
    "text_nodes",
]
