"""Whitespace normalization for rich-text (markup) messages.

Collapses insignificant whitespace the way a JSX renderer lays out text
children, so that source indentation never leaks into message catalogs:

    <Trans>
      Hello <b>World</b>{" "}
      and welcome.
    </Trans>

normalizes to the siblings "Hello ", <b>World</b>, " ", "and welcome.".

Rules, per sibling sequence (applied recursively to element children):
- Whitespace is JSX whitespace only: space, tab, CR, LF. U+00A0 is content.
- Explicit text (from a string container such as {" "}) is kept verbatim.
- A whitespace-only run touching a structural boundary (start or end of
  the sibling sequence, or an adjacent Element) is removed.
- A whitespace-only run containing a line break is removed when neither
  neighbour is implicit text (line continuation between placeholders), and
  otherwise collapses to a single space.
- Any other run is cleaned line by line: line breaks together with the
  indentation around them collapse to one space between non-empty lines,
  and vanish at the run's edges.
- At the very start and end of the whole tree, remaining leading or
  trailing spaces are trimmed.

Python 3.13+. Zero external dependencies.
"""

import re

from i18nmacro.constants import INLINE_WHITESPACE, JSX_WHITESPACE, MAX_DEPTH
from i18nmacro.core.depth_guard import DepthGuard

from .ast import Element, MessageNode, Text

__all__ = ["clean_text_lines", "is_blank", "normalize_whitespace"]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def is_blank(value: str) -> bool:
    """True if value consists only of JSX whitespace (or is empty)."""
    return not value.strip(JSX_WHITESPACE)


def clean_text_lines(value: str) -> str:
    """Collapse line breaks and the indentation around them.

    Every line but the first loses its leading spaces/tabs, every line but
    the last loses its trailing spaces/tabs; empty lines are dropped and
    the rest joined by a single space. Single-line text is returned as-is.

    Example:
        >>> clean_text_lines("\\n    Hello\\n    World ")
        'Hello World '
    """
    lines = _LINE_BREAK.split(value)
    if len(lines) == 1:
        return value

    last = len(lines) - 1
    kept: list[str] = []
    for index, line in enumerate(lines):
        if index > 0:
            line = line.lstrip(INLINE_WHITESPACE)
        if index < last:
            line = line.rstrip(INLINE_WHITESPACE)
        if line:
            kept.append(line)
    return " ".join(kept)


def normalize_whitespace(
    nodes: tuple[MessageNode, ...],
    *,
    max_depth: int = MAX_DEPTH,
    guard: DepthGuard | None = None,
) -> tuple[MessageNode, ...]:
    """Return an equivalent node sequence without insignificant whitespace.

    Pure function: the input tree is not modified, and the placeholder
    registry is not consulted.

    Args:
        nodes: Top-level sibling nodes of one macro call site
        max_depth: Maximum element nesting depth
        guard: Call-site guard to count element levels on; max_depth is
            ignored when given

    Returns:
        Normalized sibling tuple

    Raises:
        DepthLimitExceededError: If elements nest deeper than the limit
    """
    if guard is None:
        guard = DepthGuard(max_depth=max_depth)
    result = _normalize_siblings(nodes, guard)
    return _trim_tree_edges(result)


def _normalize_siblings(
    nodes: tuple[MessageNode, ...], guard: DepthGuard
) -> tuple[MessageNode, ...]:
    result: list[MessageNode] = []
    last = len(nodes) - 1
    for index, node in enumerate(nodes):
        match node:
            case Text(explicit=True):
                result.append(node)
            case Text(value=value):
                if not is_blank(value):
                    result.append(Text(clean_text_lines(value)))
                    continue
                previous = nodes[index - 1] if index > 0 else None
                following = nodes[index + 1] if index < last else None
                if previous is None or following is None:
                    continue
                if Element.guard(previous) or Element.guard(following):
                    continue
                if not _LINE_BREAK.search(value):
                    result.append(node)
                elif _is_implicit_text(previous) or _is_implicit_text(following):
                    result.append(Text(" "))
            case Element(children=children):
                with guard:
                    normalized = _normalize_siblings(children, guard)
                result.append(Element(node.tag, normalized, node.self_closing))
            case _:
                result.append(node)
    return tuple(result)


def _trim_tree_edges(nodes: tuple[MessageNode, ...]) -> tuple[MessageNode, ...]:
    """Trim leading spaces of the first and trailing spaces of the last text."""
    trimmed = list(nodes)
    if trimmed and Text.guard(first := trimmed[0]) and not first.explicit:
        value = first.value.lstrip(JSX_WHITESPACE)
        trimmed[0] = Text(value)
    if trimmed and Text.guard(final := trimmed[-1]) and not final.explicit:
        value = final.value.rstrip(JSX_WHITESPACE)
        trimmed[-1] = Text(value)
    return tuple(node for node in trimmed if not (Text.guard(node) and not node.value))


def _is_implicit_text(node: MessageNode) -> bool:
    return Text.guard(node) and not node.explicit
