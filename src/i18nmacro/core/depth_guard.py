"""Nesting limits for message tree passes.

Every recursive pass over a message tree enters a DepthGuard once per
level it descends:

- whitespace normalization and flattening: one level per Element
- visitors and transformers: one level per visited node with children
- nested macro resolution: one level per macro inside a macro
- call building: one level per nested message value

One guard is shared by all passes of a call site, nested macros included,
so its depth tracks the interpreter stack. Hosts build trees
programmatically, so a runaway or hostile tree must fail with a UsageError
for its own call site instead of a RecursionError that takes down the
whole run.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from i18nmacro.constants import MAX_DEPTH
from i18nmacro.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Interpreter frames between two guarded levels on the costliest path: a
# macro in an expression slot (visit, visit_Expression, visit_Macro,
# _compile_descriptor, resolve, transform_children).
_FRAMES_PER_LEVEL = 6


@dataclass(slots=True)
class DepthGuard:
    """Counts nesting levels of one pass and rejects trees nested too deeply.

    A guard is not shared between call sites. The resolver hands one guard
    down through recursive pipeline runs so that macro-in-macro chains are
    counted across them.

        guard = DepthGuard(max_depth=50)
        with guard:
            self._flatten_children(element.children, registry, buffer, guard)

    Attributes:
        max_depth: Levels allowed, clamped to what the interpreter stack holds
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter one level.

        The limit is checked before counting: a rejected enter never runs
        __exit__, so the count must stay untouched.

        Raises:
            DepthLimitExceededError: If max_depth levels are already entered
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Levels currently entered."""
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 100) -> int:
    """Lower a requested depth to what sys.getrecursionlimit() can support.

    Args:
        requested_depth: Depth asked for by configuration
        reserve_frames: Frames kept free for the caller's own stack

    Returns:
        requested_depth, or the largest safe depth with a warning logged
    """
    limit = sys.getrecursionlimit()
    safe_depth = (limit - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth <= safe_depth:
        return requested_depth
    logger.warning(
        "Requested depth %d exceeds what recursion limit %d supports; clamping to %d",
        requested_depth,
        limit,
        safe_depth,
    )
    return safe_depth
