"""Core utilities shared across syntax and compiler layers.

    core <- syntax <- compiler

Exports:
    DepthGuard: Context manager for recursion depth limiting
    require_babel: Fail-fast check for the optional Babel dependency

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .depth_guard import DepthGuard

__all__ = ["BabelImportError", "DepthGuard", "is_babel_available", "require_babel"]
