"""Optional Babel dependency.

The compiler itself needs nothing beyond the standard library. Only catalog
extraction (i18nmacro.extraction) builds Babel message catalogs, so Babel
is an extra:

    pip install i18nmacro            # compile macros
    pip install i18nmacro[babel]     # compile macros and write PO templates

Code that needs Babel calls require_babel() first and imports babel lazily
afterwards, so a missing extra surfaces as one BabelImportError naming the
feature and the install command.

Python 3.13+.
"""

from __future__ import annotations

from functools import cache
from importlib.util import find_spec

__all__ = [
    "BabelImportError",
    "is_babel_available",
    "require_babel",
]


class BabelImportError(ImportError):
    """A feature that builds message catalogs was used without Babel.

    Attributes:
        feature: Name of the class or function that needs Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs Babel to build message catalogs. "
            "Install with: pip install i18nmacro[babel]"
        )
        self.feature = feature


@cache
def is_babel_available() -> bool:
    """True if the babel package can be imported (checked once)."""
    return find_spec("babel") is not None


def require_babel(feature: str) -> None:
    """Raise BabelImportError unless Babel is installed.

    Args:
        feature: Name reported in the error message
    """
    if not is_babel_available():
        raise BabelImportError(feature)
