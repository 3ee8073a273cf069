"""Translation catalog extraction (requires the optional Babel dependency).

Python 3.13+.
"""

from .catalog import EXPLICIT_ID_FLAG, CatalogCollector, Location

__all__ = ["EXPLICIT_ID_FLAG", "CatalogCollector", "Location"]
