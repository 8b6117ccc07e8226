# src/matchclip/core/__init__.py
"""Public facade for matchclip.core: re-export main classes from CamelCase modules.

Keeps Java-like file names (RangeMerger.py, Truncator.py, ...),
but provides flat imports for convenience and stability.
"""

# Re-export classes/symbols from CamelCase modules
from .GraphemeMeasurer import Cluster, GraphemeMeasurer  # noqa: F401
from .RangeMerger import MatchRange, RangeMerger  # noqa: F401
from .Truncator import ColumnRange, TruncationResult, Truncator  # noqa: F401


__all__ = [
    "Cluster",
    "ColumnRange",
    "GraphemeMeasurer",
    "MatchRange",
    "RangeMerger",
    "TruncationResult",
    "Truncator",
]
