"""
Tabular comparison: check two record tables against each other.

Records are matched on an id column and every shared column is compared with
the null-safe equality helpers, producing per-column match rates and a list
of mismatching values.
"""

from .comparator import (
    ColumnMismatch,
    FrameComparator,
    FrameComparisonConfig,
    FrameComparisonResults,
    compare_csv,
)

__all__ = [
    "FrameComparator",
    "FrameComparisonConfig",
    "FrameComparisonResults",
    "ColumnMismatch",
    "compare_csv",
]
