"""
FrameComparator: Compare two tables of records column by column.

Records are matched on an id column. Text columns are compared with the
null-safe string equality (optionally ignoring case, optionally treating a
missing value as the empty string), numeric columns within an absolute
tolerance.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..equality import equal, equal_str, str_equal

logger = logging.getLogger(__name__)

LEFT_SUFFIX = "_left"
RIGHT_SUFFIX = "_right"


@dataclass
class FrameComparisonConfig:
    """Configuration for a table comparison."""

    id_col: str = "id"
    case_sensitive: bool = True
    null_as_empty: bool = True  # missing text equals ""
    numeric_tolerance: float = 0.0  # absolute
    columns: Optional[List[str]] = None  # default: all shared columns


@dataclass
class ColumnMismatch:
    """Record of a value that differs between the two tables."""

    record_id: Any
    column: str
    left_value: Any
    right_value: Any


@dataclass
class FrameComparisonResults:
    """Results from comparing two tables."""

    total_records: int
    columns_compared: List[str]
    matches: Dict[str, int]
    mismatches: Dict[str, List[ColumnMismatch]]
    match_rates: Dict[str, float]
    config: FrameComparisonConfig
    missing_left: List[Any] = field(default_factory=list)
    missing_right: List[Any] = field(default_factory=list)
    full_data: Optional[pd.DataFrame] = None

    @property
    def has_differences(self) -> bool:
        return bool(
            self.missing_left
            or self.missing_right
            or any(self.mismatches[col] for col in self.columns_compared)
        )

    def summary(self) -> Dict[str, Any]:
        """Generate summary statistics."""
        return {
            "total_records": self.total_records,
            "missing_left": len(self.missing_left),
            "missing_right": len(self.missing_right),
            "columns": {
                col: {
                    "matches": self.matches[col],
                    "mismatches": len(self.mismatches[col]),
                    "match_rate": self.match_rates[col],
                }
                for col in self.columns_compared
            },
        }

    def detailed_report(self) -> str:
        """Generate detailed text report."""
        mode = "case-sensitive" if self.config.case_sensitive else "ignoring case"
        lines = [
            "=" * 70,
            "Table Comparison Report",
            "=" * 70,
            f"Records compared: {self.total_records:,} ({mode})",
            f"Only in left:     {len(self.missing_right):,}",
            f"Only in right:    {len(self.missing_left):,}",
            "",
        ]

        for col in self.columns_compared:
            lines.extend([
                f"{col}:",
                "-" * 40,
                f"  Matches:     {self.matches[col]:,} ({self.match_rates[col]:.2f}%)",
                f"  Mismatches:  {len(self.mismatches[col]):,}",
                "",
            ])

            if self.mismatches[col]:
                lines.append("  First mismatches:")
                for m in self.mismatches[col][:5]:
                    lines.append(
                        f"    {self.config.id_col}={m.record_id}: "
                        f"left={m.left_value!r}, right={m.right_value!r}"
                    )
                lines.append("")

        lines.append("=" * 70)
        return "\n".join(lines)

    def save_report(self, output_dir: Path):
        """Save comparison results to files."""
        output_dir = Path(output_dir)
        output_dir.mkdir(exist_ok=True, parents=True)

        report_path = output_dir / "comparison_report.txt"
        report_path.write_text(self.detailed_report())
        logger.info("Saved report to: %s", report_path)

        if self.full_data is not None:
            data_path = output_dir / "comparison_data.csv"
            self.full_data.to_csv(data_path, index=False)
            logger.info("Saved full data to: %s", data_path)

        for col in self.columns_compared:
            if self.mismatches[col]:
                mismatch_df = pd.DataFrame([
                    {
                        self.config.id_col: m.record_id,
                        "left_value": m.left_value,
                        "right_value": m.right_value,
                    }
                    for m in self.mismatches[col]
                ])
                mismatch_path = output_dir / f"{col}_mismatches.csv"
                mismatch_df.to_csv(mismatch_path, index=False)
                logger.info("Saved %s mismatches to: %s", col, mismatch_path)


def _missing_to_none(value: Any) -> Any:
    """Map pandas' missing markers (NaN, NA, NaT) to None."""
    if value is None:
        return None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def _as_text(value: Any) -> Optional[str]:
    value = _missing_to_none(value)
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _is_numeric(series: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series)


class FrameComparator:
    """Compare two DataFrames record by record."""

    def __init__(self, config: Optional[FrameComparisonConfig] = None):
        self.config = config or FrameComparisonConfig()

    def compare(
        self,
        left: pd.DataFrame,
        right: pd.DataFrame,
        show_progress: bool = False,
    ) -> FrameComparisonResults:
        """
        Compare two tables.

        Args:
            left: Reference table
            right: Table checked against the reference
            show_progress: Show a progress bar per text column

        Returns:
            FrameComparisonResults with per-column matches and mismatches

        Raises:
            ValueError: If the id column is missing or not unique, or a
                requested column is absent from either table
        """
        id_col = self.config.id_col
        for name, df in (("left", left), ("right", right)):
            if id_col not in df.columns:
                raise ValueError(f"{name} table has no id column {id_col!r}")
            if df[id_col].duplicated().any():
                raise ValueError(f"{name} table has duplicate values in {id_col!r}")

        columns = self._columns_to_compare(left, right)

        merged = left.merge(
            right,
            on=id_col,
            how="outer",
            suffixes=(LEFT_SUFFIX, RIGHT_SUFFIX),
            indicator=True,
        )
        missing_right = merged.loc[merged["_merge"] == "left_only", id_col].tolist()
        missing_left = merged.loc[merged["_merge"] == "right_only", id_col].tolist()
        both = merged[merged["_merge"] == "both"]

        logger.debug(
            "Comparing %d shared records over %d columns", len(both), len(columns)
        )

        matches = {}
        mismatches = {}
        match_rates = {}
        for col in columns:
            col_matches, col_mismatches = self._compare_column(
                both, col, numeric=_is_numeric(left[col]) and _is_numeric(right[col]),
                show_progress=show_progress,
            )
            matches[col] = col_matches
            mismatches[col] = col_mismatches
            compared = col_matches + len(col_mismatches)
            match_rates[col] = (col_matches / compared * 100) if compared > 0 else 0

        return FrameComparisonResults(
            total_records=len(both),
            columns_compared=columns,
            matches=matches,
            mismatches=mismatches,
            match_rates=match_rates,
            config=self.config,
            missing_left=missing_left,
            missing_right=missing_right,
            full_data=merged.drop(columns="_merge"),
        )

    def _columns_to_compare(self, left: pd.DataFrame, right: pd.DataFrame) -> List[str]:
        id_col = self.config.id_col
        if self.config.columns is None:
            return [c for c in left.columns if c != id_col and c in right.columns]

        for col in self.config.columns:
            if col not in left.columns or col not in right.columns:
                raise ValueError(f"Column {col!r} is not present in both tables")
        return [c for c in self.config.columns if c != id_col]

    def _compare_column(
        self,
        df: pd.DataFrame,
        col: str,
        numeric: bool,
        show_progress: bool = False,
    ) -> tuple:
        """Compare a single column of the merged table."""
        left_values = df[f"{col}{LEFT_SUFFIX}"]
        right_values = df[f"{col}{RIGHT_SUFFIX}"]
        ids = df[self.config.id_col]

        if numeric:
            is_match = np.isclose(
                left_values.to_numpy(dtype=float, na_value=np.nan),
                right_values.to_numpy(dtype=float, na_value=np.nan),
                rtol=0.0,
                atol=self.config.numeric_tolerance,
                equal_nan=True,
            )
        else:
            rows = zip(left_values, right_values)
            if show_progress:
                rows = tqdm(rows, total=len(df), desc=col)
            is_match = np.array(
                [self._values_equal(a, b) for a, b in rows], dtype=bool
            )

        mismatches = [
            ColumnMismatch(
                record_id=record_id,
                column=col,
                left_value=_missing_to_none(a),
                right_value=_missing_to_none(b),
            )
            for record_id, a, b, ok in zip(ids, left_values, right_values, is_match)
            if not ok
        ]
        return int(is_match.sum()), mismatches

    def _values_equal(self, a: Any, b: Any) -> bool:
        a = _missing_to_none(a)
        b = _missing_to_none(b)
        if not isinstance(a, (str, type(None))) and not isinstance(b, (str, type(None))):
            # Non-text on both sides (bools, mixed objects)
            return equal(a, b)

        if self.config.null_as_empty:
            return str_equal(_as_text(a), _as_text(b), self.config.case_sensitive)
        return equal_str(_as_text(a), _as_text(b), self.config.case_sensitive)


def compare_csv(
    left_path: str,
    right_path: str,
    config: Optional[FrameComparisonConfig] = None,
    output_dir: Optional[str] = None,
    show_progress: bool = False,
) -> FrameComparisonResults:
    """
    Compare two CSV files.

    Text is read as-is (no NA parsing of strings like "NA"), so only empty
    cells count as missing.

    Args:
        left_path: Reference CSV
        right_path: CSV checked against the reference
        config: Comparison configuration
        output_dir: Directory to save results
        show_progress: Show progress bars

    Returns:
        FrameComparisonResults
    """
    logger.info("Loading %s and %s", left_path, right_path)
    left = pd.read_csv(left_path, keep_default_na=False, na_values=[""])
    right = pd.read_csv(right_path, keep_default_na=False, na_values=[""])

    comparator = FrameComparator(config)
    results = comparator.compare(left, right, show_progress=show_progress)

    if output_dir:
        results.save_report(Path(output_dir))

    return results
