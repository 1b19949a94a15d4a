"""
CLI for comparing two CSV tables.

Usage:
    python -m nullsafe_compare.tabular.cli left.csv right.csv [options]
    nullsafe-compare-frames left.csv right.csv [options]  # if installed

Examples:
    # Case-insensitive comparison keyed on "customer_id"
    nullsafe-compare-frames old.csv new.csv --id-col customer_id --ignore-case

    # Allow 0.01 difference in numeric columns and save mismatch CSVs
    nullsafe-compare-frames old.csv new.csv --tolerance 0.01 --output-dir out/
"""

import argparse
import logging
import sys

from .comparator import FrameComparisonConfig, compare_csv


def main():
    parser = argparse.ArgumentParser(
        prog="nullsafe-compare-frames",
        description="Compare two CSV tables record by record with null-safe equality",
    )

    parser.add_argument("left", help="Reference CSV file")
    parser.add_argument("right", help="CSV file to check against the reference")

    parser.add_argument(
        "--id-col",
        default="id",
        help="Column used to match records (default: id)",
    )

    parser.add_argument(
        "--columns",
        nargs="+",
        help="Columns to compare (default: all shared columns)",
    )

    parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Compare text ignoring case",
    )

    parser.add_argument(
        "--strict-nulls",
        action="store_true",
        help="Treat an empty cell as different from an empty string",
    )

    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.0,
        help="Absolute tolerance for numeric columns (default: 0)",
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory to save the report and mismatch CSVs",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show progress bars",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.tolerance < 0:
        parser.error("--tolerance must be non-negative")

    config = FrameComparisonConfig(
        id_col=args.id_col,
        case_sensitive=not args.ignore_case,
        null_as_empty=not args.strict_nulls,
        numeric_tolerance=args.tolerance,
        columns=args.columns,
    )

    try:
        results = compare_csv(
            args.left,
            args.right,
            config=config,
            output_dir=args.output_dir,
            show_progress=args.progress,
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    print(results.detailed_report())

    if results.has_differences:
        sys.exit(1)


if __name__ == "__main__":
    main()
