"""CLI to convert a file of GSM channel numbers into a frequency spreadsheet.

Usage:
    python -m gsm_arfcn.cli channels.txt            # writes result.xlsx
    python -m gsm_arfcn.cli channels.txt report     # writes report.xlsx
    python -m gsm_arfcn.cli channels.txt report --csv
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .bands import log_table_overlaps
from .channel_table import build_channel_rows, save_channel_table_csv, save_channel_table_xlsx
from .loaders import load_channel_lines
from .settings import DEFAULT_SETTINGS, output_path_from_arg

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert GSM ARFCNs to uplink/downlink frequencies")
    parser.add_argument("input", type=Path, help="text file with whitespace-separated channel numbers")
    parser.add_argument("output", nargs="?", default=None, help="output name without extension (default: result)")
    parser.add_argument("--csv", action="store_true", help="write CSV instead of xlsx")
    parser.add_argument("--wrapped-column", type=int, default=DEFAULT_SETTINGS.wrapped_column_start,
                        help="first column for multi-line cells (1-based)")
    parser.add_argument("--digits", type=int, default=DEFAULT_SETTINGS.significant_digits,
                        help="significant digits for frequencies")
    parser.add_argument("--check-table", action="store_true", help="warn about shadowed channel ranges")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    log_table_overlaps(logging.WARNING if args.check_table else logging.DEBUG)

    try:
        settings = dataclasses.replace(
            DEFAULT_SETTINGS,
            wrapped_column_start=args.wrapped_column,
            significant_digits=args.digits,
            output_extension=".csv" if args.csv else DEFAULT_SETTINGS.output_extension,
        )
    except ValueError as e:
        logger.error(f"Invalid option: {e}")
        return 2

    out = output_path_from_arg(args.output, settings)
    try:
        lines = load_channel_lines(args.input)
        rows = build_channel_rows(lines)
        if args.csv:
            save_channel_table_csv(rows, out, settings)
        else:
            save_channel_table_xlsx(rows, out, settings)
    except OSError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    print(f"Saved {len(rows)} rows to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
