"""Command line entry point: load the workbook, store it, then show it."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Sequence

from .database import DEFAULT_DATABASE_PATH, create_database, setup_database, write_to_database
from .excel import DEFAULT_SHEET, DEFAULT_WORKBOOK, WorkbookError, read_rows
from .headless import print_table
from .jobdata import RowError, process_rows


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="jobvisualizer", description="Load job postings and browse them."
    )
    parser.add_argument(
        "-headless",
        "--headless",
        dest="headless",
        action="store_true",
        help="Run in headless mode (no GUI)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the jobs, write them to the database, then print them or open the window."""
    args = parse_args(argv)
    try:
        jobs = process_rows(read_rows(DEFAULT_WORKBOOK, DEFAULT_SHEET))
        conn = create_database(DEFAULT_DATABASE_PATH)
        try:
            setup_database(conn)
            write_to_database(conn, jobs)
        finally:
            conn.close()
    except (WorkbookError, RowError, sqlite3.Error, OSError) as exc:
        print(f"jobvisualizer: {exc}", file=sys.stderr)
        return 1

    if args.headless:
        print_table(jobs)
    else:
        from .gui import create_gui

        create_gui(jobs)
    return 0


if __name__ == "__main__":
    sys.exit(main())