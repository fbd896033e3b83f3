"""
Seed the standard regional holiday calendars.

Creates the tables if needed and adds the built-in Brazil, São Paulo,
Belo Horizonte, Mexico and Madrid holidays for the requested years.
Holidays already present for the same date and location are skipped.

Usage:
    squadleave-seed-holidays --year 2025 --year 2026
"""

import argparse
from datetime import date
from typing import Sequence

from squadleave.core.database import get_db_context, init_db
from squadleave.core.logging import setup_logging
from squadleave.services.holiday_service import HolidayService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="squadleave-seed-holidays",
        description="Seed regional holiday calendars for one or more years.",
    )
    parser.add_argument(
        "--year",
        dest="years",
        type=int,
        action="append",
        help="Year to seed, repeatable (default: current and next year)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    years = args.years or [date.today().year, date.today().year + 1]

    setup_logging()
    init_db()

    with get_db_context() as db:
        added = HolidayService(db).seed_region(years)

    print(f"Added {added} holidays for {', '.join(str(y) for y in years)}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
