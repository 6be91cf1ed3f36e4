"""CLI entry point: write the text calendar of a year.

Usage:
    python -m textcal.src.cli 2026
    python -m textcal.src.cli 2026 --stdout
    python -m textcal.src.cli --out-dir ~/notes --csv
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from .bridge_days import get_bridge_days
from .config import load_config
from .document import build_document, write_document
from .holidays import get_holidays
from .render import InvalidYear, validate_year
from .table import write_csv


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Generate a German year calendar as text")
    parser.add_argument(
        "year", nargs="?", default=None,
        help="Year (2000 or later, default: current year)",
    )
    parser.add_argument("--out-dir", type=Path, default=None, help="Output directory")
    parser.add_argument("--stdout", action="store_true", help="Print instead of writing a file")
    parser.add_argument("--csv", action="store_true", help="Also write textcal-<year>.csv")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    args = parser.parse_args(argv)

    try:
        year = validate_year(args.year if args.year is not None else date.today().year)
    except InvalidYear as e:
        parser.error(str(e))

    cfg = load_config(args.config)
    out = cfg["output"]
    out_dir = args.out_dir or Path(out["directory"])
    overwrite = args.force or out["overwrite"]
    # Keep stdout clean for the calendar itself when printing it
    status = sys.stderr if args.stdout else sys.stdout

    try:
        if args.stdout:
            print("\n".join(build_document(year)))
        else:
            path = write_document(year, out_dir, overwrite=overwrite)
            holidays = get_holidays(year)
            bridge_days = get_bridge_days(year, holidays)
            print(f"Wrote {path}", file=status)
            print(f"  Holidays: {len(holidays)}, bridge days: {len(bridge_days)}", file=status)

        if args.csv or out["csv"]:
            csv_path = write_csv(year, out_dir, overwrite=overwrite)
            print(f"Wrote {csv_path}", file=status)
    except FileExistsError as e:
        parser.exit(1, f"{e.filename} already exists (use --force to overwrite)\n")


if __name__ == "__main__":
    main()
