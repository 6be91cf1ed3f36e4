"""Per-day table of the year for CSV export and inspection."""

from datetime import date
from pathlib import Path

import pandas as pd

from .bridge_days import get_bridge_days
from .datemath import date_from_day_of_year, day_of_week, days_in_year
from .document import output_filename
from .holidays import get_holidays
from .render import WEEKDAY_ABBREVIATIONS, validate_year
from .weeks import iso_week

COLUMNS = [
    "date", "day_of_year", "month", "day", "weekday",
    "week", "holiday", "bridge_day",
]


def year_table(year) -> pd.DataFrame:
    """One row per day with week number, holiday and bridge-day columns.

    Missing labels are empty strings, so the frame round-trips through CSV
    without NaN.
    """
    year = validate_year(year)
    holidays = get_holidays(year)
    bridge_days = get_bridge_days(year, holidays)

    rows = []
    for doy in range(1, days_in_year(year) + 1):
        _, month, day = date_from_day_of_year(year, doy)
        rows.append({
            "date": date(year, month, day),
            "day_of_year": doy,
            "month": month,
            "day": day,
            "weekday": WEEKDAY_ABBREVIATIONS[day_of_week(year, month, day)],
            "week": iso_week(year, month, day),
            "holiday": holidays.get(doy, ""),
            "bridge_day": bridge_days.get(doy, ""),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def write_csv(year, directory: Path, overwrite: bool = False) -> Path:
    """Write textcal-<year>.csv into directory and return its path.

    Raises FileExistsError if the file is already there and overwrite is off.
    """
    year = validate_year(year)
    df = year_table(year)
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / output_filename(year, ".csv")
    mode = "w" if overwrite else "x"
    with open(path, mode, newline="", encoding="utf-8") as f:
        df.to_csv(f, index=False)
    return path
