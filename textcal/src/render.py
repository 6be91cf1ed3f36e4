"""Year calendar as text: one line per day, grouped by month."""

from dataclasses import dataclass

from .bridge_days import get_bridge_days
from .datemath import day_of_week, day_of_year, days_in_month
from .holidays import get_holidays
from .weeks import iso_week

MIN_YEAR = 2000

MONTH_NAMES = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)

# Indexed by day_of_week(), Sunday first
WEEKDAY_ABBREVIATIONS = ("Son", "Mon", "Die", "Mit", "Don", "Fre", "Sam")

MONDAY = 1

# Width of the longest holiday label ("Tag der Deutschen Einheit")
HOLIDAY_WIDTH = 25


class InvalidYear(ValueError):
    """Year missing, not a number, or before MIN_YEAR."""


@dataclass(frozen=True)
class MonthSection:
    month: int
    name: str
    lines: tuple[str, ...]


def validate_year(value) -> int:
    """Parse and check a year given as int or string."""
    if value is None or isinstance(value, bool):
        raise InvalidYear("no year given")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            raise InvalidYear(f"not a year: {value!r}")
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        raise InvalidYear(f"not a year: {value!r}")
    if value < MIN_YEAR:
        raise InvalidYear(f"year must be {MIN_YEAR} or later, got {value}")
    return value


def format_day_line(week: int | None, day: int, weekday: int,
                    holiday: str = "", bridge: str = "") -> str:
    """Lay out one day: week, day, weekday, holiday label, bridge annotation."""
    week_field = f"{week:02d}" if week is not None else ""
    line = (
        f"{week_field:<2}  {day:02d} {WEEKDAY_ABBREVIATIONS[weekday]}  "
        f"{holiday:<{HOLIDAY_WIDTH}}  {bridge}"
    )
    return line.rstrip()


def render(year) -> list[MonthSection]:
    """Render the whole year as 12 month sections of day lines."""
    year = validate_year(year)
    holidays = get_holidays(year)
    bridge_days = get_bridge_days(year, holidays)

    sections = []
    for month, length in enumerate(days_in_month(year), start=1):
        lines = []
        for day in range(1, length + 1):
            doy = day_of_year(year, month, day)
            weekday = day_of_week(year, month, day)
            week = None
            if weekday == MONDAY or doy == 1:
                week = iso_week(year, month, day)
            lines.append(format_day_line(
                week, day, weekday,
                holidays.get(doy, ""), bridge_days.get(doy, ""),
            ))
        sections.append(MonthSection(month, MONTH_NAMES[month - 1], tuple(lines)))
    return sections


def render_lines(year) -> list[str]:
    """All day lines of the year in calendar order."""
    return [line for section in render(year) for line in section.lines]
