"""ISO/DIN 1355 calendar week numbers."""

from .datemath import day_of_week, day_of_year, is_leap_year


def _jan1_offset(year: int) -> int:
    """Weekday of January 1, with Friday/Saturday shifted to -2/-1.

    A year starting on Fri, Sat or Sun opens with days that still belong
    to the last week of the previous year.
    """
    wd = day_of_week(year, 1, 1)
    return wd - 7 if wd >= 5 else wd


def has_53_weeks(year: int) -> bool:
    """True if the year starts on a Thursday, or on a Wednesday in a leap year."""
    wd = _jan1_offset(year)
    if wd in (4, -3):
        return True
    return is_leap_year(year) and wd in (3, -4)


def iso_week(year: int, month: int, day: int) -> int:
    """Return the calendar week (1..53) the date falls into.

    Days at the end of December that ISO assigns to week 1 of the next year
    are reported as week 1; the year itself is not advanced.
    """
    doy = day_of_year(year, month, day)
    wd = _jan1_offset(year)

    if doy + wd <= 1:
        return iso_week(year - 1, 12, 31)

    week = (doy + wd + 5) // 7
    if week == 53 and not has_53_weeks(year):
        return 1
    return week
