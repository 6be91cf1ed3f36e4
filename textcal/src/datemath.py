"""Gregorian date arithmetic on plain integers.

Dates are (year, month, day) tuples, day-of-year (DOY) is 1-based and
weekdays are 0 = Sunday ... 6 = Saturday.
"""

# Sakamoto's month offsets
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int) -> tuple[int, ...]:
    """Return the lengths of the 12 months of the given year."""
    feb = 29 if is_leap_year(year) else 28
    return (31, feb, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(year: int, month: int, day: int) -> int:
    """Convert a date to its 1-based ordinal within the year.

    Month and day are not checked: day_of_year(y, 1, 40) is simply 40.
    """
    return sum(days_in_month(year)[:month - 1]) + day


def date_from_day_of_year(year: int, doy: int) -> tuple[int, int, int]:
    """Inverse of day_of_year. doy must be >= 1."""
    month = 1
    for length in days_in_month(year):
        if doy <= length:
            break
        doy -= length
        month += 1
    return year, month, doy


def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday via Sakamoto's method, 0 = Sunday."""
    y = year - 1 if month < 3 else year
    return (y + y // 4 - y // 100 + y // 400 + _MONTH_OFFSETS[month - 1] + day) % 7
