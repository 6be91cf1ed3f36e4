"""German public holidays. Pure computation, no external dependencies."""

from .datemath import day_of_year


def easter_sunday(year: int) -> tuple[int, int, int]:
    """Compute Easter Sunday using the Anonymous Gregorian algorithm."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return year, month, day + 1


FIXED_HOLIDAYS = (
    (1, 1, "Neujahr"),
    (1, 6, "Heilige Drei Könige"),
    (5, 1, "Tag der Arbeit"),
    (10, 3, "Tag der Deutschen Einheit"),
    (11, 1, "Allerheiligen"),
    (12, 24, "Heiligabend"),
    (12, 25, "Weihnachten"),
    (12, 26, "Weihnachten"),
    (12, 31, "Silvester"),
)

# Offsets in days from Easter Sunday
EASTER_HOLIDAYS = (
    (-2, "Karfreitag"),
    (0, "Ostersonntag"),
    (1, "Ostermontag"),
    (39, "Christi Himmelfahrt"),
    (49, "Pfingstsonntag"),
    (50, "Pfingstmontag"),
    (60, "Fronleichnam"),
)


def get_holidays(year: int) -> dict[int, str]:
    """Return the German holidays of a year as {day_of_year: label}."""
    holidays = {}
    for month, day, label in FIXED_HOLIDAYS:
        holidays[day_of_year(year, month, day)] = label

    easter = day_of_year(*easter_sunday(year))
    for offset, label in EASTER_HOLIDAYS:
        holidays[easter + offset] = label
    return holidays


def is_holiday(year: int, month: int, day: int) -> bool:
    """Check if a date is a German public holiday."""
    return day_of_year(year, month, day) in get_holidays(year)
