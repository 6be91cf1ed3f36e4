"""Bridge days: a single working day between a holiday and the weekend."""

from .datemath import date_from_day_of_year, day_of_week, days_in_year

BRIDGE_DAY_LABEL = "Brückentag"

TUESDAY = 2
THURSDAY = 4


def get_bridge_days(year: int, holidays: dict[int, str]) -> dict[int, str]:
    """Find Mondays before Tuesday holidays and Fridays after Thursday holidays.

    Returns {day_of_year: BRIDGE_DAY_LABEL}. A candidate that is itself a
    holiday, or that lies outside the year, is skipped.
    """
    last_day = days_in_year(year)
    bridge_days = {}
    for doy in holidays:
        weekday = day_of_week(*date_from_day_of_year(year, doy))
        if weekday == TUESDAY:
            candidate = doy - 1
        elif weekday == THURSDAY:
            candidate = doy + 1
        else:
            continue

        if candidate in holidays or not 1 <= candidate <= last_day:
            continue
        bridge_days[candidate] = BRIDGE_DAY_LABEL
    return bridge_days
