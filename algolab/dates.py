"""Date validation, weekday lookup and month calendars for 2021."""

from __future__ import annotations

import calendar

from algolab.numbertheory import is_leap_year

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MIN_YEAR = 1800
MAX_YEAR = 2999
CALENDAR_YEAR = 2021

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def _days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in _THIRTY_DAY_MONTHS else 31


def validate_date(day: int, month: int, year: int) -> bool:
    """Return True for a real calendar date with a year from 1800 to 2999."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= _days_in_month(month, year)


def weekday_number(year: int, month: int, day: int) -> int:
    """Weekday of a date from its Julian day number: 0 is Monday, 6 is Sunday."""
    shift = (14 - month) // 12
    shifted_year = year + 4800 - shift
    shifted_month = month + 12 * shift - 3
    julian_day = (
        day
        + (153 * shifted_month + 2) // 5
        + 365 * shifted_year
        + shifted_year // 4
        - shifted_year // 100
        + shifted_year // 400
        - 32045
    )
    return julian_day % 7


def weekday_name(day: int, month: int, year: int) -> str:
    """Name of the weekday of a valid date; ValueError for an invalid one."""
    if not validate_date(day, month, year):
        raise ValueError(f"date is incorrect: {day:02d}-{month:02d}-{year}")
    return DAY_NAMES[weekday_number(year, month, day)]


def month_calendar(month: int) -> list[list[int | None]]:
    """Weeks of a month of 2021, each seven days long starting on Sunday.

    Days outside the month are None.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month {month}")
    first_column = (weekday_number(CALENDAR_YEAR, month, 1) + 1) % 7
    cells: list[int | None] = [None] * first_column
    cells.extend(range(1, _days_in_month(month, CALENDAR_YEAR) + 1))
    cells.extend([None] * (-len(cells) % 7))
    return [cells[start : start + 7] for start in range(0, len(cells), 7)]


def format_month(month: int) -> str:
    """Render a month of 2021 as a tab-separated table."""
    header = f"\t\t\t Month - {month} - {CALENDAR_YEAR} \n\n  \t SUN\tMON\tTUE\tWED\tTHU\tFRI\tSAT\n\n"
    rows = (
        "".join("\t" if day is None else f"\t{day}" for day in week).rstrip("\t")
        for week in month_calendar(month)
    )
    return header + "\n".join(rows)


__all__ = [
    "DAY_NAMES",
    "calendar",
    "format_month",
    "month_calendar",
    "validate_date",
    "weekday_name",
    "weekday_number",
]