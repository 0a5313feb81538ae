"""Proleptic Gregorian calendar arithmetic.

Day numbers count days from 1970-01-01 (day 0) and work for year 0 and negative years alike,
which ``datetime.date`` does not. Only domain model code should import this module.
"""

from __future__ import annotations

from typing import Final

MIN_YEAR: Final[int] = 0
MAX_YEAR: Final[int] = 9999

_DAYS_PER_ERA: Final[int] = 146097  # 400 Gregorian years
_EPOCH_SHIFT: Final[int] = 719468  # day number of 1970-01-01 counted from 0000-03-01


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def day_number(year: int, month: int, day: int) -> int:
    """Return the day number of ``year-month-day`` with 1970-01-01 as day 0.

    Month and day may lie outside their usual ranges; they are carried into the neighbouring
    months and years the same way a calendar normalizes them (month 13 is January of the next
    year, day 0 is the last day of the previous month).
    """

    year_carry, month_index = divmod(month - 1, 12)
    year += year_carry
    month = month_index + 1

    # Count years from March so the leap day is the last day of the counted year.
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * ((month + 9) % 12) + 2) // 5
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT + day - 1


def from_day_number(number: int) -> tuple[int, int, int]:
    """Inverse of :func:`day_number`: return ``(year, month, day)``."""

    number += _EPOCH_SHIFT
    era = number // _DAYS_PER_ERA
    day_of_era = number - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Fold out-of-range months and days into a real calendar date."""

    return from_day_number(day_number(year, month, day))
