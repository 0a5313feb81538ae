"""Civil calendar date."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date

from civiltime.domain.model._calendar import (
    MAX_YEAR,
    MIN_YEAR,
    day_number,
    days_in_month,
    normalize,
)
from civiltime.domain.model._parsing import DATE_LAYOUT, decode_json_string, parse_date_fields
from civiltime.domain.model.errors import InvalidValueError, YearOutOfRangeError
from civiltime.domain.model.scan import InstantInput, TextInput, as_scan_input


@dataclass(frozen=True, order=True, slots=True)
class Date:
    """A year/month/day reading in the proleptic Gregorian calendar.

    Construction accepts any integers; the text boundary is where values are checked.
    Encoding only refuses years outside [0, 9999] while decoding performs full calendar
    validation, so only valid dates are guaranteed to round-trip.
    """

    year: int = 0
    month: int = 0
    day: int = 0

    @classmethod
    def of(cls, instant: date) -> Date:
        """Return the calendar date of a ``date`` or ``datetime``."""
        return cls(instant.year, instant.month, instant.day)

    @classmethod
    def from_text(cls, text: str) -> Date:
        year, month, day = parse_date_fields(text)
        return cls(year, month, day)

    @classmethod
    def from_json(cls, data: str | bytes) -> Date:
        return cls.from_text(decode_json_string(data, kind="date", layout=DATE_LAYOUT))

    @classmethod
    def scan(cls, source: object) -> Date:
        """Build a date from a stored scalar: ``YYYY-MM-DD`` text or an instant."""
        match as_scan_input(source, target=cls.__name__):
            case TextInput(text=text):
                return cls.from_text(text)
            case InstantInput(year=year, month=month, day=day):
                return cls(year, month, day)

    def to_text(self, *, strict: bool = False) -> str:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise YearOutOfRangeError(self.year)
        if strict and not self.is_valid():
            raise InvalidValueError(self)
        return self.value()

    def to_json(self, *, strict: bool = False) -> str:
        return json.dumps(self.to_text(strict=strict))

    def value(self) -> str:
        """Scalar form for storage; formats the fields without checking them."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def is_valid(self) -> bool:
        return (
            MIN_YEAR <= self.year <= MAX_YEAR
            and 1 <= self.month <= 12
            and 1 <= self.day <= days_in_month(self.year, self.month)
        )

    def is_zero(self) -> bool:
        return self == Date()

    def add_days(self, days: int) -> Date:
        return Date(*normalize(self.year, self.month, self.day + days))

    def add_months(self, months: int) -> Date:
        """Add calendar months; a day past the end of the target month spills into the next.

        ``Date(2020, 2, 29).add_months(12)`` is ``Date(2021, 3, 1)``.
        """
        return Date(*normalize(self.year, self.month + months, self.day))

    def add_years(self, years: int) -> Date:
        return Date(*normalize(self.year + years, self.month, self.day))

    def days_since(self, other: Date) -> int:
        """Return the signed number of days from ``other`` to this date."""
        return day_number(self.year, self.month, self.day) - day_number(
            other.year, other.month, other.day
        )

    def to_date(self) -> date:
        """Convert to ``datetime.date``; years before 1 are not representable there."""
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.value()


def parse_date(text: str) -> Date:
    return Date.from_text(text)


__all__ = ["Date", "parse_date"]
