"""Civil date and time of day combined."""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass, field

from civiltime.domain.model._parsing import (
    DATETIME_LAYOUT,
    decode_json_string,
    parse_datetime_fields,
)
from civiltime.domain.model.dates import Date
from civiltime.domain.model.scan import InstantInput, TextInput, as_scan_input
from civiltime.domain.model.times import Time


@dataclass(frozen=True, order=True, slots=True)
class DateTime:
    """A :class:`Date` and a :class:`Time`; the text form joins them with ``T``."""

    date: Date = field(default_factory=Date)
    time: Time = field(default_factory=Time)

    @classmethod
    def of(cls, instant: dt.datetime) -> DateTime:
        return cls(Date.of(instant), Time.of(instant))

    @classmethod
    def from_text(cls, text: str) -> DateTime:
        date_fields, time_fields = parse_datetime_fields(text)
        return cls(Date(*date_fields), Time(*time_fields))

    @classmethod
    def from_json(cls, data: str | bytes) -> DateTime:
        return cls.from_text(decode_json_string(data, kind="datetime", layout=DATETIME_LAYOUT))

    @classmethod
    def scan(cls, source: object) -> DateTime:
        """Build from stored text or split an instant at its day boundary."""
        match as_scan_input(source, target=cls.__name__):
            case TextInput(text=text):
                return cls.from_text(text)
            case InstantInput() as instant:
                return cls(
                    Date(instant.year, instant.month, instant.day),
                    Time(instant.hour, instant.minute, instant.second, instant.nanosecond),
                )

    def to_text(self, *, strict: bool = False) -> str:
        return f"{self.date.to_text(strict=strict)}T{self.time.to_text(strict=strict)}"

    def to_json(self, *, strict: bool = False) -> str:
        return json.dumps(self.to_text(strict=strict))

    def value(self) -> str:
        return f"{self.date.value()}T{self.time.value()}"

    def is_valid(self) -> bool:
        return self.date.is_valid() and self.time.is_valid()

    def is_zero(self) -> bool:
        return self.date.is_zero() and self.time.is_zero()

    def to_datetime(self) -> dt.datetime:
        """Convert to a naive ``datetime.datetime``, truncating to microseconds."""
        return dt.datetime.combine(self.date.to_date(), self.time.to_time())

    def __str__(self) -> str:
        return self.value()


def parse_datetime(text: str) -> DateTime:
    return DateTime.from_text(text)


__all__ = ["DateTime", "parse_datetime"]
