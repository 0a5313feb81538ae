"""Civil time of day."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, time

from civiltime.domain.model._parsing import TIME_LAYOUT, decode_json_string, parse_time_fields
from civiltime.domain.model.errors import InvalidValueError
from civiltime.domain.model.scan import InstantInput, TextInput, as_scan_input


@dataclass(frozen=True, order=True, slots=True)
class Time:
    """An hour/minute/second/nanosecond clock reading without date or zone."""

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    @classmethod
    def of(cls, instant: datetime | time) -> Time:
        return cls(instant.hour, instant.minute, instant.second, instant.microsecond * 1000)

    @classmethod
    def from_text(cls, text: str) -> Time:
        hour, minute, second, nanosecond = parse_time_fields(text)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_json(cls, data: str | bytes) -> Time:
        return cls.from_text(decode_json_string(data, kind="time", layout=TIME_LAYOUT))

    @classmethod
    def scan(cls, source: object) -> Time:
        """Build a time from stored text or from the clock part of an instant."""
        match as_scan_input(source, target=cls.__name__):
            case TextInput(text=text):
                return cls.from_text(text)
            case InstantInput(hour=hour, minute=minute, second=second, nanosecond=nanosecond):
                return cls(hour, minute, second, nanosecond)

    def to_text(self, *, strict: bool = False) -> str:
        if strict and not self.is_valid():
            raise InvalidValueError(self)
        return self.value()

    def to_json(self, *, strict: bool = False) -> str:
        return json.dumps(self.to_text(strict=strict))

    def value(self) -> str:
        # Fraction is always nine digits; trailing zeros are kept.
        text = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.nanosecond == 0:
            return text
        return f"{text}.{self.nanosecond:09d}"

    def is_valid(self) -> bool:
        return (
            0 <= self.hour <= 23
            and 0 <= self.minute <= 59
            and 0 <= self.second <= 59
            and 0 <= self.nanosecond <= 999_999_999
        )

    def is_zero(self) -> bool:
        return self == Time()

    def to_time(self) -> time:
        """Convert to ``datetime.time``, truncating to microseconds."""
        return time(self.hour, self.minute, self.second, self.nanosecond // 1000)

    def __str__(self) -> str:
        return self.value()


def parse_time(text: str) -> Time:
    return Time.from_text(text)


__all__ = ["Time", "parse_time"]
