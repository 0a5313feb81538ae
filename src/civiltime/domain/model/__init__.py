"""Public domain model surface."""

from __future__ import annotations

from civiltime.domain.model.dates import Date, parse_date
from civiltime.domain.model.datetimes import DateTime, parse_datetime
from civiltime.domain.model.errors import (
    CivilError,
    CivilParseError,
    InvalidValueError,
    UnsupportedScanTypeError,
    YearOutOfRangeError,
)
from civiltime.domain.model.scan import InstantInput, ScanInput, TextInput, as_scan_input
from civiltime.domain.model.times import Time, parse_time

__all__ = [  # noqa: RUF022
    # values
    "Date",
    "Time",
    "DateTime",
    # parsing
    "parse_date",
    "parse_time",
    "parse_datetime",
    # scanning
    "InstantInput",
    "ScanInput",
    "TextInput",
    "as_scan_input",
    # errors
    "CivilError",
    "CivilParseError",
    "InvalidValueError",
    "UnsupportedScanTypeError",
    "YearOutOfRangeError",
]
