from __future__ import annotations

from importlib import metadata

from civiltime.domain.model import (
    CivilError,
    CivilParseError,
    Date,
    DateTime,
    InstantInput,
    InvalidValueError,
    ScanInput,
    TextInput,
    Time,
    UnsupportedScanTypeError,
    YearOutOfRangeError,
    parse_date,
    parse_datetime,
    parse_time,
)

try:
    __version__ = metadata.version("civiltime")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CivilError",
    "CivilParseError",
    "Date",
    "DateTime",
    "InstantInput",
    "InvalidValueError",
    "ScanInput",
    "TextInput",
    "Time",
    "UnsupportedScanTypeError",
    "YearOutOfRangeError",
    "__version__",
    "parse_date",
    "parse_datetime",
    "parse_time",
]
