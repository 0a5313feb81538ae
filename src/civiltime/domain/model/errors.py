"""Errors raised by the civil value types."""

from __future__ import annotations

from civiltime.domain.model._calendar import MAX_YEAR, MIN_YEAR


class CivilError(ValueError):
    """Base class for every civil date/time error."""


class YearOutOfRangeError(CivilError):
    """Raised when a date with a year outside [0, 9999] is encoded as text."""

    def __init__(self, year: int) -> None:
        super().__init__(f"year '{year}' outside of range [{MIN_YEAR},{MAX_YEAR}]")
        self.year = year


class InvalidValueError(CivilError):
    """Raised by strict encoding when a value is not a real calendar/clock reading."""

    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a valid {type(value).__name__}")
        self.value = value


class CivilParseError(CivilError):
    """Raised when text does not strictly match the expected layout.

    ``literal`` is the rejected input, ``layout`` the expected shape and ``reason`` the
    underlying cause reported by the parser.
    """

    def __init__(self, kind: str, literal: str, layout: str, reason: str) -> None:
        super().__init__(f"invalid {kind}: parsing '{literal}' as '{layout}': {reason}")
        self.kind = kind
        self.literal = literal
        self.layout = layout
        self.reason = reason


class UnsupportedScanTypeError(CivilError, TypeError):
    """Raised when a storage value of an unsupported type is scanned."""

    def __init__(self, source_type: type, target: str) -> None:
        super().__init__(f"cannot scan {source_type.__name__} into {target}")
        self.source_type = source_type
        self.target = target
