"""Closed set of inputs accepted when scanning a stored value into a civil type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeAlias

from civiltime.domain.model.errors import UnsupportedScanTypeError

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextInput:
    """Scalar text as written by ``value()``."""

    text: str


@dataclass(frozen=True, slots=True)
class InstantInput:
    """Calendar and clock readings projected from an instant."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    @classmethod
    def of(cls, instant: date) -> InstantInput:
        """Project a ``date`` or ``datetime`` in its own frame; any tzinfo is ignored."""
        if isinstance(instant, datetime):
            return cls(
                instant.year,
                instant.month,
                instant.day,
                instant.hour,
                instant.minute,
                instant.second,
                instant.microsecond * 1000,
            )
        return cls(instant.year, instant.month, instant.day)


ScanInput: TypeAlias = TextInput | InstantInput


def as_scan_input(value: object, *, target: str) -> ScanInput:
    """Map a driver value onto :data:`ScanInput` or raise for unsupported types."""

    match value:
        case TextInput() | InstantInput():
            return value
        case str():
            return TextInput(value)
        case date():
            return InstantInput.of(value)
        case _:
            log.debug("Refusing to scan %s into %s", type(value).__name__, target)
            raise UnsupportedScanTypeError(type(value), target)


__all__ = ["InstantInput", "ScanInput", "TextInput", "as_scan_input"]
