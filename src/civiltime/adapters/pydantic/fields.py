"""Pydantic field types for civil values.

Validation accepts an instance, scalar text, or a stdlib ``date``/``datetime`` instant (the
same inputs as ``scan``). Dumps emit the text form, which refuses years outside [0, 9999].
"""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from civiltime.domain.model import Date, DateTime, Time


def _validate_date(value: object) -> Date:
    if isinstance(value, Date):
        return value
    return Date.scan(value)


def _validate_time(value: object) -> Time:
    if isinstance(value, Time):
        return value
    return Time.scan(value)


def _validate_datetime(value: object) -> DateTime:
    if isinstance(value, DateTime):
        return value
    return DateTime.scan(value)


def _serialize(value: Date | Time | DateTime) -> str:
    return value.to_text()


CivilDateField = Annotated[
    Date,
    PlainValidator(_validate_date),
    PlainSerializer(_serialize, return_type=str),
]
CivilTimeField = Annotated[
    Time,
    PlainValidator(_validate_time),
    PlainSerializer(_serialize, return_type=str),
]
CivilDateTimeField = Annotated[
    DateTime,
    PlainValidator(_validate_datetime),
    PlainSerializer(_serialize, return_type=str),
]

__all__ = ["CivilDateField", "CivilDateTimeField", "CivilTimeField"]
