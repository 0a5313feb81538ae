"""Strict fixed-layout parsers for the civil text format.

Only domain model code should import this module.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Final, TypeAlias

from civiltime.domain.model._calendar import days_in_month
from civiltime.domain.model.errors import CivilParseError

log = logging.getLogger(__name__)

DATE_LAYOUT: Final[str] = "YYYY-MM-DD"
TIME_LAYOUT: Final[str] = "HH:MM:SS.fffffffff"
DATETIME_LAYOUT: Final[str] = f"{DATE_LAYOUT}T{TIME_LAYOUT}"

ZERO_DATE_TEXT: Final[str] = "0000-00-00"
FRACTION_DIGITS: Final[int] = 9

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?")

DateFields: TypeAlias = tuple[int, int, int]
TimeFields: TypeAlias = tuple[int, int, int, int]


def _reject(kind: str, literal: str, layout: str, reason: str) -> CivilParseError:
    log.debug("Rejected %s literal %r: %s", kind, literal, reason)
    return CivilParseError(kind, literal, layout, reason)


def parse_date_fields(text: str) -> DateFields:
    """Parse ``YYYY-MM-DD`` into ``(year, month, day)``.

    The all-zero literal is the encoding of the zero date and parses back to it.
    """

    if text == ZERO_DATE_TEXT:
        return 0, 0, 0
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise _reject("date", text, DATE_LAYOUT, "literal does not match layout")
    year, month, day = (int(group) for group in match.groups())
    if not 1 <= month <= 12:
        raise _reject("date", text, DATE_LAYOUT, "month out of range")
    if not 1 <= day <= days_in_month(year, month):
        raise _reject("date", text, DATE_LAYOUT, "day out of range")
    return year, month, day


def parse_time_fields(text: str) -> TimeFields:
    """Parse ``H[H]:MM:SS[.f...]`` into ``(hour, minute, second, nanosecond)``."""

    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        raise _reject("time", text, TIME_LAYOUT, "literal does not match layout")
    hour_text, minute_text, second_text, fraction = match.groups()
    hour, minute, second = int(hour_text), int(minute_text), int(second_text)
    if hour > 23:
        raise _reject("time", text, TIME_LAYOUT, "hour out of range")
    if minute > 59:
        raise _reject("time", text, TIME_LAYOUT, "minute out of range")
    if second > 59:
        raise _reject("time", text, TIME_LAYOUT, "second out of range")
    nanosecond = 0
    if fraction is not None:
        if len(fraction) > FRACTION_DIGITS:
            raise _reject("time", text, TIME_LAYOUT, "fractional second out of range")
        nanosecond = int(fraction.ljust(FRACTION_DIGITS, "0"))
    return hour, minute, second, nanosecond


def parse_datetime_fields(text: str) -> tuple[DateFields, TimeFields]:
    """Split ``<date>T<time>`` on the first ``T`` and parse both halves."""

    date_text, separator, time_text = text.partition("T")
    if not separator:
        raise _reject("datetime", text, DATETIME_LAYOUT, "missing 'T' separator")
    try:
        return parse_date_fields(date_text), parse_time_fields(time_text)
    except CivilParseError as exc:
        raise _reject("datetime", text, DATETIME_LAYOUT, f"{exc.kind} {exc.reason}") from exc


def decode_json_string(data: str | bytes, *, kind: str, layout: str) -> str:
    """Unwrap a JSON string payload, rejecting anything that is not one."""

    literal = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    try:
        payload = json.loads(data)
    except ValueError as exc:
        raise _reject(kind, literal, layout, f"malformed JSON: {exc}") from exc
    if not isinstance(payload, str):
        raise _reject(kind, literal, layout, "JSON value is not a string")
    return payload
