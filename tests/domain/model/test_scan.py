from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, timezone

import pytest

from civiltime.domain.model import (
    InstantInput,
    TextInput,
    UnsupportedScanTypeError,
    as_scan_input,
)


def test_as_scan_input_wraps_text() -> None:
    assert as_scan_input("2020-02-29", target="Date") == TextInput("2020-02-29")


def test_as_scan_input_projects_datetime() -> None:
    instant = datetime(2020, 2, 29, 3, 42, 31, 5, tzinfo=UTC)

    assert as_scan_input(instant, target="DateTime") == InstantInput(2020, 2, 29, 3, 42, 31, 5000)


def test_as_scan_input_keeps_wall_clock_of_aware_datetimes() -> None:
    plus_two = timezone(timedelta(hours=2))
    instant = datetime(2020, 2, 29, 1, 0, tzinfo=plus_two)

    assert as_scan_input(instant, target="DateTime") == InstantInput(2020, 2, 29, 1)


def test_as_scan_input_projects_date() -> None:
    assert as_scan_input(date(2020, 2, 29), target="Date") == InstantInput(2020, 2, 29)


def test_as_scan_input_passes_variants_through() -> None:
    text = TextInput("03:42:31")
    instant = InstantInput(2020, 2, 29)

    assert as_scan_input(text, target="Time") is text
    assert as_scan_input(instant, target="Time") is instant


@pytest.mark.parametrize("value", [None, 1, 1.5, b"2020-02-29", time(3, 42), ("2020", 2, 29)])
def test_as_scan_input_rejects_other_types(value: object) -> None:
    with pytest.raises(UnsupportedScanTypeError) as excinfo:
        as_scan_input(value, target="Date")

    assert excinfo.value.source_type is type(value)
    assert excinfo.value.target == "Date"
