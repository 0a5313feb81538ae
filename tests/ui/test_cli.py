from __future__ import annotations

import pytest

from civiltime.ui import cli as cli_module


def test_check_prints_canonical_text(
    civil_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = civil_env

    cli_module.main(["check", "time", "3:42:31.5"])

    assert capsys.readouterr().out == "03:42:31.500000000\n"


def test_check_datetime(civil_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _ = civil_env

    cli_module.main(["check", "datetime", "2020-02-29T03:42:31.000000876"])

    assert capsys.readouterr().out == "2020-02-29T03:42:31.000000876\n"


def test_check_rejects_invalid_value(civil_env: pytest.MonkeyPatch) -> None:
    _ = civil_env

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["check", "date", "2020-13-01"])

    assert excinfo.value.code == 2


def test_add_applies_calendar_arithmetic(
    civil_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _ = civil_env

    cli_module.main(["add", "2020-02-29", "--years", "1"])
    cli_module.main(["add", "2020-02-29", "--months", "1", "--days", "-1"])

    assert capsys.readouterr().out == "2021-03-01\n2020-03-28\n"


def test_strict_encoding_setting_is_applied(
    civil_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    cli_module.main(["check", "date", "0000-00-00"])
    assert capsys.readouterr().out == "0000-00-00\n"

    civil_env.setenv("CIVILTIME_STRICT_ENCODING", "1")
    # The zero date decodes, but strict encoding refuses it.
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["check", "date", "0000-00-00"])

    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_invalid_configuration_exits(civil_env: pytest.MonkeyPatch) -> None:
    civil_env.setenv("CIVILTIME_STRICT_ENCODING", "sometimes")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["check", "date", "2020-02-29"])

    assert excinfo.value.code == 2


def test_unknown_kind_is_rejected_by_argparse(civil_env: pytest.MonkeyPatch) -> None:
    _ = civil_env

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["check", "week", "2020-W09"])

    assert excinfo.value.code == 2
