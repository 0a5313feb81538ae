# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from civiltime.config import ConfigurationError, configure_logging, get_civil_config
from civiltime.domain.model import CivilError, Date, DateTime, Time

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_DECODERS: dict[str, Callable[[str], Date | Time | DateTime]] = {
    "date": Date.from_text,
    "time": Time.from_text,
    "datetime": DateTime.from_text,
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check and compute civil dates and times")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Strictly decode a value and print it back")
    check.add_argument("kind", choices=sorted(_DECODERS), help="Type of the value")
    check.add_argument("text", help="Value in YYYY-MM-DD, HH:MM:SS[.f] or <date>T<time> form")

    add = subparsers.add_parser("add", help="Add years, months and days to a date")
    add.add_argument("date", help="Start date in YYYY-MM-DD form")
    add.add_argument("--years", type=int, default=0, help="Calendar years to add")
    add.add_argument("--months", type=int, default=0, help="Calendar months to add")
    add.add_argument("--days", type=int, default=0, help="Days to add after years and months")

    return parser.parse_args(list(argv))


def _run_command(args: argparse.Namespace, *, strict: bool) -> str:
    if args.command == "check":
        value = _DECODERS[args.kind](args.text)
        return value.to_text(strict=strict)
    if args.command == "add":
        start = Date.from_text(args.date)
        result = start.add_months(args.years * 12 + args.months).add_days(args.days)
        log.debug(
            "Added %s years, %s months, %s days to %s", args.years, args.months, args.days, start
        )
        return result.to_text(strict=strict)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_civil_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(2)
    configure_logging(level=config.log_level)

    parsed_args = _parse_args(args_list)
    try:
        output = _run_command(parsed_args, strict=config.strict_encoding)
    except CivilError as exc:
        log.error("Rejected input: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Unexpected error")
        sys.exit(1)

    print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
