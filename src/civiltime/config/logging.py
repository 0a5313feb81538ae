"""Logging setup for civiltime entry points."""

from __future__ import annotations

import logging


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for the command line.

    ``level`` takes a number or a level name such as ``"DEBUG"``. Library code never calls
    this; only entry points do. Pass ``force=True`` to replace handlers installed earlier,
    e.g. from tests.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
