"""Runtime settings for the civiltime command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import env_flag, env_log_level

STRICT_ENCODING_ENV: Final[str] = "CIVILTIME_STRICT_ENCODING"
LOG_LEVEL_ENV: Final[str] = "CIVILTIME_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class CivilConfig:
    """Settings read from the environment.

    ``strict_encoding`` makes encoding refuse out-of-range months, days and clock fields
    instead of only out-of-range years.
    """

    strict_encoding: bool = False
    log_level: int = logging.INFO


def get_civil_config() -> CivilConfig:
    return CivilConfig(
        strict_encoding=env_flag(STRICT_ENCODING_ENV),
        log_level=env_log_level(LOG_LEVEL_ENV),
    )
