"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_log_level
from .errors import ConfigurationError
from .logging import configure_logging
from .settings import CivilConfig, get_civil_config

__all__ = [
    "CivilConfig",
    "ConfigurationError",
    "configure_logging",
    "env_flag",
    "env_log_level",
    "get_civil_config",
]
