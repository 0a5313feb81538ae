"""SQLAlchemy adapter package for civiltime."""

from __future__ import annotations

from .types import CivilDateTimeType, CivilDateType, CivilTimeType

__all__ = [
    "CivilDateTimeType",
    "CivilDateType",
    "CivilTimeType",
]
