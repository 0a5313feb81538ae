"""SQLAlchemy column types storing civil values as their scalar text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from sqlalchemy import String, TypeDecorator

from civiltime.domain.model import CivilError, Date, DateTime, InvalidValueError, Time

if TYPE_CHECKING:
    from sqlalchemy import Dialect

log = logging.getLogger(__name__)

CivilValue: TypeAlias = Date | Time | DateTime


class _CivilTextType(TypeDecorator[Any]):
    impl = String
    cache_ok = True

    civil_type: ClassVar[type[Date] | type[Time] | type[DateTime]]
    length: ClassVar[int]

    def __init__(self, strict: bool = False) -> None:  # noqa: FBT001, FBT002
        super().__init__(self.length)
        self.strict = strict

    def process_bind_param(self, value: CivilValue | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if self.strict and not value.is_valid():
            raise InvalidValueError(value)
        return value.value()

    def process_result_value(self, value: Any, dialect: Dialect) -> CivilValue | None:
        _ = dialect
        if value is None:
            return None
        try:
            return self.civil_type.scan(value)
        except CivilError:
            log.warning("Stored value %r cannot be read as %s", value, self.civil_type.__name__)
            raise


class CivilDateType(_CivilTextType):
    civil_type = Date
    length = 10


class CivilTimeType(_CivilTextType):
    civil_type = Time
    length = 18


class CivilDateTimeType(_CivilTextType):
    civil_type = DateTime
    length = 29


__all__ = ["CivilDateTimeType", "CivilDateType", "CivilTimeType", "CivilValue"]
