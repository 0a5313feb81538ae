"""Pydantic integration for civil values."""

from __future__ import annotations

from .fields import CivilDateField, CivilDateTimeField, CivilTimeField

__all__ = ["CivilDateField", "CivilDateTimeField", "CivilTimeField"]
