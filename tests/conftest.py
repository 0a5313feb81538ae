from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def civil_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Start each config-dependent test from a clean environment."""
    monkeypatch.delenv("CIVILTIME_STRICT_ENCODING", raising=False)
    monkeypatch.delenv("CIVILTIME_LOG_LEVEL", raising=False)
    return monkeypatch
