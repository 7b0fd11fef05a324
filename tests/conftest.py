"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from gambit.core.board import Board
from gambit.core.engine import RulesEngine
from gambit.core.enums import Color

EngineFactory = Callable[..., RulesEngine]


@pytest.fixture
def engine() -> RulesEngine:
    """Fresh game in the standard opening position."""
    return RulesEngine()


@pytest.fixture
def engine_from_rows() -> EngineFactory:
    """Build an engine from eight text rows (rank 8 first)."""

    def _make(rows: Sequence[str], side_to_move: Color = Color.WHITE) -> RulesEngine:
        return RulesEngine(Board.from_rows(rows), side_to_move)

    return _make
