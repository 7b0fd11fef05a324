"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import RulesEngine, MoveResult, parse_square

    engine = RulesEngine()
    result = engine.play(parse_square("e2"), parse_square("e4"))
    assert result is MoveResult.OK
"""

from gambit.core.board import Board
from gambit.core.check_oracle import CheckOracle
from gambit.core.engine import RulesEngine
from gambit.core.enums import Color, MoveResult, PieceType
from gambit.core.move_validator import MoveValidator
from gambit.core.piece import Piece
from gambit.core.state import CastlingHistory, GameState
from gambit.core.types import (
    ALL_SQUARES,
    Square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveResult",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CastlingHistory",
    "CheckOracle",
    "GameState",
    "MoveValidator",
    "Piece",
    "RulesEngine",
]
