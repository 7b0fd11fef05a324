"""gambit — a rules engine for standard chess."""

from gambit.core import Color, MoveResult, PieceType, RulesEngine, Square

__all__ = ["Color", "MoveResult", "PieceType", "RulesEngine", "Square"]
__version__ = "0.1.0"
