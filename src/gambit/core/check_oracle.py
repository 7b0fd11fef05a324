"""Attack detection built on ordinary move legality."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, MoveResult
from gambit.core.move_validator import MoveValidator
from gambit.core.types import Square


class CheckOracle:
    """Answers attack questions on behalf of *defender*.

    A square is attacked when any enemy piece could move onto it under
    :meth:`MoveValidator.validate` in attacking mode. Because pawns attack
    diagonally regardless of occupancy, empty squares in front of an
    enemy pawn count as attacked.
    """

    __slots__ = ("_board", "_defender", "_validator")

    def __init__(self, board: Board, defender: Color) -> None:
        self._board = board
        self._defender = defender
        self._validator = MoveValidator(board)

    def attackers(self, sq: Square) -> list[Square]:
        """Squares of every enemy piece attacking *sq*."""
        return [
            origin
            for origin, _ in self._board.occupied(self._defender.opposite)
            if self._attacks(origin, sq)
        ]

    def is_attacked(self, sq: Square) -> bool:
        return any(
            self._attacks(origin, sq)
            for origin, _ in self._board.occupied(self._defender.opposite)
        )

    def find_king(self) -> Square | None:
        return self._board.find_king(self._defender)

    def in_check(self) -> bool:
        """Whether the defender's king is attacked (``False`` without a king)."""
        king = self.find_king()
        return king is not None and self.is_attacked(king)

    def _attacks(self, origin: Square, target: Square) -> bool:
        result = self._validator.validate(origin, target, attacking=True)
        return result is MoveResult.OK
