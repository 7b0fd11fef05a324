"""Mutable game state: side to move, castling history, en passant memo."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square


@dataclass(slots=True)
class CastlingHistory:
    """Which castling pieces of one side have ever moved.

    Flags only go from ``False`` to ``True``; a king or rook that
    returns to its square keeps its flag.
    """

    king_moved: bool = False
    queenside_rook_moved: bool = False
    kingside_rook_moved: bool = False

    def rook_moved(self, rook_file: int) -> bool:
        """Flag of the rook that starts on *rook_file* (1 or 8)."""
        if rook_file == 1:
            return self.queenside_rook_moved
        return self.kingside_rook_moved

    def mark_rook(self, rook_file: int) -> None:
        if rook_file == 1:
            self.queenside_rook_moved = True
        else:
            self.kingside_rook_moved = True


def _new_histories() -> dict[Color, CastlingHistory]:
    return {Color.WHITE: CastlingHistory(), Color.BLACK: CastlingHistory()}


# Corner square -> (owner, rook file) of the rook that starts there.
_ROOK_CORNERS: dict[Square, tuple[Color, int]] = {
    Square(1, 1): (Color.WHITE, 1),
    Square(8, 1): (Color.WHITE, 8),
    Square(1, 8): (Color.BLACK, 1),
    Square(8, 8): (Color.BLACK, 8),
}


@dataclass(slots=True)
class GameState:
    """Everything besides piece placement that decides legality."""

    side_to_move: Color = Color.WHITE
    castling: dict[Color, CastlingHistory] = field(default_factory=_new_histories)
    # Square skipped by a pawn double step on the previous move, else None.
    double_step: Square | None = None

    def record_move(self, piece: Piece, from_sq: Square, to_sq: Square) -> None:
        """Update movement memos after *piece* went from *from_sq* to *to_sq*
        and hand the turn to the other side.
        """
        if piece.piece_type == PieceType.KING:
            self.castling[piece.color].king_moved = True

        # Leaving a corner moves that rook; arriving there captures it.
        for sq in (from_sq, to_sq):
            corner = _ROOK_CORNERS.get(sq)
            if corner is not None:
                owner, rook_file = corner
                self.castling[owner].mark_rook(rook_file)

        if piece.piece_type == PieceType.PAWN and abs(to_sq.rank - from_sq.rank) == 2:
            self.double_step = from_sq.offset(0, piece.color.forward)
        else:
            self.double_step = None

        self.side_to_move = self.side_to_move.opposite
