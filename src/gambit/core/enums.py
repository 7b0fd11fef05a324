"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank of the side's back row (king and rooks)."""
        return 1 if self is Color.WHITE else 8

    @property
    def pawn_rank(self) -> int:
        """Rank the side's pawns start on."""
        return 2 if self is Color.WHITE else 7

    @property
    def promotion_rank(self) -> int:
        return 8 if self is Color.WHITE else 1

    @property
    def en_passant_rank(self) -> int:
        """Rank a pawn of this side lands on when capturing en passant."""
        return 6 if self is Color.WHITE else 3

    @property
    def forward(self) -> int:
        """Rank direction the side's pawns advance in."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class MoveResult(Enum):
    """Outcome of :meth:`RulesEngine.play`.

    Members are listed in order of precedence: when several apply, the
    first one is reported. The executor enforces this through the order
    of its checks.

    ``CAPTURE``      legal move that took a piece
    ``OK``           legal move, performed
    ``NO_PIECE``     nothing stands on the origin square
    ``BAD_PIECE``    the piece on the origin belongs to the opponent
    ``BAD_MOVE``     the piece cannot move that way
    ``BLOCKED``      another piece is in the way
    ``LAPSED``       the en passant capture is no longer available
    ``HAS_MOVED``    king or rook already moved, castling forbidden
    ``IN_CHECK``     side is in check and the move does not resolve it
    ``WOULD_CHECK``  the move would leave or put own king in check
    ``BAD_PROMOTE``  promotion to a pawn or a king was requested
    """

    CAPTURE = "capture"
    OK = "ok"
    NO_PIECE = "no_piece"
    BAD_PIECE = "bad_piece"
    BAD_MOVE = "bad_move"
    BLOCKED = "blocked"
    LAPSED = "lapsed"
    HAS_MOVED = "has_moved"
    IN_CHECK = "in_check"
    WOULD_CHECK = "would_check"
    BAD_PROMOTE = "bad_promote"

    @property
    def accepted(self) -> bool:
        """Whether the move was performed."""
        return self in (MoveResult.CAPTURE, MoveResult.OK)

    def __str__(self) -> str:
        return self.value
