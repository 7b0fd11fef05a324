"""Geometric move legality and path clearing.

The validator answers "can this piece make this displacement on the
current board?" without looking at whose turn it is, castling history or
king safety. Those belong to :class:`~gambit.core.engine.RulesEngine`.
"""

from __future__ import annotations

from collections.abc import Callable

from gambit.core.board import Board
from gambit.core.enums import MoveResult, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square

# Predicate telling whether a square is unsafe for a castling king.
SquareGuard = Callable[[Square], bool]

_KING_HOME_FILE = 5


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def castling_rook_squares(king_to: Square) -> tuple[Square, Square]:
    """Rook origin and destination for a king castling onto *king_to*."""
    if king_to.file == 3:
        return Square(1, king_to.rank), Square(4, king_to.rank)
    return Square(8, king_to.rank), Square(6, king_to.rank)


def squares_between(from_sq: Square, to_sq: Square) -> list[Square]:
    """Squares strictly between two squares on a shared line."""
    df = to_sq.file - from_sq.file
    dr = to_sq.rank - from_sq.rank
    assert df == 0 or dr == 0 or abs(df) == abs(dr), "not on a line"
    step_f, step_r = _sign(df), _sign(dr)
    squares: list[Square] = []
    sq = from_sq.offset(step_f, step_r)
    while sq != to_sq:
        squares.append(sq)
        sq = sq.offset(step_f, step_r)
    return squares


class MoveValidator:
    """Per-piece displacement rules over a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # ── Public API ───────────────────────────────────────────────────────

    def validate(
        self,
        from_sq: Square,
        to_sq: Square,
        piece_type: PieceType | None = None,
        *,
        attacking: bool = False,
    ) -> MoveResult:
        """Check whether the piece on *from_sq* may move to *to_sq*.

        *piece_type* overrides the kind of the moving piece; its owner is
        always the piece standing on *from_sq*. With *attacking* set the
        question becomes "does this piece attack *to_sq*": pawns attack
        both forward diagonals whatever stands there, and a king never
        attacks by castling.

        Returns ``OK``, ``BAD_MOVE`` or ``BLOCKED``.
        """
        assert from_sq.is_valid and to_sq.is_valid
        piece = self._board[from_sq]
        assert piece is not None, f"No piece on {from_sq}"
        kind = piece.piece_type if piece_type is None else piece_type

        df = to_sq.file - from_sq.file
        dr = to_sq.rank - from_sq.rank
        if df == 0 and dr == 0:
            return MoveResult.BAD_MOVE

        if kind == PieceType.PAWN:
            return self._pawn_move(piece, from_sq, to_sq, df, dr, attacking)
        if kind == PieceType.ROOK:
            return self._rook_move(from_sq, to_sq, df, dr)
        if kind == PieceType.KNIGHT:
            return self._knight_move(df, dr)
        if kind == PieceType.BISHOP:
            return self._bishop_move(from_sq, to_sq, df, dr)
        if kind == PieceType.QUEEN:
            return self._queen_move(from_sq, to_sq, df, dr)
        return self._king_move(piece, from_sq, to_sq, df, dr, attacking)

    def empty_path(
        self,
        from_sq: Square,
        to_sq: Square,
        *,
        guard: SquareGuard | None = None,
    ) -> MoveResult:
        """Walk from *from_sq* toward *to_sq*, both ends excluded.

        An occupied square gives ``BLOCKED``. In castling mode *guard* is
        consulted first for every square and a ``True`` answer stops the
        walk with ``WOULD_CHECK``.
        """
        for sq in squares_between(from_sq, to_sq):
            if guard is not None and guard(sq):
                return MoveResult.WOULD_CHECK
            if not self._board.is_empty(sq):
                return MoveResult.BLOCKED
        return MoveResult.OK

    # ── Per-piece rules ──────────────────────────────────────────────────

    def _pawn_move(
        self,
        pawn: Piece,
        from_sq: Square,
        to_sq: Square,
        df: int,
        dr: int,
        attacking: bool,
    ) -> MoveResult:
        color = pawn.color
        if dr * color.forward <= 0:
            return MoveResult.BAD_MOVE

        # Pushes never attack; both forward diagonals always do.
        if attacking:
            if abs(dr) == 1 and abs(df) == 1:
                return MoveResult.OK
            return MoveResult.BAD_MOVE

        # Double step from the starting rank
        if abs(dr) == 2 and df == 0 and from_sq.rank == color.pawn_rank:
            skipped = from_sq.offset(0, color.forward)
            if self._board.is_empty(to_sq) and self._board.is_empty(skipped):
                return MoveResult.OK
            return MoveResult.BLOCKED

        if abs(dr) == 1 and df == 0:
            if self._board.is_empty(to_sq):
                return MoveResult.OK
            return MoveResult.BLOCKED

        if abs(dr) == 1 and abs(df) == 1:
            target = self._board[to_sq]
            if target is not None:
                if target.color != color:
                    return MoveResult.OK
            elif self._en_passant_shape(pawn, from_sq, to_sq):
                return MoveResult.OK

        return MoveResult.BAD_MOVE

    def _en_passant_shape(self, pawn: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Enemy pawn beside us on the target file, landing on the ep rank.

        Whether that pawn has just double-stepped is the executor's call.
        """
        if to_sq.rank != pawn.color.en_passant_rank:
            return False
        beside = self._board[Square(to_sq.file, from_sq.rank)]
        return beside == Piece(pawn.color.opposite, PieceType.PAWN)

    def _rook_move(
        self, from_sq: Square, to_sq: Square, df: int, dr: int
    ) -> MoveResult:
        if df != 0 and dr != 0:
            return MoveResult.BAD_MOVE
        return self.empty_path(from_sq, to_sq)

    @staticmethod
    def _knight_move(df: int, dr: int) -> MoveResult:
        if {abs(df), abs(dr)} != {1, 2}:
            return MoveResult.BAD_MOVE
        return MoveResult.OK

    def _bishop_move(
        self, from_sq: Square, to_sq: Square, df: int, dr: int
    ) -> MoveResult:
        if abs(df) != abs(dr):
            return MoveResult.BAD_MOVE
        return self.empty_path(from_sq, to_sq)

    def _queen_move(
        self, from_sq: Square, to_sq: Square, df: int, dr: int
    ) -> MoveResult:
        if df != 0 and dr != 0 and abs(df) != abs(dr):
            return MoveResult.BAD_MOVE
        return self.empty_path(from_sq, to_sq)

    def _king_move(
        self,
        king: Piece,
        from_sq: Square,
        to_sq: Square,
        df: int,
        dr: int,
        attacking: bool,
    ) -> MoveResult:
        if abs(df) <= 1 and abs(dr) <= 1:
            return MoveResult.OK
        if attacking:
            return MoveResult.BAD_MOVE

        # Two files sideways from the home square is a castling attempt
        home = Square(_KING_HOME_FILE, king.color.home_rank)
        if abs(df) == 2 and dr == 0 and from_sq == home:
            rook_sq, _ = castling_rook_squares(to_sq)
            if self._board[rook_sq] != Piece(king.color, PieceType.ROOK):
                return MoveResult.BAD_MOVE
            return self.empty_path(from_sq, rook_sq)
        return MoveResult.BAD_MOVE
