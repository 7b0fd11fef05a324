"""RulesEngine — the single entry point that plays moves.

Orchestrates one turn: ownership, geometry (:class:`MoveValidator`),
king safety (:class:`CheckOracle`), the castling / en passant /
promotion protocols and the turn switch.

Every candidate position is built on a copy of the board and swapped in
only once it is known to be legal, so a rejected move never touches the
live board or state.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from gambit.core.board import Board
from gambit.core.check_oracle import CheckOracle
from gambit.core.enums import Color, MoveResult, PieceType
from gambit.core.move_validator import MoveValidator, castling_rook_squares
from gambit.core.piece import Piece
from gambit.core.state import CastlingHistory, GameState
from gambit.core.types import Square

_LOGGER = logging.getLogger(__name__)

_FORBIDDEN_PROMOTIONS = (PieceType.PAWN, PieceType.KING)


class RulesEngine:
    """A chess game in progress, advanced one :meth:`play` at a time.

    Quick start::

        engine = RulesEngine()
        engine.play(E2, E4)          # MoveResult.OK
        engine.play(D7, D5)          # MoveResult.OK
        engine.play(E4, D5)          # MoveResult.CAPTURE

    *board* lets a game start from any placement (castling history
    starts clean); by default the standard opening layout is used.
    """

    __slots__ = ("_board", "_state")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._state = GameState(side_to_move=side_to_move)

    # ── Read accessors ───────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The live board. Treat as read-only; mutate through :meth:`play`."""
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def en_passant_square(self) -> Square | None:
        """Square an en passant capture may land on this move, if any."""
        return self._state.double_step

    def at(self, sq: Square) -> Piece | None:
        """Which piece, if any, stands on *sq*."""
        return self._board[sq]

    def castling_history(self, color: Color) -> CastlingHistory:
        """Snapshot of *color*'s castling flags."""
        return replace(self._state.castling[color])

    def in_check(self) -> bool:
        """Whether the side to move is in check."""
        return CheckOracle(self._board, self._state.side_to_move).in_check()

    # ── Playing moves ────────────────────────────────────────────────────

    def play(
        self,
        from_sq: Square,
        to_sq: Square,
        promote: PieceType = PieceType.PAWN,
    ) -> MoveResult:
        """Move the piece on *from_sq* to *to_sq* for the side to move.

        Castling is a king move of two files. *promote* names the piece a
        pawn becomes on reaching the last rank and is ignored otherwise.
        Anything other than ``CAPTURE`` / ``OK`` leaves the game untouched
        and the same side to move.
        """
        assert from_sq.is_valid, f"Square off the board: {from_sq!r}"
        assert to_sq.is_valid, f"Square off the board: {to_sq!r}"

        side = self._state.side_to_move
        result = self._play(from_sq, to_sq, promote)
        if result.accepted:
            _LOGGER.debug("%s played %s-%s: %s", side, from_sq, to_sq, result)
        else:
            _LOGGER.debug("%s rejected %s-%s: %s", side, from_sq, to_sq, result)
        return result

    def _play(self, from_sq: Square, to_sq: Square, promote: PieceType) -> MoveResult:
        board = self._board
        side = self._state.side_to_move

        piece = board[from_sq]
        if piece is None:
            return MoveResult.NO_PIECE
        if piece.color != side:
            return MoveResult.BAD_PIECE

        validity = MoveValidator(board).validate(from_sq, to_sq, piece.piece_type)
        if validity is not MoveResult.OK:
            return validity

        captured = board[to_sq]
        if captured is not None and captured.color == side:
            return MoveResult.BLOCKED

        started_in_check = CheckOracle(board, side).in_check()

        if (
            piece.piece_type == PieceType.PAWN
            and from_sq.file != to_sq.file
            and captured is None
        ):
            return self._en_passant(piece, from_sq, to_sq, started_in_check)
        if piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2:
            return self._castle(piece, from_sq, to_sq, started_in_check)

        candidate = board.copy()
        candidate[to_sq] = piece
        candidate[from_sq] = None
        unsafe = self._king_exposed(candidate, started_in_check)
        if unsafe is not None:
            return unsafe

        if piece.piece_type == PieceType.PAWN and to_sq.rank == side.promotion_rank:
            if promote in _FORBIDDEN_PROMOTIONS:
                return MoveResult.BAD_PROMOTE
            candidate[to_sq] = piece.promoted(promote)

        self._commit(candidate, piece, from_sq, to_sq)
        return MoveResult.OK if captured is None else MoveResult.CAPTURE

    # ── Special-move protocols ───────────────────────────────────────────

    def _en_passant(
        self,
        pawn: Piece,
        from_sq: Square,
        to_sq: Square,
        started_in_check: bool,
    ) -> MoveResult:
        # The captured pawn stands beside us; the square it skipped is our target.
        victim_sq = Square(to_sq.file, from_sq.rank)
        if to_sq != self._state.double_step:
            return MoveResult.LAPSED

        candidate = self._board.copy()
        candidate[victim_sq] = None
        candidate[to_sq] = pawn
        candidate[from_sq] = None
        unsafe = self._king_exposed(candidate, started_in_check)
        if unsafe is not None:
            return unsafe

        self._commit(candidate, pawn, from_sq, to_sq)
        return MoveResult.CAPTURE

    def _castle(
        self,
        king: Piece,
        from_sq: Square,
        to_sq: Square,
        started_in_check: bool,
    ) -> MoveResult:
        history = self._state.castling[king.color]
        rook_from, rook_to = castling_rook_squares(to_sq)
        if history.king_moved or history.rook_moved(rook_from.file):
            return MoveResult.HAS_MOVED
        if started_in_check:
            return MoveResult.IN_CHECK

        # No square between king and rook may be attacked.
        oracle = CheckOracle(self._board, king.color)
        path = MoveValidator(self._board).empty_path(
            from_sq, rook_from, guard=oracle.is_attacked
        )
        if path is not MoveResult.OK:
            return path

        candidate = self._board.copy()
        candidate[to_sq] = king
        candidate[from_sq] = None
        candidate[rook_to] = candidate[rook_from]
        candidate[rook_from] = None
        self._commit(candidate, king, from_sq, to_sq)
        return MoveResult.OK

    # ── Internal ─────────────────────────────────────────────────────────

    def _king_exposed(
        self, candidate: Board, started_in_check: bool
    ) -> MoveResult | None:
        """Rejection for *candidate* if it leaves the mover's king attacked."""
        oracle = CheckOracle(candidate, self._state.side_to_move)
        king = oracle.find_king()
        if king is None or not oracle.is_attacked(king):
            return None
        if _LOGGER.isEnabledFor(logging.DEBUG):
            attackers = ", ".join(str(sq) for sq in oracle.attackers(king))
            _LOGGER.debug("King on %s attacked from %s", king, attackers)
        return MoveResult.IN_CHECK if started_in_check else MoveResult.WOULD_CHECK

    def _commit(
        self, candidate: Board, piece: Piece, from_sq: Square, to_sq: Square
    ) -> None:
        self._board = candidate
        self._state.record_move(piece, from_sq, to_sq)
