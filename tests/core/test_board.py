"""Tests for Board."""

import pytest

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, E1, E2, E4, E8, Square


class TestBoardLayout:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert all(board.is_empty(sq) for sq in ALL_SQUARES)
        assert list(board.occupied()) == []

    @pytest.mark.parametrize("color", list(Color))
    def test_initial_home_ranks(self, color: Color) -> None:
        board = Board.initial()
        back = [board[Square(f, color.home_rank)] for f in range(1, 9)]
        pawns = [board[Square(f, color.pawn_rank)] for f in range(1, 9)]
        assert "".join(str(p) for p in back).lower() == "rnbqkbnr"
        assert all(p is not None and p.color == color for p in back)
        assert pawns == [Piece(color, PieceType.PAWN)] * 8

    def test_initial_middle_ranks_empty(self) -> None:
        board = Board.initial()
        middle = [sq for sq in ALL_SQUARES if 3 <= sq.rank <= 6]
        assert len(middle) == 32
        assert all(board.is_empty(sq) for sq in middle)

    def test_initial_occupied_by_color(self) -> None:
        board = Board.initial()
        for color in Color:
            ranks = {sq.rank for sq, _ in board.occupied(color)}
            assert ranks == {color.home_rank, color.pawn_rank}
        assert len(list(board.occupied())) == 32

    def test_occupied_follows_square_order(self) -> None:
        board = Board()
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        board[E2] = Piece(Color.WHITE, PieceType.PAWN)
        assert [sq for sq, _ in board.occupied()] == [E2, E4]
        assert [sq for sq, _ in board.occupied(Color.BLACK)] == [E4]


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board.at(E4) == piece
        assert board.is_empty(E2)

    def test_write_empty(self) -> None:
        board = Board.initial()
        board[E2] = None
        assert board.is_empty(E2)
        assert board[E2] is None

    def test_off_board_access_asserts(self) -> None:
        board = Board()
        with pytest.raises(AssertionError):
            board[Square(9, 1)]

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing(self) -> None:
        assert Board().find_king(Color.WHITE) is None

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestBoardFromRows:
    def test_initial_layout(self) -> None:
        board = Board.from_rows([
            "r n b q k b n r",
            "p p p p p p p p",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            "P P P P P P P P",
            "R N B Q K B N R",
        ])
        assert board == Board.initial()

    def test_repr_rows_round_trip(self) -> None:
        board = Board.initial()
        board[E2] = None
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        rows = [line[2:] for line in repr(board).splitlines()[:8]]
        assert Board.from_rows(rows) == board

    def test_wrong_row_count(self) -> None:
        with pytest.raises(ValueError, match="Expected 8 rows"):
            Board.from_rows(["........"] * 7)

    def test_wrong_row_width(self) -> None:
        with pytest.raises(ValueError, match="rank 8"):
            Board.from_rows(["......."] + ["........"] * 7)

    def test_bad_piece_letter(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_rows(["x......."] + ["........"] * 7)
