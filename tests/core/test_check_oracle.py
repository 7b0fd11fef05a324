"""Tests for CheckOracle."""

from gambit.core.board import Board
from gambit.core.check_oracle import CheckOracle
from gambit.core.enums import Color
from gambit.core.types import parse_square


def _rows(*rows: str) -> Board:
    return Board.from_rows(list(rows))


class TestIsAttacked:
    def test_opening_position(self) -> None:
        oracle = CheckOracle(Board.initial(), Color.WHITE)
        # Black pawns cover rank 6 only.
        assert oracle.is_attacked(parse_square("d6"))
        assert not oracle.is_attacked(parse_square("e4"))
        assert not oracle.in_check()

    def test_pawn_diagonals_attacked_when_empty(self) -> None:
        board = _rows(
            "....k...",
            "........",
            "........",
            "...p....",
            "........",
            "........",
            "........",
            "....K...",
        )
        oracle = CheckOracle(board, Color.WHITE)
        assert oracle.is_attacked(parse_square("c4"))
        assert oracle.is_attacked(parse_square("e4"))
        assert not oracle.is_attacked(parse_square("d4"))
        assert not oracle.is_attacked(parse_square("c6"))

    def test_slider_blocked(self) -> None:
        board = _rows(
            "....k...",
            "....r...",
            "........",
            "....P...",
            "........",
            "........",
            "........",
            "....K...",
        )
        oracle = CheckOracle(board, Color.WHITE)
        assert oracle.is_attacked(parse_square("e5"))
        assert not oracle.is_attacked(parse_square("e4"))
        assert not oracle.in_check()

    def test_knight_check(self) -> None:
        board = _rows(
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "...n....",
            "........",
            "....K...",
        )
        oracle = CheckOracle(board, Color.WHITE)
        assert oracle.in_check()
        assert oracle.attackers(parse_square("e1")) == [parse_square("d3")]

    def test_multiple_attackers(self) -> None:
        board = _rows(
            "....k...",
            "........",
            "........",
            "b.......",
            "........",
            "........",
            "........",
            "r...K...",
        )
        oracle = CheckOracle(board, Color.WHITE)
        assert set(oracle.attackers(parse_square("e1"))) == {
            parse_square("a1"), parse_square("a5"),
        }

    def test_own_pieces_do_not_attack(self) -> None:
        board = _rows(
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "R...K...",
        )
        assert not CheckOracle(board, Color.WHITE).is_attacked(parse_square("b1"))
        assert CheckOracle(board, Color.BLACK).is_attacked(parse_square("b1"))


class TestFindKing:
    def test_find_king(self) -> None:
        oracle = CheckOracle(Board.initial(), Color.BLACK)
        assert oracle.find_king() == parse_square("e8")

    def test_no_king_never_in_check(self) -> None:
        board = _rows(
            "....k...",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "q.......",
        )
        oracle = CheckOracle(board, Color.WHITE)
        assert oracle.find_king() is None
        assert not oracle.in_check()
