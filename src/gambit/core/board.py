"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(sq: Square) -> int:
    assert sq.is_valid, f"Square off the board: {sq!r}"
    return (sq.rank - 1) * 8 + (sq.file - 1)


class Board:
    """Mutable 64-cell grid; each cell is a :class:`Piece` or ``None``."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[_index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        assert piece is None or isinstance(piece, Piece)
        self._cells[_index(sq)] = piece

    def at(self, sq: Square) -> Piece | None:
        """Occupant of *sq* (``None`` when empty)."""
        return self[sq]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell, optionally of *color*."""
        for sq, piece in zip(ALL_SQUARES, self._cells):
            if piece is not None and (color is None or piece.color == color):
                yield sq, piece

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK, start=1):
            b[Square(f, 1)] = Piece(Color.WHITE, pt)
            b[Square(f, 2)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 7)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(f, 8)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight text rows, rank 8 first.

        Each row holds eight cells: a piece letter or ``.`` for an empty
        square. Spaces are ignored, so ``repr(board)`` rows round-trip::

            Board.from_rows([
                "r . . . k . . r",
                ". . . . . . . .",
                ...
            ])
        """
        if len(rows) != 8:
            raise ValueError(f"Expected 8 rows, got {len(rows)}")
        b = cls()
        for rank, row in zip(range(8, 0, -1), rows):
            cells = row.replace(" ", "")
            if len(cells) != 8:
                raise ValueError(f"Row for rank {rank} must have 8 cells: {row!r}")
            for file, char in enumerate(cells, start=1):
                if char != ".":
                    b[Square(file, rank)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for file in range(1, 9):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
