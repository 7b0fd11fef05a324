"""Square value type and coordinate helpers.

Coordinates are 1-indexed, matching how squares are named on a real
board::

    a1 = Square(1, 1), b1 = Square(2, 1), ..., h1 = Square(8, 1)
    ...
    a8 = Square(1, 8), ..., h8 = Square(8, 8)
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (file, rank) board coordinate, both in 1..8."""

    file: int
    rank: int

    @property
    def is_valid(self) -> bool:
        """Whether the square lies on the board."""
        return 1 <= self.file <= 8 and 1 <= self.rank <= 8

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Square(5, 4) → 'e4'."""
        return square_name(self)

    def offset(self, df: int, dr: int) -> Square:
        """New square displaced by *df* files and *dr* ranks."""
        return Square(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    if not sq.is_valid:
        return f"({sq.file},{sq.rank})"
    return _FILES[sq.file - 1] + _RANKS[sq.rank - 1]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(5, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILES.index(name[0]) + 1, int(name[1]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for rank in range(1, 9) for file in range(1, 9)
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
