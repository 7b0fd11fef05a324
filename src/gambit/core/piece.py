"""Piece value object.

A board cell holds ``Piece | None``; ``None`` is the empty cell, so an
empty square never carries owner or kind data.
"""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType

# Lower-case letter per kind; upper case marks a white piece.
_KIND_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_KINDS: dict[str, PieceType] = {v: k for k, v in _KIND_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Occupant of a cell: its owner and its kind."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _KIND_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a layout letter: ``"N"`` is a white knight, ``"n"`` black."""
        kind = _LETTER_KINDS.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

    def promoted(self, piece_type: PieceType) -> Piece:
        """The piece a pawn becomes: same owner, new kind."""
        return Piece(self.color, piece_type)
