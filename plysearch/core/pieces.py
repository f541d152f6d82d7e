"""Colors and piece marks with their fixed lookup tables."""

from enum import Enum, IntEnum
from typing import Optional

import chess


class ParseError(ValueError):
    """Malformed piece character, board diagram or FEN."""


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def sign(self) -> int:
        """+1 for White, -1 for Black."""
        return 1 if self is Color.WHITE else -1

    def to_chess(self) -> chess.Color:
        return chess.WHITE if self is Color.WHITE else chess.BLACK

    @staticmethod
    def from_chess(color: chess.Color) -> "Color":
        return Color.WHITE if color == chess.WHITE else Color.BLACK

    @staticmethod
    def parse(text: str) -> "Color":
        key = text.strip().lower()
        if key in ("w", "white"):
            return Color.WHITE
        if key in ("b", "black"):
            return Color.BLACK
        raise ValueError(f"invalid color: {text!r}")

    def __str__(self):
        return self.value


class Piece(IntEnum):
    """Contents of a square. Ordinals index the tables below."""

    EMPTY = 0

    W_PAWN = 1
    W_ROOK = 2
    W_KNIGHT = 3
    W_BISHOP = 4
    W_QUEEN = 5
    W_KING = 6

    B_PAWN = 7
    B_ROOK = 8
    B_KNIGHT = 9
    B_BISHOP = 10
    B_QUEEN = 11
    B_KING = 12

    def to_char(self) -> str:
        """FEN letter, '.' for an empty square."""
        return ASCII[self]

    def unicode(self) -> str:
        return UNICODE[self]

    def material(self) -> int:
        """Signed material value: positive for White, negative for Black."""
        return VALUES[self]

    def abs_material(self) -> int:
        return abs(VALUES[self])

    def color(self) -> Optional[Color]:
        return COLORS[self]

    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    def is_color(self, color: Color) -> bool:
        return COLORS[self] is color

    def is_king(self) -> bool:
        return self in (Piece.W_KING, Piece.B_KING)

    def to_chess(self) -> Optional[chess.Piece]:
        if self is Piece.EMPTY:
            return None
        return chess.Piece.from_symbol(ASCII[self])

    @staticmethod
    def from_chess(piece: Optional[chess.Piece]) -> "Piece":
        if piece is None:
            return Piece.EMPTY
        return _BY_CHAR[piece.symbol()]

    @staticmethod
    def from_char(c: str) -> "Piece":
        try:
            return _BY_CHAR[c]
        except KeyError:
            raise ParseError(f"invalid piece: {c!r}") from None

    def __str__(self):
        return self.to_char()


ASCII = (".", "P", "R", "N", "B", "Q", "K", "p", "r", "n", "b", "q", "k")
UNICODE = (" ", "♙", "♖", "♘", "♗", "♕", "♔", "♟", "♜", "♞", "♝", "♛", "♚")
# https://en.wikipedia.org/wiki/Chess_piece_relative_value, kings carry no material
VALUES = (0, 1, 5, 3, 3, 9, 0, -1, -5, -3, -3, -9, 0)
COLORS = (None,) + (Color.WHITE,) * 6 + (Color.BLACK,) * 6

_BY_CHAR = {ch: Piece(i) for i, ch in enumerate(ASCII)}
