"""Immutable position wrapper over python-chess.

Moves are generated pseudo-legally for either color, so a king can be left
in check or captured; filtering self-check moves is the caller's job.
"""

from typing import Iterator, Optional, Tuple

import chess

from plysearch.core.pieces import Color, ParseError, Piece

Coordinate = Tuple[int, int]

__all__ = ["Coordinate", "ParseError", "Position"]


def _square(coord: Coordinate) -> chess.Square:
    row, col = coord
    if not (0 <= row < 8 and 0 <= col < 8):
        raise IndexError(f"coordinate out of range: {coord!r}")
    return chess.square(col, 7 - row)


class Position:
    """A snapshot of piece placement. Never mutated after construction."""

    def __init__(self, board: Optional[chess.Board] = None):
        """Take ownership of a copy of `board`, or start from an empty board."""
        self._board = board.copy(stack=False) if board is not None else chess.Board(None)

    @classmethod
    def initial(cls) -> "Position":
        return cls(chess.Board())

    @classmethod
    def from_fen(cls, fen: str) -> "Position":
        try:
            return cls(chess.Board(fen))
        except ValueError as e:
            raise ParseError(f"invalid fen {fen!r}: {e}") from e

    @classmethod
    def parse(cls, text: str) -> "Position":
        """Parse an 8x8 diagram, first line is rank 8.

        Example::

            . . . . R . . k
            . . . . R . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . K
        """
        rows = [line for line in text.splitlines() if line.strip()]
        if len(rows) != 8:
            raise ParseError(f"expected 8 rows, got {len(rows)}")

        board = chess.Board(None)
        for r, line in enumerate(rows):
            cells = "".join(line.split())
            if len(cells) != 8:
                raise ParseError(f"row {r + 1} must have 8 squares: {line.strip()!r}")
            for c, ch in enumerate(cells):
                piece = Piece.from_char(ch).to_chess()
                if piece is not None:
                    board.set_piece_at(_square((r, c)), piece)
        return cls(board)

    def fen(self) -> str:
        """Full FEN, enough to rebuild this position with from_fen."""
        return self._board.fen(en_passant="fen")

    def placement(self) -> str:
        return self._board.board_fen()

    # ── Position contract ───────────────────────────────────────────────────

    def moves_for(self, player: Color) -> Iterator[chess.Move]:
        """Lazily yield pseudo-legal moves for `player`."""
        board = self._board
        if board.turn != player.to_chess():
            board = board.copy(stack=False)
            board.turn = player.to_chess()
        return board.generate_pseudo_legal_moves()

    def apply(self, move: chess.Move) -> "Position":
        """Return the position after `move`; the mover is the piece's owner."""
        board = self._board.copy(stack=False)
        mover = board.color_at(move.from_square)
        if mover is None:
            raise ValueError(f"no piece on {chess.square_name(move.from_square)} for {move.uci()}")
        board.turn = mover
        board.push(move)
        return Position._wrap(board)

    def is_in_check(self, player: Color) -> bool:
        color = player.to_chess()
        king = self._board.king(color)
        return king is not None and self._board.is_attacked_by(not color, king)

    def has_king(self, player: Color) -> bool:
        return self._board.king(player.to_chess()) is not None

    def piece_at(self, coord: Coordinate) -> Piece:
        return Piece.from_chess(self._board.piece_at(_square(coord)))

    # ── Rendering / value semantics ─────────────────────────────────────────

    def unicode(self) -> str:
        return self._render(Piece.unicode)

    def _render(self, glyph) -> str:
        return "\n".join(
            " ".join(glyph(self.piece_at((r, c))) for c in range(8))
            for r in range(8)
        )

    def __str__(self):
        return self._render(Piece.to_char)

    def __repr__(self):
        return f"Position({self.fen()!r})"

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.placement() == other.placement()

    def __hash__(self):
        return hash(self.placement())

    @classmethod
    def _wrap(cls, board: chess.Board) -> "Position":
        # board is a private copy already, skip the defensive copy in __init__
        pos = cls.__new__(cls)
        pos._board = board
        return pos
