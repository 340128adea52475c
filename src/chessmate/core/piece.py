"""Piece: one chess piece with its own reachability rule and path shape.

Movement rules are a closed union over :class:`PieceType`: every operation
dispatches through one table keyed by piece type, so adding a type without
a rule fails loudly at import time.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from chessmate.core.enums import Color, PieceType
from chessmate.core.types import (
    Square,
    file_of,
    make_square,
    rank_of,
    sign,
    square_name,
)

# Solid glyphs for both colors; the color is carried by the text style.
_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "♟",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.ROOK: "♜",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

# Pieces whose path is never blocked by intervening pieces.
_SKIPPING: frozenset[PieceType] = frozenset({PieceType.KNIGHT, PieceType.KING})


# ── Reachability rules ───────────────────────────────────────────────────────
# Each rule gets (piece, file delta, rank delta, is_capture).


def _king_reach(piece: Piece, df: int, dr: int, is_capture: bool) -> bool:
    return abs(df) <= 1 and abs(dr) <= 1


def _knight_reach(piece: Piece, df: int, dr: int, is_capture: bool) -> bool:
    return (abs(df), abs(dr)) in ((1, 2), (2, 1))


def _bishop_reach(piece: Piece, df: int, dr: int, is_capture: bool) -> bool:
    return abs(df) == abs(dr) != 0


def _rook_reach(piece: Piece, df: int, dr: int, is_capture: bool) -> bool:
    return df == 0 or dr == 0


def _queen_reach(piece: Piece, df: int, dr: int, is_capture: bool) -> bool:
    return _bishop_reach(piece, df, dr, is_capture) or _rook_reach(
        piece, df, dr, is_capture
    )


def _pawn_reach(piece: Piece, df: int, dr: int, is_capture: bool) -> bool:
    forward = dr * piece.color.forward
    if is_capture:
        return abs(df) == 1 and forward == 1
    return df == 0 and (forward == 1 or (not piece.has_moved and forward == 2))


_REACH_RULES: dict[PieceType, Callable[[Piece, int, int, bool], bool]] = {
    PieceType.PAWN: _pawn_reach,
    PieceType.KNIGHT: _knight_reach,
    PieceType.BISHOP: _bishop_reach,
    PieceType.ROOK: _rook_reach,
    PieceType.QUEEN: _queen_reach,
    PieceType.KING: _king_reach,
}


# ── Path shapes ──────────────────────────────────────────────────────────────


def _no_path(piece: Piece, dest: Square) -> list[Square]:
    return []


def _pawn_path(piece: Piece, dest: Square) -> list[Square]:
    if abs(rank_of(dest) - rank_of(piece.square)) == 2:
        return [make_square(file_of(dest), rank_of(dest) - piece.color.forward)]
    return []


def _sliding_path(piece: Piece, dest: Square) -> list[Square]:
    df = file_of(dest) - file_of(piece.square)
    dr = rank_of(dest) - rank_of(piece.square)
    if df and dr and abs(df) != abs(dr):
        raise ValueError(
            f"No straight path from {square_name(piece.square)} to {square_name(dest)}"
        )
    step_f, step_r = sign(df), sign(dr)
    f = file_of(piece.square) + step_f
    r = rank_of(piece.square) + step_r
    path: list[Square] = []
    while (f, r) != (file_of(dest), rank_of(dest)):
        path.append(make_square(f, r))
        f += step_f
        r += step_r
    return path


_PATH_SHAPES: dict[PieceType, Callable[[Piece, Square], list[Square]]] = {
    PieceType.PAWN: _pawn_path,
    PieceType.KNIGHT: _no_path,
    PieceType.BISHOP: _sliding_path,
    PieceType.ROOK: _sliding_path,
    PieceType.QUEEN: _sliding_path,
    PieceType.KING: _no_path,
}

assert set(_REACH_RULES) == set(_PATH_SHAPES) == set(PieceType)


@dataclass(eq=False, slots=True)
class Piece:
    """A chess piece on a board.

    Pieces compare by identity: a board hands out the same object for the
    same piece until it is captured or promoted.
    """

    color: Color
    piece_type: PieceType
    square: Square
    has_moved: bool = False

    # ── Movement ─────────────────────────────────────────────────────────

    def can_reach(self, dest: Square, is_capture: bool) -> bool:
        """Whether *dest* is within this piece's movement shape."""
        df = file_of(dest) - file_of(self.square)
        dr = rank_of(dest) - rank_of(self.square)
        return _REACH_RULES[self.piece_type](self, df, dr, is_capture)

    def path_to(self, dest: Square) -> list[Square]:
        """Squares strictly between this piece and *dest*, nearest first.

        Assumes ``can_reach(dest, ...)`` holds.
        """
        return _PATH_SHAPES[self.piece_type](self, dest)

    def place(self, square: Square) -> None:
        """Set the piece's square. Any placement counts as having moved."""
        self.square = square
        self.has_moved = True

    # ── Dispatch predicates ──────────────────────────────────────────────

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def skips(self) -> bool:
        """Whether intervening pieces never block this piece."""
        return self.piece_type in _SKIPPING

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        return _SYMBOLS[self.piece_type]

    @property
    def letter(self) -> str:
        """ASCII letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    def __str__(self) -> str:
        return self.letter

    # ── Copying ──────────────────────────────────────────────────────────

    def clone(self) -> Piece:
        return Piece(self.color, self.piece_type, self.square, self.has_moved)
