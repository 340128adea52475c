"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import parse_square

# Letter ↔ (Color, PieceType); upper-case is white.
_LETTERS: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

BoardFactory = Callable[..., Board]


def build_board(layout: dict[str, str], moved: Iterable[str] = ()) -> Board:
    """Committed board from ``{"E1": "K", "E8": "k"}``.

    Squares listed in *moved* hold pieces that count as having moved.
    """
    moved_squares = {parse_square(name) for name in moved}
    pieces = []
    for name, letter in layout.items():
        color, piece_type = _LETTERS[letter]
        sq = parse_square(name)
        pieces.append(Piece(color, piece_type, sq, has_moved=sq in moved_squares))
    return Board.from_pieces(pieces)


@pytest.fixture
def make_board() -> BoardFactory:
    """Factory fixture wrapping :func:`build_board`."""
    return build_board


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from chessmate.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")
