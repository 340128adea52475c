"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessmate.core import Color, RulesEngine, parse_square

    engine = RulesEngine()
    engine.move(parse_square("E2"), parse_square("E4"), Color.WHITE, False)
    print(engine.board)
"""

from chessmate.core.board import Board
from chessmate.core.enums import CastlingSide, Color, GameResult, PieceType
from chessmate.core.move import Move
from chessmate.core.notation import (
    KINGSIDE_TOKEN,
    QUEENSIDE_TOKEN,
    MoveRequest,
    format_move,
    parse_move,
)
from chessmate.core.piece import Piece
from chessmate.core.rules import RulesEngine
from chessmate.core.types import (
    BOARD_SIZE,
    Square,
    file_of,
    is_valid_square,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "file_of",
    "is_valid_square",
    "make_square",
    "offset_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "RulesEngine",
    # Notation
    "KINGSIDE_TOKEN",
    "QUEENSIDE_TOKEN",
    "MoveRequest",
    "format_move",
    "parse_move",
]
