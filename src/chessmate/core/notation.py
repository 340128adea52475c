"""Move text recognised from players.

Two formats only:

* castling keywords ``o-o-o`` (queenside) and ``o-o`` (kingside);
* a square pair such as ``A2A4`` (source then destination, no separators).
"""

from __future__ import annotations

from typing import TypeAlias

from chessmate.core.enums import CastlingSide
from chessmate.core.move import Move
from chessmate.core.types import parse_square

QUEENSIDE_TOKEN = "o-o-o"
KINGSIDE_TOKEN = "o-o"

_CASTLING_TOKENS: dict[str, CastlingSide] = {
    QUEENSIDE_TOKEN: CastlingSide.QUEENSIDE,
    KINGSIDE_TOKEN: CastlingSide.KINGSIDE,
}

MoveRequest: TypeAlias = Move | CastlingSide


def parse_move(text: str) -> MoveRequest | None:
    """Parse one move token; ``None`` when *text* is in neither format."""
    token = text.strip()
    side = _CASTLING_TOKENS.get(token)
    if side is not None:
        return side
    if len(token) != 4:
        return None
    try:
        return Move(parse_square(token[:2]), parse_square(token[2:]))
    except ValueError:
        return None


def format_move(request: MoveRequest) -> str:
    """Inverse of :func:`parse_move`."""
    if isinstance(request, CastlingSide):
        return (
            QUEENSIDE_TOKEN if request is CastlingSide.QUEENSIDE else KINGSIDE_TOKEN
        )
    return str(request)
