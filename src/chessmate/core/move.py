"""Move value object (square-pair representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a regular (non-castling) move."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
