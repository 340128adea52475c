"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Sign of a pawn's forward rank delta: +1 for white, -1 for black."""
        return 1 if self is Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank index (0–7) of the back rank."""
        return 0 if self is Color.WHITE else 7

    @property
    def promotion_rank(self) -> int:
        """Rank index (0–7) a pawn promotes on."""
        return 7 if self is Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(IntEnum):
    """Castling wing. The value is the king's file direction."""

    QUEENSIDE = -1
    KINGSIDE = 1

    @property
    def code(self) -> str:
        """Single-letter code: 'Q' or 'K'."""
        return "Q" if self is CastlingSide.QUEENSIDE else "K"

    @property
    def rook_file(self) -> int:
        """Home file of the castling rook: a-file or h-file."""
        return 0 if self is CastlingSide.QUEENSIDE else 7

    @classmethod
    def from_code(cls, code: str) -> CastlingSide:
        if code == "Q":
            return cls.QUEENSIDE
        if code == "K":
            return cls.KINGSIDE
        raise ValueError(f"Invalid castling side: {code!r}")


class GameResult(IntEnum):
    """Outcome of a game. Draws are not detected."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2

    @classmethod
    def won_by(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color is Color.WHITE else cls.BLACK_WINS
