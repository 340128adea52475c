"""Board - piece placement on an 8x8 board with trial-move transactions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import Square, is_valid_square, make_square, square_name

_LOGGER = logging.getLogger(__name__)
_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


# ── Undo records ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class _SquareWrite:
    """Grid cell *square* held *previous* before the write."""

    square: Square
    previous: Piece | None


@dataclass(frozen=True, slots=True)
class _PieceWrite:
    """*piece* stood on *square* with *has_moved* before the write."""

    piece: Piece
    square: Square
    has_moved: bool


@dataclass(frozen=True, slots=True)
class _RosterWrite:
    """*piece* was inserted into (or removed from index *index* of) its roster."""

    piece: Piece
    index: int
    inserted: bool


_UndoRecord: TypeAlias = _SquareWrite | _PieceWrite | _RosterWrite


class Board:
    """Mutable 64-square board with per-color rosters and king references.

    The board doubles as its own scratch copy. Every mutation is journaled;
    :meth:`commit` accepts the journaled changes and :meth:`rollback`
    reverts them, restoring the last committed state exactly (including
    piece identities and roster order).
    """

    __slots__ = ("_squares", "_rosters", "_kings", "_journal")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> live pieces of that color, in insertion order.
        self._rosters: list[list[Piece]] = [[] for _ in range(_COLOR_COUNT)]
        # [color] -> that color's king (None only while setting up).
        self._kings: list[Piece | None] = [None] * _COLOR_COUNT
        self._journal: list[_UndoRecord] = []

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    @staticmethod
    def is_in_board(sq: int) -> bool:
        return is_valid_square(sq)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """Live pieces of *color*, in roster order."""
        return list(self._rosters[int(color)])

    def king(self, color: Color) -> Piece:
        """Return the single king of *color*."""
        king = self._kings[int(color)]
        if king is None:
            raise ValueError(f"No {color.name} king on board")
        return king

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece | None, sq: Square) -> None:
        """Write *piece* into the grid cell *sq*.

        Overwrites the previous occupant without removing it from its roster;
        callers remove it first.
        """
        self._journal.append(_SquareWrite(sq, self._squares[sq]))
        self._squares[sq] = piece

    def move_piece(self, piece: Piece, sq: Square) -> None:
        """Place *piece* on *sq* and mark it as moved."""
        self.place(piece, sq)
        self._journal.append(_PieceWrite(piece, piece.square, piece.has_moved))
        piece.place(sq)

    def apply_move(self, src: Square, dest: Square) -> Piece | None:
        """Move the piece on *src* to *dest*, capturing any occupant.

        Returns the captured piece. Assumes *src* is occupied.
        """
        captured = self._squares[dest]
        if captured is not None:
            self.remove(dest)
        piece = self._squares[src]
        if piece is None:
            raise ValueError(f"No piece on {square_name(src)}")
        self.place(None, src)
        self.move_piece(piece, dest)
        return captured

    def remove(self, sq: Square) -> None:
        """Take the piece on *sq* off the board. No-op on an empty square."""
        piece = self._squares[sq]
        if piece is None:
            return
        if piece.is_king:
            raise ValueError(f"Cannot remove the {piece.color.name} king")
        roster = self._rosters[int(piece.color)]
        index = roster.index(piece)
        self._journal.append(_RosterWrite(piece, index, inserted=False))
        del roster[index]
        self.place(None, sq)

    def add(self, piece: Piece) -> Piece:
        """Put a new *piece* on its own square and into its color's roster."""
        sq = piece.square
        if self._squares[sq] is not None:
            raise ValueError(f"Square {square_name(sq)} is occupied")
        color_idx = int(piece.color)
        if piece.is_king and self._kings[color_idx] is not None:
            raise ValueError(f"{piece.color.name} already has a king")
        roster = self._rosters[color_idx]
        self._journal.append(_RosterWrite(piece, len(roster), inserted=True))
        roster.append(piece)
        if piece.is_king:
            self._kings[color_idx] = piece
        self.place(piece, sq)
        return piece

    def promote(self, sq: Square) -> Piece:
        """Replace the piece on *sq* with a queen of the same color."""
        pawn = self._squares[sq]
        if pawn is None:
            raise ValueError(f"No piece on {square_name(sq)}")
        self.remove(sq)
        return self.add(Piece(pawn.color, PieceType.QUEEN, sq, has_moved=True))

    # -- Transactions -------------------------------------------------------

    @property
    def in_transaction(self) -> bool:
        """Whether there are changes since the last commit or rollback."""
        return bool(self._journal)

    def commit(self) -> None:
        """Accept every change since the last commit or rollback."""
        _LOGGER.debug("Committing %d board changes", len(self._journal))
        self._journal.clear()

    def rollback(self) -> None:
        """Revert every change since the last commit or rollback."""
        _LOGGER.debug("Rolling back %d board changes", len(self._journal))
        journal = self._journal
        while journal:
            record = journal.pop()
            if isinstance(record, _SquareWrite):
                self._squares[record.square] = record.previous
            elif isinstance(record, _PieceWrite):
                record.piece.square = record.square
                record.piece.has_moved = record.has_moved
            else:
                self._undo_roster(record)

    def _undo_roster(self, record: _RosterWrite) -> None:
        piece = record.piece
        color_idx = int(piece.color)
        roster = self._rosters[color_idx]
        if record.inserted:
            del roster[record.index]
            if piece.is_king:
                self._kings[color_idx] = None
        else:
            roster.insert(record.index, piece)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Deep copy with fresh pieces and an empty journal."""
        b = Board()
        for color_idx, roster in enumerate(self._rosters):
            for piece in roster:
                clone = piece.clone()
                b._rosters[color_idx].append(clone)
                b._squares[clone.square] = clone
                if clone.is_king:
                    b._kings[color_idx] = clone
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Board:
        """Committed board holding exactly *pieces*."""
        b = cls()
        for piece in pieces:
            b.add(piece)
        b.commit()
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, committed."""
        b = cls()
        for color in Color:
            for f, pt in enumerate(_BACK_RANK):
                b.add(Piece(color, pt, make_square(f, color.home_rank)))
            for f in range(8):
                pawn_sq = make_square(f, color.home_rank + color.forward)
                b.add(Piece(color, PieceType.PAWN, pawn_sq))
        b.commit()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def _state(self) -> tuple[object, ...]:
        def sig(p: Piece | None) -> tuple[int, int, int, bool] | None:
            if p is None:
                return None
            return (p.color, p.piece_type, p.square, p.has_moved)

        return (
            tuple(sig(p) for p in self._squares),
            tuple(tuple(sig(p) for p in roster) for roster in self._rosters),
            tuple(sig(k) for k in self._kings),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  A B C D E F G H")
        return "\n".join(rows)
