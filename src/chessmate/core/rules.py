"""RulesEngine: move legality, check, checkmate and castling.

All trial mutations happen on the board inside a transaction: an accepted
move is committed, a rejected one is rolled back, so the board is never left
half-moved between calls.
"""

from __future__ import annotations

import logging

from chessmate.core.board import Board
from chessmate.core.enums import CastlingSide, Color, PieceType
from chessmate.core.move import Move
from chessmate.core.notation import MoveRequest
from chessmate.core.piece import Piece
from chessmate.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    rank_of,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class RulesEngine:
    """Validates and executes moves for two players sharing one :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()

    @property
    def board(self) -> Board:
        return self._board

    # ── Pseudo-legality ──────────────────────────────────────────────────

    def _is_empty_path(self, path: list[Square]) -> bool:
        return all(self._board.is_empty(sq) for sq in path)

    def is_pseudo_legal(self, piece: Piece, dest: Square) -> bool:
        """Whether *dest* is in *piece*'s shape and the way there is clear.

        Does not look at the safety of the mover's own king.
        """
        if not self._board.is_in_board(dest):
            return False
        occupant = self._board[dest]
        if occupant is not None and occupant.color == piece.color:
            return False
        if not piece.can_reach(dest, is_capture=occupant is not None):
            return False
        return self._is_empty_path(piece.path_to(dest))

    def is_promotion(self, piece: Piece, dest: Square) -> bool:
        return piece.is_pawn and rank_of(dest) == piece.color.promotion_rank

    # ── Check / checkmate ────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        """Whether any enemy piece could pseudo-legally move onto *color*'s king."""
        king_sq = self._board.king(color).square
        return any(
            self.is_pseudo_legal(enemy, king_sq)
            for enemy in self._board.pieces(color.opposite)
        )

    def king_moves(self, square: Square) -> list[Square]:
        """In-board squares one step from *square* in every direction."""
        return [
            sq
            for df, dr in KING_OFFSETS
            if (sq := offset_square(square, df, dr)) is not None
        ]

    def is_in_checkmate(self, color: Color, is_color_in_check: bool) -> bool:
        """Whether *color* is checked and its king has no safe adjacent square.

        Only king moves are tried as escapes; blocking or capturing the
        checking piece with another piece is not considered.
        """
        if not is_color_in_check:
            return False
        self._require_committed()
        king = self._board.king(color)
        origin = king.square
        for dest in self.king_moves(origin):
            occupant = self._board[dest]
            if occupant is not None and occupant.is_king:
                continue
            if not self.is_pseudo_legal(king, dest):
                continue
            self._board.apply_move(origin, dest)
            still_in_check = self.is_in_check(color)
            self._board.rollback()
            if not still_in_check:
                _LOGGER.debug(
                    "%s king escapes check via %s", color.name, square_name(dest)
                )
                return False
        return True

    # ── Moves ────────────────────────────────────────────────────────────

    def move(
        self,
        src: Square,
        dest: Square,
        current_player: Color,
        is_current_in_check: bool,
    ) -> bool:
        """Execute a regular move. Returns True if legal and applied."""
        self._require_committed()
        if not self._board.is_in_board(src):
            return self._reject("source square %d is off the board", src)
        piece = self._board[src]
        if piece is None or piece.color != current_player:
            return self._reject(
                "no %s piece on %s", current_player.name, square_name(src)
            )
        if not self._board.is_in_board(dest):
            return self._reject("destination square %d is off the board", dest)
        if is_current_in_check and not piece.is_king:
            return self._reject("only the king may move out of check")
        if not self.is_pseudo_legal(piece, dest):
            return self._reject(
                "%s cannot reach %s", square_name(src), square_name(dest)
            )
        target = self._board[dest]
        if target is not None and target.is_king:
            return self._reject("kings are never captured")

        promotion = self.is_promotion(piece, dest)
        self._board.apply_move(src, dest)
        if self.is_in_check(current_player):
            self._board.rollback()
            return self._reject(
                "move leaves the %s king in check", current_player.name
            )
        if promotion:
            self._board.promote(dest)
        self._board.commit()
        _LOGGER.debug(
            "Accepted %s%s%s",
            square_name(src),
            square_name(dest),
            " (promotion)" if promotion else "",
        )
        return True

    def _castling_pieces(
        self, side: CastlingSide, current_player: Color
    ) -> tuple[Piece, Piece] | None:
        """King and rook for a pseudo-legal castling, or None."""
        king = self._board.king(current_player)
        if king.has_moved:
            return None
        rook_sq = make_square(side.rook_file, rank_of(king.square))
        rook = self._board[rook_sq]
        if (
            rook is None
            or abs(side.rook_file - file_of(king.square)) < 3
            or rook.piece_type != PieceType.ROOK
            or rook.color != current_player
            or rook.has_moved
        ):
            return None
        if not self._is_empty_path(rook.path_to(king.square)):
            return None
        return king, rook

    def castling(
        self,
        side: CastlingSide,
        current_player: Color,
        is_current_in_check: bool,
    ) -> bool:
        """Execute a castling move. Returns True if legal and applied."""
        self._require_committed()
        pieces = self._castling_pieces(side, current_player)
        if pieces is None:
            return self._reject("castling %s is not available", side.name)
        king, rook = pieces

        # The king may not start from, pass through or land on an attacked square.
        attacked = is_current_in_check
        for _ in range(2):
            step = make_square(file_of(king.square) + int(side), rank_of(king.square))
            self._board.apply_move(king.square, step)
            attacked = attacked or self.is_in_check(current_player)
        if attacked:
            self._board.rollback()
            return self._reject("castling %s crosses an attacked square", side.name)

        rook_dest = make_square(file_of(king.square) - int(side), rank_of(king.square))
        self._board.apply_move(rook.square, rook_dest)
        self._board.commit()
        _LOGGER.debug("Accepted %s castling for %s", side.name, current_player.name)
        return True

    def submit(
        self,
        request: MoveRequest,
        current_player: Color,
        is_current_in_check: bool,
    ) -> bool:
        """Execute a parsed move request of either kind."""
        if isinstance(request, CastlingSide):
            return self.castling(request, current_player, is_current_in_check)
        assert isinstance(request, Move)
        return self.move(
            request.from_sq, request.to_sq, current_player, is_current_in_check
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _require_committed(self) -> None:
        if self._board.in_transaction:
            raise RuntimeError("Board has uncommitted changes")

    @staticmethod
    def _reject(reason: str, *args: object) -> bool:
        _LOGGER.debug("Rejected: " + reason, *args)
        return False
