"""Game state machine: tracks phase, side to move and outcome."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessmate.core.enums import Color, GameResult
from chessmate.game.interfaces import GamePhase


@dataclass
class GameState:
    """Manages game lifecycle: phase, turn, check flag and result.

    This is a pure data/logic class: no I/O. No move history is kept;
    ``turn`` only counts accepted moves.
    """

    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    in_check: bool = field(default=False, init=False)
    turn: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.side_to_move = side_to_move
        self.in_check = False
        self.turn = 0

    # ── Transitions ──────────────────────────────────────────────────────

    def advance(self, in_check: bool) -> None:
        """Hand the move to the other side after an accepted move."""
        self.side_to_move = self.side_to_move.opposite
        self.in_check = in_check
        self.turn += 1

    def declare_checkmate(self, color: Color) -> None:
        """*color* is checkmated; the other side wins."""
        self.result = GameResult.won_by(color.opposite)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None
