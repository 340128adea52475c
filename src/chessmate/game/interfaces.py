"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameSession depends on these
ABCs, not on concrete player or front-end implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessmate.core.enums import Color, GameResult

if TYPE_CHECKING:
    from chessmate.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant that supplies move text."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def request_move(self, board: Board) -> str:
        """Return the next move token, e.g. ``"E2E4"`` or ``"o-o"``.

        Raises:
            EOFError: No more input is available.
        """


class IGameSession(ABC):
    """Interface for the turn loop."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, text: str) -> bool:
        """Submit move text for the side to move. Returns True if applied."""

    @abstractmethod
    def play_turn(self) -> None:
        """Ask the side to move for moves until one is accepted."""

    @abstractmethod
    def run(self) -> GameResult:
        """Play turns until the game is over."""
