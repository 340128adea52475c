"""GameSession: the turn loop of a two-player chess game.

Coordinates: Players, GameState, RulesEngine.
Emits events via simple callbacks so the front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameResult
from chessmate.core.notation import MoveRequest, format_move, parse_move
from chessmate.core.rules import RulesEngine
from chessmate.game.interfaces import GamePhase, IGameSession, IPlayer
from chessmate.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TurnStartCallback = Callable[[Color, bool], None]  # side to move, in check
MoveCallback = Callable[[MoveRequest, Color], None]  # request, mover
IllegalMoveCallback = Callable[[str, Color], None]  # raw text, mover
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn_start: list[TurnStartCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_illegal_move: list[IllegalMoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Runs a full chess game: asks players for moves, validates them,
    switches turns, detects check and checkmate, notifies listeners.

    Single-threaded: every call blocks until the current player answers.
    """

    __slots__ = ("_state", "_engine", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._engine = RulesEngine()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def engine(self) -> RulesEngine:
        return self._engine

    @property
    def board(self) -> Board:
        return self._engine.board

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameSession impl ────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._engine = RulesEngine(board)
        self._state = GameState()
        self._state.setup()
        self._state.in_check = self._engine.is_in_check(Color.WHITE)
        _LOGGER.info("New game: %s (white) vs %s (black)", white.name, black.name)
        self._begin_turn()

    def submit_move(self, text: str) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False

        color = self._state.side_to_move
        request = parse_move(text)
        if request is None or not self._engine.submit(
            request, color, self._state.in_check
        ):
            _LOGGER.info("Illegal move from %s: %r", color.name, text)
            self._emit_illegal_move(text, color)
            return False

        _LOGGER.info("%s played %s", color.name, format_move(request))
        self._emit_move(request, color)

        opponent = color.opposite
        in_check = self._engine.is_in_check(opponent)
        if in_check:
            _LOGGER.info("%s is in check", opponent.name)
        self._state.advance(in_check)
        self._begin_turn()
        return True

    def play_turn(self) -> None:
        if self._state.is_game_over:
            return
        player = self.current_player
        if player is None:
            raise RuntimeError("No game in progress")
        while not self.submit_move(player.request_move(self.board)):
            pass

    def run(self) -> GameResult:
        while not self._state.is_game_over:
            self.play_turn()
        return self._state.result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _begin_turn(self) -> None:
        """Announce the next turn, or end the game if the mover is mated."""
        color = self._state.side_to_move
        if self._engine.is_in_checkmate(color, self._state.in_check):
            _LOGGER.info("%s is checkmated", color.name)
            self._state.declare_checkmate(color)
            self._emit_game_over(self._state.result)
            return
        self._emit_turn_start(color, self._state.in_check)

    def _emit_turn_start(self, color: Color, in_check: bool) -> None:
        for cb in self.events.on_turn_start:
            cb(color, in_check)

    def _emit_move(self, request: MoveRequest, color: Color) -> None:
        for cb in self.events.on_move:
            cb(request, color)

    def _emit_illegal_move(self, text: str, color: Color) -> None:
        for cb in self.events.on_illegal_move:
            cb(text, color)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
