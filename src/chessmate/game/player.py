"""Concrete player implementations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Callable

from chessmate.core.enums import Color
from chessmate.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessmate.core.board import Board


class HumanPlayer(IPlayer):
    """A human participant typing moves into a front end.

    Args:
        color: Side the player plays.
        name: Display name.
        read_move: ``(HumanPlayer) -> str``: reads one move token from the
            front end. Defaults to :func:`input`.
    """

    __slots__ = ("_color", "_name", "_read_move")

    def __init__(
        self,
        color: Color,
        name: str = "",
        read_move: Callable[[HumanPlayer], str] | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"Player ({color})"
        self._read_move = read_move

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def request_move(self, board: Board) -> str:
        if self._read_move is None:
            return input()
        return self._read_move(self)


class ScriptedPlayer(IPlayer):
    """Replays a fixed sequence of move tokens.

    Raises :class:`EOFError` once the script is exhausted, like :func:`input`
    at the end of a stream.
    """

    __slots__ = ("_color", "_name", "_moves")

    def __init__(self, color: Color, moves: Iterable[str], name: str = "") -> None:
        self._color = color
        self._name = name or f"Script ({color})"
        self._moves = iter(moves)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def request_move(self, board: Board) -> str:
        try:
            return next(self._moves)
        except StopIteration:
            raise EOFError(f"{self._name} has no moves left") from None
