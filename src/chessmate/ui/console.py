"""Console front end: board rendering and turn reports via rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from chessmate.core.enums import Color, GameResult
from chessmate.core.types import BOARD_SIZE, FILES, RANKS, make_square
from chessmate.ui.i18n import t
from chessmate.ui.theme import ConsoleTheme

if TYPE_CHECKING:
    from chessmate.core.board import Board
    from chessmate.game.interfaces import IPlayer
    from chessmate.game.session import GameSession

_BANNER_STYLE = "white on red"


def render_board(
    board: Board,
    theme: ConsoleTheme | None = None,
    *,
    show_coordinates: bool = True,
    use_glyphs: bool = True,
    use_color: bool = True,
) -> Text:
    """Render *board* with rank 8 on top.

    Without colour the pieces are drawn as letters (upper-case white,
    lower-case black) and empty squares as dots, since glyph colour and
    square shading are both lost.
    """
    theme = theme or ConsoleTheme.classic()
    glyphs = use_glyphs and use_color
    text = Text()

    def file_labels() -> None:
        style = theme.coordinates if use_color else None
        text.append("  " + FILES + "\n", style=style)

    if show_coordinates:
        file_labels()
        text.append("\n")

    for rank in range(BOARD_SIZE - 1, -1, -1):
        if show_coordinates:
            text.append(RANKS[rank] + " ")
        for file in range(BOARD_SIZE):
            piece = board[make_square(file, rank)]
            if piece is None:
                cell = " " if use_color else "."
            else:
                cell = piece.symbol if glyphs else piece.letter
            if not use_color:
                text.append(cell)
                continue
            square_style = (
                theme.dark_square if (file + rank) % 2 == 0 else theme.light_square
            )
            if piece is not None:
                fg = (
                    theme.white_piece
                    if piece.color == Color.WHITE
                    else theme.black_piece
                )
                square_style = f"{fg} {square_style}"
            text.append(cell, style=square_style)
        if show_coordinates:
            text.append(" " + RANKS[rank])
        text.append("\n")

    if show_coordinates:
        text.append("\n")
        file_labels()
    return text


class ConsoleView:
    """Prints a :class:`GameSession`'s progress and reads players' input."""

    __slots__ = (
        "_session",
        "_console",
        "_theme",
        "_show_coordinates",
        "_use_glyphs",
        "_use_color",
    )

    def __init__(
        self,
        session: GameSession,
        console: Console | None = None,
        *,
        theme: ConsoleTheme | None = None,
        show_coordinates: bool = True,
        use_glyphs: bool = True,
        use_color: bool = True,
    ) -> None:
        self._session = session
        self._console = console or Console(highlight=False, no_color=not use_color)
        self._theme = theme or ConsoleTheme.classic()
        self._show_coordinates = show_coordinates
        self._use_glyphs = use_glyphs
        self._use_color = use_color

        events = session.events
        events.on_turn_start.append(self._on_turn_start)
        events.on_illegal_move.append(self._on_illegal_move)
        events.on_game_over.append(self._on_game_over)

    @property
    def console(self) -> Console:
        return self._console

    # ── Input ────────────────────────────────────────────────────────────

    def ask_name(self, prompt: str) -> str:
        self._console.print(prompt)
        return self._console.input().strip()

    def read_move(self, player: IPlayer) -> str:
        self._console.print(t().request_move.format(name=player.name))
        return self._console.input().strip()

    # ── Output ───────────────────────────────────────────────────────────

    def show_board(self) -> None:
        self._console.print(
            render_board(
                self._session.board,
                self._theme,
                show_coordinates=self._show_coordinates,
                use_glyphs=self._use_glyphs,
                use_color=self._use_color,
            ),
            end="",
        )

    def _banner(self, message: str) -> None:
        style = _BANNER_STYLE if self._use_color else ""
        self._console.print(Text(message, style=style))

    def _on_turn_start(self, color: Color, in_check: bool) -> None:
        self.show_board()
        if in_check:
            self._banner(t().check)

    def _on_illegal_move(self, text: str, color: Color) -> None:
        self._banner(t().illegal_move)

    def _on_game_over(self, result: GameResult) -> None:
        self.show_board()
        winner = self._session.state.winner
        if winner is None:
            return
        player = self._session.player(winner)
        name = player.name if player is not None else _color_name(winner)
        self._console.print(t().won.format(name=name))


def _color_name(color: Color) -> str:
    return t().color_white if color == Color.WHITE else t().color_black
