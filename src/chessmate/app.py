"""Application entry point."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console

from chessmate import __version__
from chessmate.core.enums import Color
from chessmate.game.player import HumanPlayer
from chessmate.game.session import GameSession
from chessmate.ui.console import ConsoleView
from chessmate.ui.i18n import set_language, t
from chessmate.ui.settings import AppSettings
from chessmate.ui.theme import theme_by_name

_LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="chessmate",
    help="Two-player chess in the terminal.",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def run_application(
    settings: AppSettings,
    white: Optional[str] = None,
    black: Optional[str] = None,
    console: Optional[Console] = None,
) -> int:
    """Ask for player names (unless given) and play one game."""
    _configure_logging(settings.log_level)
    set_language(settings.language)

    session = GameSession()
    view = ConsoleView(
        session,
        console or Console(highlight=False, no_color=not settings.use_color),
        theme=theme_by_name(settings.board_theme),
        show_coordinates=settings.show_coordinates,
        use_glyphs=settings.use_glyphs,
        use_color=settings.use_color,
    )
    try:
        white_name = white or view.ask_name(t().request_white_player)
        black_name = black or view.ask_name(t().request_black_player)
        session.new_game(
            HumanPlayer(Color.WHITE, white_name, view.read_move),
            HumanPlayer(Color.BLACK, black_name, view.read_move),
        )
        result = session.run()
    except (EOFError, KeyboardInterrupt):
        _LOGGER.info("Input ended before the game was decided")
        view.console.print(t().game_aborted)
        return 0
    _LOGGER.info("Game over: %s", result.name)
    return 0


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"chessmate {__version__}")
        raise typer.Exit()


@app.command()
def main(
    white: Optional[str] = typer.Option(None, "--white", help="White player name"),
    black: Optional[str] = typer.Option(None, "--black", help="Black player name"),
    language: Optional[str] = typer.Option(
        None, "--language", "-l", help="UI language (English, Russian)"
    ),
    theme: Optional[str] = typer.Option(
        None, "--theme", help="Board theme (Classic, Walnut, Slate)"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Plain text output"),
    ascii_pieces: bool = typer.Option(
        False, "--ascii", help="Draw pieces as letters instead of glyphs"
    ),
    no_coordinates: bool = typer.Option(
        False, "--no-coordinates", help="Hide file and rank labels"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level written to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print version information and exit.",
    ),
) -> None:
    """Play a game of chess between two people at one terminal."""
    env = AppSettings.from_env()
    settings = AppSettings(
        language=language or env.language,
        log_level=log_level.upper() if log_level else env.log_level,
        board_theme=theme or env.board_theme,
        show_coordinates=env.show_coordinates and not no_coordinates,
        use_color=env.use_color and not no_color,
        use_glyphs=env.use_glyphs and not ascii_pieces,
    )
    raise typer.Exit(run_application(settings, white, black))


if __name__ == "__main__":
    app()
