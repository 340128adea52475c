"""Console front end: rendering, localized strings, settings."""

from chessmate.ui.console import ConsoleView, render_board
from chessmate.ui.i18n import set_language, t
from chessmate.ui.settings import AppSettings
from chessmate.ui.theme import ConsoleTheme, theme_by_name

__all__ = [
    "AppSettings",
    "ConsoleTheme",
    "ConsoleView",
    "render_board",
    "set_language",
    "t",
    "theme_by_name",
]
