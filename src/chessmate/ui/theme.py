"""Colour schemes for the console board (rich style strings)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConsoleTheme:
    """Colour scheme for the chessboard."""

    light_square: str  # background style
    dark_square: str
    white_piece: str  # foreground style
    black_piece: str
    coordinates: str

    @classmethod
    def classic(cls) -> ConsoleTheme:
        """Green and cyan ANSI squares; works on any 8-colour terminal."""
        return cls(
            light_square="on cyan",
            dark_square="on green",
            white_piece="bold white",
            black_piece="bold black",
            coordinates="default",
        )

    @classmethod
    def walnut(cls) -> ConsoleTheme:
        return cls(
            light_square="on rgb(228,210,184)",
            dark_square="on rgb(118,74,47)",
            white_piece="bold rgb(255,255,255)",
            black_piece="bold rgb(0,0,0)",
            coordinates="rgb(181,136,99)",
        )

    @classmethod
    def slate(cls) -> ConsoleTheme:
        return cls(
            light_square="on rgb(222,227,230)",
            dark_square="on rgb(140,162,173)",
            white_piece="bold rgb(250,250,250)",
            black_piece="bold rgb(20,20,20)",
            coordinates="rgb(140,162,173)",
        )


THEMES: dict[str, ConsoleTheme] = {
    "Classic": ConsoleTheme.classic(),
    "Walnut": ConsoleTheme.walnut(),
    "Slate": ConsoleTheme.slate(),
}


def theme_by_name(name: str) -> ConsoleTheme:
    """Theme called *name* (case-insensitive); unknown names give Classic."""
    for key, theme in THEMES.items():
        if key.lower() == name.lower():
            return theme
    return THEMES["Classic"]
