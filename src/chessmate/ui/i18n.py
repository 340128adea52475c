"""Internationalisation strings for the chessmate console.

Usage::

    from chessmate.ui.i18n import t, set_language

    set_language("Russian")
    print(t().check)                          # "Шах!"
    print(t().won.format(name="Alice"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Setup ────────────────────────────────────────────────────────────
    request_white_player: str
    request_black_player: str

    # ── Turn reports ─────────────────────────────────────────────────────
    request_move: str  # "{name}: Please enter your move:"
    check: str
    illegal_move: str
    won: str  # "{name} won!"
    game_aborted: str

    color_white: str
    color_black: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    request_white_player="Enter white player name:",
    request_black_player="Enter black player name:",
    request_move="{name}: Please enter your move:",
    check="Check!",
    illegal_move="illegal move",
    won="{name} won!",
    game_aborted="Game aborted.",
    color_white="White",
    color_black="Black",
)

_RU = Strings(
    request_white_player="Введите имя игрока белыми:",
    request_black_player="Введите имя игрока чёрными:",
    request_move="{name}: введите ваш ход:",
    check="Шах!",
    illegal_move="недопустимый ход",
    won="{name} победил!",
    game_aborted="Игра прервана.",
    color_white="Белые",
    color_black="Чёрные",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: tuple[str, ...] = tuple(_LOCALES)

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
