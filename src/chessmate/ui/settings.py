"""User-configurable console settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    use_color: bool = True
    use_glyphs: bool = True

    def with_env(self, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Copy overlaid with ``CHESSMATE_*`` / ``NO_COLOR`` variables."""
        env = os.environ if environ is None else environ
        changes: dict[str, object] = {}
        if "CHESSMATE_LANGUAGE" in env:
            changes["language"] = env["CHESSMATE_LANGUAGE"]
        if "CHESSMATE_THEME" in env:
            changes["board_theme"] = env["CHESSMATE_THEME"]
        if "CHESSMATE_LOG_LEVEL" in env:
            changes["log_level"] = env["CHESSMATE_LOG_LEVEL"].upper()
        # https://no-color.org: any non-empty value disables colour.
        if env.get("NO_COLOR") or (
            env.get("CHESSMATE_NO_COLOR", "").lower() in _TRUE_VALUES
        ):
            changes["use_color"] = False
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        return cls().with_env(environ)
