"""Tests for localised strings."""

from chessmate.ui.i18n import LANGUAGES, set_language, t


class TestI18n:
    def test_default_is_english(self) -> None:
        assert t().check == "Check!"
        assert t().won.format(name="Alice") == "Alice won!"

    def test_switch_to_russian(self) -> None:
        set_language("Russian")
        assert t().check == "Шах!"

    def test_unknown_language_falls_back(self) -> None:
        set_language("Klingon")
        assert t().illegal_move == "illegal move"

    def test_languages(self) -> None:
        assert LANGUAGES == ("English", "Russian")

    def test_placeholders_in_every_locale(self) -> None:
        for language in LANGUAGES:
            set_language(language)
            assert "{name}" in t().request_move
            assert "{name}" in t().won
