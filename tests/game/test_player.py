"""Tests for player implementations."""

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.game.interfaces import IPlayer
from chessmate.game.player import HumanPlayer, ScriptedPlayer


class TestHumanPlayer:
    def test_is_player(self) -> None:
        assert isinstance(HumanPlayer(Color.WHITE), IPlayer)

    def test_properties(self) -> None:
        player = HumanPlayer(Color.BLACK, "Alice")
        assert player.color == Color.BLACK
        assert player.name == "Alice"

    def test_default_name(self) -> None:
        assert HumanPlayer(Color.WHITE).name == "Player (white)"
        assert HumanPlayer(Color.BLACK).name == "Player (black)"

    def test_reads_through_callback(self) -> None:
        seen: list[HumanPlayer] = []

        def read(player: HumanPlayer) -> str:
            seen.append(player)
            return "E2E4"

        player = HumanPlayer(Color.WHITE, "Alice", read)
        assert player.request_move(Board.initial()) == "E2E4"
        assert seen == [player]

    def test_defaults_to_input(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("builtins.input", lambda *args: "o-o")
        assert HumanPlayer(Color.WHITE).request_move(Board.initial()) == "o-o"


class TestScriptedPlayer:
    def test_replays_in_order(self) -> None:
        player = ScriptedPlayer(Color.WHITE, ["E2E4", "G1F3"])
        board = Board.initial()
        assert player.request_move(board) == "E2E4"
        assert player.request_move(board) == "G1F3"

    def test_exhausted_script_raises_eof(self) -> None:
        player = ScriptedPlayer(Color.BLACK, [])
        with pytest.raises(EOFError):
            player.request_move(Board.initial())

    def test_default_name(self) -> None:
        assert ScriptedPlayer(Color.BLACK, []).name == "Script (black)"
