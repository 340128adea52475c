"""Tests for GameSession: turn loop, events, checkmate."""

from collections.abc import Callable

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import CastlingSide, Color, GameResult
from chessmate.core.move import Move
from chessmate.core.types import E1, E2, E4, E8, G1, H4
from chessmate.game.interfaces import GamePhase, IGameSession
from chessmate.game.player import HumanPlayer, ScriptedPlayer
from chessmate.game.session import GameSession

BoardFactory = Callable[..., Board]

FOOLS_MATE_WHITE = ["F2F3", "G2G4"]
FOOLS_MATE_BLACK = ["E7E5", "D8H4"]


def _make_session(
    white_moves: list[str] | None = None,
    black_moves: list[str] | None = None,
) -> GameSession:
    session = GameSession()
    session.new_game(
        ScriptedPlayer(Color.WHITE, white_moves or [], "W"),
        ScriptedPlayer(Color.BLACK, black_moves or [], "B"),
    )
    return session


class TestNewGame:
    def test_is_session(self) -> None:
        assert isinstance(GameSession(), IGameSession)

    def test_not_started(self) -> None:
        session = GameSession()
        assert session.state.phase == GamePhase.NOT_STARTED
        assert session.current_player is None

    def test_phase_and_players(self) -> None:
        session = _make_session()
        assert session.state.phase == GamePhase.AWAITING_MOVE
        assert session.state.side_to_move == Color.WHITE
        assert session.current_player is session.player(Color.WHITE)
        assert session.player(Color.BLACK).name == "B"

    def test_initial_board(self) -> None:
        session = _make_session()
        assert session.board[E1].is_king
        assert not session.board.in_transaction

    def test_turn_start_emitted(self) -> None:
        session = GameSession()
        starts: list[tuple[Color, bool]] = []
        session.events.on_turn_start.append(lambda c, chk: starts.append((c, chk)))
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, [])
        )
        assert starts == [(Color.WHITE, False)]

    def test_custom_board_in_check(self, make_board: BoardFactory) -> None:
        board = make_board({"E1": "K", "E8": "r", "A8": "k"})
        session = GameSession()
        starts: list[tuple[Color, bool]] = []
        session.events.on_turn_start.append(lambda c, chk: starts.append((c, chk)))
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, []), board
        )
        assert session.state.in_check
        assert starts == [(Color.WHITE, True)]

    def test_custom_board_already_mated(self, make_board: BoardFactory) -> None:
        board = make_board({"A1": "K", "H1": "r", "H2": "r", "E8": "k"})
        session = GameSession()
        results: list[GameResult] = []
        session.events.on_game_over.append(results.append)
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, []), board
        )
        assert session.state.is_game_over
        assert results == [GameResult.BLACK_WINS]

    def test_custom_board_with_adjacent_kings(self, make_board: BoardFactory) -> None:
        board = make_board({"E1": "K", "E2": "k"})
        session = GameSession()
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, []), board
        )
        assert session.state.is_game_over
        assert session.state.result == GameResult.BLACK_WINS

    def test_new_game_resets(self) -> None:
        session = _make_session(["E2E4"])
        assert session.submit_move("E2E4")
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, [])
        )
        assert session.state.side_to_move == Color.WHITE
        assert session.state.turn == 0
        assert session.board[E2] is not None


class TestSubmitMove:
    def test_legal_move_switches_side(self) -> None:
        session = _make_session()
        assert session.submit_move("E2E4")
        assert session.state.side_to_move == Color.BLACK
        assert session.state.turn == 1
        assert session.board[E4] is not None

    def test_move_event(self) -> None:
        session = _make_session()
        moves: list[tuple[object, Color]] = []
        session.events.on_move.append(lambda m, c: moves.append((m, c)))
        session.submit_move("E2E4")
        assert moves == [(Move(E2, E4), Color.WHITE)]

    def test_illegal_move_keeps_side(self) -> None:
        session = _make_session()
        illegal: list[tuple[str, Color]] = []
        session.events.on_illegal_move.append(lambda t, c: illegal.append((t, c)))
        assert not session.submit_move("E2E5")
        assert session.state.side_to_move == Color.WHITE
        assert illegal == [("E2E5", Color.WHITE)]

    def test_malformed_text_is_illegal(self) -> None:
        session = _make_session()
        illegal: list[tuple[str, Color]] = []
        session.events.on_illegal_move.append(lambda t, c: illegal.append((t, c)))
        assert not session.submit_move("hello")
        assert illegal == [("hello", Color.WHITE)]

    def test_cannot_move_opponent_piece(self) -> None:
        session = _make_session()
        assert not session.submit_move("E7E5")

    def test_castling_text(self, make_board: BoardFactory) -> None:
        board = make_board({"E1": "K", "H1": "R", "E8": "k"})
        session = GameSession()
        moves: list[object] = []
        session.events.on_move.append(lambda m, c: moves.append(m))
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, []), board
        )
        assert session.submit_move("o-o")
        assert session.board[G1].is_king
        assert moves == [CastlingSide.KINGSIDE]

    def test_check_is_reported_to_next_turn(self, make_board: BoardFactory) -> None:
        board = make_board({"A1": "K", "D1": "R", "E8": "k"})
        session = GameSession()
        starts: list[tuple[Color, bool]] = []
        session.events.on_turn_start.append(lambda c, chk: starts.append((c, chk)))
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, []), board
        )
        assert session.submit_move("D1E1")
        assert session.state.in_check
        assert starts[-1] == (Color.BLACK, True)

    def test_in_check_only_king_may_move(self, make_board: BoardFactory) -> None:
        board = make_board({"A1": "K", "E1": "R", "E8": "k", "A7": "p"})
        session = GameSession()
        session.new_game(
            ScriptedPlayer(Color.WHITE, []), ScriptedPlayer(Color.BLACK, []), board
        )
        assert session.submit_move("A1B1")
        assert session.state.in_check
        assert not session.submit_move("A7A6")
        assert session.submit_move("E8D8")


class TestCheckmate:
    def test_fools_mate(self) -> None:
        session = _make_session()
        results: list[GameResult] = []
        session.events.on_game_over.append(results.append)
        for white, black in zip(FOOLS_MATE_WHITE, FOOLS_MATE_BLACK):
            assert session.submit_move(white)
            assert session.submit_move(black)
        assert session.state.is_game_over
        assert session.state.result == GameResult.BLACK_WINS
        assert session.state.winner == Color.BLACK
        assert results == [GameResult.BLACK_WINS]
        assert session.board[H4] is not None

    def test_no_moves_after_game_over(self) -> None:
        session = _make_session()
        for white, black in zip(FOOLS_MATE_WHITE, FOOLS_MATE_BLACK):
            session.submit_move(white)
            session.submit_move(black)
        assert not session.submit_move("E2E4")

    def test_mate_suppresses_turn_start(self) -> None:
        session = _make_session()
        starts: list[Color] = []
        session.events.on_turn_start.append(lambda c, chk: starts.append(c))
        for white, black in zip(FOOLS_MATE_WHITE, FOOLS_MATE_BLACK):
            session.submit_move(white)
            session.submit_move(black)
        assert len(starts) == 3


class TestTurnLoop:
    def test_run_scripted_game(self) -> None:
        session = _make_session(FOOLS_MATE_WHITE, FOOLS_MATE_BLACK)
        assert session.run() == GameResult.BLACK_WINS

    def test_play_turn_retries_illegal_input(self) -> None:
        session = _make_session(["E2E5", "nonsense", "E2E4"])
        illegal: list[str] = []
        session.events.on_illegal_move.append(lambda t, c: illegal.append(t))
        session.play_turn()
        assert illegal == ["E2E5", "nonsense"]
        assert session.state.side_to_move == Color.BLACK

    def test_play_turn_after_game_over_is_noop(self) -> None:
        session = _make_session(FOOLS_MATE_WHITE, FOOLS_MATE_BLACK)
        session.run()
        session.play_turn()
        assert session.state.result == GameResult.BLACK_WINS

    def test_play_turn_without_game(self) -> None:
        with pytest.raises(RuntimeError):
            GameSession().play_turn()

    def test_end_of_input_propagates(self) -> None:
        session = _make_session(["E2E4"], [])
        with pytest.raises(EOFError):
            session.run()
        assert session.state.phase == GamePhase.AWAITING_MOVE
        assert session.state.side_to_move == Color.BLACK

    def test_human_player_callback(self) -> None:
        asked: list[str] = []
        replies = iter(["E2E4"])

        def read(player: HumanPlayer) -> str:
            asked.append(player.name)
            return next(replies)

        session = GameSession()
        session.new_game(
            HumanPlayer(Color.WHITE, "Alice", read),
            HumanPlayer(Color.BLACK, "Bob", read),
        )
        session.play_turn()
        assert asked == ["Alice"]
        assert session.board[E8].is_king
