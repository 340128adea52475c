"""Game management layer: session, players, state machine.

Quick start::

    from chessmate.core import Color
    from chessmate.game import GameSession, ScriptedPlayer

    session = GameSession()
    session.new_game(
        white=ScriptedPlayer(Color.WHITE, ["F2F3", "G2G4"]),
        black=ScriptedPlayer(Color.BLACK, ["E7E5", "D8H4"]),
    )
    session.run()
"""

from chessmate.game.interfaces import GamePhase, IGameSession, IPlayer
from chessmate.game.player import HumanPlayer, ScriptedPlayer
from chessmate.game.session import GameEvents, GameSession
from chessmate.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameSession",
    "IPlayer",
    # Concrete
    "GameEvents",
    "GameSession",
    "GameState",
    "HumanPlayer",
    "ScriptedPlayer",
]
