"""Game management layer: controller and state machine.

Quick start::

    from chaoschess.game import GameController
    from chaoschess.engine import SelectorConfig, Strategy

    ctrl = GameController(SelectorConfig(strategy=Strategy.CHAOS))
    ctrl.new_game()
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
    ctrl.play_bot_move()
"""

from chaoschess.game.controller import GameController, GameEvents
from chaoschess.game.interfaces import GameEndReason, GamePhase, IGameController

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
]
