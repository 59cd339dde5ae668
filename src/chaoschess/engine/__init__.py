"""Move selection package: strategies, evaluation and Qt worker bridge."""

from chaoschess.engine.chaos import ChaosSession
from chaoschess.engine.evaluation import PIECE_VALUES, evaluate
from chaoschess.engine.minimax import MinimaxSelector
from chaoschess.engine.qt_bridge import SelectorWorker
from chaoschess.engine.random_selector import RandomSelector
from chaoschess.engine.search import (
    IMoveSelector,
    SelectorConfig,
    SelectorResult,
    Strategy,
)
from chaoschess.engine.selector import build_selector, select_move

__all__ = [
    "PIECE_VALUES",
    "ChaosSession",
    "IMoveSelector",
    "MinimaxSelector",
    "RandomSelector",
    "SelectorConfig",
    "SelectorResult",
    "SelectorWorker",
    "Strategy",
    "build_selector",
    "evaluate",
    "select_move",
]
