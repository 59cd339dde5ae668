"""Strategy dispatch: one entry point for every computer opponent."""

from __future__ import annotations

import random

from chaoschess.core.state import GameState
from chaoschess.engine.chaos import ChaosSession
from chaoschess.engine.minimax import MinimaxSelector
from chaoschess.engine.random_selector import RandomSelector
from chaoschess.engine.search import (
    IMoveSelector,
    SelectorConfig,
    SelectorResult,
    Strategy,
)


def build_selector(
    config: SelectorConfig,
    chaos: ChaosSession | None = None,
    rng: random.Random | None = None,
) -> IMoveSelector:
    """Return the selector *config* asks for.

    Chaos mode has no selector of its own; the caller-owned *chaos* session
    is returned as-is.
    """
    if config.strategy is Strategy.SEARCH:
        return MinimaxSelector(depth=config.depth)
    if config.strategy is Strategy.CHAOS:
        if chaos is None:
            raise ValueError("Chaos strategy requires a ChaosSession")
        return chaos
    return RandomSelector(capture_bias=config.capture_bias, rng=rng)


def select_move(
    state: GameState,
    config: SelectorConfig,
    chaos: ChaosSession | None = None,
    rng: random.Random | None = None,
) -> SelectorResult:
    """Pick a move for ``state.turn``; the result never raises for "no move"."""
    return build_selector(config, chaos, rng).select(state)
