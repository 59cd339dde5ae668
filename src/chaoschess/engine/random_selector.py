"""Random-move opponent that sometimes stumbles into a capture."""

from __future__ import annotations

import logging
import random

from chaoschess.core.rules import Rules
from chaoschess.core.state import GameState
from chaoschess.engine.search import IMoveSelector, SelectorResult

_LOGGER = logging.getLogger(__name__)


class RandomSelector(IMoveSelector):
    """Uniform random over legal moves.

    With probability *capture_bias* the pool is first narrowed to captures,
    if there are any.
    """

    __slots__ = ("_capture_bias", "_rng")

    def __init__(
        self,
        capture_bias: float = 0.1,
        rng: random.Random | None = None,
    ) -> None:
        self._capture_bias = capture_bias
        self._rng = rng or random.Random()

    def select(self, state: GameState) -> SelectorResult:
        moves = Rules.all_legal_moves(state)
        if not moves:
            return SelectorResult(None)

        pool = moves
        if self._rng.random() < self._capture_bias:
            captures = [c for c in moves if c.move.capture]
            if captures:
                pool = captures

        choice = self._rng.choice(pool)
        _LOGGER.debug("Random pick %s from %d candidates", choice, len(pool))
        return SelectorResult(choice)
