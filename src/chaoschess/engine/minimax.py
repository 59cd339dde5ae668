"""Pure-Python fixed-depth minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging

from chaoschess.core.enums import Color, GameOverReason
from chaoschess.core.move import MoveChoice
from chaoschess.core.rules import Rules
from chaoschess.core.state import GameState
from chaoschess.engine.evaluation import evaluate
from chaoschess.engine.search import IMoveSelector, SelectorResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
MATE_SCORE = 100_000


class MinimaxSelector(IMoveSelector):
    """Classical minimax searcher, scores always from White's side.

    Every node is a separate state returned by ``Rules.apply_move``, so no
    two branches share a board. Results are deterministic: root moves are
    visited in generation order and the first best one wins ties.
    """

    __slots__ = ("_depth", "_nodes")

    def __init__(self, depth: int = 4) -> None:
        if depth <= 0:
            raise ValueError("Search depth must be >= 1")
        self._depth = depth
        self._nodes = 0

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def nodes(self) -> int:
        """Nodes visited by the most recent :meth:`select` call."""
        return self._nodes

    def select(self, state: GameState) -> SelectorResult:
        self._nodes = 0
        root_moves = Rules.all_legal_moves(state)
        if not root_moves:
            return SelectorResult(None)

        score, choice = self._search_root(state, root_moves)
        _LOGGER.debug(
            "Search depth %d picked %s (score %d, %d nodes)",
            self._depth,
            choice,
            score,
            self._nodes,
        )
        return SelectorResult(choice, score=score, nodes=self._nodes)

    def _search_root(
        self,
        state: GameState,
        root_moves: list[MoveChoice],
    ) -> tuple[int, MoveChoice | None]:
        maximizing = state.turn == Color.WHITE
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        best_move: MoveChoice | None = None
        alpha = -_INF_SCORE
        beta = _INF_SCORE

        for choice in root_moves:
            child = self._child(state, choice)
            score = self._minimax(child, self._depth - 1, alpha, beta)
            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = choice
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score = score
                    best_move = choice
                beta = min(beta, score)

        return best_score, best_move

    def _minimax(self, state: GameState, depth: int, alpha: int, beta: int) -> int:
        self._nodes += 1

        if state.game_over:
            mated = state.reason == GameOverReason.CHECKMATE
            return self._terminal_score(state, depth, mated)
        if depth <= 0:
            return evaluate(state)

        moves = Rules.all_legal_moves(state)
        if not moves:
            mated = Rules.is_in_check(state, state.turn)
            return self._terminal_score(state, depth, mated)

        if state.turn == Color.WHITE:
            best = -_INF_SCORE
            for choice in self._order_moves(moves):
                child = self._child(state, choice)
                score = self._minimax(child, depth - 1, alpha, beta)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for choice in self._order_moves(moves):
            child = self._child(state, choice)
            score = self._minimax(child, depth - 1, alpha, beta)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best

    def _terminal_score(self, state: GameState, depth: int, mated: bool) -> int:
        if not mated:
            return 0
        # More depth left means the mate came sooner.
        score = MATE_SCORE + depth
        return -score if state.turn == Color.WHITE else score

    def _order_moves(self, moves: list[MoveChoice]) -> list[MoveChoice]:
        # Captures first; sort is stable so the rest keep generation order.
        return sorted(moves, key=lambda choice: not choice.move.capture)

    def _child(self, state: GameState, choice: MoveChoice) -> GameState:
        child, _ = Rules.apply_move(
            state, choice.from_sq, choice.move.to_sq, choice.move.promotion
        )
        return child
