"""GameController: the central orchestrator of a human-vs-bot game.

Coordinates: GameState, Rules, the move selector and the chaos session.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chaoschess.core.enums import Color, GameOverReason, GameResult, PieceType
from chaoschess.core.move import MoveRecord
from chaoschess.core.notation import move_to_san, state_from_fen
from chaoschess.core.rules import IllegalMoveError, Rules
from chaoschess.core.state import GameState
from chaoschess.core.types import Square
from chaoschess.engine.chaos import ChaosSession
from chaoschess.engine.search import SelectorConfig, SelectorResult, Strategy
from chaoschess.engine.selector import select_move
from chaoschess.game.interfaces import GameEndReason, GamePhase, IGameController

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, str, GameState], None]  # record, san, state
GameOverCallback = Callable[[GameResult, GameEndReason], None]
CommentCallback = Callable[[str], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_comment: list[CommentCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a human-vs-bot game: validates the human's moves, asks
    the selector on the bot's turns, notifies listeners.

    Thread-safety: call from a single thread (the main/UI thread). A
    ``SelectorWorker`` result is handed back through :meth:`apply_bot_result`.
    """

    __slots__ = (
        "_state",
        "_phase",
        "_human_color",
        "_config",
        "_chaos",
        "_rng",
        "_winner",
        "_end_reason",
        "events",
    )

    def __init__(
        self,
        config: SelectorConfig | None = None,
        human_color: Color = Color.WHITE,
        *,
        rng: random.Random | None = None,
        chaos: ChaosSession | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._state = GameState.initial()
        self._phase = GamePhase.NOT_STARTED
        self._human_color = human_color
        self._config = config or SelectorConfig()
        self._chaos = chaos or ChaosSession(self._rng)
        self._winner: GameResult | None = None
        self._end_reason: GameEndReason | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def config(self) -> SelectorConfig:
        return self._config

    @property
    def chaos(self) -> ChaosSession:
        return self._chaos

    @property
    def human_color(self) -> Color:
        return self._human_color

    @property
    def bot_color(self) -> Color:
        return self._human_color.opposite

    @property
    def winner(self) -> GameResult | None:
        """Who won, as decided by the rules or by chaos mode."""
        return self._winner

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def is_chaos(self) -> bool:
        return self._config.strategy is Strategy.CHAOS

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        human_color: Color | None = None,
        config: SelectorConfig | None = None,
        fen: str | None = None,
    ) -> None:
        if human_color is not None:
            self._human_color = human_color
        if config is not None:
            self._config = config

        self._state = state_from_fen(fen) if fen else GameState.initial()
        self._winner = None
        self._end_reason = None
        _LOGGER.info(
            "New game: human plays %s, bot strategy %s",
            self._human_color,
            self._config.strategy.value,
        )

        if self.is_chaos:
            self._chaos.reset()
            self._emit_comment(self._chaos.welcome_comment())

        if not self._finish_if_no_moves():
            self._prompt_side_to_move()

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> MoveRecord | None:
        if self._phase != GamePhase.AWAITING_MOVE:
            return None
        if self._state.turn != self._human_color:
            return None

        try:
            record = self._play(from_sq, to_sq, promotion)
        except IllegalMoveError as exc:
            _LOGGER.debug("Human move rejected: %s", exc)
            return None

        if record.checkmate and self.is_chaos:
            # The bot refuses to lose.
            result = self._chaos.cheat()
            if result.comment:
                self._emit_comment(result.comment)
            self._finish(GameResult.win_for(self.bot_color), GameEndReason.BOT_CHEATED)
            return record

        if not self._finish_by_rules():
            self._prompt_side_to_move()
        return record

    def play_bot_move(self) -> SelectorResult:
        if self._phase != GamePhase.THINKING:
            _LOGGER.debug("Bot asked to move outside its turn")
            return SelectorResult(None)

        chaos = self._chaos if self.is_chaos else None
        result = select_move(self._state, self._config, chaos, self._rng)
        self.apply_bot_result(result)
        return result

    def apply_bot_result(self, result: SelectorResult) -> MoveRecord | None:
        if self._phase != GamePhase.THINKING:
            return None

        if result.comment:
            self._emit_comment(result.comment)

        if result.bot_wins:
            reason = (
                GameEndReason.BOT_CHEATED
                if result.cheat
                else GameEndReason.BOT_DECLARED_VICTORY
            )
            self._finish(GameResult.win_for(self.bot_color), reason)
            return None

        choice = result.choice
        if choice is None:
            _LOGGER.debug("Selector returned no move")
            return None

        try:
            record = self._play(
                choice.from_sq, choice.move.to_sq, choice.move.promotion
            )
        except IllegalMoveError as exc:
            _LOGGER.debug("Bot move rejected: %s", exc)
            return None

        if not self._finish_by_rules():
            self._prompt_side_to_move()
        return record

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None,
    ) -> MoveRecord:
        before = self._state
        state, record = Rules.apply_move(
            before, from_sq, to_sq, promotion, rng=self._rng
        )
        self._state = state
        san = move_to_san(before, record)
        _LOGGER.debug("Played %s", san)
        for cb in self.events.on_move:
            cb(record, san, self._state)
        return record

    def _finish_by_rules(self) -> bool:
        if not self._state.game_over:
            return False
        result = self._state.result
        assert result is not None
        if self._state.reason == GameOverReason.CHECKMATE:
            self._finish(result, GameEndReason.CHECKMATE)
        else:
            self._finish(result, GameEndReason.STALEMATE)
        return True

    def _finish_if_no_moves(self) -> bool:
        """End a game loaded from a position with no legal reply."""
        if Rules.is_checkmate(self._state):
            self._finish(
                GameResult.win_for(self._state.turn.opposite), GameEndReason.CHECKMATE
            )
            return True
        if Rules.is_stalemate(self._state):
            self._finish(GameResult.DRAW, GameEndReason.STALEMATE)
            return True
        return False

    def _finish(self, winner: GameResult, reason: GameEndReason) -> None:
        self._winner = winner
        self._end_reason = reason
        _LOGGER.info("Game over: %s (%s)", winner.name, reason.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner, reason)

    def _prompt_side_to_move(self) -> None:
        if self._state.turn == self._human_color:
            self._set_phase(GamePhase.AWAITING_MOVE)
        else:
            self._set_phase(GamePhase.THINKING)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_comment(self, text: str) -> None:
        for cb in self.events.on_comment:
            cb(text)
