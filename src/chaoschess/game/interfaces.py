"""Abstract interfaces for the game layer.

The UI talks to an :class:`IGameController`; the controller owns the one
current :class:`~chaoschess.core.state.GameState` of a human-vs-bot game.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chaoschess.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chaoschess.core.move import MoveRecord
    from chaoschess.core.types import Square
    from chaoschess.engine.search import SelectorConfig, SelectorResult


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # bot to move
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a game ended, including the ways chaos mode ends it."""

    CHECKMATE = auto()
    STALEMATE = auto()
    BOT_DECLARED_VICTORY = auto()
    BOT_CHEATED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        human_color: Color | None = None,
        config: SelectorConfig | None = None,
        fen: str | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> MoveRecord | None:
        """Submit the human's move. Returns the record if legal and applied."""

    @abstractmethod
    def play_bot_move(self) -> SelectorResult:
        """Let the bot choose and play its move."""

    @abstractmethod
    def apply_bot_result(self, result: SelectorResult) -> MoveRecord | None:
        """Play a selector result computed elsewhere (e.g. a worker thread)."""
