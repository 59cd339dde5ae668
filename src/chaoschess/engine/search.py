"""Shared move-selector models, configuration and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chaoschess.core.move import MoveChoice
    from chaoschess.core.state import GameState


class Strategy(Enum):
    """How the computer side picks its moves."""

    RANDOM = "random"
    SEARCH = "search"
    CHAOS = "chaos"

    @classmethod
    def parse(cls, name: str) -> Strategy:
        """Accept strategy names and the difficulty labels shown to players."""
        key = name.strip().lower()
        key = _DIFFICULTY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown strategy: {name!r}") from None


_DIFFICULTY_ALIASES: dict[str, str] = {
    "easy": Strategy.RANDOM.value,
    "hard": Strategy.SEARCH.value,
}


@dataclass(slots=True, frozen=True)
class SelectorConfig:
    """Settings for a single computer opponent."""

    strategy: Strategy = Strategy.RANDOM
    depth: int = 4
    capture_bias: float = 0.1

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("Search depth must be >= 1")
        if not 0.0 <= self.capture_bias <= 1.0:
            raise ValueError("capture_bias must be within [0, 1]")


@dataclass(slots=True, frozen=True)
class SelectorResult:
    """A selector's answer: the move (or ``None``) plus presentation extras.

    ``bot_wins`` and ``cheat`` are only ever set by chaos mode.
    """

    choice: MoveChoice | None
    comment: str | None = None
    bot_wins: bool = False
    cheat: bool = False
    score: int | None = None
    nodes: int = 0

    @property
    def has_move(self) -> bool:
        return self.choice is not None


class IMoveSelector(Protocol):
    """Protocol for anything that can choose a move for the side to move."""

    def select(self, state: GameState) -> SelectorResult: ...
