"""GameState: complete game state (board + metadata + history)."""

from __future__ import annotations

from dataclasses import dataclass, field

from chaoschess.core.board import Board
from chaoschess.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    GameOverReason,
    GameResult,
)
from chaoschess.core.move import MoveRecord
from chaoschess.core.types import Square


@dataclass(slots=True)
class GameState:
    """Full chess game state.

    A state is only ever produced by :meth:`initial` (or FEN import) and by
    ``Rules.apply_move``, which returns a fresh copy instead of mutating its
    input. Search and the legality filter work on copies made with
    :meth:`copy`, so two branches never share a board.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    move_history: list[MoveRecord] = field(default_factory=list)
    game_over: bool = False
    result: GameResult | None = None
    reason: GameOverReason | None = None

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, White to move."""
        return cls()

    def copy(self) -> GameState:
        """Deep copy: board, rights and history are independent of ``self``.

        Records are immutable, so the history list is copied shallowly.
        """
        return GameState(
            board=self.board.copy(),
            turn=self.turn,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            move_history=self.move_history.copy(),
            game_over=self.game_over,
            result=self.result,
            reason=self.reason,
        )

    def can_castle(self, color: Color, side: CastleSide) -> bool:
        """Whether *color* still holds the right to castle towards *side*."""
        return bool(self.castling & CastlingRights.for_side(color, side))

    @property
    def last_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)
