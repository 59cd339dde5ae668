"""Move value objects: generated candidates and applied-move records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from chaoschess.core.enums import CastleSide, PieceType
from chaoschess.core.piece import Piece
from chaoschess.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class LegalMove:
    """A destination reachable by a specific piece, plus its side effects.

    Transient: produced by generation and consumed right away. The origin
    square is carried separately (see :class:`MoveChoice`).
    """

    to_sq: Square
    capture: bool = False
    promotion: PieceType | None = None
    castle: CastleSide | None = None
    double_pawn: bool = False
    en_passant: bool = False


class MoveChoice(NamedTuple):
    """A ``(from, LegalMove)`` pair as returned by ``all_legal_moves``."""

    from_sq: Square
    move: LegalMove

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.move.to_sq)}"
        if self.move.promotion is not None:
            base += _PROMO_CHARS.get(self.move.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Everything that happened in one applied move.

    Created once by ``Rules.apply_move`` and never changed afterwards. The
    check / checkmate / stalemate flags describe the position after the move.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None
    castle: CastleSide | None = None
    en_passant: bool = False
    check: bool = False
    checkmate: bool = False
    stalemate: bool = False

    @property
    def capture(self) -> bool:
        return self.captured is not None
