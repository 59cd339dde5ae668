"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleSide(IntEnum):
    """Which wing a castling move goes to."""

    KING = 0
    QUEEN = 1


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastleSide) -> CastlingRights:
        """Single flag for *color* castling towards *side*."""
        if color == Color.WHITE:
            if side == CastleSide.KING:
                return cls.WHITE_KINGSIDE
            return cls.WHITE_QUEENSIDE
        if side == CastleSide.KING:
            return cls.BLACK_KINGSIDE
        return cls.BLACK_QUEENSIDE

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameResult(IntEnum):
    """Winner of a finished game."""

    WHITE = 0
    BLACK = 1
    DRAW = 2

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE if color == Color.WHITE else cls.BLACK


class GameOverReason(IntEnum):
    """Why the rules ended the game."""

    CHECKMATE = 1
    STALEMATE = 2
