"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chaoschess.core import GameState, Rules, parse_square

    state = GameState.initial()
    state, record = Rules.apply_move(state, parse_square("e2"), parse_square("e4"))
    for choice in Rules.all_legal_moves(state):
        print(choice)
"""

from chaoschess.core.board import Board
from chaoschess.core.enums import (
    CastleSide,
    CastlingRights,
    Color,
    GameOverReason,
    GameResult,
    PieceType,
)
from chaoschess.core.move import LegalMove, MoveChoice, MoveRecord
from chaoschess.core.move_generator import MoveGenerator
from chaoschess.core.notation import (
    STARTING_FEN,
    describe_move,
    move_number_prefix,
    move_to_san,
    state_from_fen,
    state_to_fen,
)
from chaoschess.core.piece import Piece
from chaoschess.core.rules import IllegalMoveError, Rules
from chaoschess.core.state import GameState
from chaoschess.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "GameOverReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "IllegalMoveError",
    "LegalMove",
    "MoveChoice",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "describe_move",
    "move_number_prefix",
    "move_to_san",
    "state_from_fen",
    "state_to_fen",
]
