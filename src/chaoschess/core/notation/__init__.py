"""Notation package: FEN import/export and SAN / move-log formatting."""

from chaoschess.core.notation.fen import STARTING_FEN, state_from_fen, state_to_fen
from chaoschess.core.notation.san import describe_move, move_number_prefix, move_to_san

__all__ = [
    "STARTING_FEN",
    "state_from_fen",
    "state_to_fen",
    "move_to_san",
    "describe_move",
    "move_number_prefix",
]
