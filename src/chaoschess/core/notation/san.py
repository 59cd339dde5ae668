"""SAN (Standard Algebraic Notation) formatting of applied moves."""

from __future__ import annotations

from chaoschess.core.enums import CastleSide, Color, PieceType
from chaoschess.core.move import MoveRecord
from chaoschess.core.move_generator import MoveGenerator
from chaoschess.core.state import GameState
from chaoschess.core.types import Square, file_char, rank_char, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def move_to_san(before: GameState, record: MoveRecord) -> str:
    """Convert an applied *record* to SAN given the state *before* the move."""
    if record.castle is not None:
        san = "O-O" if record.castle == CastleSide.KING else "O-O-O"
    else:
        ptype = record.piece.piece_type
        san = _SAN_PIECE.get(ptype, "")
        if ptype != PieceType.PAWN:
            san += _disambiguation(before, record)

        if record.capture:
            if ptype == PieceType.PAWN:
                san += file_char(record.from_sq)
            san += "x"

        san += square_name(record.to_sq)

        if record.promotion is not None:
            san += "=" + _SAN_PIECE[record.promotion]

    if record.checkmate:
        san += "#"
    elif record.check:
        san += "+"
    return san


def _disambiguation(before: GameState, record: MoveRecord) -> str:
    """Origin file, rank, or both when another same piece reaches the target."""
    gen = MoveGenerator(before)
    rivals: list[Square] = []
    for sq in before.board.pieces(record.piece.color, record.piece.piece_type):
        if sq == record.from_sq:
            continue
        if any(m.to_sq == record.to_sq for m in gen.legal_moves_from(sq)):
            rivals.append(sq)

    if not rivals:
        return ""
    same_file = any(sq[1] == record.from_sq[1] for sq in rivals)
    same_rank = any(sq[0] == record.from_sq[0] for sq in rivals)
    if not same_file:
        return file_char(record.from_sq)
    if not same_rank:
        return rank_char(record.from_sq)
    return square_name(record.from_sq)


def describe_move(record: MoveRecord) -> str:
    """Plain-English description, e.g. ``"White Knight g1 → f3"``."""
    color_name = "White" if record.piece.color == Color.WHITE else "Black"

    if record.castle is not None:
        wing = "kingside" if record.castle == CastleSide.KING else "queenside"
        desc = f"{color_name} castles {wing}"
    else:
        desc = (
            f"{color_name} {record.piece.kind_name} "
            f"{square_name(record.from_sq)} → {square_name(record.to_sq)}"
        )
        if record.captured is not None:
            desc += f" captures {record.captured.kind_name}"
            if record.en_passant:
                desc += " (en passant)"
        if record.promotion is not None:
            desc += f" promotes to {record.promotion.name.capitalize()}"

    if record.checkmate:
        desc += " - CHECKMATE!"
    elif record.check:
        desc += " - Check!"
    elif record.stalemate:
        desc += " - Stalemate!"
    return desc


def move_number_prefix(ply_index: int, is_black: bool) -> str:
    """Move-log prefix for the ply at *ply_index*: ``"1."`` or ``"1..."``."""
    number = ply_index // 2 + 1
    return f"{number}..." if is_black else f"{number}."
