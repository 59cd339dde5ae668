"""FEN parsing and serialization."""

from __future__ import annotations

from chaoschess.core.board import Board
from chaoschess.core.enums import CastlingRights, Color, PieceType
from chaoschess.core.piece import Piece
from chaoschess.core.state import GameState
from chaoschess.core.types import Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def state_from_fen(fen: str) -> GameState:
    """Parse a FEN string into a fresh :class:`GameState` with empty history.

    The board must hold exactly one king per colour.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement; FEN lists rank 8 first, which is row 0.
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for color in Color:
        if board.count(color, PieceType.KING) != 1:
            raise ValueError(f"Invalid FEN: need exactly one {color} king: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_CHARS)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant: the skipped square sits on row 2 (after a black
    # double step, white to move) or row 5 (black to move).
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_row = 2 if side == Color.WHITE else 5
        if ep[0] != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    halfmove = int(parts[4]) if len(parts) > 4 else 0
    if halfmove < 0:
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    fullmove = int(parts[5]) if len(parts) > 5 else 1
    if fullmove < 1:
        raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")

    return GameState(
        board=board,
        turn=side,
        castling=castling,
        en_passant=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def state_to_fen(state: GameState) -> str:
    """Serialise the position part of a :class:`GameState` to FEN."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = state.board[(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    side_str = "w" if state.turn == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS if state.castling & right
    )
    if not castling_str:
        castling_str = "-"

    ep_str = square_name(state.en_passant) if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
