"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chaoschess.core.enums import CastleSide, Color, PieceType
from chaoschess.core.move import LegalMove, MoveChoice
from chaoschess.core.piece import Piece
from chaoschess.core.types import Square, home_row, is_valid_square

if TYPE_CHECKING:
    from chaoschess.core.board import Board
    from chaoschess.core.state import GameState


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Forward row step per colour: white pawns move towards row 0.
_PAWN_DIRECTION: tuple[int, int] = (-1, 1)
_PAWN_START_ROW: tuple[int, int] = (6, 1)
_PROMOTION_ROW: tuple[int, int] = (0, 7)

_KING_HOME_COL = 4


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    table: list[tuple[tuple[Square, ...], ...]] = []
    for row in range(8):
        cells: list[tuple[Square, ...]] = []
        for col in range(8):
            cells.append(
                tuple(
                    (row + dr, col + dc)
                    for dr, dc in offsets
                    if 0 <= row + dr < 8 and 0 <= col + dc < 8
                )
            )
        table.append(tuple(cells))
    return tuple(table)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[tuple[Square, ...], ...], ...], ...]:
    table: list[tuple[tuple[tuple[Square, ...], ...], ...]] = []
    for row in range(8):
        cells: list[tuple[tuple[Square, ...], ...]] = []
        for col in range(8):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in directions:
                r, c = row + dr, col + dc
                ray: list[Square] = []
                while 0 <= r < 8 and 0 <= c < 8:
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            cells.append(tuple(square_rays))
        table.append(tuple(cells))
    return tuple(table)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Board-level primitives ------------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color* on *board*?

    Pawns attack diagonally forward only. Sliding attacks stop at the first
    occupied square, which is itself attacked.
    """
    row, col = sq

    # A pawn of by_color attacks sq from one row "behind" it.
    pawn_row = row - _PAWN_DIRECTION[int(by_color)]
    if 0 <= pawn_row < 8:
        for pawn_col in (col - 1, col + 1):
            if 0 <= pawn_col < 8:
                piece = board[(pawn_row, pawn_col)]
                if (
                    piece is not None
                    and piece.color == by_color
                    and piece.piece_type == PieceType.PAWN
                ):
                    return True

    for from_sq in _KNIGHT_TARGETS[row][col]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for from_sq in _KING_TARGETS[row][col]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    if _ray_attacked(board, _BISHOP_RAYS[row][col], by_color, _DIAGONAL_ATTACKERS):
        return True
    return _ray_attacked(board, _ROOK_RAYS[row][col], by_color, _STRAIGHT_ATTACKERS)


def _ray_attacked(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    attackers: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in attackers:
                return True
            break
    return False


def place_move(board: Board, from_sq: Square, move: LegalMove) -> Piece | None:
    """Carry out *move* on *board* in place and return the captured piece.

    Covers the compound effects: the en-passant victim is removed from the
    square beside the origin, castling relocates the rook, and promotion
    substitutes the new piece.
    """
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {from_sq}")

    captured = board[move.to_sq]
    if move.en_passant:
        victim_sq = (from_sq[0], move.to_sq[1])
        captured = board[victim_sq]
        board[victim_sq] = None

    board[from_sq] = None
    if move.promotion is not None:
        board[move.to_sq] = Piece(piece.color, move.promotion)
    else:
        board[move.to_sq] = piece

    if move.castle is not None:
        row = move.to_sq[0]
        if move.castle == CastleSide.KING:
            rook_from, rook_to = (row, 7), (row, 5)
        else:
            rook_from, rook_to = (row, 0), (row, 3)
        board[rook_to] = board[rook_from]
        board[rook_from] = None

    return captured


class MoveGenerator:
    """Generates legal moves for a given :class:`GameState`.

    The state is never modified: every candidate is tried on a disposable
    copy of the board.
    """

    __slots__ = ("_state", "_board")

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._board = state.board

    # -- Public API ---------------------------------------------------------

    def legal_moves_from(self, sq: Square) -> list[LegalMove]:
        """Strictly legal moves for the piece on *sq*.

        Empty when *sq* is off the board, empty, or holds a piece that is not
        on move.
        """
        if not is_valid_square(sq):
            return []
        piece = self._board[sq]
        if piece is None or piece.color != self._state.turn:
            return []
        return [
            move
            for move in self.pseudo_legal_moves_from(sq)
            if self._keeps_king_safe(sq, move, piece.color)
        ]

    def generate_legal_moves(self) -> list[MoveChoice]:
        """All strictly legal moves for the side to move, board order."""
        legal: list[MoveChoice] = []
        for sq in self._board.all_pieces(self._state.turn):
            for move in self.legal_moves_from(sq):
                legal.append(MoveChoice(sq, move))
        return legal

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        color = self._state.turn
        for sq in self._board.all_pieces(color):
            for move in self.pseudo_legal_moves_from(sq):
                if self._keeps_king_safe(sq, move, color):
                    return True
        return False

    def pseudo_legal_moves_from(self, sq: Square) -> list[LegalMove]:
        """Pseudo-legal moves (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[LegalMove] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_leaper(sq, piece.color, _KNIGHT_TARGETS, moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, _BISHOP_RAYS, moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, _ROOK_RAYS, moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, _QUEEN_RAYS, moves)
        elif ptype == PieceType.KING:
            self._gen_leaper(sq, piece.color, _KING_TARGETS, moves)
            self._gen_castling(sq, piece.color, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        return is_square_attacked(self._board, king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._board, sq, by_color)

    # -- Legality filter ---------------------------------------------------

    def _keeps_king_safe(self, from_sq: Square, move: LegalMove, color: Color) -> bool:
        trial = self._board.copy()
        place_move(trial, from_sq, move)
        return not is_square_attacked(trial, trial.king_square(color), color.opposite)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[LegalMove]) -> None:
        board = self._board
        row, col = sq
        idx = int(color)
        direction = _PAWN_DIRECTION[idx]
        promotion_row = _PROMOTION_ROW[idx]
        ahead = row + direction
        if not 0 <= ahead < 8:
            return

        one_step = (ahead, col)
        if board.is_empty(one_step):
            if ahead == promotion_row:
                for pt in PROMOTION_TYPES:
                    moves.append(LegalMove(one_step, promotion=pt))
            else:
                moves.append(LegalMove(one_step))
                two_step = (row + 2 * direction, col)
                if row == _PAWN_START_ROW[idx] and board.is_empty(two_step):
                    moves.append(LegalMove(two_step, double_pawn=True))

        for dc in (-1, 1):
            cap_col = col + dc
            if not 0 <= cap_col < 8:
                continue
            cap_sq = (ahead, cap_col)
            target = board[cap_sq]
            if target is not None and target.color != color:
                if ahead == promotion_row:
                    for pt in PROMOTION_TYPES:
                        moves.append(LegalMove(cap_sq, capture=True, promotion=pt))
                else:
                    moves.append(LegalMove(cap_sq, capture=True))
            elif target is None and cap_sq == self._state.en_passant:
                moves.append(LegalMove(cap_sq, capture=True, en_passant=True))

    def _gen_leaper(
        self,
        sq: Square,
        color: Color,
        targets: tuple[tuple[tuple[Square, ...], ...], ...],
        moves: list[LegalMove],
    ) -> None:
        board = self._board
        for to_sq in targets[sq[0]][sq[1]]:
            target = board[to_sq]
            if target is None:
                moves.append(LegalMove(to_sq))
            elif target.color != color:
                moves.append(LegalMove(to_sq, capture=True))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[tuple[tuple[Square, ...], ...], ...], ...],
        moves: list[LegalMove],
    ) -> None:
        board = self._board
        for ray in rays[sq[0]][sq[1]]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(LegalMove(to_sq))
                    continue
                if target.color != color:
                    moves.append(LegalMove(to_sq, capture=True))
                break

    def _gen_castling(
        self, king_sq: Square, color: Color, moves: list[LegalMove]
    ) -> None:
        row = home_row(int(color))
        if king_sq != (row, _KING_HOME_COL):
            return
        # Castling out of check is never allowed; test it before the path.
        if self.is_in_check(color):
            return

        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)

        if (
            self._state.can_castle(color, CastleSide.KING)
            and board[(row, 7)] == rook
            and board.is_empty((row, 5))
            and board.is_empty((row, 6))
            and not self.is_square_attacked((row, 5), opponent)
            and not self.is_square_attacked((row, 6), opponent)
        ):
            moves.append(LegalMove((row, 6), castle=CastleSide.KING))

        if (
            self._state.can_castle(color, CastleSide.QUEEN)
            and board[(row, 0)] == rook
            and board.is_empty((row, 1))
            and board.is_empty((row, 2))
            and board.is_empty((row, 3))
            and not self.is_square_attacked((row, 2), opponent)
            and not self.is_square_attacked((row, 3), opponent)
        ):
            moves.append(LegalMove((row, 2), castle=CastleSide.QUEEN))
