"""High-level chess rules: the query surface and the single mutation path."""

from __future__ import annotations

import logging
import random

from chaoschess.core.enums import (
    CastlingRights,
    Color,
    GameOverReason,
    GameResult,
    PieceType,
)
from chaoschess.core.move import LegalMove, MoveChoice, MoveRecord
from chaoschess.core.move_generator import (
    PROMOTION_TYPES,
    MoveGenerator,
    is_square_attacked,
    place_move,
)
from chaoschess.core.state import GameState
from chaoschess.core.types import Square, is_valid_square, square_name

_LOGGER = logging.getLogger(__name__)

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    (7, 0): CastlingRights.WHITE_QUEENSIDE,
    (7, 7): CastlingRights.WHITE_KINGSIDE,
    (0, 0): CastlingRights.BLACK_QUEENSIDE,
    (0, 7): CastlingRights.BLACK_KINGSIDE,
}


class IllegalMoveError(ValueError):
    """The requested move is not in the current legal move set.

    Always recoverable: the state passed to ``apply_move`` is untouched.
    """


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Product policy:
    # - Games end only by checkmate or stalemate.
    # - The half-move clock is kept up to date but never forces a draw.

    @staticmethod
    def legal_moves(state: GameState, sq: Square) -> list[LegalMove]:
        """Legal destinations for the piece on *sq* (empty if none / not on move)."""
        return MoveGenerator(state).legal_moves_from(sq)

    @staticmethod
    def all_legal_moves(state: GameState) -> list[MoveChoice]:
        """Every legal ``(from, move)`` pair for the side to move."""
        return MoveGenerator(state).generate_legal_moves()

    @staticmethod
    def has_legal_move(state: GameState) -> bool:
        return MoveGenerator(state).has_legal_move()

    @staticmethod
    def is_in_check(state: GameState, color: Color) -> bool:
        return MoveGenerator(state).is_in_check(color)

    @staticmethod
    def is_square_attacked(state: GameState, sq: Square, by_color: Color) -> bool:
        return is_square_attacked(state.board, sq, by_color)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        return Rules.is_in_check(state, state.turn) and not Rules.has_legal_move(state)

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        return not Rules.is_in_check(state, state.turn) and not Rules.has_legal_move(
            state
        )

    # ── Mutation ─────────────────────────────────────────────────────────

    @staticmethod
    def apply_move(
        state: GameState,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
        *,
        rng: random.Random | None = None,
    ) -> tuple[GameState, MoveRecord]:
        """Validate and play ``from_sq → to_sq``; return the new state and record.

        The move is looked up in ``legal_moves(state, from_sq)``, so arbitrary
        untrusted coordinates are safe to pass. When the move promotes and
        *promotion* is ``None``, the piece is drawn uniformly from
        Queen/Rook/Bishop/Knight using *rng*. *promotion* is ignored for moves
        that do not promote.

        Raises:
            IllegalMoveError: if no legal move matches the request.
        """
        if not is_valid_square(from_sq) or not is_valid_square(to_sq):
            _LOGGER.debug("Rejected off-board move %r -> %r", from_sq, to_sq)
            raise IllegalMoveError(f"Square off the board: {from_sq!r} -> {to_sq!r}")

        candidates = [m for m in Rules.legal_moves(state, from_sq) if m.to_sq == to_sq]
        if not candidates:
            _LOGGER.debug(
                "Rejected move %s%s", square_name(from_sq), square_name(to_sq)
            )
            raise IllegalMoveError(
                f"Illegal move: {square_name(from_sq)}{square_name(to_sq)}"
            )

        move = candidates[0]
        if move.promotion is not None:
            if promotion is None:
                promotion = (rng or random).choice(PROMOTION_TYPES)
            elif promotion not in PROMOTION_TYPES:
                raise IllegalMoveError(f"Cannot promote to {promotion!r}")
            move = next(m for m in candidates if m.promotion == promotion)

        return Rules._play(state, from_sq, move)

    @staticmethod
    def _play(
        state: GameState, from_sq: Square, move: LegalMove
    ) -> tuple[GameState, MoveRecord]:
        new_state = state.copy()
        board = new_state.board
        piece = board[from_sq]
        assert piece is not None
        color = piece.color
        opponent = color.opposite

        captured = place_move(board, from_sq, move)

        next_castling = new_state.castling
        if piece.piece_type == PieceType.KING:
            next_castling &= ~CastlingRights.for_color(color)
        for sq in (from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                next_castling &= ~_ROOK_CORNERS[sq]
        new_state.castling = next_castling

        if move.double_pawn:
            new_state.en_passant = ((from_sq[0] + move.to_sq[0]) // 2, from_sq[1])
        else:
            new_state.en_passant = None

        if piece.piece_type == PieceType.PAWN or captured is not None:
            new_state.halfmove_clock = 0
        else:
            new_state.halfmove_clock += 1
        if color == Color.BLACK:
            new_state.fullmove_number += 1
        new_state.turn = opponent

        gen = MoveGenerator(new_state)
        in_check = gen.is_in_check(opponent)
        has_moves = gen.has_legal_move()

        record = MoveRecord(
            from_sq=from_sq,
            to_sq=move.to_sq,
            piece=piece,
            captured=captured,
            promotion=move.promotion,
            castle=move.castle,
            en_passant=move.en_passant,
            check=in_check and has_moves,
            checkmate=in_check and not has_moves,
            stalemate=not in_check and not has_moves,
        )
        new_state.move_history.append(record)

        if record.checkmate:
            new_state.game_over = True
            new_state.result = GameResult.win_for(color)
            new_state.reason = GameOverReason.CHECKMATE
        elif record.stalemate:
            new_state.game_over = True
            new_state.result = GameResult.DRAW
            new_state.reason = GameOverReason.STALEMATE

        return new_state, record
