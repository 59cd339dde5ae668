"""Tests for Rules: check, checkmate, stalemate and move rejection."""

import pytest

from chaoschess.core.enums import Color, GameOverReason, GameResult, PieceType
from chaoschess.core.notation import state_from_fen
from chaoschess.core.rules import IllegalMoveError, Rules
from chaoschess.core.state import GameState
from chaoschess.core.types import parse_square


def _play(state: GameState, *moves: str) -> GameState:
    for uci in moves:
        from_sq, to_sq = parse_square(uci[:2]), parse_square(uci[2:4])
        state, _ = Rules.apply_move(state, from_sq, to_sq)
    return state


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        state = GameState.initial()
        assert not Rules.is_in_check(state, Color.WHITE)
        assert not Rules.is_in_check(state, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        state = state_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        assert Rules.is_in_check(state, Color.WHITE)

    def test_square_attacked(self) -> None:
        state = GameState.initial()
        assert Rules.is_square_attacked(state, parse_square("f3"), Color.WHITE)
        assert not Rules.is_square_attacked(state, parse_square("e4"), Color.WHITE)

    def test_check_flag_on_record(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        _, record = Rules.apply_move(state, parse_square("a1"), parse_square("a8"))
        assert record.check
        assert not record.checkmate


class TestCheckmate:
    def test_fools_mate_sequence(self) -> None:
        state = _play(GameState.initial(), "f2f3", "e7e5", "g2g4")
        state, record = Rules.apply_move(state, parse_square("d8"), parse_square("h4"))

        assert record.checkmate
        assert not record.check
        assert state.game_over
        assert state.result == GameResult.BLACK
        assert state.reason == GameOverReason.CHECKMATE
        assert Rules.all_legal_moves(state) == []
        assert Rules.is_checkmate(state)

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        state = state_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(state)
        assert not Rules.is_stalemate(state)

    def test_not_checkmate_when_can_escape(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert not Rules.is_checkmate(state)


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        state = state_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(state)
        assert not Rules.is_checkmate(state)

    def test_move_into_stalemate_ends_game(self) -> None:
        state = state_from_fen("7k/8/5K2/6Q1/8/8/8/8 w - - 0 1")
        state, record = Rules.apply_move(state, parse_square("g5"), parse_square("g6"))
        assert record.stalemate
        assert state.game_over
        assert state.result == GameResult.DRAW
        assert state.reason == GameOverReason.STALEMATE

    def test_not_stalemate_when_has_moves(self) -> None:
        state = state_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not Rules.is_stalemate(state)


class TestApplyMove:
    def test_returns_new_state(self) -> None:
        state = GameState.initial()
        new_state, record = Rules.apply_move(
            state, parse_square("g1"), parse_square("f3")
        )
        assert new_state is not state
        assert state.board[parse_square("g1")] is not None
        assert state.move_history == []
        assert new_state.move_history == [record]
        assert new_state.turn == Color.BLACK
        assert new_state.last_move is record

    def test_clocks(self) -> None:
        state = _play(GameState.initial(), "g1f3")
        assert state.halfmove_clock == 1
        assert state.fullmove_number == 1
        state = _play(state, "e7e5")
        assert state.halfmove_clock == 0
        assert state.fullmove_number == 2

    def test_capture_record(self) -> None:
        state = _play(GameState.initial(), "e2e4", "d7d5")
        _, record = Rules.apply_move(state, parse_square("e4"), parse_square("d5"))
        assert record.capture
        assert record.captured is not None
        assert record.captured.color == Color.BLACK


class TestRejection:
    @pytest.mark.parametrize(
        ("from_sq", "to_sq"),
        [
            ((6, 4), (3, 4)),  # e2-e5: three ranks
            ((4, 4), (3, 4)),  # empty origin
            ((1, 4), (2, 4)),  # black pawn on white's turn
            ((6, 4), (6, 4)),  # null move
            ((6, 4), (8, 4)),  # off the board
            ((-1, 0), (0, 0)),
        ],
    )
    def test_illegal_requests(self, from_sq: tuple, to_sq: tuple) -> None:
        state = GameState.initial()
        with pytest.raises(IllegalMoveError):
            Rules.apply_move(state, from_sq, to_sq)

    def test_rejection_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Rules.apply_move(GameState.initial(), (6, 4), (2, 4))

    def test_state_untouched_after_rejection(self) -> None:
        state = GameState.initial()
        with pytest.raises(IllegalMoveError):
            Rules.apply_move(state, parse_square("e1"), parse_square("e2"))
        assert state.turn == Color.WHITE
        assert state.move_history == []
        assert state.board[parse_square("e1")] is not None

    def test_king_promotion_rejected(self) -> None:
        state = state_from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1")
        with pytest.raises(IllegalMoveError):
            Rules.apply_move(
                state, parse_square("a7"), parse_square("a8"), PieceType.KING
            )

    def test_no_moves_after_game_over(self) -> None:
        state = _play(GameState.initial(), "f2f3", "e7e5", "g2g4", "d8h4")
        with pytest.raises(IllegalMoveError):
            Rules.apply_move(state, parse_square("a2"), parse_square("a3"))
