"""Tests for FEN, SAN and move-log notation."""

import pytest

from chaoschess.core.enums import CastlingRights, Color, PieceType
from chaoschess.core.notation import (
    STARTING_FEN,
    describe_move,
    move_number_prefix,
    move_to_san,
    state_from_fen,
    state_to_fen,
)
from chaoschess.core.piece import Piece
from chaoschess.core.rules import Rules
from chaoschess.core.state import GameState
from chaoschess.core.types import E1, E8, parse_square


def _san(state: GameState, uci: str, promotion: PieceType | None = None) -> str:
    _, record = Rules.apply_move(
        state, parse_square(uci[:2]), parse_square(uci[2:4]), promotion
    )
    return move_to_san(state, record)


class TestFenParsing:
    def test_starting_side(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.turn == Color.WHITE

    def test_starting_castling(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.castling == CastlingRights.ALL

    def test_starting_en_passant(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.en_passant is None

    def test_starting_clocks(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.halfmove_clock == 0
        assert state.fullmove_number == 1

    def test_matches_initial_state(self) -> None:
        assert state_from_fen(STARTING_FEN).board == GameState.initial().board

    def test_kings(self) -> None:
        state = state_from_fen(STARTING_FEN)
        assert state.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert state.board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_en_passant_field(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        state = state_from_fen(fen)
        assert state.en_passant == parse_square("e3")

    def test_optional_clocks(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert state.halfmove_clock == 0
        assert state.fullmove_number == 1

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8/8 w - - 0 1",  # no kings
            "4k3/8/8/8/8/8/8/3KK3 w - - 0 1",  # two white kings
            "4k3/8/8/8/8/8/4K3 w - - 0 1",  # seven ranks
            "4k3/8/8/8/8/8/8/4K4 w - - 0 1",  # nine files
            "4k3/8/8/8/8/8/8/4K3 x - - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w KX - 0 1",
            "4k3/8/8/8/8/8/8/4K3 w - e4 0 1",  # wrong en-passant rank
            "4k3/8/8/8/8/8/8/4K3 w - - -1 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 0",
        ],
    )
    def test_rejects_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            state_from_fen(fen)


class TestFenRoundTrip:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 2",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
        ],
    )
    def test_round_trip(self, fen: str) -> None:
        assert state_to_fen(state_from_fen(fen)) == fen

    def test_after_moves(self) -> None:
        state, _ = Rules.apply_move(
            GameState.initial(), parse_square("e2"), parse_square("e4")
        )
        assert (
            state_to_fen(state)
            == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )


class TestSan:
    def test_pawn_push(self) -> None:
        assert _san(GameState.initial(), "e2e4") == "e4"

    def test_knight_move(self) -> None:
        assert _san(GameState.initial(), "g1f3") == "Nf3"

    def test_pawn_capture(self) -> None:
        state = state_from_fen(
            "rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR w KQkq d6 0 2"
        )
        assert _san(state, "e4d5") == "exd5"

    def test_en_passant_capture(self) -> None:
        state = state_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert _san(state, "e5d6") == "exd6"

    def test_castling(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert _san(state, "e1g1") == "O-O"
        assert _san(state, "e1c1") == "O-O-O"

    def test_promotion_with_check(self) -> None:
        state = state_from_fen("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        assert _san(state, "a7a8", PieceType.QUEEN) == "a8=Q+"
        assert _san(state, "a7a8", PieceType.KNIGHT) == "a8=N"

    def test_checkmate_suffix(self) -> None:
        state = state_from_fen(
            "rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq g3 0 2"
        )
        assert _san(state, "d8h4") == "Qh4#"

    def test_file_disambiguation(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/R4RK1 w - - 0 1")
        assert _san(state, "a1d1") == "Rad1"

    def test_rank_disambiguation(self) -> None:
        state = state_from_fen("R7/7k/8/8/8/8/8/R3K3 w - - 0 1")
        assert _san(state, "a1a4") == "R1a4"

    def test_full_square_disambiguation(self) -> None:
        state = state_from_fen("4k3/8/8/8/1Q5Q/8/8/K6Q w - - 0 1")
        assert _san(state, "h4e1") == "Qh4e1+"


class TestMoveLog:
    def test_describe_simple(self) -> None:
        _, record = Rules.apply_move(
            GameState.initial(), parse_square("g1"), parse_square("f3")
        )
        assert describe_move(record) == "White Knight g1 → f3"

    def test_describe_en_passant(self) -> None:
        state = state_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        _, record = Rules.apply_move(state, parse_square("e5"), parse_square("d6"))
        assert describe_move(record) == (
            "White Pawn e5 → d6 captures Pawn (en passant)"
        )

    def test_describe_promotion_and_check(self) -> None:
        state = state_from_fen("7k/P7/8/8/8/8/8/K7 w - - 0 1")
        _, record = Rules.apply_move(
            state, parse_square("a7"), parse_square("a8"), PieceType.QUEEN
        )
        assert describe_move(record) == (
            "White Pawn a7 → a8 promotes to Queen - Check!"
        )

    def test_describe_checkmate(self) -> None:
        state = state_from_fen("6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1")
        _, record = Rules.apply_move(state, parse_square("a1"), parse_square("a8"))
        assert describe_move(record) == "White Rook a1 → a8 - CHECKMATE!"

    def test_describe_castling(self) -> None:
        state = state_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        _, record = Rules.apply_move(state, parse_square("e8"), parse_square("c8"))
        assert describe_move(record) == "Black castles queenside"

    def test_move_number_prefix(self) -> None:
        assert move_number_prefix(0, False) == "1."
        assert move_number_prefix(1, True) == "1..."
        assert move_number_prefix(4, False) == "3."
