"""Tests for the static evaluation."""

from chaoschess.core.enums import Color, PieceType
from chaoschess.core.notation import state_from_fen
from chaoschess.core.state import GameState
from chaoschess.engine.evaluation import (
    CHECK_BONUS,
    PIECE_VALUES,
    SQUARE_TABLES,
    evaluate,
    square_bonus,
)


class TestEvaluate:
    def test_starting_position_is_level(self) -> None:
        assert evaluate(GameState.initial()) == 0

    def test_extra_queen_counts(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")
        assert evaluate(state) >= PIECE_VALUES[PieceType.QUEEN] - 50

    def test_mirrored_position_negates(self) -> None:
        white_up = state_from_fen("4k3/8/8/8/4P3/2N5/8/4K3 w - - 0 1")
        black_up = state_from_fen("4k3/8/2n5/4p3/8/8/8/4K3 b - - 0 1")
        assert evaluate(white_up) == -evaluate(black_up)
        assert evaluate(white_up) > 0

    def test_side_to_move_does_not_matter(self) -> None:
        fen = "4k3/8/8/8/4P3/8/8/4K3 {} - - 0 1"
        assert evaluate(state_from_fen(fen.format("w"))) == evaluate(
            state_from_fen(fen.format("b"))
        )

    def test_check_bonus_for_checking_side(self) -> None:
        quiet = state_from_fen("4k3/8/8/8/8/8/8/R3K3 b - - 0 1")
        checking = state_from_fen("R3k3/8/8/8/8/8/8/4K3 b - - 0 1")
        material_and_squares = (
            PIECE_VALUES[PieceType.ROOK]
            + square_bonus(PieceType.ROOK, Color.WHITE, 0, 0)
            + square_bonus(PieceType.KING, Color.WHITE, 7, 4)
            - square_bonus(PieceType.KING, Color.BLACK, 0, 4)
        )
        assert evaluate(checking) == material_and_squares + CHECK_BONUS
        assert evaluate(quiet) != evaluate(checking)

    def test_black_checking_white_is_penalised(self) -> None:
        state = state_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        expected = (
            -PIECE_VALUES[PieceType.ROOK]
            - square_bonus(PieceType.ROOK, Color.BLACK, 7, 0)
            + square_bonus(PieceType.KING, Color.WHITE, 7, 4)
            - square_bonus(PieceType.KING, Color.BLACK, 0, 4)
            - CHECK_BONUS
        )
        assert evaluate(state) == expected


class TestSquareTables:
    def test_all_kinds_present(self) -> None:
        assert set(SQUARE_TABLES) == set(PieceType)

    def test_tables_are_8x8(self) -> None:
        for table in SQUARE_TABLES.values():
            assert len(table) == 8
            assert all(len(row) == 8 for row in table)

    def test_black_reads_mirrored(self) -> None:
        for pt in PieceType:
            for row in range(8):
                for col in range(8):
                    assert square_bonus(pt, Color.BLACK, row, col) == square_bonus(
                        pt, Color.WHITE, 7 - row, col
                    )

    def test_advanced_pawn_rewarded(self) -> None:
        assert square_bonus(PieceType.PAWN, Color.WHITE, 1, 4) > square_bonus(
            PieceType.PAWN, Color.WHITE, 6, 4
        )
