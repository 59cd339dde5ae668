"""Square type alias and coordinate helpers.

Board layout (row, col), zero-based:
    row 0 = rank 8 (Black's home rank) ... row 7 = rank 1 (White's home rank)
    col 0 = file a ... col 7 = file h

So a8=(0, 0), h8=(0, 7), a1=(7, 0), e1=(7, 4).
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col)

FILES = "abcdefgh"
RANKS = "87654321"  # indexed by row


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is a ``(row, col)`` pair inside the board."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    if isinstance(row, bool) or isinstance(col, bool):
        return False
    return 0 <= row < 8 and 0 <= col < 8


def file_char(sq: Square) -> str:
    return FILES[sq[1]]


def rank_char(sq: Square) -> str:
    return RANKS[sq[0]]


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1'."""
    return file_char(sq) + rank_char(sq)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return (RANKS.index(name[1]), FILES.index(name[0]))


def home_row(color_index: int) -> int:
    """Back-rank row for a colour index (0 = white, 1 = black)."""
    return 7 if color_index == 0 else 0


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
