"""Square addressing for the 5x5 Qirkat board.

Squares are named by column ``'a'..'e'`` and row ``'1'..'5'``. The
linearized index of a square is its number in row-major order, counting
from 0 at ``a1`` with row 1 being the bottom row.
"""
from __future__ import annotations

from typing import Optional, Union

BOARD_SIDE = 5
MAX_INDEX = BOARD_SIDE * BOARD_SIDE - 1
COLUMNS = "abcde"
ROWS = "12345"


def index(c: str, r: str) -> int:
    """Return the linearized index of square ``c r`` (e.g. ``'b', '2'`` -> 6)."""

    if not valid_square(c, r):
        raise ValueError(f"square out of bounds: {c}{r}")
    return COLUMNS.index(c) + BOARD_SIDE * ROWS.index(r)


def col(k: int) -> str:
    """Return the column letter of index ``k``."""

    return COLUMNS[k % BOARD_SIDE]


def row(k: int) -> str:
    """Return the row digit of index ``k``."""

    return ROWS[k // BOARD_SIDE]


def valid_square(c: Union[str, int], r: Optional[str] = None) -> bool:
    """Whether ``c r`` (two characters) or index ``c`` names a board square."""

    if r is None:
        return isinstance(c, int) and 0 <= c <= MAX_INDEX
    return len(c) == 1 and len(r) == 1 and c in COLUMNS and r in ROWS


def offset(k: int, dc: int, dr: int, distance: int = 1) -> Optional[int]:
    """Return the index ``distance`` steps from ``k`` along ``(dc, dr)``, or ``None`` off the board."""

    c = k % BOARD_SIDE + dc * distance
    r = k // BOARD_SIDE + dr * distance
    if 0 <= c < BOARD_SIDE and 0 <= r < BOARD_SIDE:
        return c + BOARD_SIDE * r
    return None


def square_name(k: int) -> str:
    if not valid_square(k):
        raise ValueError(f"index out of bounds: {k}")
    return col(k) + row(k)


def parse_square(text: str) -> Optional[int]:
    """Return the index named by ``text`` (e.g. ``"c3"``), or ``None`` if it is not a square."""

    name = text.strip().lower()
    if len(name) != 2 or not valid_square(name[0], name[1]):
        return None
    return index(name[0], name[1])
