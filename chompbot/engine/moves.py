"""Move generation on skylines.

All coordinates here are zero-indexed ``(row, col)`` with row 0 at the top.
Eating ``(r, c)`` removes every remaining cell in rows ``<= r`` and columns
``<= c``.
"""

from typing import List, Tuple

from ..config import BOARD_COLS, POISON_COL, POISON_ROW
from ..errors import IllegalMove
from .skyline import Skyline

Move = Tuple[int, int]
POISON: Move = (POISON_ROW, POISON_COL)


def is_present(skyline: Skyline, row: int, col: int) -> bool:
    if not (0 <= row < len(skyline.rows) and 0 <= col < BOARD_COLS):
        return False
    return col >= BOARD_COLS - skyline.rows[row]


def legal_moves(skyline: Skyline) -> List[Move]:
    """Every remaining cell, ascending row then ascending column."""
    return [(r, c) for r, count in enumerate(skyline.rows)
            for c in range(BOARD_COLS - count, BOARD_COLS)]


def safe_moves(skyline: Skyline) -> List[Move]:
    """Legal moves other than the poison cell, in the same order."""
    return [move for move in legal_moves(skyline) if move != POISON]


def apply_move(skyline: Skyline, row: int, col: int) -> Skyline:
    """Return the skyline after eating at ``(row, col)``.

    Raises:
        IllegalMove: the cell is not on the board.
    """
    if not is_present(skyline, row, col):
        raise IllegalMove(f"Cell ({row}, {col}) is not present in {skyline}")
    keep = BOARD_COLS - 1 - col
    rows = tuple(min(count, keep) if r <= row else count
                 for r, count in enumerate(skyline.rows))
    return Skyline(rows)


def is_terminal(skyline: Skyline) -> bool:
    """True when only the poison cell is left."""
    return skyline.cell_count == 1 and is_present(skyline, *POISON)
