"""Skyline representation and index packing for Chomp boards.

A skyline stores, for each row from top to bottom, how many cells are still
present. Eating removes upper-left rectangles, so the remaining cells of a row
are always its rightmost ones and the counts never decrease toward the poison
row.

Index layout: each row count takes a 4-bit field, row ``i`` in bits
``[4i, 4i + 4)``. The table built over this index has ``1 << 20`` slots.
"""

from dataclasses import dataclass
from itertools import combinations_with_replacement
from typing import Sequence, Tuple

import numpy as np

from ..config import BOARD_COLS, BOARD_ROWS
from ..errors import MalformedBoard

FIELD_BITS = 4
FIELD_MASK = (1 << FIELD_BITS) - 1
TABLE_SIZE = 1 << (FIELD_BITS * BOARD_ROWS)


@dataclass(frozen=True)
class Skyline:
    """Remaining-cell count per row, top row first."""

    rows: Tuple[int, ...]

    def __post_init__(self):
        for value in self.rows:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise MalformedBoard(f"Row count must be an integer, got {value!r}")
        rows = tuple(int(v) for v in self.rows)
        object.__setattr__(self, 'rows', rows)
        if len(rows) != BOARD_ROWS:
            raise MalformedBoard(f"Skyline needs {BOARD_ROWS} rows, got {len(rows)}")
        for value in rows:
            if value < 0 or value > BOARD_COLS:
                raise MalformedBoard(f"Row count {value} outside 0..{BOARD_COLS}")
        for upper, lower in zip(rows, rows[1:]):
            if upper > lower:
                raise MalformedBoard(f"Row counts must not decrease toward the poison row: {rows}")

    @classmethod
    def full(cls) -> 'Skyline':
        return cls((BOARD_COLS,) * BOARD_ROWS)

    @classmethod
    def glass_only(cls) -> 'Skyline':
        return cls((0,) * (BOARD_ROWS - 1) + (1,))

    @property
    def cell_count(self) -> int:
        return sum(self.rows)

    @property
    def is_empty(self) -> bool:
        # Poison row holds the maximum, so it is zero only when everything is
        return self.rows[-1] == 0

    def encode(self) -> int:
        return encode(self)

    def __str__(self) -> str:
        return "Skyline(" + ",".join(str(v) for v in self.rows) + ")"


def encode(skyline: Skyline) -> int:
    """Pack a skyline into its table index."""
    index = 0
    for i, count in enumerate(skyline.rows):
        index |= count << (FIELD_BITS * i)
    return index


def decode(index: int) -> Skyline:
    """Unpack a table index produced by :func:`encode`."""
    return Skyline(tuple((index >> (FIELD_BITS * i)) & FIELD_MASK for i in range(BOARD_ROWS)))


def _as_grid(board) -> np.ndarray:
    """Raw board as a 5x8 array of bools or 0/1 integers."""
    grid = np.asarray(board)
    if grid.shape != (BOARD_ROWS, BOARD_COLS):
        raise MalformedBoard(f"Board must be {BOARD_ROWS}x{BOARD_COLS}, got shape {grid.shape}")
    if grid.dtype == np.bool_:
        return grid
    if not np.issubdtype(grid.dtype, np.integer):
        raise MalformedBoard(f"Board cells must be bool or 0/1 integers, got dtype {grid.dtype}")
    if not np.isin(grid, (0, 1)).all():
        raise MalformedBoard(f"Board cells must be 0 or 1, got values {np.unique(grid).tolist()}")
    return grid


def to_skyline(board) -> Skyline:
    """Summarize a raw board (1 or True = present) as a skyline.

    Raises:
        MalformedBoard: wrong shape, cells that are not bool or 0/1, a row
            with a gap, or a row holding more cells than a row nearer the
            poison corner.
    """
    present = _as_grid(board).astype(bool)

    counts = []
    for r in range(BOARD_ROWS):
        count = int(present[r].sum())
        # Remaining cells must be the rightmost ones of the row
        if count and not present[r, BOARD_COLS - count:].all():
            raise MalformedBoard(f"Row {r + 1} has a gap: {present[r].astype(int).tolist()}")
        counts.append(count)
    return Skyline(tuple(counts))


def skyline_to_board(skyline: Skyline) -> np.ndarray:
    """Expand a skyline into a raw board (int8, 1 = present)."""
    board = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
    for r, count in enumerate(skyline.rows):
        if count:
            board[r, BOARD_COLS - count:] = 1
    return board


def board_from_bitmasks(masks: Sequence[int]) -> np.ndarray:
    """Convert wire row masks (set bit = eaten, MSB = column 1) to a raw board."""
    if len(masks) != BOARD_ROWS:
        raise MalformedBoard(f"Expected {BOARD_ROWS} row masks, got {len(masks)}")
    board = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
    for r, mask in enumerate(masks):
        mask = int(mask)
        if mask < 0 or mask >= 1 << BOARD_COLS:
            raise MalformedBoard(f"Row mask {mask} does not fit in {BOARD_COLS} bits")
        for c in range(BOARD_COLS):
            eaten = mask & (1 << (BOARD_COLS - 1 - c))
            board[r, c] = 0 if eaten else 1
    return board


def board_to_bitmasks(board) -> Tuple[int, ...]:
    """Inverse of :func:`board_from_bitmasks`."""
    grid = _as_grid(board)
    masks = []
    for r in range(BOARD_ROWS):
        mask = 0
        for c in range(BOARD_COLS):
            if not grid[r, c]:
                mask |= 1 << (BOARD_COLS - 1 - c)
        masks.append(mask)
    return tuple(masks)


def all_skylines():
    """Yield every staircase shape, including the empty board."""
    # Non-decreasing tuples over 0..BOARD_COLS are exactly the valid shapes
    for rows in combinations_with_replacement(range(BOARD_COLS + 1), BOARD_ROWS):
        yield Skyline(rows)
