"""Backward-induction classifier for every Chomp shape.

Every staircase shape is solved once and stored in a dense table indexed by
:func:`~chompbot.engine.skyline.encode`. A shape is winning when some
non-poison move leads to a losing shape; the stored move is the first such
move in :func:`~chompbot.engine.moves.legal_moves` order.
"""

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm

from ..config import BOARD_COLS
from .moves import Move, apply_move, is_terminal, safe_moves
from .skyline import TABLE_SIZE, Skyline, all_skylines, encode

NO_MOVE = -1


class Outcome(IntEnum):
    UNKNOWN = 0
    LOSING = 1
    WINNING = 2


@dataclass(frozen=True)
class Classification:
    """Verdict for the player to move."""

    outcome: Outcome
    move: Optional[Move] = None  # zero-indexed; set only when winning

    @property
    def is_win(self) -> bool:
        return self.outcome == Outcome.WINNING

    @property
    def is_loss(self) -> bool:
        return self.outcome == Outcome.LOSING


class PositionTable:
    """Dense outcome and best-move arrays over the whole index space."""

    def __init__(self, outcomes: np.ndarray, moves: np.ndarray):
        if outcomes.shape != (TABLE_SIZE,) or moves.shape != (TABLE_SIZE,):
            raise ValueError(f"Table arrays must have shape ({TABLE_SIZE},)")
        self.outcomes = outcomes
        self.moves = moves

    @classmethod
    def build(cls, show_progress: bool = False) -> 'PositionTable':
        """Solve every shape and return a read-only table."""
        outcomes = np.full(TABLE_SIZE, Outcome.UNKNOWN, dtype=np.int8)
        moves = np.full(TABLE_SIZE, NO_MOVE, dtype=np.int8)

        def classify(skyline: Skyline) -> int:
            idx = encode(skyline)
            if outcomes[idx] != Outcome.UNKNOWN:
                return outcomes[idx]

            if is_terminal(skyline):
                outcomes[idx] = Outcome.LOSING
                return outcomes[idx]

            # Every move strictly shrinks the shape, so recursion depth is
            # bounded by the cell count
            for row, col in safe_moves(skyline):
                if classify(apply_move(skyline, row, col)) == Outcome.LOSING:
                    outcomes[idx] = Outcome.WINNING
                    moves[idx] = row * BOARD_COLS + col
                    return outcomes[idx]

            outcomes[idx] = Outcome.LOSING
            return outcomes[idx]

        classify(Skyline.full())

        # The full board reaches every staircase; the sweep fills in anything
        # the search above skipped
        shapes = [s for s in all_skylines() if not s.is_empty]
        for skyline in tqdm(shapes, desc="Classifying shapes", disable=not show_progress):
            classify(skyline)

        outcomes.setflags(write=False)
        moves.setflags(write=False)
        return cls(outcomes, moves)

    def lookup(self, skyline: Skyline) -> Classification:
        idx = encode(skyline)
        outcome = Outcome(int(self.outcomes[idx]))
        if outcome != Outcome.WINNING:
            return Classification(outcome)
        row, col = divmod(int(self.moves[idx]), BOARD_COLS)
        return Classification(outcome, (row, col))

    def best_reply(self, skyline: Skyline) -> Optional[Tuple[int, int]]:
        """Zero-indexed winning move, or None when there is no forced win."""
        return self.lookup(skyline).move

    def stats(self) -> Dict[str, int]:
        winning = int(np.count_nonzero(self.outcomes == Outcome.WINNING))
        losing = int(np.count_nonzero(self.outcomes == Outcome.LOSING))
        return {
            'winning': winning,
            'losing': losing,
            'classified': winning + losing,
            'table_size': TABLE_SIZE,
        }


_TABLE: Optional[PositionTable] = None
_TABLE_LOCK = threading.Lock()


def get_position_table() -> PositionTable:
    """Process-wide table, built on first use."""
    global _TABLE
    if _TABLE is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = PositionTable.build()
    return _TABLE
