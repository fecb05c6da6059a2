"""Move-choosing players for local games and evaluation.

Agents take a raw board and return a one-indexed ``(row, col)`` move, or
None when nothing is left to eat.
"""

from typing import Optional, Tuple

import numpy as np

from .engine.moves import POISON, safe_moves
from .engine.selector import choose_move
from .engine.skyline import to_skyline


class SolverAgent:
    """Plays the precomputed forced win when there is one."""

    name = "solver"

    def act(self, board) -> Optional[Tuple[int, int]]:
        return choose_move(board)


class RandomAgent:
    """Uniformly random non-poison move; takes the poison only when forced."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def act(self, board) -> Optional[Tuple[int, int]]:
        skyline = to_skyline(board)
        if skyline.is_empty:
            return None
        moves = safe_moves(skyline)
        if not moves:
            return POISON[0] + 1, POISON[1] + 1
        row, col = moves[int(self.rng.integers(len(moves)))]
        return row + 1, col + 1


def make_agent(kind: str, seed: Optional[int] = None):
    if kind == "solver":
        return SolverAgent()
    if kind == "random":
        return RandomAgent(seed)
    raise ValueError(f"Unknown agent kind: {kind}")
