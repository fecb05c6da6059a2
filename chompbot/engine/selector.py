"""Runtime move selection from a raw board.

Moves returned here are one-indexed ``(row, col)`` pairs, matching what the
game program expects; everything underneath is zero-indexed.
"""

from typing import Optional, Tuple

from .classifier import get_position_table
from .moves import POISON, is_terminal, legal_moves, safe_moves
from .skyline import to_skyline


def _to_human(move: Tuple[int, int]) -> Tuple[int, int]:
    return move[0] + 1, move[1] + 1


def is_glass_only(board) -> bool:
    """True when the poison cell is the only one left."""
    return is_terminal(to_skyline(board))


def pick_forced_victory(board) -> Optional[Tuple[int, int]]:
    """Winning move for the player to move, or None if there is none."""
    skyline = to_skyline(board)
    if skyline.is_empty:
        return None
    move = get_position_table().best_reply(skyline)
    return _to_human(move) if move is not None else None


def pick_any_legal(board) -> Optional[Tuple[int, int]]:
    """First non-poison move, the poison if it is forced, None if nothing is left."""
    skyline = to_skyline(board)
    moves = safe_moves(skyline)
    if moves:
        return _to_human(moves[0])
    if POISON in legal_moves(skyline):
        return _to_human(POISON)
    return None


def choose_move(board) -> Optional[Tuple[int, int]]:
    return pick_forced_victory(board) or pick_any_legal(board)
