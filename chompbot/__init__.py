"""Chomp strategy bot: exact solver for the 5x8 poisoned-glass game."""

from .config import BOARD_COLS, BOARD_ROWS, BotConfig
from .engine import choose_move, pick_any_legal, pick_forced_victory
from .errors import ChompError, IllegalMove, MalformedBoard

__version__ = "0.1.0"

__all__ = [
    'BOARD_ROWS', 'BOARD_COLS', 'BotConfig',
    'pick_forced_victory', 'pick_any_legal', 'choose_move',
    'ChompError', 'MalformedBoard', 'IllegalMove',
]
