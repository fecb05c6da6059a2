"""Strategy engine: skyline codec, move generation, classification and selection."""

from .classifier import Classification, Outcome, PositionTable, get_position_table
from .moves import POISON, apply_move, is_terminal, legal_moves, safe_moves
from .selector import choose_move, is_glass_only, pick_any_legal, pick_forced_victory
from .skyline import (
    TABLE_SIZE,
    Skyline,
    all_skylines,
    board_from_bitmasks,
    board_to_bitmasks,
    decode,
    encode,
    skyline_to_board,
    to_skyline,
)

__all__ = [
    'Skyline', 'to_skyline', 'encode', 'decode', 'skyline_to_board',
    'board_from_bitmasks', 'board_to_bitmasks', 'all_skylines', 'TABLE_SIZE',
    'POISON', 'legal_moves', 'safe_moves', 'apply_move', 'is_terminal',
    'Outcome', 'Classification', 'PositionTable', 'get_position_table',
    'pick_forced_victory', 'pick_any_legal', 'choose_move', 'is_glass_only',
]
