"""Centralized configuration for the Chomp bot.

Board geometry is fixed; the engine's packing and table size depend on it.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Board geometry
# ============================================================================

BOARD_ROWS = 5
BOARD_COLS = 8
NUM_CELLS = BOARD_ROWS * BOARD_COLS

# Zero-indexed; the bottom-right corner
POISON_ROW = BOARD_ROWS - 1
POISON_COL = BOARD_COLS - 1


# ============================================================================
# Bot configuration
# ============================================================================

class BotConfig(BaseModel):
    """Settings for the move loop."""
    autoplay: bool = False
    interval_ms: int = Field(1500, ge=0)
    max_moves: int = Field(200, ge=1)
    reset: bool = False
    init_if_missing: bool = True
    # Manual one-indexed move override
    row: Optional[int] = Field(None, ge=1, le=BOARD_ROWS)
    col: Optional[int] = Field(None, ge=1, le=BOARD_COLS)
    cash_out: bool = False
    # Local games only
    opponent: Literal["random", "solver"] = "random"
    seed: Optional[int] = None

    @property
    def manual_move(self) -> Optional[tuple]:
        if self.row is None or self.col is None:
            return None
        return self.row, self.col

    @property
    def description(self) -> str:
        """Human-readable description"""
        mode = "autoplay" if self.autoplay else "single-move"
        return f"{mode}, interval={self.interval_ms}ms, max_moves={self.max_moves}"


DEFAULT_CONFIG = BotConfig()
