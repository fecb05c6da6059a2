from typing import Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ..config import BOARD_COLS, BOARD_ROWS, NUM_CELLS, POISON_COL, POISON_ROW
from ..engine.skyline import to_skyline


class ChompEnv(gym.Env):
    """Chomp environment following Gymnasium interface"""

    def __init__(self):
        super().__init__()

        # Action space: each cell on the board, row * BOARD_COLS + col
        self.action_space = spaces.Discrete(NUM_CELLS)

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=0, high=1, shape=(BOARD_ROWS, BOARD_COLS), dtype=np.int8
                ),
                "current_player": spaces.Discrete(2),
                "action_mask": spaces.Box(
                    low=0, high=1, shape=(NUM_CELLS,), dtype=np.bool_
                ),
            }
        )

        self.reset()

    def reset(
        self, seed: Optional[int] = None, options: Optional[Dict] = None
    ) -> Tuple[Dict, Dict]:
        super().reset(seed=seed)

        # 1 = cell present, 0 = eaten
        self.board = np.ones((BOARD_ROWS, BOARD_COLS), dtype=np.int8)
        if options and options.get("board") is not None:
            board = np.asarray(options["board"], dtype=np.int8)
            to_skyline(board)  # reject shapes that cannot occur in play
            self.board = board.copy()
        self.current_player = 1  # 1 for first player, -1 for second
        self.move_count = 0
        self.game_over = False
        self.winner = 0

        return self._get_observation(), {}

    def step(self, action: int) -> Tuple[Dict, float, bool, bool, Dict]:
        # If game already over, remain terminated and return current observation
        if self.game_over:
            return self._get_observation(), 0.0, True, False, {"game_over": True}

        if not isinstance(action, (int, np.integer)) or not (0 <= int(action) < NUM_CELLS):
            self.game_over = True
            return self._get_observation(), -1.0, True, False, {"invalid_move": True}

        row, col = divmod(int(action), BOARD_COLS)

        if self.board[row, col] == 0:
            # Eaten cell - terminate game
            self.game_over = True
            return self._get_observation(), -1.0, True, False, {"invalid_move": True}

        self.board[: row + 1, : col + 1] = 0
        self.move_count += 1

        if (row, col) == (POISON_ROW, POISON_COL):
            self.game_over = True
            self.winner = -self.current_player
            return self._get_observation(), -1.0, True, False, {"winner": self.winner}

        self.current_player *= -1

        return self._get_observation(), 0.0, False, False, {}

    def _get_observation(self) -> Dict:
        return {
            "board": self.board.copy(),
            "current_player": 0 if self.current_player == 1 else 1,
            "action_mask": self._get_action_mask(),
        }

    def _get_action_mask(self) -> np.ndarray:
        """Return mask of legal actions"""
        return self.board.reshape(-1) == 1

    def get_legal_actions(self) -> np.ndarray:
        """Get list of legal action indices"""
        return np.where(self._get_action_mask())[0]

    def render(self, mode: str = "human") -> Optional[str]:
        """Render the board state"""
        symbols = {0: ".", 1: "#"}
        lines = [" ".join(symbols[int(cell)] for cell in row) for row in self.board]
        lines[POISON_ROW] = lines[POISON_ROW][:-1] + ("P" if self.board[POISON_ROW, POISON_COL] else ".")
        board_str = "\n".join(lines) + "\n"
        if mode == "human":
            print(board_str)
            return None
        return board_str
