"""Move loop that drives a game through a :class:`GameClient`.

The client owns transport and game accounts; this module only reads boards,
asks the engine for a move and hands the move back.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .agents import make_agent
from .config import BOARD_COLS, BOARD_ROWS, BotConfig
from .engine.selector import choose_move, is_glass_only
from .engine.skyline import board_from_bitmasks, board_to_bitmasks
from .env.chomp_env import ChompEnv
from .errors import IllegalMove, MalformedBoard

logger = logging.getLogger(__name__)


class GameClient(ABC):
    """Access to a remote game."""

    @abstractmethod
    def fetch_board(self) -> Optional[np.ndarray]:
        """Current raw board, or None when no game is open."""

    @abstractmethod
    def send_move(self, row: int, col: int) -> None:
        """Submit a one-indexed move; opens a new game if none is open."""

    @abstractmethod
    def reset(self) -> None:
        """Close the current game, if any."""


class LocalGameClient(GameClient):
    """In-process game against a local opponent agent.

    The game closes as soon as someone takes the poison; ``result`` then
    holds ``"bot"`` or ``"opponent"``.
    """

    def __init__(self, opponent=None, seed: Optional[int] = None):
        self.opponent = opponent if opponent is not None else make_agent("random", seed)
        self.env = ChompEnv()
        self.is_open = False
        self.result: Optional[str] = None
        self.games_played = 0

    def fetch_board(self) -> Optional[np.ndarray]:
        if not self.is_open:
            return None
        return self.env.board.copy()

    def send_move(self, row: int, col: int) -> None:
        if not self.is_open:
            self.env.reset()
            self.is_open = True
            self.result = None

        self._play(row, col)
        if self.env.game_over:
            self._close("opponent")
            return

        reply = self.opponent.act(self.env.board)
        self._play(*reply)
        if self.env.game_over:
            self._close("bot")

    def reset(self) -> None:
        self.env.reset()
        self.is_open = False
        self.result = None

    def _play(self, row: int, col: int) -> None:
        if not (1 <= row <= BOARD_ROWS and 1 <= col <= BOARD_COLS):
            raise IllegalMove(f"Move ({row}, {col}) is off the board")
        _, _, _, _, info = self.env.step((row - 1) * BOARD_COLS + (col - 1))
        if info.get("invalid_move"):
            self.is_open = False
            raise IllegalMove(f"Cell ({row}, {col}) is already eaten")

    def _close(self, winner: str) -> None:
        self.is_open = False
        self.result = winner
        self.games_played += 1


def format_board(board) -> str:
    """Rows as 8-bit strings, 1 = eaten, top row first."""
    return "\n".join(
        f"row{i + 1}: {mask:0{BOARD_COLS}b}" for i, mask in enumerate(board_to_bitmasks(board))
    )


def log_board(tag: str, board) -> None:
    logger.info(f"{tag}:\n{format_board(board)}")


def opening_move() -> Tuple[int, int]:
    return choose_move(np.ones((BOARD_ROWS, BOARD_COLS), dtype=np.int8))


def run_single_move(client: GameClient, config: BotConfig) -> Optional[Tuple[int, int]]:
    """Make at most one move. Returns the move sent, if any."""
    board = client.fetch_board()

    if board is None:
        if not config.init_if_missing:
            logger.warning("Game account missing or closed, aborting")
            return None
        move = opening_move()
        logger.info(f"No game found, starting a new one with opening move {move}")
        client.send_move(*move)
        updated = client.fetch_board()
        if updated is not None:
            log_board("new board", updated)
        return move

    log_board("current", board)
    if is_glass_only(board):
        logger.info("Only glass remains, game ended")
        return None

    if config.cash_out:
        logger.info("Cash-out requested, no move sent")
        return None

    move = config.manual_move or choose_move(board)
    logger.info(f"Chosen move: {move}")
    if move is None:
        logger.info("No move available")
        return None

    client.send_move(*move)
    updated = client.fetch_board()
    if updated is not None:
        log_board("updated", updated)
    else:
        logger.warning("Game account closed after our move")
    return move


def run_autoplay(
    client: GameClient,
    config: BotConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict:
    """Keep moving until the game ends or ``max_moves`` moves were sent."""
    logger.info(
        f"Autoplay ON (interval={config.interval_ms}ms, max_moves={config.max_moves}, "
        f"init_if_missing={config.init_if_missing})"
    )

    moves_sent = 0
    stop_reason = "max_moves"
    while moves_sent < config.max_moves:
        board = client.fetch_board()

        if board is None:
            if not config.init_if_missing:
                logger.warning("Game account missing, stopping autoplay")
                stop_reason = "missing"
                break
            move = opening_move()
            logger.info(f"No game found, opening a new one with {move}")
        else:
            log_board("board", board)
            if is_glass_only(board):
                logger.info("Only glass remains, game over")
                stop_reason = "glass_only"
                break
            move = choose_move(board)
            logger.info(f"Chosen: {move}")
            if move is None:
                logger.info("No safe move, stopping")
                stop_reason = "no_move"
                break

        client.send_move(*move)
        moves_sent += 1
        sleep(config.interval_ms / 1000.0)
    else:
        logger.warning(f"Reached max_moves={config.max_moves}, stopping")

    final = client.fetch_board()
    if final is not None:
        log_board("final", final)
    else:
        logger.info("Final board: account missing or closed")

    return {"moves_sent": moves_sent, "stop_reason": stop_reason}


def run(client: GameClient, config: BotConfig, sleep: Callable[[float], None] = time.sleep):
    """Entry point used by the command line script."""
    logger.info(f"Starting chomp bot: {config.description}")
    if config.reset:
        client.reset()
    if config.autoplay:
        return run_autoplay(client, config, sleep=sleep)
    return run_single_move(client, config)


def parse_wire_board(text: str) -> np.ndarray:
    """Parse five comma-separated row masks (``0xfe``, ``0b11111110``,
    ``11111110`` or decimal) into a raw board."""
    masks = []
    for token in text.replace(" ", "").split(","):
        try:
            if len(token) == BOARD_COLS and set(token) <= {"0", "1"}:
                masks.append(int(token, 2))
            else:
                masks.append(int(token, 0))
        except ValueError:
            raise MalformedBoard(f"Cannot parse row mask {token!r}") from None
    return board_from_bitmasks(masks)
