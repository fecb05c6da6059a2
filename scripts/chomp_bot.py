#!/usr/bin/env python3
"""Chomp bot command line.

Plays a local game against a built-in opponent, or solves a single board
given as wire row masks (set bit = eaten, MSB = column 1).

Example:
    python scripts/chomp_bot.py --autoplay --max_moves 20 --interval_ms 0
    python scripts/chomp_bot.py --board 0xff,0xff,0xff,0xfe,0xfe
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from chompbot.agents import make_agent
from chompbot.bot import LocalGameClient, format_board, parse_wire_board, run
from chompbot.config import BotConfig
from chompbot.engine import is_glass_only, pick_any_legal, pick_forced_victory
from chompbot.errors import ChompError
from chompbot.utils.validation import print_validation_errors, validate_bot_config


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Setup logging for the bot."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger("chomp-bot")


def parse_args():
    parser = argparse.ArgumentParser(description='Chomp/Glass strategy bot')
    parser.add_argument('--autoplay', action='store_true',
                        help='Keep playing until the game ends or max_moves is reached')
    parser.add_argument('--interval_ms', type=int, default=1500,
                        help='Pause between autoplay moves')
    parser.add_argument('--max_moves', type=int, default=200,
                        help='Stop autoplay after this many moves')
    parser.add_argument('--reset', action='store_true',
                        help='Close any open game before playing')
    parser.add_argument('--no_init', dest='init_if_missing', action='store_false',
                        help='Do not open a new game when none exists')
    parser.add_argument('--r', dest='row', type=int, default=None,
                        help='Manual move row (1-5)')
    parser.add_argument('--c', dest='col', type=int, default=None,
                        help='Manual move column (1-8)')
    parser.add_argument('--cash_out', action='store_true',
                        help='End the turn without sending a move')
    parser.add_argument('--opponent', choices=['random', 'solver'], default='random',
                        help='Local opponent')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the opponent')
    parser.add_argument('--board', type=str, default=None,
                        help='Solve this board and exit: five row masks, e.g. 0xff,0xff,0xff,0xfe,0xfe')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    return parser.parse_args()


def solve_board(text: str, logger: logging.Logger) -> int:
    board = parse_wire_board(text)
    logger.info(f"board:\n{format_board(board)}")
    if is_glass_only(board):
        logger.info("Only glass remains, the player to move must take it")
        return 0
    move = pick_forced_victory(board)
    if move is None:
        logger.info(f"No forced win; fallback move {pick_any_legal(board)}")
    else:
        logger.info(f"Forced win: {move}")
    return 0


def main():
    args = parse_args()
    logger = setup_logging(args.verbose)

    try:
        if args.board is not None:
            return solve_board(args.board, logger)

        config = BotConfig(
            autoplay=args.autoplay,
            interval_ms=args.interval_ms,
            max_moves=args.max_moves,
            reset=args.reset,
            init_if_missing=args.init_if_missing,
            row=args.row,
            col=args.col,
            cash_out=args.cash_out,
            opponent=args.opponent,
            seed=args.seed,
        )
    except ValidationError as e:
        logger.error(f"Invalid arguments: {e}")
        return 1
    except ChompError as e:
        logger.error(f"Malformed board: {e}")
        return 1

    validation_errors = validate_bot_config(config)
    if validation_errors:
        print_validation_errors(validation_errors, logger)
        return 1

    client = LocalGameClient(opponent=make_agent(config.opponent, config.seed))
    try:
        result = run(client, config)
    except ChompError as e:
        logger.error(f"Game state rejected: {e}")
        return 1

    logger.info(f"Result: {result}; games finished: {client.games_played}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
