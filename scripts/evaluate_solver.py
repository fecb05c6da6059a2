#!/usr/bin/env python3
"""Play the solver against a random opponent and report the win rate."""

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from chompbot.agents import RandomAgent, SolverAgent
from chompbot.engine.classifier import PositionTable
from chompbot.eval import Evaluator


def main():
    parser = argparse.ArgumentParser(description='Evaluate the Chomp solver')
    parser.add_argument('--games', type=int, default=200, help='Number of games')
    parser.add_argument('--seed', type=int, default=42, help='Random opponent seed')
    args = parser.parse_args()

    start = time.time()
    table = PositionTable.build(show_progress=True)
    tqdm.write(f"Table built in {time.time() - start:.2f}s: {table.stats()}")

    evaluator = Evaluator(disable_tqdm=False)
    stats = evaluator.evaluate(SolverAgent(), RandomAgent(args.seed), num_games=args.games)

    tqdm.write(f"\nWin rate: {stats['win_rate']:.1%} "
               f"({stats['wins']} wins, {stats['losses']} losses in {stats['total_games']} games)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
