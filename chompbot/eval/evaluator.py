from typing import Dict

from tqdm.auto import tqdm

from ..config import BOARD_COLS
from ..env.chomp_env import ChompEnv


class Evaluator:
    """Head-to-head matches between agents"""

    def __init__(self, disable_tqdm: bool = True):
        self.env = ChompEnv()
        self.disable_tqdm = disable_tqdm

    def play_game(self, first, second) -> Dict:
        """Play a single game; ``first`` moves as player 1"""
        self.env.reset()

        move_count = 0
        while not self.env.game_over:
            agent = first if self.env.current_player == 1 else second
            move = agent.act(self.env.board)
            row, col = move
            self.env.step((row - 1) * BOARD_COLS + (col - 1))
            move_count += 1

        return {
            "winner": self.env.winner,
            "moves": move_count,
            "first": first.name,
            "second": second.name,
        }

    def evaluate(self, agent, baseline, num_games: int = 100) -> Dict:
        """Evaluate ``agent`` against ``baseline``, alternating who moves first"""
        results = []
        wins = losses = 0

        games = tqdm(range(num_games), desc="Evaluation", unit="game", disable=self.disable_tqdm)
        for game_idx in games:
            if game_idx % 2 == 0:
                result = self.play_game(agent, baseline)
                won = result["winner"] == 1
            else:
                result = self.play_game(baseline, agent)
                won = result["winner"] == -1

            if won:
                wins += 1
            else:
                losses += 1
            results.append(result)

        return {
            "win_rate": wins / num_games if num_games > 0 else 0.0,
            "wins": wins,
            "losses": losses,
            "total_games": num_games,
            "results": results,
        }
