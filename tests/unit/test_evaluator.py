"""Unit tests for the evaluator."""

from chompbot.agents import RandomAgent, SolverAgent
from chompbot.eval import Evaluator


class TestEvaluator:
    """Test head-to-head play."""

    def test_play_game_solver_first_wins(self):
        evaluator = Evaluator()
        result = evaluator.play_game(SolverAgent(), RandomAgent(seed=0))
        assert result["winner"] == 1
        assert result["first"] == "solver"
        assert result["moves"] >= 2

    def test_solver_mirror_match(self):
        # The first player always has a forced win
        result = Evaluator().play_game(SolverAgent(), SolverAgent())
        assert result["winner"] == 1

    def test_evaluate_counts(self):
        stats = Evaluator().evaluate(SolverAgent(), RandomAgent(seed=1), num_games=6)
        assert stats["total_games"] == 6
        assert stats["wins"] + stats["losses"] == 6
        assert len(stats["results"]) == 6
        # Every game where the solver moves first is a win
        assert stats["wins"] >= 3

    def test_evaluate_zero_games(self):
        stats = Evaluator().evaluate(SolverAgent(), RandomAgent(seed=1), num_games=0)
        assert stats["win_rate"] == 0.0
