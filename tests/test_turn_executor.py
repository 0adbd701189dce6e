"""Tests for turn sequencing."""

import pytest

from chinese_checkers.engine import TurnExecutor, is_done, new_game, register
from chinese_checkers.models import Position
from chinese_checkers.utils import DEFAULT_PLAYERS


def _two_player_game(size):
    game = new_game(size)
    register(game, "A", 0)
    register(game, "B", 3)
    return game


class TestTurnExecutor:
    """Test TurnExecutor."""

    def test_execute_turn_applies_selected_move(self):
        """Test that a turn moves exactly one piece."""
        game = _two_player_game(1)
        executor = TurnExecutor()
        move = executor.execute_turn(game, "A")
        assert move.from_pos == Position(3, 0)
        assert game.get_player_state("A").positions == {move.to_pos}

    def test_execute_turn_skips_done_player(self):
        """Test that a finished player does not move."""
        game = _two_player_game(1)
        state = game.get_player_state("A")
        state.positions = set(state.goal)
        game.get_player_state("B").positions = {Position(3, 2)}
        assert TurnExecutor().execute_turn(game, "A") is None
        assert state.positions == set(state.goal)

    def test_execute_turn_deadlocked(self):
        """Test that a player without moves passes."""
        game = _two_player_game(1)
        game.get_player_state("B").positions = {
            Position(2, 1),
            Position(4, 1),
            Position(1, 2),
            Position(5, 2),
        }
        assert TurnExecutor().execute_turn(game, "A") is None
        assert game.get_player_state("A").positions == {Position(3, 0)}

    def test_execute_round_moves_every_player(self):
        """Test that a round gives each player one move."""
        game = _two_player_game(4)
        result = TurnExecutor().execute_round(game, 1)
        assert result.round_number == 1
        assert set(result.moves) == {"A", "B"}
        assert result.finished == []

    def test_six_players_keep_pieces_disjoint(self):
        """Test that occupancy stays disjoint over many rounds."""
        game = new_game(4)
        for name, triangle, color in DEFAULT_PLAYERS:
            register(game, name, triangle, color)
        executor = TurnExecutor()
        for round_number in range(1, 21):
            executor.execute_round(game, round_number)

        seen = set()
        for state in game.state.values():
            assert len(state.positions) == 10
            assert not seen & state.positions
            seen |= state.positions
        assert all(point in game.nodes for point in seen)

    def test_run_minimal_board_to_completion(self):
        """Test that two players swap corners on the smallest board."""
        game = _two_player_game(1)
        result = TurnExecutor().run(game, max_rounds=20)
        assert result.all_finished
        assert sorted(result.finished) == ["A", "B"]
        assert result.rounds_played < 20
        assert is_done(game, "A")
        assert is_done(game, "B")

    def test_run_respects_round_limit(self):
        """Test that the run stops at max_rounds."""
        game = _two_player_game(4)
        result = TurnExecutor().run(game, max_rounds=3)
        assert result.rounds_played == 3
        assert not result.all_finished

    def test_run_invalid_round_limit(self):
        """Test that a non-positive round limit is rejected."""
        with pytest.raises(ValueError, match="Invalid max_rounds"):
            TurnExecutor().run(_two_player_game(1), max_rounds=0)

    def test_run_reports_each_round(self):
        """Test that the round callback sees every completed round."""
        game = _two_player_game(4)
        seen = []
        result = TurnExecutor().run(game, max_rounds=3, on_round=seen.append)
        assert [r.round_number for r in seen] == [1, 2, 3]
        assert all(set(r.moves) == {"A", "B"} for r in seen)
        assert result.rounds_played == 3

    def test_run_without_players_plays_all_rounds(self):
        """Test that an empty game never counts as finished."""
        result = TurnExecutor().run(new_game(1), max_rounds=5)
        assert result.rounds_played == 5
        assert result.finished == []
        assert not result.all_finished
