"""Tests for greedy move selection."""

import pytest

from chinese_checkers.engine import evaluate_move, goal_tip, new_game, register, select_move
from chinese_checkers.errors import UnknownPlayer
from chinese_checkers.models import CRAWL, JUMP, Move, Position


def _two_player_game(size):
    game = new_game(size)
    register(game, "A", 0)
    register(game, "B", 3)
    return game


def test_goal_tip_is_opposite_tip():
    """Test that the goal tip is the tip of the opposite triangle."""
    game = _two_player_game(4)
    assert goal_tip(game, "A") == Position(12, 16)
    assert goal_tip(game, "B") == Position(12, 0)


def test_evaluate_progress():
    """Test that moving toward the goal tip scores positive."""
    game = _two_player_game(1)
    forward = Move(from_pos=Position(3, 2), to_pos=Position(2, 3))
    backward = Move(from_pos=Position(2, 3), to_pos=Position(3, 2))
    assert evaluate_move(game, "A", forward) > 0
    assert evaluate_move(game, "A", backward) == pytest.approx(-evaluate_move(game, "A", forward))


def test_tie_prefers_first_candidate():
    """Test that equal scores keep the earliest candidate."""
    game = _two_player_game(1)
    move = select_move(game, "A")
    assert move == Move(from_pos=Position(3, 0), to_pos=Position(2, 1), kind=CRAWL)


def test_prefers_long_jump():
    """Test that a chained jump beats a crawl when it gains more ground."""
    game = _two_player_game(4)
    game.get_player_state("A").positions = {Position(12, 8)}
    game.get_player_state("B").positions = {Position(13, 9), Position(15, 11)}
    move = select_move(game, "A")
    assert move.kind == JUMP
    assert move.to_pos == Position(16, 12)
    assert move.path == (Position(12, 8), Position(14, 10), Position(16, 12))


def test_no_move_when_deadlocked():
    """Test that a fully blocked player has no move."""
    game = _two_player_game(1)
    game.get_player_state("B").positions = {
        Position(2, 1),
        Position(4, 1),
        Position(1, 2),
        Position(5, 2),
    }
    assert select_move(game, "A") is None


def test_negative_best_move_still_selected():
    """Test that a move is returned even when every move loses ground."""
    game = _two_player_game(1)
    game.get_player_state("A").positions = {Position(3, 4)}
    game.get_player_state("B").positions = {Position(3, 0)}
    move = select_move(game, "A")
    assert move is not None
    assert evaluate_move(game, "A", move) < 0


def test_unknown_player():
    """Test that an unregistered player fails."""
    game = _two_player_game(1)
    with pytest.raises(UnknownPlayer):
        select_move(game, "Nobody")
    with pytest.raises(UnknownPlayer):
        goal_tip(game, "Nobody")
