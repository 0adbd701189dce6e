"""Greedy move selection.

Each candidate move is scored by how much closer it brings the piece to
the tip of the player's goal triangle. The best score wins; among equal
scores the earliest candidate is kept. There is no lookahead.
"""

import logging

from ..errors import UnknownPlayer
from ..models import Game, Move, Position
from ..utils import weighted_distance
from .movement import find_all_moves

logger = logging.getLogger(__name__)


def goal_tip(game: Game, name: str) -> Position:
    """Return the tip of the named player's goal triangle."""
    player = game.players.get(name)
    if player is None:
        raise UnknownPlayer(f"Player {name} is not found in the game.")
    return game.tips[player.goal_triangle]


def evaluate_move(game: Game, name: str, move: Move) -> float:
    """Score a move by the net progress toward the goal tip.

    Positive scores move the piece closer to the tip.
    """
    tip = goal_tip(game, name)
    return weighted_distance(tip, move.from_pos) - weighted_distance(tip, move.to_pos)


def select_move(game: Game, name: str) -> Move | None:
    """Pick the highest-scoring candidate move for a player.

    Args:
        game: Current game state
        name: Player name

    Returns:
        The chosen move, or None when the player has no candidate move

    Raises:
        UnknownPlayer: If no player with this name is registered
    """
    best_move: Move | None = None
    best_score = float("-inf")
    for move in find_all_moves(game, name):
        score = evaluate_move(game, name, move)
        if score > best_score:
            best_move = move
            best_score = score

    if best_move is None:
        logger.debug("%s has no candidate move", name)
    else:
        logger.debug("%s selected %s (score %.3f)", name, best_move, best_score)
    return best_move
