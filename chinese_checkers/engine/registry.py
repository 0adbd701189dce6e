"""Player registration."""

import logging

from ..errors import CapacityExceeded, DuplicatePlayer
from ..models import Game, Player, PlayerState
from ..utils import MAX_PLAYERS

logger = logging.getLogger(__name__)


def add_player(game: Game, player: Player) -> PlayerState:
    """Register a player and place its pieces on its starting triangle.

    The player's pieces fill every point of its triangle and its goal is
    the point set of the opposite triangle.

    Args:
        game: Current game state
        player: Player to register

    Returns:
        The new PlayerState

    Raises:
        CapacityExceeded: If six players are already registered
        DuplicatePlayer: If a player with the same name exists
    """
    if len(game.state) >= MAX_PLAYERS:
        raise CapacityExceeded(f"The game cannot have more than {MAX_PLAYERS} players.")
    if player.name in game.state:
        raise DuplicatePlayer(f"Player {player.name} already exists in the game.")

    state = PlayerState(
        positions=game.positions_in_triangle(player.triangle),
        goal=frozenset(game.positions_in_triangle(player.goal_triangle)),
    )
    game.players[player.name] = player
    game.state[player.name] = state

    logger.debug(
        "Registered %s on triangle %d (%d pieces, goal triangle %d)",
        player.name,
        player.triangle,
        len(state.positions),
        player.goal_triangle,
    )
    return state


def register(game: Game, name: str, triangle: int, color: str = "white") -> PlayerState:
    """Register a player by name and starting triangle."""
    return add_player(game, Player(name=name, triangle=triangle, color=color))
