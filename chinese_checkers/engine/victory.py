"""Goal checking.

A player is done once its pieces fill exactly the opposite triangle.
"""

from ..models import Game


def is_done(game: Game, name: str) -> bool:
    """True if the player's positions equal its goal.

    Raises:
        UnknownPlayer: If no player with this name is registered
    """
    return game.get_player_state(name).is_done()


def finished_players(game: Game) -> list[str]:
    """Names of every done player, in registration order."""
    return [name for name in game.players if is_done(game, name)]


def all_done(game: Game) -> bool:
    return bool(game.players) and all(is_done(game, name) for name in game.players)
