"""Game state container."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from ..errors import UnknownPlayer, UnknownPosition
from .node import Node
from .player import Player, PlayerState
from .position import Position


@dataclass
class Game:
    """Main game state container.

    The Game owns the board topology, the six tips and the occupancy of
    every registered player. Topology and tips are fixed once the board is
    built; only player occupancy changes, and only through move
    application. All engine logic operates on this state.
    """

    size: int  # Board size, validated by new_game (1 gives the minimal 13-point board)
    nodes: Mapping[Position, Node] = field(default_factory=dict)  # Read-only topology
    tips: tuple[Position, ...] = ()  # Tip of each triangle, indexed by triangle
    players: dict[str, Player] = field(default_factory=dict)  # Registration order
    state: dict[str, PlayerState] = field(default_factory=dict)  # name -> occupancy

    def node(self, position: Position) -> Node:
        """Return the node at ``position``.

        Raises:
            UnknownPosition: If the point is not on the board
        """
        try:
            return self.nodes[position]
        except KeyError:
            raise UnknownPosition(f"Position {position} is not found on the board.") from None

    def points(self) -> Iterator[Position]:
        """Iterate over every point of the board."""
        return iter(self.nodes)

    def positions_in_triangle(self, triangle: int) -> set[Position]:
        return {p for p, node in self.nodes.items() if node.triangle == triangle}

    def get_player_state(self, name: str) -> PlayerState:
        """Return the occupancy of a registered player.

        Raises:
            UnknownPlayer: If no player with this name is registered
        """
        try:
            return self.state[name]
        except KeyError:
            raise UnknownPlayer(f"Player {name} is not found in the game.") from None

    def is_occupied(self, position: Position) -> bool:
        """True if any registered player holds ``position``."""
        return any(position in ps.positions for ps in self.state.values())

    def owner_of(self, position: Position) -> str | None:
        """Return the name of the player holding ``position``, if any."""
        for name, ps in self.state.items():
            if position in ps.positions:
                return name
        return None
