"""Player data models."""

from dataclasses import dataclass, field

from .position import Position


@dataclass(frozen=True)
class Player:
    """A participant in the game.

    The name identifies the player inside the engine; the triangle is the
    corner the player starts from. The goal is always the opposite corner.
    """

    name: str
    triangle: int  # 0-5
    color: str = "white"  # Display label only

    def __post_init__(self):
        """Validate player data after initialization."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if not (0 <= self.triangle < 6):
            raise ValueError(f"Invalid triangle: {self.triangle} (must be 0-5)")

    @property
    def goal_triangle(self) -> int:
        return (self.triangle + 3) % 6


@dataclass
class PlayerState:
    """Occupancy of one player.

    ``positions`` changes with every applied move; ``goal`` is the point
    set of the opposite triangle and is fixed at registration.
    """

    positions: set[Position] = field(default_factory=set)
    goal: frozenset[Position] = field(default_factory=frozenset)

    def is_done(self) -> bool:
        return self.positions == self.goal
