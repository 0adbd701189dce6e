"""Board node model."""

from dataclasses import dataclass

from .position import Position


@dataclass(frozen=True)
class Node:
    """A single point of the board topology.

    Nodes are built once with the board and never change afterwards.
    """

    neighbors: tuple[Position | None, ...]  # 6 slots, None at the board edge
    triangle: int | None  # 0-5, or None for the central hexagon

    def __post_init__(self):
        """Validate node data after initialization."""
        if len(self.neighbors) != 6:
            raise ValueError(f"Invalid neighbors: {len(self.neighbors)} slots (must be 6)")
        if self.triangle is not None and not (0 <= self.triangle < 6):
            raise ValueError(f"Invalid triangle: {self.triangle} (must be 0-5 or None)")

    @staticmethod
    def opposite_slot(slot: int) -> int:
        """Return the slot pointing in the opposite direction of ``slot``."""
        return (slot + 3) % 6

    def valid_neighbors(self) -> list[Position]:
        """Neighbors that exist on the board, in slot order."""
        return [p for p in self.neighbors if p is not None]

    def slot_of(self, neighbor: Position) -> int:
        """Return the slot index of ``neighbor``.

        Raises:
            ValueError: If ``neighbor`` is not adjacent to this node
        """
        for slot, p in enumerate(self.neighbors):
            if p == neighbor:
                return slot
        raise ValueError(f"{neighbor} is not a neighbor of this node")

    def beyond(self, neighbor: Position) -> Position | None:
        """Return the point on the far side of this node, seen from ``neighbor``.

        This is the landing point of a jump from ``neighbor`` over this node.
        """
        return self.neighbors[self.opposite_slot(self.slot_of(neighbor))]
