"""Board topology construction.

The hexagram is enumerated row by row. Each row's span comes from two
piecewise-linear formulas mirrored around the middle row ``y = 2 * size``;
every point then gets its six neighbor slots and its triangle index.
"""

import logging
from types import MappingProxyType

from ..models import Game, Node, Position
from ..utils import NEIGHBOR_OFFSETS

logger = logging.getLogger(__name__)

OFFSETS = tuple(Position(dx, dy) for dx, dy in NEIGHBOR_OFFSETS)


def new_game(size: int) -> Game:
    """Create a game with a fresh board and no registered players.

    This is the only place the board size is validated; it is checked
    before any topology is built.

    Args:
        size: Board size (must be >= 1)

    Returns:
        Game with topology and tips initialized

    Raises:
        ValueError: If size is smaller than 1
    """
    if size < 1:
        raise ValueError(f"Invalid size: {size} (must be >= 1)")

    nodes = build_topology(size)
    game = Game(
        size=size,
        nodes=MappingProxyType(nodes),
        tips=compute_tips(size),
    )
    logger.debug("Built board of size %d with %d points", size, len(nodes))
    return game


def build_topology(size: int) -> dict[Position, Node]:
    """Build the mapping of every valid point to its node.

    Algorithm:
    1. For each row y in 0..4*size compute the row start and point count:
       - y < size or 2*size <= y <= 3*size: start 3*size - y, y + 1 points
       - otherwise: start y - size, 4*size - y + 1 points
    2. Points in a row are two columns apart
    3. For each point, build its node from the six neighbor offsets

    Args:
        size: Board size (caller guarantees >= 1)

    Returns:
        Dictionary mapping each point to its Node
    """
    nodes: dict[Position, Node] = {}
    for y in range(4 * size + 1):
        start, count = _row_span(y, size)
        for i in range(count):
            position = Position(start + 2 * i, y)
            nodes[position] = make_node(position, size)
    return nodes


def make_node(position: Position, size: int) -> Node:
    """Build the node for one point of a board of ``size``."""
    return Node(
        neighbors=tuple((position + offset).validate(size) for offset in OFFSETS),
        triangle=position.in_triangle(size),
    )


def compute_tips(size: int) -> tuple[Position, ...]:
    """Return the extremal point of each triangle, indexed by triangle."""
    return (
        Position(3 * size, 0),
        Position(0, size),
        Position(0, 3 * size),
        Position(3 * size, 4 * size),
        Position(6 * size, 3 * size),
        Position(6 * size, size),
    )


def board_center(size: int) -> Position:
    return Position(3 * size, 2 * size)


def _row_span(y: int, size: int) -> tuple[int, int]:
    """Return (x start, point count) for row ``y``."""
    if y < size or 2 * size <= y <= 3 * size:
        return 3 * size - y, y + 1
    return y - size, 4 * size - y + 1
