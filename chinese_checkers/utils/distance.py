"""Distance calculations for move scoring."""

from ..models.position import Position


def weighted_distance(a: Position, b: Position) -> float:
    """Calculate the weighted Euclidean distance between two points.

    The board stores a hex grid in skewed coordinates where horizontal
    neighbors are two columns apart, so the x component is scaled down
    by sqrt(3) before taking the ordinary Euclidean length. This is only
    used for heuristic scoring, never for adjacency.

    Args:
        a: First point
        b: Second point

    Returns:
        Weighted distance between the two points

    Examples:
        >>> weighted_distance(Position(0, 0), Position(0, 2))
        2.0
        >>> weighted_distance(Position(0, 0), Position(3, 0))
        1.7320508075688772
    """
    return (a - b).norm()
