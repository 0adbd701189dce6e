"""Move data model."""

from dataclasses import dataclass

from .position import Position

CRAWL = "crawl"
JUMP = "jump"


@dataclass(frozen=True)
class Move:
    """A candidate or applied move of a single piece.

    ``path`` runs from origin to destination inclusive. For a jump it is
    one witness chain; other chains may reach the same destination.
    """

    from_pos: Position
    to_pos: Position
    kind: str = CRAWL  # "crawl" or "jump"
    path: tuple[Position, ...] = ()

    def __post_init__(self):
        """Validate move data after initialization."""
        if self.kind not in (CRAWL, JUMP):
            raise ValueError(f"Invalid kind: {self.kind} (must be '{CRAWL}' or '{JUMP}')")
        if self.from_pos == self.to_pos:
            raise ValueError(f"Cannot move a piece onto itself: {self.from_pos}")
        if not self.path:
            # frozen dataclass, so bypass __setattr__
            object.__setattr__(self, "path", (self.from_pos, self.to_pos))
        elif self.path[0] != self.from_pos or self.path[-1] != self.to_pos:
            raise ValueError("path must start at from_pos and end at to_pos")
