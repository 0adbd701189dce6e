"""Plain-text board rendering.

Renders the hexagram as a character grid using the board's own skewed
coordinates, so each point lands at column x, row y.
"""

from ..models import Game


class BoardRenderer:
    """Renders a board snapshot as text."""

    EMPTY = "o"
    BLANK = " "
    SYMBOLS = "123456"  # Indexed by registration order

    def render(self, game: Game) -> str:
        """Render the board with every player's pieces.

        Output format for size 1 with two registered players, the first on
        triangle 0 and the second on triangle 3::

               1
            o o o o
             o o o
            o o o o
               2

        Legend:
        - 'o' = empty point
        - digit = piece of the n-th registered player

        Args:
            game: Game to render

        Returns:
            Multi-line string, one line per board row
        """
        width = 6 * game.size + 1
        height = 4 * game.size + 1
        grid = [[self.BLANK] * width for _ in range(height)]
        symbols = self.symbols(game)

        for point in game.points():
            owner = game.owner_of(point)
            grid[point.y][point.x] = self.EMPTY if owner is None else symbols[owner]

        return "\n".join("".join(row).rstrip() for row in grid)

    def symbols(self, game: Game) -> dict[str, str]:
        """Map each player name to its glyph."""
        return {name: self.SYMBOLS[i] for i, name in enumerate(game.players)}
