"""Game configuration constants."""

# Board
DEFAULT_BOARD_SIZE = 4  # 121 points, 10 per triangle
NUM_TRIANGLES = 6
MAX_PLAYERS = 6

# Neighbor displacements in slot order: upper-left, left, lower-left,
# lower-right, right, upper-right. Slot i and slot (i + 3) % 6 are opposite.
NEIGHBOR_OFFSETS = (
    (-1, -1),
    (-2, 0),
    (-1, 1),
    (1, 1),
    (2, 0),
    (1, -1),
)

# Game loop
MAX_ROUNDS_DEFAULT = 100

# Default line-up (name, triangle, color)
DEFAULT_PLAYERS = (
    ("Green", 0, "green"),
    ("Red", 1, "red"),
    ("Blue", 2, "blue"),
    ("Yellow", 3, "yellow"),
    ("White", 4, "white"),
    ("Magenta", 5, "magenta"),
)
