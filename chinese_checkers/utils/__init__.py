"""Utility functions and constants for Chinese Checkers."""

from .constants import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_PLAYERS,
    MAX_PLAYERS,
    MAX_ROUNDS_DEFAULT,
    NEIGHBOR_OFFSETS,
    NUM_TRIANGLES,
)
from .distance import weighted_distance

__all__ = [
    "DEFAULT_BOARD_SIZE",
    "DEFAULT_PLAYERS",
    "MAX_PLAYERS",
    "MAX_ROUNDS_DEFAULT",
    "NEIGHBOR_OFFSETS",
    "NUM_TRIANGLES",
    "weighted_distance",
]
