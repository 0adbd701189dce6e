"""Data models for Chinese Checkers."""

from .game import Game
from .move import CRAWL, JUMP, Move
from .node import Node
from .player import Player, PlayerState
from .position import Position

__all__ = [
    "CRAWL",
    "JUMP",
    "Game",
    "Move",
    "Node",
    "Player",
    "PlayerState",
    "Position",
]
