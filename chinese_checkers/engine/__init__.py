"""Game engine components."""

from .board_builder import board_center, build_topology, compute_tips, new_game
from .movement import (
    adjacent_unoccupied_positions,
    apply_move,
    find_all_moves,
    jump_paths,
    jumpable_positions,
    one_jumpable_positions,
)
from .registry import add_player, register
from .selector import evaluate_move, goal_tip, select_move
from .turn_executor import GameResult, RoundResult, TurnExecutor
from .victory import all_done, finished_players, is_done

__all__ = [
    "GameResult",
    "RoundResult",
    "TurnExecutor",
    "add_player",
    "adjacent_unoccupied_positions",
    "all_done",
    "apply_move",
    "board_center",
    "build_topology",
    "compute_tips",
    "evaluate_move",
    "find_all_moves",
    "finished_players",
    "goal_tip",
    "is_done",
    "jump_paths",
    "jumpable_positions",
    "new_game",
    "one_jumpable_positions",
    "register",
    "select_move",
]
