"""Move generation and application.

This module handles:
1. Crawl moves (one step to an unoccupied neighbor)
2. Jump moves (the closure of chained hops over occupied neighbors)
3. Candidate move assembly for a player
4. Applying a move to a player's occupancy

Generation reads occupancy and application writes it, so a caller must
finish generating and selecting before applying (see TurnExecutor).
"""

import logging

from ..models import CRAWL, JUMP, Game, Move, Position

logger = logging.getLogger(__name__)


def adjacent_unoccupied_positions(game: Game, position: Position) -> set[Position]:
    """Return the neighbors of ``position`` that no player holds.

    Raises:
        UnknownPosition: If ``position`` is not on the board
    """
    return {p for p in game.node(position).valid_neighbors() if not game.is_occupied(p)}


def one_jumpable_positions(game: Game, position: Position) -> set[Position]:
    """Return the landing points of every single jump from ``position``.

    A jump goes over an occupied neighbor (the pivot) to the point directly
    beyond it, which must exist and be unoccupied.

    Raises:
        UnknownPosition: If ``position`` is not on the board
    """
    landings = set()
    for pivot in game.node(position).valid_neighbors():
        if not game.is_occupied(pivot):
            continue
        landing = game.node(pivot).beyond(position)
        if landing is not None and not game.is_occupied(landing):
            landings.add(landing)
    return landings


def jump_paths(game: Game, position: Position) -> dict[Position, tuple[Position, ...]]:
    """Find every point reachable from ``position`` by chained jumps.

    Breadth-first frontier expansion: start from the single-jump landings,
    then expand each newly found point until a round adds nothing new. The
    moving piece still counts as occupying ``position`` throughout.

    Args:
        game: Current game state
        position: Origin of the jump chain

    Returns:
        Dictionary mapping each destination to one witness path (origin and
        every landing point in order). The witness is the first chain found,
        so it has the fewest jumps.
    """
    paths: dict[Position, tuple[Position, ...]] = {}
    frontier = [position]
    while frontier:
        next_frontier = []
        for current in frontier:
            base = paths.get(current, (position,))
            for landing in sorted(one_jumpable_positions(game, current)):
                if landing in paths:
                    continue
                paths[landing] = base + (landing,)
                next_frontier.append(landing)
        frontier = next_frontier
    logger.debug("closure from %s: %d destinations", position, len(paths))
    return paths


def jumpable_positions(game: Game, position: Position) -> set[Position]:
    """Return the closure of jump destinations from ``position``."""
    return set(jump_paths(game, position))


def find_all_moves(game: Game, name: str) -> list[Move]:
    """Enumerate every candidate move of a player.

    Origins are visited in sorted order. For each origin, crawls come first
    and then jumps; a jump landing on a point already reachable by crawl is
    dropped so each (origin, destination) pair appears once.

    Args:
        game: Current game state
        name: Player name

    Returns:
        List of candidate moves in a deterministic order

    Raises:
        UnknownPlayer: If no player with this name is registered
    """
    moves: list[Move] = []
    for origin in sorted(game.get_player_state(name).positions):
        crawls = adjacent_unoccupied_positions(game, origin)
        for dest in sorted(crawls):
            moves.append(Move(from_pos=origin, to_pos=dest, kind=CRAWL))

        for dest, path in sorted(jump_paths(game, origin).items()):
            if dest in crawls:
                continue
            moves.append(Move(from_pos=origin, to_pos=dest, kind=JUMP, path=path))
    return moves


def apply_move(game: Game, name: str, from_pos: Position, to_pos: Position) -> None:
    """Move one of a player's pieces.

    The caller guarantees that ``from_pos`` is held by the player and that
    ``to_pos`` is a legal destination; neither is re-checked here.

    Args:
        game: Current game state
        name: Player name
        from_pos: Point the piece leaves
        to_pos: Point the piece lands on

    Raises:
        UnknownPlayer: If no player with this name is registered
    """
    positions = game.get_player_state(name).positions
    positions.remove(from_pos)
    positions.add(to_pos)
    logger.debug("%s moved %s -> %s", name, from_pos, to_pos)
