"""Turn sequencing.

Each player's turn runs three steps strictly in order:
1. Move generation (reads occupancy)
2. Move selection
3. Move application (writes occupancy)

A turn is completed before the next player's turn starts, so generation
always sees a stable occupancy snapshot. Rounds visit players in
registration order and skip players that have already reached their goal.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..models import Game, Move
from ..utils import MAX_ROUNDS_DEFAULT
from .movement import apply_move
from .selector import select_move
from .victory import all_done, is_done

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Outcome of one round.

    Attributes:
        round_number: 1-based round counter
        moves: Moves applied this round, keyed by player name
        finished: Players done so far, in order of finishing
    """

    round_number: int
    moves: dict[str, Move] = field(default_factory=dict)
    finished: list[str] = field(default_factory=list)


@dataclass
class GameResult:
    """Outcome of a full run."""

    rounds_played: int
    finished: list[str]  # In order of finishing
    all_finished: bool


class TurnExecutor:
    """Drives turns and rounds over a single game.

    The executor is the only writer of occupancy during a run and keeps
    track of the order in which players reach their goal.
    """

    def __init__(self):
        self.finished: list[str] = []

    def execute_turn(self, game: Game, name: str) -> Move | None:
        """Generate, select and apply one move for a player.

        Args:
            game: Current game state
            name: Player name

        Returns:
            The applied move, or None if the player is done or has no move
        """
        if is_done(game, name):
            return None

        move = select_move(game, name)
        if move is None:
            logger.warning("%s has no legal move", name)
            return None

        apply_move(game, name, move.from_pos, move.to_pos)
        return move

    def execute_round(self, game: Game, round_number: int) -> RoundResult:
        """Run one turn for every registered player.

        Args:
            game: Current game state
            round_number: 1-based round counter

        Returns:
            RoundResult with the applied moves and finishing order
        """
        result = RoundResult(round_number=round_number)
        for name in game.players:
            move = self.execute_turn(game, name)
            if move is not None:
                result.moves[name] = move
            if name not in self.finished and is_done(game, name):
                self.finished.append(name)
                logger.info("%s reached the goal in round %d", name, round_number)
        result.finished = list(self.finished)
        return result

    def run(
        self,
        game: Game,
        max_rounds: int = MAX_ROUNDS_DEFAULT,
        on_round: Callable[[RoundResult], None] | None = None,
    ) -> GameResult:
        """Play rounds until every player is done or the round limit is hit.

        Args:
            game: Game with players registered
            max_rounds: Upper bound on rounds played
            on_round: Called with each RoundResult once the round is complete

        Returns:
            GameResult summarizing the run
        """
        if max_rounds < 1:
            raise ValueError(f"Invalid max_rounds: {max_rounds} (must be >= 1)")

        rounds_played = 0
        for round_number in range(1, max_rounds + 1):
            result = self.execute_round(game, round_number)
            rounds_played = round_number
            if on_round is not None:
                on_round(result)
            if all_done(game):
                break

        all_finished = all_done(game)
        logger.info(
            "Game over after %d rounds: %d/%d players finished",
            rounds_played,
            len(self.finished),
            len(game.players),
        )
        return GameResult(
            rounds_played=rounds_played,
            finished=list(self.finished),
            all_finished=all_finished,
        )
