#!/usr/bin/env python3
"""Chinese Checkers - Main entry point.

Runs a headless game between computer players on a hexagram board and
prints the final position and the finishing order.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from chinese_checkers.config import GameConfig, load_config
from chinese_checkers.engine import (
    GameResult,
    RoundResult,
    TurnExecutor,
    add_player,
    new_game,
)
from chinese_checkers.errors import GameError
from chinese_checkers.interface.renderer import BoardRenderer
from chinese_checkers.models import Game


class GameOrchestrator:
    """Builds a game from configuration and runs it to completion."""

    def __init__(self, config: GameConfig, show_rounds: bool = False):
        """Initialize game orchestrator.

        Args:
            config: Validated game configuration
            show_rounds: If True, print the board after every round
        """
        self.config = config
        self.show_rounds = show_rounds
        self.renderer = BoardRenderer()
        self.turn_executor = TurnExecutor()
        self.game = self._setup_game()

    def _setup_game(self) -> Game:
        game = new_game(self.config.size)
        for player_config in self.config.players:
            add_player(game, player_config.to_player())
        return game

    def run(self) -> GameResult:
        """Main game loop."""
        print(self.renderer.render(self.game))
        print()
        on_round = self._show_round if self.show_rounds else None
        return self.turn_executor.run(self.game, self.config.max_rounds, on_round=on_round)

    def _show_round(self, result: RoundResult) -> None:
        print(f"Round {result.round_number}")
        print(self.renderer.render(self.game))
        print()

    def show_result(self, result: GameResult) -> None:
        print(self.renderer.render(self.game))
        print()
        print(f"Rounds played: {result.rounds_played}")
        if result.finished:
            for place, name in enumerate(result.finished, start=1):
                print(f"  {place}. {name}")
        else:
            print("No player reached the goal.")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Chinese Checkers - computer players on a hexagram board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Six players on the standard 121-point board
  %(prog)s --size 2 --rounds 50     # Smaller board, fewer rounds
  %(prog)s --config players.json    # Player line-up from a JSON file
        """,
    )
    parser.add_argument("--config", type=str, metavar="FILE", help="Load configuration from JSON file")
    parser.add_argument("--size", type=int, default=None, help="Board size (default: 4)")
    parser.add_argument("--rounds", type=int, default=None, help="Maximum rounds (default: 100)")
    parser.add_argument(
        "--show-rounds",
        action="store_true",
        help="Print the board after every round",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {}
        if args.size is not None:
            overrides["size"] = args.size
        if args.rounds is not None:
            overrides["max_rounds"] = args.rounds
        if overrides:
            config = GameConfig.model_validate({**config.model_dump(), **overrides})
    except FileNotFoundError:
        print(f"Error: File {args.config} not found.")
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}")
        sys.exit(1)

    try:
        orchestrator = GameOrchestrator(config, show_rounds=args.show_rounds)
        result = orchestrator.run()
    except GameError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user. Exiting...")
        sys.exit(0)

    orchestrator.show_result(result)


if __name__ == "__main__":
    main()
