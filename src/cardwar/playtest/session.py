"""Watch a full game of War in the terminal."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from cardwar.simulation.war import DEFAULT_PLAYER_NAMES, GameResult, RoundOutcome, WarGame
from cardwar.playtest.display import OutcomeRenderer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a watched game."""

    seed: Optional[int] = None
    max_rounds: Optional[int] = 10_000
    player_names: tuple[str, str] = DEFAULT_PLAYER_NAMES
    quiet: bool = False  # only print the final result
    show_counts: bool = False  # print hand sizes after every round

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)
        if self.max_rounds is not None and self.max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {self.max_rounds}")
        if len(self.player_names) != 2:
            raise ValueError("player_names must name exactly 2 players")


class WatchSession:
    """Builds one game from a config and plays it to the end."""

    def __init__(self, config: SessionConfig):
        self.config = config
        self.seed = config.seed
        self.renderer = OutcomeRenderer()
        self.game = WarGame.new(seed=self.seed, player_names=config.player_names)
        self.last_outcome: Optional[RoundOutcome] = None

    def run(self, output_fn: Callable[[str], None] = print) -> GameResult:
        """Run the game.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            GameResult of the finished game
        """
        names = (self.game.player1.name, self.game.player2.name)
        logger.debug(f"Starting game with seed {self.seed}")

        def on_round(outcome: RoundOutcome) -> None:
            self.last_outcome = outcome
            if self.config.quiet:
                return
            for line in self.renderer.render(outcome, names):
                output_fn(line)
            if self.config.show_counts:
                counts = (len(self.game.player1.hand), len(self.game.player2.hand))
                output_fn(self.renderer.render_counts(counts, names))

        result = self.game.play_game(max_rounds=self.config.max_rounds, on_round=on_round)

        already_announced = (
            not self.config.quiet
            and self.last_outcome is not None
            and self.renderer.announces_winner(self.last_outcome)
        )
        if not already_announced:
            for line in self.renderer.render_result(result):
                output_fn(line)

        return result
