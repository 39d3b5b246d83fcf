"""Run many seeded games and summarize the outcomes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from cardwar.simulation.war import WarGame

logger = logging.getLogger(__name__)


@dataclass
class BatchSummary:
    """Aggregate statistics over a batch of games."""

    games: int
    wins: tuple[int, int]
    mean_rounds: float
    max_rounds: int
    mean_wars: float
    truncated: int

    @property
    def win_rates(self) -> tuple[float, float]:
        return (self.wins[0] / self.games, self.wins[1] / self.games)


def simulate_games(
    num_games: int,
    seed: int = 0,
    max_rounds: Optional[int] = 10_000,
) -> BatchSummary:
    """Play num_games games; game i is seeded with seed + i."""
    if num_games < 1:
        raise ValueError(f"num_games must be >= 1, got {num_games}")

    wins = [0, 0]
    rounds = np.zeros(num_games, dtype=np.int64)
    wars = np.zeros(num_games, dtype=np.int64)
    truncated = 0

    for i in range(num_games):
        result = WarGame.new(seed=seed + i).play_game(max_rounds=max_rounds)
        wins[result.winner_index] += 1
        rounds[i] = result.rounds
        wars[i] = result.wars
        if result.truncated:
            truncated += 1

    logger.debug(f"Simulated {num_games} games ({truncated} truncated)")

    return BatchSummary(
        games=num_games,
        wins=(wins[0], wins[1]),
        mean_rounds=float(rounds.mean()),
        max_rounds=int(rounds.max()),
        mean_wars=float(wars.mean()),
        truncated=truncated,
    )
