"""Statistical tools for War: shuffle fairness and batch simulation."""

from cardwar.analysis.fairness import (
    ShuffleFairness,
    shuffle_position_counts,
    check_shuffle_fairness,
)
from cardwar.analysis.batch import BatchSummary, simulate_games

__all__ = [
    # Shuffle
    "ShuffleFairness",
    "shuffle_position_counts",
    "check_shuffle_fairness",
    # Batch
    "BatchSummary",
    "simulate_games",
]
