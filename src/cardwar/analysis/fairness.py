"""Statistical check that the deck shuffle is uniform."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from scipy import stats

from cardwar.simulation.deck import Deck

DECK_SIZE = 52

ShuffleFn = Callable[[Deck, random.Random], None]


@dataclass
class ShuffleFairness:
    """Chi-square test of card-by-position frequencies."""

    trials: int
    chi2: float
    pvalue: float
    dof: int
    alpha: float
    max_deviation: float  # largest |observed - expected| / expected over all cells

    @property
    def is_uniform(self) -> bool:
        """Returns True if uniformity cannot be rejected at alpha."""
        return self.pvalue >= self.alpha


def _default_shuffle(deck: Deck, rng: random.Random) -> None:
    deck.shuffle(rng)


def shuffle_position_counts(
    trials: int,
    seed: Optional[int] = None,
    shuffle_fn: Optional[ShuffleFn] = None,
) -> np.ndarray:
    """Count where each card lands after shuffling a freshly built deck.

    Returns:
        (52, 52) matrix; entry [c, p] is how often the card built at index c
        ended up at position p.
    """
    if trials < 1:
        raise ValueError(f"trials must be >= 1, got {trials}")

    rng = random.Random(seed)
    shuffle_fn = shuffle_fn or _default_shuffle

    # Cards compare by rank only, so key on (rank, suit)
    build_index = {
        (card.rank, card.suit): i for i, card in enumerate(Deck.build().cards)
    }
    counts = np.zeros((DECK_SIZE, DECK_SIZE), dtype=np.int64)

    for _ in range(trials):
        deck = Deck.build()
        shuffle_fn(deck, rng)
        for position, card in enumerate(deck.cards):
            counts[build_index[(card.rank, card.suit)], position] += 1

    return counts


def check_shuffle_fairness(
    trials: int = 5200,
    seed: Optional[int] = None,
    alpha: float = 0.01,
    shuffle_fn: Optional[ShuffleFn] = None,
) -> ShuffleFairness:
    """Chi-square goodness of fit of position counts against 1/52 per cell."""
    counts = shuffle_position_counts(trials, seed=seed, shuffle_fn=shuffle_fn)
    observed = counts.ravel().astype(float)
    expected = np.full_like(observed, trials / DECK_SIZE)

    # Row and column sums are fixed: Pearson's statistic over the table is
    # (52/51) * chi2((52-1)^2), so rescale before taking the p-value
    dof = (DECK_SIZE - 1) ** 2
    pearson = stats.chisquare(observed, f_exp=expected).statistic
    chi2 = float(pearson) * (DECK_SIZE - 1) / DECK_SIZE
    pvalue = float(stats.chi2.sf(chi2, dof))

    return ShuffleFairness(
        trials=trials,
        chi2=chi2,
        pvalue=pvalue,
        dof=dof,
        alpha=alpha,
        max_deviation=float(np.max(np.abs(observed - expected)) / expected[0]),
    )
