"""Standard 52-card deck."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from cardwar.simulation.state import Card, Rank, Suit


class Deck:
    """Ordered cards dealt from the top (the end of the sequence)."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self.cards: list[Card] = list(cards)

    @classmethod
    def build(cls) -> Deck:
        """Create an unshuffled deck: ranks 2..A inside each suit."""
        return cls(Card(rank=rank, suit=suit) for suit in Suit for rank in Rank)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Fisher-Yates shuffle in place."""
        rng = rng or random.Random()
        for i in range(len(self.cards) - 1, 0, -1):
            j = rng.randint(0, i)
            self.cards[i], self.cards[j] = self.cards[j], self.cards[i]

    def draw_top(self) -> Optional[Card]:
        """Remove and return the top card, or None when the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)
