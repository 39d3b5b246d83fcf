"""Card, hand and player state for War."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Iterator, Optional


class Rank(IntEnum):
    """Playing card ranks (Ace high)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(Enum):
    """Playing card suits, in deck build order."""

    SPADES = "spades"
    CLUBS = "clubs"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"


@dataclass(frozen=True, order=True)
class Card:
    """Immutable playing card.

    Equality, ordering and hashing use rank only; suit never breaks a tie.
    """

    rank: Rank
    suit: Suit = field(compare=False)

    def compare(self, other: Card) -> int:
        """Signed rank difference (positive if this card is higher)."""
        return int(self.rank) - int(other.rank)

    def __str__(self) -> str:
        return f"{int(self.rank)} of {self.suit.value}"


class Hand:
    """A player's cards: played from the front, winnings added to the back."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: deque[Card] = deque(cards)

    def receive(self, cards: Iterable[Card]) -> None:
        """Append cards to the back, keeping their order."""
        self._cards.extend(cards)

    def play_front(self) -> Optional[Card]:
        """Remove and return the front card, or None when empty."""
        if not self._cards:
            return None
        return self._cards.popleft()

    def peek(self) -> Optional[Card]:
        return self._cards[0] if self._cards else None

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Hand({list(self._cards)!r})"


@dataclass
class Player:
    """A named player and the hand they own."""

    name: str
    hand: Hand = field(default_factory=Hand)

    def is_out_of_cards(self) -> bool:
        return self.hand.is_empty()
