"""War simulation: cards, deck, hands and the game engine."""

from cardwar.simulation.state import Card, Hand, Player, Rank, Suit
from cardwar.simulation.deck import Deck
from cardwar.simulation.war import (
    GameResult,
    OutcomeKind,
    RoundOutcome,
    WarGame,
    play_war_game,
)

__all__ = [
    "Card",
    "Hand",
    "Player",
    "Rank",
    "Suit",
    "Deck",
    "GameResult",
    "OutcomeKind",
    "RoundOutcome",
    "WarGame",
    "play_war_game",
]
