"""Terminal display for rounds and game results."""

from __future__ import annotations

from cardwar.simulation.state import Card, Rank, Suit
from cardwar.simulation.war import GameResult, OutcomeKind, RoundOutcome


# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
}

FACE_RANKS = {Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A"}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    rank = FACE_RANKS.get(card.rank, str(int(card.rank)))
    return f"{rank}{SUIT_SYMBOLS[card.suit]}"


class OutcomeRenderer:
    """Renders round outcomes as console lines."""

    def render(self, outcome: RoundOutcome, names: tuple[str, str]) -> list[str]:
        """Render one round: cards played, each war, then the outcome."""
        lines: list[str] = []
        name1, name2 = names

        if outcome.played is not None:
            card1, card2 = outcome.played
            lines.append(f"{name1} plays {format_card(card1)}")
            lines.append(f"{name2} plays {format_card(card2)}")

        for i in range(outcome.wars):
            lines.append("War!")
            if i < len(outcome.war_cards):
                final1, final2 = outcome.war_cards[i]
                lines.append(f"{name1} final war card: {format_card(final1)}")
                lines.append(f"{name2} final war card: {format_card(final2)}")

        lines.append(outcome.message)
        return lines

    def render_counts(self, counts: tuple[int, int], names: tuple[str, str]) -> str:
        return f"  [{names[0]}: {counts[0]} | {names[1]}: {counts[1]}]"

    def render_result(self, result: GameResult) -> list[str]:
        """Render the final game result."""
        lines = [f"{result.winner} wins the game!"]
        if result.truncated:
            lines.append(
                f"(Stopped after {result.rounds} rounds; "
                f"cards held {result.final_counts[0]}-{result.final_counts[1]})"
            )
        return lines

    def announces_winner(self, outcome: RoundOutcome) -> bool:
        """True if the outcome message already declares the game winner."""
        return (
            outcome.kind == OutcomeKind.GAME_OVER
            and outcome.winner is not None
            and outcome.message == f"{outcome.winner} wins the game!"
        )
