"""War game engine: dealing, rounds and recursive war resolution."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Sequence, Union

from cardwar.simulation.deck import Deck
from cardwar.simulation.state import Card, Hand, Player

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")
WAR_CARDS = 4  # three face down, one face up


class OutcomeKind(Enum):
    """What happened in a single round."""

    ROUND_WIN = "round_win"
    WAR_WIN = "war_win"
    GAME_OVER = "game_over"


@dataclass
class RoundOutcome:
    """Result of one call to WarGame.play_round()."""

    kind: OutcomeKind
    message: str
    played: Optional[tuple[Card, Card]] = None
    war_cards: list[tuple[Card, Card]] = field(default_factory=list)  # compared card per war
    wars: int = 0  # wars declared, including one that could not be completed
    winner: Optional[str] = None
    cards_won: int = 0

    @property
    def is_war(self) -> bool:
        return self.wars > 0


@dataclass(frozen=True)
class GameResult:
    """Summary of a finished (or truncated) game."""

    winner: str
    winner_index: int  # 0 or 1
    rounds: int
    wars: int
    truncated: bool
    final_counts: tuple[int, int]


class WarGame:
    """Two-player War over a shuffled 52-card deck."""

    def __init__(
        self,
        seed: Optional[int] = None,
        player_names: Sequence[str] = DEFAULT_PLAYER_NAMES,
        deck: Optional[Deck] = None,
    ) -> None:
        if len(player_names) != 2:
            raise ValueError(f"War needs exactly 2 players, got {len(player_names)}")

        self.seed = seed
        self.rng = random.Random(seed)

        if deck is None:
            deck = Deck.build()
            deck.shuffle(self.rng)
        self.deck = deck

        self.player1 = Player(player_names[0])
        self.player2 = Player(player_names[1])

        # Cards committed to an unresolved war
        self.pot: list[Card] = []
        self.rounds = 0
        self.wars = 0
        self._decided: Optional[Player] = None

    @classmethod
    def new(
        cls,
        seed: Optional[int] = None,
        player_names: Sequence[str] = DEFAULT_PLAYER_NAMES,
    ) -> WarGame:
        """Build, shuffle and deal a fresh game."""
        game = cls(seed=seed, player_names=player_names)
        game.deal()
        return game

    @classmethod
    def from_hands(
        cls,
        hand1: Iterable[Card],
        hand2: Iterable[Card],
        player_names: Sequence[str] = DEFAULT_PLAYER_NAMES,
    ) -> WarGame:
        """Start a game from fixed hands (no deck)."""
        game = cls(player_names=player_names, deck=Deck())
        game.player1.hand = Hand(hand1)
        game.player2.hand = Hand(hand2)
        return game

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player1, self.player2)

    def deal(self) -> None:
        """Deal the deck alternately, one card to each player per pass.

        An odd leftover card stays in the deck.
        """
        while len(self.deck) >= 2:
            card1 = self.deck.draw_top()
            card2 = self.deck.draw_top()
            if card1 is not None:
                self.player1.hand.receive([card1])
            if card2 is not None:
                self.player2.hand.receive([card2])

        logger.debug(
            f"Dealt {len(self.player1.hand)}/{len(self.player2.hand)} cards "
            f"(seed={self.seed})"
        )

    def card_total(self) -> int:
        """Cards held by both players plus any cards in the pot."""
        return len(self.player1.hand) + len(self.player2.hand) + len(self.pot)

    def is_game_over(self) -> bool:
        return (
            self._decided is not None
            or self.player1.is_out_of_cards()
            or self.player2.is_out_of_cards()
        )

    def winner(self) -> Optional[Player]:
        """The winning player once the game is over, else None."""
        if self._decided is not None:
            return self._decided
        if not self.is_game_over():
            return None
        return self.player2 if self.player1.is_out_of_cards() else self.player1

    def play_round(self) -> RoundOutcome:
        """Play one round, resolving any war it triggers."""
        if self.is_game_over():
            return RoundOutcome(kind=OutcomeKind.GAME_OVER, message="Game over!")

        card1 = self.player1.hand.play_front()
        card2 = self.player2.hand.play_front()
        if card1 is None or card2 is None:
            return RoundOutcome(kind=OutcomeKind.GAME_OVER, message="Game over!")

        self.rounds += 1

        if card1 > card2:
            return self._award_round(self.player1, [card1, card2], (card1, card2))
        if card2 > card1:
            return self._award_round(self.player2, [card2, card1], (card1, card2))

        self.pot = [card1, card2]
        outcome = RoundOutcome(kind=OutcomeKind.WAR_WIN, message="", played=(card1, card2))
        return self._resolve_war(outcome)

    def _award_round(
        self, winner: Player, cards: list[Card], played: tuple[Card, Card]
    ) -> RoundOutcome:
        winner.hand.receive(cards)
        return RoundOutcome(
            kind=OutcomeKind.ROUND_WIN,
            message=f"{winner.name} wins the round!",
            played=played,
            winner=winner.name,
            cards_won=len(cards),
        )

    def _resolve_war(self, outcome: RoundOutcome) -> RoundOutcome:
        """Resolve a war over self.pot, recursing while the face-up cards tie."""
        outcome.wars += 1
        self.wars += 1
        p1, p2 = self.player1, self.player2

        if len(p1.hand) < WAR_CARDS or len(p2.hand) < WAR_CARDS:
            # Only player 1 running dry hands the game to player 2, even when
            # player 1 is the one short of cards.
            winner = p2 if p1.is_out_of_cards() else p1
            return self._end_war_early(outcome, winner, f"{winner.name} wins the game!")

        war1 = [p1.hand.play_front() for _ in range(WAR_CARDS)]
        war2 = [p2.hand.play_front() for _ in range(WAR_CARDS)]
        self.pot.extend(card for card in war1 if card is not None)
        self.pot.extend(card for card in war2 if card is not None)

        final1, final2 = war1[-1], war2[-1]
        if final1 is None or final2 is None:
            winner = p2 if p1.is_out_of_cards() else p1
            return self._end_war_early(
                outcome, winner, "Game over due to insufficient cards."
            )

        outcome.war_cards.append((final1, final2))
        logger.debug(f"War #{outcome.wars}: {final1} vs {final2}, pot={len(self.pot)}")

        if final1 == final2:
            return self._resolve_war(outcome)

        winner = p1 if final1 > final2 else p2
        won = len(self.pot)
        winner.hand.receive(self.pot)
        self.pot = []

        outcome.message = f"{winner.name} wins the war!"
        outcome.winner = winner.name
        outcome.cards_won = won
        logger.debug(f"{winner.name} takes a pot of {won} cards")
        return outcome

    def _end_war_early(
        self, outcome: RoundOutcome, winner: Player, message: str
    ) -> RoundOutcome:
        """End the game mid-war; the pot stays in self.pot and is never awarded."""
        self._decided = winner
        logger.debug(
            f"War cannot continue ({len(self.player1.hand)} vs "
            f"{len(self.player2.hand)} cards); abandoning pot of {len(self.pot)}"
        )
        outcome.kind = OutcomeKind.GAME_OVER
        outcome.message = message
        outcome.winner = winner.name
        return outcome

    def play_game(
        self,
        max_rounds: Optional[int] = None,
        on_round: Optional[Callable[[RoundOutcome], None]] = None,
    ) -> GameResult:
        """Play rounds until the game is over or max_rounds is reached.

        Args:
            max_rounds: Round cap (None for no cap)
            on_round: Called with every RoundOutcome as it happens

        Returns:
            GameResult; truncated games go to the player holding more cards
        """
        if max_rounds is not None and max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")

        truncated = False
        while not self.is_game_over():
            if max_rounds is not None and self.rounds >= max_rounds:
                truncated = True
                break
            outcome = self.play_round()
            if on_round is not None:
                on_round(outcome)

        if truncated:
            winner = (
                self.player2
                if len(self.player2.hand) > len(self.player1.hand)
                else self.player1
            )
        else:
            winner = self.winner() or self.player1

        result = GameResult(
            winner=winner.name,
            winner_index=0 if winner is self.player1 else 1,
            rounds=self.rounds,
            wars=self.wars,
            truncated=truncated,
            final_counts=(len(self.player1.hand), len(self.player2.hand)),
        )
        logger.debug(
            f"{result.winner} wins after {result.rounds} rounds "
            f"({result.wars} wars{', truncated' if truncated else ''})"
        )
        return result


def play_war_game(
    seed: int = 42, max_rounds: Optional[int] = 10_000
) -> Dict[str, Union[int, bool]]:
    """Play a complete War game and return results."""
    game = WarGame.new(seed=seed)
    result = game.play_game(max_rounds=max_rounds)

    return {
        "winner": result.winner_index + 1,
        "rounds": result.rounds,
        "wars": result.wars,
        "truncated": result.truncated,
    }
