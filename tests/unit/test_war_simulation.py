"""Tests for War game simulation."""

import pytest
from cardwar.simulation.deck import Deck
from cardwar.simulation.state import Card, Rank, Suit
from cardwar.simulation.war import OutcomeKind, WarGame, play_war_game


def make_card(rank: int, suit: str = "spades") -> Card:
    """Helper to create cards."""
    return Card(rank=Rank(rank), suit=Suit(suit))


def filler(n: int, rank: int = 2, suit: str = "clubs") -> list[Card]:
    """Face-down cards whose values never matter."""
    return [make_card(rank, suit) for _ in range(n)]


def identities(cards) -> list:
    return [(c.rank, c.suit) for c in cards]


class TestDeal:
    """Tests for dealing."""

    def test_war_game_initialization(self) -> None:
        """Test War game deals 52 cards split evenly."""
        game = WarGame.new(seed=42)
        assert len(game.player1.hand) == 26
        assert len(game.player2.hand) == 26
        assert game.deck.is_empty()

    def test_hands_empty_before_deal(self) -> None:
        game = WarGame(seed=42)
        assert len(game.deck) == 52
        assert game.player1.is_out_of_cards()
        assert game.player2.is_out_of_cards()

    def test_deal_alternates_from_top(self) -> None:
        """Top card goes to player 1, next to player 2."""
        cards = [make_card(2), make_card(3), make_card(4), make_card(5)]
        game = WarGame(deck=Deck(cards))
        game.deal()

        assert [int(c.rank) for c in game.player1.hand] == [5, 3]
        assert [int(c.rank) for c in game.player2.hand] == [4, 2]

    def test_odd_deck_leaves_last_card(self) -> None:
        """An odd leftover card is never dealt."""
        game = WarGame(deck=Deck(Deck.build().cards[:5]))
        game.deal()

        assert len(game.player1.hand) == 2
        assert len(game.player2.hand) == 2
        assert len(game.deck) == 1

    def test_same_seed_same_deal(self) -> None:
        game1 = WarGame.new(seed=7)
        game2 = WarGame.new(seed=7)
        assert identities(game1.player1.hand) == identities(game2.player1.hand)

    def test_rejects_wrong_player_count(self) -> None:
        with pytest.raises(ValueError):
            WarGame(player_names=("A", "B", "C"))


class TestPlayRound:
    """Tests for a single round."""

    def test_higher_card_wins_round(self) -> None:
        """King beats 2; winner's card goes back first."""
        game = WarGame.from_hands(
            [make_card(13, "spades"), make_card(3, "spades")],
            [make_card(2, "clubs"), make_card(4, "clubs")],
        )

        outcome = game.play_round()

        assert outcome.kind == OutcomeKind.ROUND_WIN
        assert outcome.message == "Player 1 wins the round!"
        assert outcome.winner == "Player 1"
        assert outcome.cards_won == 2
        assert identities(game.player1.hand) == [
            (Rank.THREE, Suit.SPADES),
            (Rank.KING, Suit.SPADES),
            (Rank.TWO, Suit.CLUBS),
        ]
        assert identities(game.player2.hand) == [(Rank.FOUR, Suit.CLUBS)]

    def test_player2_wins_round(self) -> None:
        game = WarGame.from_hands([make_card(2, "clubs")], [make_card(13, "spades")])

        outcome = game.play_round()

        assert outcome.message == "Player 2 wins the round!"
        assert identities(game.player2.hand) == [
            (Rank.KING, Suit.SPADES),
            (Rank.TWO, Suit.CLUBS),
        ]
        assert game.is_game_over()
        assert game.winner() is game.player2

    def test_played_cards_recorded(self) -> None:
        game = WarGame.from_hands([make_card(9)], [make_card(4)])
        outcome = game.play_round()

        card1, card2 = outcome.played
        assert (card1.rank, card2.rank) == (Rank.NINE, Rank.FOUR)

    def test_round_on_finished_game(self) -> None:
        """Playing after the game ended changes nothing."""
        game = WarGame.from_hands([], [make_card(5)])

        outcome = game.play_round()

        assert outcome.kind == OutcomeKind.GAME_OVER
        assert outcome.message == "Game over!"
        assert len(game.player2.hand) == 1
        assert game.rounds == 0


class TestWar:
    """Tests for war resolution."""

    def test_tie_triggers_war(self) -> None:
        """Tie consumes 4 more cards each; higher 4th card takes all 10."""
        hand1 = [make_card(7, "spades")] + filler(3, 2, "spades") + [make_card(10, "spades"), make_card(6, "spades")]
        hand2 = [make_card(7, "hearts")] + filler(3, 3, "hearts") + [make_card(5, "hearts"), make_card(8, "hearts")]
        game = WarGame.from_hands(hand1, hand2)

        outcome = game.play_round()

        assert outcome.kind == OutcomeKind.WAR_WIN
        assert outcome.message == "Player 1 wins the war!"
        assert outcome.wars == 1
        assert outcome.cards_won == 10
        final1, final2 = outcome.war_cards[0]
        assert (final1.rank, final2.rank) == (Rank.TEN, Rank.FIVE)

        assert len(game.player1.hand) == 11
        assert len(game.player2.hand) == 1
        assert game.pot == []

    def test_pot_order(self) -> None:
        """Pot goes back as: tied cards, player 1's war cards, player 2's."""
        hand1 = [make_card(7, "spades"), make_card(2, "spades"), make_card(3, "spades"),
                 make_card(4, "spades"), make_card(5, "spades")]
        hand2 = [make_card(7, "hearts"), make_card(2, "hearts"), make_card(3, "hearts"),
                 make_card(4, "hearts"), make_card(9, "hearts")]
        game = WarGame.from_hands(hand1, hand2)

        game.play_round()

        assert identities(game.player2.hand) == identities(
            [hand1[0], hand2[0]] + hand1[1:] + hand2[1:]
        )
        assert game.player1.is_out_of_cards()

    def test_repeated_war(self) -> None:
        """A tie on the face-up war card starts another war."""
        hand1 = [make_card(7, "spades")] + filler(3) + [make_card(9, "spades")] + filler(3) + [make_card(13, "spades")]
        hand2 = [make_card(7, "hearts")] + filler(3) + [make_card(9, "hearts")] + filler(3) + [make_card(12, "hearts")]
        game = WarGame.from_hands(hand1, hand2)

        outcome = game.play_round()

        assert outcome.wars == 2
        assert len(outcome.war_cards) == 2
        assert outcome.cards_won == 18
        assert outcome.winner == "Player 1"
        assert len(game.player1.hand) == 18
        assert game.is_game_over()
        assert game.wars == 2

    def test_insufficient_cards_ends_game(self) -> None:
        """Player 1 short of cards but not empty is still declared winner."""
        hand1 = [make_card(7, "spades"), make_card(3, "spades")]
        hand2 = [make_card(7, "hearts")] + filler(9, 14, "hearts")
        game = WarGame.from_hands(hand1, hand2)

        outcome = game.play_round()

        assert outcome.kind == OutcomeKind.GAME_OVER
        assert outcome.message == "Player 1 wins the game!"
        assert outcome.wars == 1
        assert outcome.war_cards == []
        assert game.is_game_over()
        assert game.winner() is game.player1

        # Pot is abandoned, not awarded
        assert len(game.pot) == 2
        assert len(game.player1.hand) == 1
        assert len(game.player2.hand) == 9
        assert game.card_total() == 12

    def test_insufficient_cards_player1_empty(self) -> None:
        """Player 2 wins when player 1 has nothing left for the war."""
        hand1 = [make_card(7, "spades")]
        hand2 = [make_card(7, "hearts")] + filler(4)
        game = WarGame.from_hands(hand1, hand2)

        outcome = game.play_round()

        assert outcome.message == "Player 2 wins the game!"
        assert game.winner() is game.player2

    def test_player2_short_of_cards(self) -> None:
        hand1 = [make_card(7, "spades")] + filler(6)
        hand2 = [make_card(7, "hearts")] + filler(2)
        game = WarGame.from_hands(hand1, hand2)

        outcome = game.play_round()

        assert outcome.winner == "Player 1"
        assert game.play_round().kind == OutcomeKind.GAME_OVER


class TestPlayGame:
    """Tests for the full game loop."""

    def test_play_full_game(self) -> None:
        """Test a full game runs to completion."""
        result = play_war_game(seed=42, max_rounds=10_000)

        assert result["winner"] in [1, 2]
        assert result["rounds"] > 0
        assert result["rounds"] <= 10_000

    @pytest.mark.parametrize("seed", range(20))
    def test_seeded_game_finishes(self, seed: int) -> None:
        """Seeded games finish well inside 10,000 rounds."""
        game = WarGame.new(seed=seed)
        result = game.play_game(max_rounds=10_000)

        assert not result.truncated
        assert result.rounds < 10_000
        assert game.is_game_over()
        assert game.card_total() == 52
        assert result.final_counts == (len(game.player1.hand), len(game.player2.hand))

    def test_both_endings_occur(self) -> None:
        """Games end either on an empty hand or on a war that cannot be finished."""
        empty_hand = 0
        short_war = 0

        for seed in range(40):
            game = WarGame.new(seed=seed)
            result = game.play_game(max_rounds=10_000)
            assert not result.truncated

            if game.pot:
                assert min(len(p.hand) for p in game.players) < 4
                assert len(game.pot) >= 2
                short_war += 1
            else:
                assert sorted(len(p.hand) for p in game.players) == [0, 52]
                empty_hand += 1

        assert empty_hand > 0
        assert short_war > 0

    def test_winner_holds_cards(self) -> None:
        game = WarGame.new(seed=3)
        result = game.play_game(max_rounds=10_000)

        winner = game.players[result.winner_index]
        assert winner.name == result.winner
        assert not winner.is_out_of_cards()

    def test_truncated_game(self) -> None:
        """Reaching max_rounds stops the game; most cards wins."""
        game = WarGame.new(seed=42)
        result = game.play_game(max_rounds=1)

        assert result.rounds == 1
        assert result.truncated
        counts = result.final_counts
        expected = 0 if counts[0] >= counts[1] else 1
        assert result.winner_index == expected

    def test_on_round_callback(self) -> None:
        outcomes = []
        game = WarGame.new(seed=11)
        result = game.play_game(max_rounds=50, on_round=outcomes.append)

        assert len(outcomes) == result.rounds

    def test_invalid_max_rounds(self) -> None:
        with pytest.raises(ValueError):
            WarGame.new(seed=1).play_game(max_rounds=0)

    def test_deterministic(self) -> None:
        """Same seed gives the same game."""
        assert play_war_game(seed=123) == play_war_game(seed=123)
