"""Pytest fixtures for blackjack round tests."""

import pytest
from random import Random

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackRound


class StackedDeck(Deck):
    """Deck that deals a fixed sequence of cards, first card first."""

    def __init__(self, cards: list[str]) -> None:
        super().__init__(rng=Random(0))
        self._stack = [Card.from_string(c) for c in cards]
        for card in self._stack:
            self.playable_cards.remove(card)

    def deal_card(self) -> Card:
        if self._stack:
            return self._stack.pop(0)
        return super().deal_card()


def stacked_round(*cards: str, **kwargs) -> BlackjackRound:
    """
    Build a round whose deck deals ``cards`` in order.

    The opening deal goes player, dealer, player, dealer.
    """
    return BlackjackRound(deck=StackedDeck(list(cards)), **kwargs)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    hand.add_card(Card(Rank.KING, Suit.CLUBS))
    return hand


@pytest.fixture
def game(rng):
    """A new round dealt from a seeded deck."""
    return BlackjackRound(rng=rng)


@pytest.fixture
def stacked():
    """Factory for rounds dealt from a stacked deck."""
    return stacked_round
