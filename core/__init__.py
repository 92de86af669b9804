"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, DeckExhaustedError, Rank, Suit
from core.hand import Hand

__all__ = [
    "Card",
    "Deck",
    "DeckExhaustedError",
    "Rank",
    "Suit",
    "Hand",
]
