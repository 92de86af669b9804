"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card

BLACKJACK = 21


@dataclass
class Hand:
    """
    A blackjack hand with value calculation.

    A hand that is not revealed discloses only its first card, both in
    ``points`` and in ``show_cards()``. The dealer's hole card is tracked
    this way rather than with a separate public copy of the hand.
    """

    cards: list[Card] = field(default_factory=list)
    reveal: bool = True

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """
        Calculate the best value of every card in the hand.

        Aces count 11, then drop to 1 one at a time while the hand is over 21.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.value

        # Reduce aces from 11 to 1 as needed
        while total > BLACKJACK and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def points(self) -> int:
        """Score disclosed to the table."""
        if not self.cards:
            return 0
        if not self.reveal:
            return self.cards[0].value
        return self.value

    def show_cards(self) -> str:
        """Render the disclosed cards, e.g. '10 hearts | 11/1 spades'."""
        shown = self.cards if self.reveal else self.cards[:1]
        return " | ".join(f"{card.display_value} {card.suit.value}" for card in shown)

    @property
    def is_soft(self) -> bool:
        """Check if the hand is soft (has an ace counted as 11)."""
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        if not self.reveal:
            return f"{self.cards[0]} ??" if self.cards else ""
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, reveal={self.reveal})"
