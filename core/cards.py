"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator


class DeckExhaustedError(IndexError):
    """Raised when a card is requested from an empty deck."""


class Suit(Enum):
    """Card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    SPADES = "spades"
    CLUBS = "clubs"

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, ordered two through ace."""

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

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def values(self) -> tuple[int, ...]:
        """
        Candidate point values, highest first.

        Every rank carries a single value except the ace, which carries
        (11, 1) and is resolved by the hand scoring.
        """
        return RANK_VALUES[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


RANK_VALUES: dict[Rank, tuple[int, ...]] = {
    Rank.TWO: (2,),
    Rank.THREE: (3,),
    Rank.FOUR: (4,),
    Rank.FIVE: (5,),
    Rank.SIX: (6,),
    Rank.SEVEN: (7,),
    Rank.EIGHT: (8,),
    Rank.NINE: (9,),
    Rank.TEN: (10,),
    Rank.JACK: (10,),
    Rank.QUEEN: (10,),
    Rank.KING: (10,),
    Rank.ACE: (11, 1),
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def values(self) -> tuple[int, ...]:
        return self.rank.values

    @property
    def value(self) -> int:
        """Return the high point value (Ace = 11)."""
        return self.rank.values[0]

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @property
    def display_value(self) -> str:
        """Point value as shown to the table, e.g. '10' or '11/1'."""
        return "/".join(str(v) for v in self.values)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
            "A": Rank.ACE,
        }

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """A standard 52-card deck dealt at random without replacement."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new deck, already shuffled.

        Args:
            rng: Random number generator for shuffling and dealing
        """
        self._rng = rng or Random()
        self.playable_cards: list[Card] = []
        self.shuffle()

    def shuffle(self) -> None:
        """Return every dealt card to the deck and shuffle it."""
        self.playable_cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        self._rng.shuffle(self.playable_cards)

    def deal_card(self) -> Card:
        """Remove a uniformly random card from the deck and return it."""
        if not self.playable_cards:
            raise DeckExhaustedError("Cannot deal from an exhausted deck")
        return self.playable_cards.pop(self._rng.randrange(len(self.playable_cards)))

    def __len__(self) -> int:
        return len(self.playable_cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.playable_cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self.playable_cards)
