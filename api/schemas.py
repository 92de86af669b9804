"""Pydantic schemas for the public state of a round."""

from pydantic import BaseModel
from typing import Literal

from core.cards import Card
from core.hand import Hand
from core.game.engine import BlackjackRound


class CardResponse(BaseModel):
    """Card representation."""

    rank: str
    suit: str
    value: int

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(rank=str(card.rank), suit=card.suit.value, value=card.value)


class HandResponse(BaseModel):
    """Hand representation, limited to the disclosed cards."""

    cards: list[CardResponse]
    points: int
    display: str
    revealed: bool

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandResponse":
        shown = hand.cards if hand.reveal else hand.cards[:1]
        return cls(
            cards=[CardResponse.from_card(card) for card in shown],
            points=hand.points,
            display=hand.show_cards(),
            revealed=hand.reveal,
        )


class RoundStateResponse(BaseModel):
    """Current round state."""

    state: str
    status: Literal["", "Bust", "Win", "Push"]
    outcome: Literal["PLAYER_BUST", "DEALER_WIN", "PLAYER_WIN", "PUSH"] | None
    player: HandResponse
    dealer: HandResponse
    cards_remaining: int

    @classmethod
    def from_round(cls, game: BlackjackRound) -> "RoundStateResponse":
        """Snapshot a round without exposing the dealer's hole card."""
        return cls(
            state=game.state.name,
            status=game.status,
            outcome=game.outcome.name if game.outcome else None,
            player=HandResponse.from_hand(game.player),
            dealer=HandResponse.from_hand(game.dealer),
            cards_remaining=game.deck.cards_remaining,
        )
