"""Blackjack round engine with state machine."""

import logging
from random import Random

from transitions import Machine

from config import config
from core.cards import Card, Deck
from core.hand import BLACKJACK, Hand
from core.game.events import EventHandler, EventEmitter, EventType
from core.game.state import IN_PROGRESS, Outcome, RoundState

logger = logging.getLogger(__name__)


class BlackjackRound:
    """
    A single round of blackjack between one player and the dealer.

    The round deals itself on construction and is then driven one action
    at a time through ``hit()`` and ``stand()``. Actions return True when
    they were applied and False when the round is not in the player's turn.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_cards", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_natural", "source": "dealing", "dest": "round_complete"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "round_complete"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "round_complete"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        deck: Deck | None = None,
        dealer_stands_on: int | None = None,
        on_event: EventHandler | None = None,
    ) -> None:
        """
        Start a new round and deal the opening cards.

        Args:
            rng: Random number generator for a reproducible deck
            deck: Deck to deal from (a fresh shuffled deck if not provided)
            dealer_stands_on: Total at which the dealer stops drawing
            on_event: Handler subscribed to every event before the deal
        """
        self.dealer_stands_on = (
            config.game.dealer_stands_on if dealer_stands_on is None else dealer_stands_on
        )
        if not 2 <= self.dealer_stands_on <= BLACKJACK:
            raise ValueError(f"dealer_stands_on must be between 2 and {BLACKJACK}")

        self.events = EventEmitter()
        if on_event is not None:
            self.events.subscribe(on_event)

        if deck is None:
            if rng is None and config.game.seed is not None:
                rng = Random(config.game.seed)
            deck = Deck(rng=rng)
            self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(deck))
        self.deck = deck

        self.dealer = Hand(reveal=False)
        self.player = Hand()
        self._outcome: Outcome | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self._deal_initial_cards()

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def outcome(self) -> Outcome | None:
        """How the round ended, or None while it is in progress."""
        return self._outcome

    @property
    def status(self) -> str:
        """Result for the player: '', 'Bust', 'Win' or 'Push'."""
        if self._outcome is None:
            return IN_PROGRESS
        return self._outcome.status

    @property
    def is_complete(self) -> bool:
        return self.state == RoundState.ROUND_COMPLETE

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def player_points(self) -> int:
        return self.player.points

    def dealer_points(self) -> int:
        return self.dealer.points

    def player_cards(self) -> str:
        return self.player.show_cards()

    def dealer_cards(self) -> str:
        return self.dealer.show_cards()

    @staticmethod
    def is_bust(hand: Hand) -> bool:
        """Check if a hand's disclosed points are over 21."""
        return hand.points > BLACKJACK

    def _deal_initial_cards(self) -> None:
        """Deal player, dealer, player, dealer (hole card face down)."""
        for _ in range(2):
            self._deal_card_to_hand(self.player)
            self._deal_card_to_hand(self.dealer)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_cards=self.player_cards(),
            dealer_showing=self.dealer_cards(),
        )

        if self.player.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self._reveal_dealer()
            self.player_natural()
            self._complete(
                Outcome.PUSH if self.dealer.points == BLACKJACK else Outcome.PLAYER_WIN
            )
            return

        self.deal_cards()  # Move to player turn

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = self.deck.deal_card()
        hand.add_card(card)
        face_up = hand.reveal or len(hand) == 1
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if hand is self.dealer else "player",
            hand_value=hand.points,
        )
        return card

    def _reveal_dealer(self) -> None:
        """Turn the dealer's hole card face up."""
        self.dealer.reveal = True
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer.cards[1]),
            hand_value=self.dealer.points,
        )

    def _reject(self, action: str) -> bool:
        logger.warning("Ignoring %s in state %s (status %r)", action, self.state, self.status)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            state=self.state.name,
        )
        return False

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != RoundState.PLAYER_TURN:
            return self._reject("hit")

        self._deal_card_to_hand(self.player)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player.points)

        if self.is_bust(self.player):
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player.points)
            self.player_busts()
            self._complete(Outcome.PLAYER_BUST)

        return True

    def stand(self) -> bool:
        """Player stands and the dealer plays out the round."""
        if self.state != RoundState.PLAYER_TURN:
            return self._reject("stand")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.points)
        self.player_done()
        self._reveal_dealer()

        outcome: Outcome | None = None
        while self.dealer.points < self.dealer_stands_on and outcome is None:
            self._deal_card_to_hand(self.dealer)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer.points)
            if self.is_bust(self.dealer):
                self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer.points)
                outcome = Outcome.PLAYER_WIN

        if outcome is None:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.points)
            outcome = self._compare_hands()

        self.dealer_plays()
        self._complete(outcome)
        return True

    def _compare_hands(self) -> Outcome:
        """
        Settle a round where the dealer stood.

        The dealer wins only with a strictly higher total; an equal total
        goes to the player.
        """
        dealer_points = self.dealer.points
        if dealer_points > BLACKJACK:
            return Outcome.PUSH
        if dealer_points > self.player.points:
            return Outcome.DEALER_WIN
        return Outcome.PLAYER_WIN

    def _complete(self, outcome: Outcome) -> None:
        """Record the outcome and announce it."""
        self._outcome = outcome

        if outcome == Outcome.PLAYER_WIN:
            self.events.emit_new(EventType.PLAYER_WINS)
        elif outcome == Outcome.PUSH:
            self.events.emit_new(EventType.PUSH)
        else:
            self.events.emit_new(EventType.PLAYER_LOSES, outcome=outcome.name)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.name,
            status=self.status,
            player_points=self.player.points,
            dealer_points=self.dealer.points,
        )
        logger.info(
            "Round over: %s (player %d, dealer %d)",
            outcome.name,
            self.player.value,
            self.dealer.value,
        )


def new_round(
    rng: Random | None = None,
    dealer_stands_on: int | None = None,
) -> BlackjackRound:
    """Deal a new round from a freshly shuffled deck."""
    return BlackjackRound(rng=rng, dealer_stands_on=dealer_stands_on)
