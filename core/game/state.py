"""Round state and outcome enumerations."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE
    """

    # Opening cards being dealt
    DEALING = auto()

    # Player may hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to its standing total
    DEALER_TURN = auto()

    # Outcome decided, no further actions
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Outcome(Enum):
    """How a round ended, from the player's point of view."""

    PLAYER_BUST = auto()
    DEALER_WIN = auto()
    PLAYER_WIN = auto()
    PUSH = auto()

    @property
    def status(self) -> str:
        """External status word. Both losing outcomes read 'Bust'."""
        return OUTCOME_STATUS[self]


OUTCOME_STATUS: dict[Outcome, str] = {
    Outcome.PLAYER_BUST: "Bust",
    Outcome.DEALER_WIN: "Bust",
    Outcome.PLAYER_WIN: "Win",
    Outcome.PUSH: "Push",
}

# Status of a round that has not finished
IN_PROGRESS = ""
