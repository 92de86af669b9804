"""Round engine and state management."""

from core.game.events import GameEvent, EventType
from core.game.state import Outcome, RoundState
from core.game.engine import BlackjackRound, new_round

__all__ = [
    "GameEvent",
    "EventType",
    "Outcome",
    "RoundState",
    "BlackjackRound",
    "new_round",
]
