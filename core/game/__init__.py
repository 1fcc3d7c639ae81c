"""Game engine and state management."""

from core.game.actions import Action, ActionSource, scripted
from core.game.events import GameEvent, EventType
from core.game.state import RoundState
from core.game.engine import Game, RoundResult

__all__ = [
    "Action",
    "ActionSource",
    "scripted",
    "GameEvent",
    "EventType",
    "RoundState",
    "Game",
    "RoundResult",
]
