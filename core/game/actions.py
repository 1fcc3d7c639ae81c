"""Player actions and the input that selects them."""

from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from core.player import Player


class Action(Enum):
    """Possible player actions."""

    STAND = auto()
    HIT = auto()

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, raw: "Action | str | None") -> "Action | None":
        """
        Normalise raw input to an action.

        Accepts Action members and strings such as "s", "stand", "stick",
        "h", "t", "hit" or "twist" (case and surrounding whitespace ignored).

        Returns:
            The action, or None if the input is not recognised
        """
        if isinstance(raw, Action):
            return raw
        if not isinstance(raw, str):
            return None
        return _ALIASES.get(raw.strip().lower())


_ALIASES = {
    "s": Action.STAND,
    "stand": Action.STAND,
    "stick": Action.STAND,
    "h": Action.HIT,
    "t": Action.HIT,
    "hit": Action.HIT,
    "twist": Action.HIT,
}

# Called once per decision with the player whose turn it is
ActionSource = Callable[["Player"], Union[Action, str, None]]


def scripted(*inputs: "Action | str") -> ActionSource:
    """
    Build an action source that replays fixed inputs in order.

    Raises:
        RuntimeError: If asked for more inputs than were scripted
    """
    remaining = list(inputs)

    def source(player: "Player") -> "Action | str":
        if not remaining:
            raise RuntimeError(f"No scripted action left for {player.name}")
        return remaining.pop(0)

    return source
