"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: IDLE → DEALING → PLAYER_TURNS → DEALER_TURN → RESOLVING → ROUND_COMPLETE
    """

    # No round played yet
    IDLE = auto()

    # Empty hands receiving their opening cards
    DEALING = auto()

    # Participants acting one at a time
    PLAYER_TURNS = auto()

    # Dealer draws to its stand threshold
    DEALER_TURN = auto()

    # Comparing participants against the dealer
    RESOLVING = auto()

    # Round finished, ready for next
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.IDLE: [RoundState.DEALING],
    RoundState.DEALING: [RoundState.PLAYER_TURNS, RoundState.DEALING],
    RoundState.PLAYER_TURNS: [
        RoundState.DEALER_TURN,
        RoundState.RESOLVING,
        RoundState.ROUND_COMPLETE,
        RoundState.DEALING,
    ],
    RoundState.DEALER_TURN: [RoundState.RESOLVING, RoundState.DEALING],
    RoundState.RESOLVING: [RoundState.ROUND_COMPLETE],
    RoundState.ROUND_COMPLETE: [RoundState.DEALING],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    A round interrupted by an exhausted deck may restart dealing from the
    state it was left in.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
