"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from core.cards import Card

BLACKJACK = 21


class Outcome(Enum):
    """Result of one participant's hand against the dealer."""

    WIN = auto()
    LOSS = auto()
    DRAW = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class Hand:
    """An ordered, append-only collection of cards with point calculation."""

    _cards: list[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        self._cards.append(card)

    add_card = add

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self._cards.clear()

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards in draw order."""
        return tuple(self._cards)

    def points(self) -> int:
        """
        Calculate the hand's point total.

        Aces start at 11. While the total is over 21, one soft ace at a time
        is demoted to 1. If every ace has been demoted and the total is still
        over 21, the hand is bust at that total.
        """
        total = 0
        soft_aces = 0

        for card in self._cards:
            if card.is_ace:
                soft_aces += 1
            total += card.value

        while total > BLACKJACK and soft_aces > 0:
            total -= 10
            soft_aces -= 1

        return total

    def is_bust(self) -> bool:
        """Check if the hand has busted (points > 21)."""
        return self.points() > BLACKJACK

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self._cards)
        value_str = "(BUST)" if self.is_bust() else f"({self.points()})"
        return f"{cards_str} {value_str}".strip()

    def __repr__(self) -> str:
        return f"Hand({self._cards!r}, points={self.points()})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare a participant's hand with the dealer's.

    Returns:
        Outcome from the participant's point of view
    """
    # Player busts always loses, even if the dealer busts too
    if player_hand.is_bust():
        return Outcome.LOSS

    if dealer_hand.is_bust():
        return Outcome.WIN

    player_points = player_hand.points()
    dealer_points = dealer_hand.points()

    if player_points > dealer_points:
        return Outcome.WIN
    if dealer_points > player_points:
        return Outcome.LOSS
    return Outcome.DRAW
