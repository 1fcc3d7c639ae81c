"""Participants at the table."""

from core.cards import Card
from core.hand import Hand


class Player:
    """A named participant owning one hand and a cross-round score."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._hand = Hand()
        self._score = 0

    @property
    def hand(self) -> Hand:
        return self._hand

    @property
    def score(self) -> int:
        """Number of rounds won; never decreases."""
        return self._score

    def add_card(self, card: Card) -> None:
        """Add a card to this player's hand."""
        self._hand.add(card)

    def points(self) -> int:
        return self._hand.points()

    def is_bust(self) -> bool:
        return self._hand.is_bust()

    def add_score(self) -> None:
        """Record one more won round."""
        self._score += 1

    def __str__(self) -> str:
        return f"{self.name}: {self._hand}"

    def __repr__(self) -> str:
        return f"Player({self.name!r}, score={self._score})"
