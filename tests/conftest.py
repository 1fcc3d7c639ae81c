"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from config import GameConfig
from core.cards import Card, Deck
from core.hand import Hand
from core.game import Game


class RecordingSource:
    """Action source that replays inputs and records who was asked."""

    def __init__(self, *inputs):
        self.inputs = list(inputs)
        self.asked: list[str] = []
        self.hand_sizes: list[int] = []

    def __call__(self, player):
        self.asked.append(player.name)
        self.hand_sizes.append(len(player.hand))
        if not self.inputs:
            raise AssertionError(f"{player.name} was asked for an unexpected action")
        return self.inputs.pop(0)


class StackedDeck(Deck):
    """Deck that deals a fixed list of cards first, then falls back to random draws."""

    def __init__(self, *cards: str, rng=None):
        super().__init__(rng=rng)
        self._stack = [Card.from_string(c) for c in cards]

    def draw(self) -> Card:
        while self._stack:
            card = self._stack.pop(0)
            key = (card.rank, card.suit)
            if key not in self._consumed:
                self._consumed.add(key)
                return card
        return super().draw()


def _make_hand(*cards: str) -> Hand:
    hand = Hand()
    for card in cards:
        hand.add(Card.from_string(card))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A fresh deck with seeded draws."""
    return Deck(rng=rng)


@pytest.fixture
def game_config():
    """Default rules, independent of the environment."""
    return GameConfig(dealer_stand_threshold=17, resolve_rounds=True)


@pytest.fixture
def game(game_config, rng):
    """A new table with no participants."""
    return Game(config=game_config, rng=rng)


@pytest.fixture
def unresolved_game(rng):
    """A table that only deals and runs participant turns."""
    return Game(config=GameConfig(dealer_stand_threshold=17, resolve_rounds=False), rng=rng)


@pytest.fixture
def make_hand():
    """Build a hand from card strings like 'AS', '10H'."""
    return _make_hand


@pytest.fixture
def source():
    """Factory for recording action sources."""
    return RecordingSource


@pytest.fixture
def stack_deck(rng):
    """Replace a game's deck with one that deals the given cards first."""

    def stack(game, *cards: str):
        game.deck = StackedDeck(*cards, rng=rng)
        return game.deck

    return stack


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """Ace-King, 21 in two cards."""
    return _make_hand("AS", "KH")


@pytest.fixture
def bust_hand():
    """Ten-Nine-Five, 24."""
    return _make_hand("10S", "9H", "5C")
