"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, DeckExhausted, Rank, Suit
from core.hand import Hand, Outcome, evaluate_hands
from core.player import Player

__all__ = [
    "Card",
    "Deck",
    "DeckExhausted",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "evaluate_hands",
    "Player",
]
