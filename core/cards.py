"""Card and Deck classes - immutable cards drawn without replacement."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from random import Random
from typing import Iterator

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class DeckExhausted(IndexError):
    """Raised when drawing from a deck with no undrawn cards left."""

    def __init__(self, drawn: int = DECK_SIZE) -> None:
        super().__init__(f"Cannot draw from exhausted deck ({drawn} cards drawn)")
        self.drawn = drawn


class Suit(Enum):
    """Card suits."""

    HEART = "♥"
    DIAMOND = "♦"
    SPADE = "♠"
    CLUB = "♣"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Return the display symbol."""
        return self.value


class Rank(Enum):
    """Card ranks, valued by their blackjack base points."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the display symbol ("2".."10", "J", "Q", "K", "A")."""
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def base_value(self) -> int:
        """Return the base point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_SYMBOLS = {rank.symbol: rank for rank in Rank}
_RANK_SYMBOLS["T"] = Rank.TEN

_SUIT_SYMBOLS = {
    "H": Suit.HEART,
    "♥": Suit.HEART,
    "D": Suit.DIAMOND,
    "♦": Suit.DIAMOND,
    "S": Suit.SPADE,
    "♠": Suit.SPADE,
    "C": Suit.CLUB,
    "♣": Suit.CLUB,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card; equal by (rank, suit)."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank_symbol}{self.suit_symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base point value."""
        return self.rank.base_value

    @property
    def rank_symbol(self) -> str:
        return self.rank.symbol

    @property
    def suit_symbol(self) -> str:
        return self.suit.symbol

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_SYMBOLS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_SYMBOLS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_SYMBOLS[rank_str], _SUIT_SYMBOLS[suit_str])


class Deck:
    """
    A single 52-card deck drawn without replacement.

    The population is fixed at construction. Each draw picks uniformly among
    the identities not yet consumed, so the candidate pool shrinks by one per
    draw until an explicit reset().
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new deck.

        Args:
            rng: Random number generator used for draws
        """
        self._rng = rng or Random()
        self._population: dict[tuple[Rank, Suit], Card] = {
            (rank, suit): Card(rank, suit) for suit in Suit for rank in Rank
        }
        self._consumed: set[tuple[Rank, Suit]] = set()

    def draw(self) -> Card:
        """
        Draw a random undrawn card.

        Returns:
            A copy of the drawn card; the deck keeps no reference to it

        Raises:
            DeckExhausted: If all 52 cards have been drawn since the last reset
        """
        candidates = [key for key in self._population if key not in self._consumed]
        if not candidates:
            raise DeckExhausted(len(self._consumed))

        key = self._rng.choice(candidates)
        self._consumed.add(key)
        card = replace(self._population[key])
        logger.debug("Drew %s (%d remaining)", card, self.cards_remaining)
        return card

    def reset(self) -> None:
        """Make all 52 cards drawable again."""
        self._consumed = set()

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards that can still be drawn."""
        return len(self._population) - len(self._consumed)

    @property
    def consumed(self) -> frozenset[tuple[Rank, Suit]]:
        """Return the (rank, suit) identities drawn since the last reset."""
        return frozenset(self._consumed)

    def __len__(self) -> int:
        return self.cards_remaining

    def __iter__(self) -> Iterator[Card]:
        """Iterate over the cards still drawable, in canonical order."""
        return iter(
            [card for key, card in self._population.items() if key not in self._consumed]
        )
