"""
This module contains the `Hand` class, an immutable hand of cards.

A hand only grows: `add_card` returns a new hand with the card appended and
leaves the original unchanged.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from solojack.blackjack import scoring
from solojack.common.card import Card


@dataclass(frozen=True)
class Hand:
    """
    Immutable representation of a hand of cards.

    Attributes:
        cards: The cards in the order they were dealt
    """

    cards: Tuple[Card, ...] = field(default_factory=tuple)

    def __post_init__(self):
        cards = tuple(self.cards)
        for card in cards:
            if not isinstance(card, Card):
                raise TypeError(f"Hand can only hold cards, got {card!r}")
        object.__setattr__(self, "cards", cards)

    def add_card(self, card: Card) -> "Hand":
        """
        Return a new hand with ``card`` appended.

        Args:
            card: The card to add.
        """
        if not isinstance(card, Card):
            raise TypeError(f"Hand can only hold cards, got {card!r}")
        return Hand(self.cards + (card,))

    def first(self, count: int) -> "Hand":
        """Return a hand made of the first ``count`` cards."""
        return Hand(self.cards[:count])

    @property
    def value(self) -> int:
        """Best total of the hand."""
        return scoring.score(self.cards)

    @property
    def is_bust(self) -> bool:
        return scoring.is_bust(self.cards)

    @property
    def is_soft(self) -> bool:
        return scoring.is_soft(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index):
        return self.cards[index]

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            A string in the form "A♠, K♥".
        """
        return ", ".join(str(card) for card in self.cards)
