"""
This module contains the Deck class, which represents a single 52-card deck.

Decks are immutable: shuffling and drawing return new decks and leave the
original untouched. Cards are consumed from the end of the sequence.

>>> from solojack.common.random_source import DefaultRandomSource
>>> deck = build_deck(DefaultRandomSource(seed=1))
>>> deck.size
52
>>> card, rest = deck.draw()
>>> rest.size
51
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from solojack.common.card import Card, Rank, Suit
from solojack.common.errors import EmptyDeckError
from solojack.common.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)


# Precompute the canonical deck order: suits outer, ranks inner
_STANDARD_CARDS: Tuple[Card, ...] = tuple(
    Card(suit, rank) for suit in Suit for rank in Rank
)


def standard_cards() -> Tuple[Card, ...]:
    """
    Return the 52 cards of a standard deck in canonical order.

    >>> len(standard_cards())
    52
    """
    return _STANDARD_CARDS


class Deck:
    """
    An immutable, ordered sequence of cards dealt from the end.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: Cards in dealing order, the last one is dealt first.
                      If not provided, the unshuffled standard deck is used.
        """
        if cards is None:
            cards = _STANDARD_CARDS
        cards = tuple(cards)
        for card in cards:
            if not isinstance(card, Card):
                raise TypeError(f"Deck can only hold cards, got {card!r}")
        object.__setattr__(self, "_cards", cards)

    def __setattr__(self, name, value):
        raise AttributeError(f"Deck is immutable, cannot set {name!r}")

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffled(self, rng: Optional[RandomSource] = None) -> "Deck":
        """Return a shuffled copy of this deck."""
        return shuffle(self, rng)

    def draw(self) -> Tuple[Card, "Deck"]:
        """
        Take the next card.

        :return: The dealt card and the deck that remains.
        :raises EmptyDeckError: If the deck has no cards left.
        """
        if not self._cards:
            logger.error("Attempted to draw from an empty deck")
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards[-1], Deck(self._cards[:-1])

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __eq__(self, other):
        if isinstance(other, Deck):
            return self._cards == other._cards
        return NotImplemented

    def __hash__(self):
        return hash(self._cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self._cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self._cards)} cards"


def shuffle(deck: Deck, rng: Optional[RandomSource] = None) -> Deck:
    """
    Return a uniformly random permutation of ``deck`` (Fisher-Yates).

    Walks the index ``i`` from the last position down to 1 and swaps it with
    a uniformly drawn ``j`` in ``[0, i]``. The input deck is not modified.
    """
    rng = rng or default_random_source()
    cards = list(deck.cards)
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        cards[i], cards[j] = cards[j], cards[i]
    return Deck(cards)


def build_deck(rng: Optional[RandomSource] = None) -> Deck:
    """Build a fresh 52-card deck and shuffle it."""
    deck = shuffle(Deck(_STANDARD_CARDS), rng)
    logger.debug("Built and shuffled a new deck")
    return deck


def draw(deck: Deck) -> Tuple[Card, Deck]:
    """Take the next card from ``deck``; see `Deck.draw`."""
    return deck.draw()
