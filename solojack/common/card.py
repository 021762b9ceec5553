"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards, listed in the canonical order used to build a deck: Spades, Clubs,
Hearts, Diamonds.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards, Ace through King. Each rank knows its blackjack base value.

- `Card`: An immutable playing card. A card has a suit and a rank. The `Card`
class also provides methods for comparing cards and for converting cards to
strings for display.
"""

from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    CLUBS = "♣"
    HEARTS = "♥"
    DIAMONDS = "♦"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def base_value(self) -> int:
        """The value of the rank before any ace is softened."""
        if self is Rank.ACE:
            return 11
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        return self.value

    def __str__(self) -> str:
        return self.rank_str


class Card:
    """
    Class representing a playing card. Cards are immutable values.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2♥
    >>> card.base_value
    2
    """

    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: Suit, rank: Rank):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit!r}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank!r}")
        object.__setattr__(self, "_suit", suit)
        object.__setattr__(self, "_rank", rank)

    def __setattr__(self, name, value):
        raise AttributeError(f"Card is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Card is immutable, cannot delete {name!r}")

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def base_value(self) -> int:
        """Blackjack value of the card with aces counted as 11."""
        return self._rank.base_value

    @property
    def is_ace(self) -> bool:
        return self._rank is Rank.ACE

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self._rank.rank_str}{self._suit}"
