"""
Hand scoring for blackjack.

Aces start at 11. While the total is over 21 and an ace is still counted
as 11, one ace at a time is softened to 1.
"""

from typing import Iterable

from solojack.blackjack.constants import (
    ACE_SOFTENING,
    BLACKJACK,
    DEALER_STAND_THRESHOLD,
)
from solojack.common.card import Card


def _total_and_soft_aces(cards: Iterable[Card]):
    total = 0
    aces = 0
    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.base_value

    while total > BLACKJACK and aces > 0:
        total -= ACE_SOFTENING
        aces -= 1

    return total, aces


def score(cards: Iterable[Card]) -> int:
    """
    Calculate the best total of a hand.

    Returns the best total not over 21 when one exists, otherwise the total
    with every ace counted as 1.

    >>> from solojack.common.card import Card, Rank, Suit
    >>> score([Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.ACE)])
    12
    >>> score([])
    0
    """
    total, _ = _total_and_soft_aces(cards)
    return total


def is_bust(cards: Iterable[Card]) -> bool:
    return score(cards) > BLACKJACK


def is_soft(cards: Iterable[Card]) -> bool:
    """Determine if the hand is soft (contains an ace counted as 11)."""
    _, soft_aces = _total_and_soft_aces(cards)
    return soft_aces > 0


def dealer_should_draw(cards: Iterable[Card]) -> bool:
    """The dealer draws below 17 and stands on every 17, soft or hard."""
    return score(cards) < DEALER_STAND_THRESHOLD
