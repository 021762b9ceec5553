"""
Pytest configuration for the solojack test suite.

This module contains fixtures for building deterministic decks and random
sources, and keeps the event bus isolated between tests.
"""

import itertools

import pytest

from solojack.common.card import Card, Rank, Suit
from solojack.common.deck import Deck
from solojack.common.random_source import RandomSource
from solojack.events import EventBus


class ScriptedRandomSource(RandomSource):
    """Random source that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randbelow(self, n):
        self.calls.append(n)
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < n, f"scripted value {value} out of range for {n}"
        return value


RANKS_BY_LABEL = {rank.value: rank for rank in Rank}


@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


def cards_from_labels(labels):
    """
    Build cards from rank labels such as ``"A"`` or ``"10"``.

    Suits follow the label position, so the same labels always give the
    same cards.
    """
    return [
        Card(suit, RANKS_BY_LABEL[label])
        for label, suit in zip(labels, itertools.cycle(Suit))
    ]


@pytest.fixture
def hand_of():
    """Build a list of cards from rank labels."""

    def make(*labels):
        return cards_from_labels(labels)

    return make


@pytest.fixture
def stacked_deck():
    """
    Build a deck that deals the given rank labels in the given order.

    Decks deal from the end, so the cards are stored reversed.
    """

    def make(*labels):
        return Deck(list(reversed(cards_from_labels(labels))))

    return make


@pytest.fixture
def scripted_rng():
    return ScriptedRandomSource
