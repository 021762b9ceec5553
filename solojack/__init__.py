"""
solojack: single-player blackjack against a dealer.

The in-process API is a set of pure functions over an immutable
``RoundState``:

>>> from solojack import new_round, place_bet, stand
>>> state = new_round(chips=1000)
>>> state = place_bet(state, 100)
>>> state.chips
900
"""

from solojack.common.card import Card, Rank, Suit
from solojack.common.deck import Deck, build_deck, draw, shuffle, standard_cards
from solojack.common.errors import (
    EmptyDeckError,
    InsufficientChipsError,
    InvalidBetError,
    InvalidPhaseActionError,
    SolojackError,
)
from solojack.common.hand import Hand
from solojack.common.random_source import (
    DefaultRandomSource,
    RandomSource,
    SystemRandomSource,
)
from solojack.blackjack.scoring import score
from solojack.state.models import GamePhase, RoundOutcome, RoundState
from solojack.state.transitions import (
    StateTransitionEngine,
    hit,
    new_round,
    place_bet,
    reset,
    stand,
)

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "build_deck",
    "draw",
    "shuffle",
    "standard_cards",
    "Hand",
    "score",
    "RandomSource",
    "DefaultRandomSource",
    "SystemRandomSource",
    "GamePhase",
    "RoundOutcome",
    "RoundState",
    "StateTransitionEngine",
    "new_round",
    "place_bet",
    "hit",
    "stand",
    "reset",
    "SolojackError",
    "EmptyDeckError",
    "InsufficientChipsError",
    "InvalidBetError",
    "InvalidPhaseActionError",
]
