"""
Immutable state management for the solojack engine.

This package provides immutable state classes and pure transition functions
for managing a round in a predictable and testable way.
"""

from solojack.state.models import GamePhase, RoundOutcome, RoundState

from solojack.state.transitions import StateTransitionEngine

__all__ = [
    "GamePhase",
    "RoundOutcome",
    "RoundState",
    "StateTransitionEngine",
]
