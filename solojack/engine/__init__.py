"""
Core engine for solojack.

This package provides the engine that owns the current round and connects
the pure state transitions to a platform adapter.
"""

from solojack.engine.blackjack import BlackjackEngine

__all__ = ["BlackjackEngine"]
