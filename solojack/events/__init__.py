"""
Event system for the solojack engine.

This package provides the event bus that the engine publishes state changes on.
"""

from solojack.events.emitter import EngineEventType, EventBus, EventEmitter

__all__ = ["EventEmitter", "EventBus", "EngineEventType"]
