"""
Event bus for the solojack engine.

The engine publishes one event per observable step of a round (a bet, each
card, the dealer's decisions, the settlement). Observers subscribe to the
``EngineEventType`` members they care about instead of polling the state.
"""

import logging
import threading
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet

logger = logging.getLogger(__name__)

EventHandler = Callable[[Dict[str, Any]], None]


class EngineEventType(Enum):
    """
    Event types published by the engine.

    Each type has a fixed set of payload keys, see ``fields``. Every payload
    also carries a ``timestamp``.
    """

    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"
    ROUND_STARTED = "round_started"
    PLAYER_BET = "player_bet"
    CARD_DEALT = "card_dealt"
    PLAYER_ACTION = "player_action"
    DEALER_ACTION = "dealer_action"
    HAND_BUSTED = "hand_busted"
    HAND_RESULT = "hand_result"
    MONEY_PAYOUT = "money_payout"
    ROUND_ENDED = "round_ended"
    ERROR = "error"

    @property
    def fields(self) -> FrozenSet[str]:
        """Keys a payload of this type must contain."""
        return _PAYLOAD_FIELDS[self] | {"timestamp"}


_PAYLOAD_FIELDS = {
    EngineEventType.ENGINE_INIT: frozenset({"initial_chips", "bet_options", "strict"}),
    EngineEventType.ENGINE_SHUTDOWN: frozenset(),
    EngineEventType.ROUND_STARTED: frozenset({"round_number", "chips"}),
    EngineEventType.PLAYER_BET: frozenset({"amount", "chips"}),
    EngineEventType.CARD_DEALT: frozenset({"card", "is_dealer", "is_hole_card"}),
    EngineEventType.PLAYER_ACTION: frozenset({"action"}),
    EngineEventType.DEALER_ACTION: frozenset({"action", "score"}),
    EngineEventType.HAND_BUSTED: frozenset({"is_dealer", "score"}),
    EngineEventType.HAND_RESULT: frozenset(
        {"outcome", "message", "player_score", "dealer_score"}
    ),
    EngineEventType.MONEY_PAYOUT: frozenset({"bet", "payout", "chips"}),
    EngineEventType.ROUND_ENDED: frozenset({"round_number", "chips"}),
    EngineEventType.ERROR: frozenset({"error"}),
}


class EventEmitter:
    """
    Dispatches engine events to subscribed handlers.

    Handlers run synchronously, in subscription order, on the emitting
    thread. A failing handler is logged and does not stop the others.
    """

    def __init__(self):
        self._handlers = defaultdict(list)
        self._lock = threading.RLock()

    def on(
        self, event_type: EngineEventType, callback: EventHandler
    ) -> Callable[[], None]:
        """
        Subscribe ``callback`` to one event type.

        Args:
            event_type: The engine event to listen for
            callback: Called with the event payload

        Returns:
            A function that removes this subscription
        """
        if not isinstance(event_type, EngineEventType):
            raise TypeError(f"Expected an EngineEventType, got {event_type!r}")

        # Wrap so the same callback can be subscribed and removed more than once
        subscription = [callback]
        with self._lock:
            self._handlers[event_type].append(subscription)

        def unsubscribe():
            with self._lock:
                handlers = self._handlers[event_type]
                handlers[:] = [entry for entry in handlers if entry is not subscription]

        return unsubscribe

    def emit(self, event_type: EngineEventType, data: Dict[str, Any]) -> None:
        """
        Publish an event to its subscribers.

        Raises:
            TypeError: If ``event_type`` is not an ``EngineEventType``
            ValueError: If the payload lacks keys the event type requires
        """
        if not isinstance(event_type, EngineEventType):
            raise TypeError(f"Expected an EngineEventType, got {event_type!r}")
        missing = event_type.fields - data.keys()
        if missing:
            raise ValueError(
                f"{event_type.name} payload is missing {', '.join(sorted(missing))}"
            )

        with self._lock:
            callbacks = [entry[0] for entry in self._handlers.get(event_type, [])]

        for callback in callbacks:
            try:
                callback(data)
            except Exception:
                logger.exception("Handler %r failed on %s", callback, event_type.name)

    def listener_count(self, event_type: EngineEventType) -> int:
        with self._lock:
            return len(self._handlers.get(event_type, []))


class EventBus:
    """
    Process-wide event emitter shared by the engine and its observers.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance
