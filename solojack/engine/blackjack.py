"""
Blackjack engine implementation.

This module provides the BlackjackEngine class, the single owner of the
authoritative round state. It applies the pure transitions from
``solojack.state``, publishes what changed on the event bus, and drives a
platform adapter.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from solojack.adapters.base import PlatformAdapter
from solojack.blackjack.action import Action
from solojack.blackjack.constants import DEFAULT_BET_OPTIONS, DEFAULT_CHIPS
from solojack.common.errors import EmptyDeckError
from solojack.common.random_source import DefaultRandomSource, RandomSource
from solojack.events import EngineEventType, EventBus
from solojack.state import GamePhase, RoundState, StateTransitionEngine

logger = logging.getLogger(__name__)

Event = Tuple[EngineEventType, Dict[str, Any]]


class BlackjackEngine:
    """
    Engine for a single player against the dealer.

    The engine holds exactly one current ``RoundState``. Every operation
    replaces it with the snapshot returned by a transition; requests that are
    not valid in the current phase leave it untouched (or raise, with
    ``strict`` enabled) and emit no events.
    """

    def __init__(self, adapter: PlatformAdapter, config: Dict[str, Any] = None):
        """
        Initialize the blackjack engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options; ``initial_chips``, ``bet_options``,
                    ``strict``, ``seed`` and ``rng`` are recognised
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()

        self.initial_chips = self.config.get("initial_chips", DEFAULT_CHIPS)
        self.bet_options = tuple(self.config.get("bet_options", DEFAULT_BET_OPTIONS))
        self.strict = self.config.get("strict", False)
        self.rng: RandomSource = self.config.get("rng") or DefaultRandomSource(
            self.config.get("seed")
        )

        self.state: Optional[RoundState] = None
        self._lock = threading.RLock()

    async def initialize(self) -> None:
        """
        Initialize the adapter and announce the engine.
        """
        await self.adapter.initialize()
        await self._publish(
            [
                (
                    EngineEventType.ENGINE_INIT,
                    {
                        "initial_chips": self.initial_chips,
                        "bet_options": list(self.bet_options),
                        "strict": self.strict,
                        "timestamp": time.time(),
                    },
                )
            ]
        )

    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self._publish(
            [(EngineEventType.ENGINE_SHUTDOWN, {"timestamp": time.time()})]
        )
        await self.adapter.shutdown()

    async def start_game(self, chips: Optional[int] = None) -> RoundState:
        """
        Sit down at the table with a fresh balance.

        Args:
            chips: Starting balance, defaults to the configured initial chips
        """
        chips = self.initial_chips if chips is None else chips
        return await self._apply(
            lambda _: StateTransitionEngine.new_round(chips, rng=self.rng),
            require_state=False,
        )

    async def reset(self) -> RoundState:
        """
        Start a new round with a freshly shuffled deck, keeping the chips.
        """
        return await self._apply(
            lambda state: StateTransitionEngine.reset(state, rng=self.rng)
        )

    async def place_bet(self, amount: int) -> RoundState:
        """
        Place a bet and deal the opening cards.

        Args:
            amount: Number of chips to stake
        """
        return await self._apply(
            lambda state: StateTransitionEngine.place_bet(
                state, amount, strict=self.strict
            )
        )

    async def hit(self) -> RoundState:
        """Deal another card to the player."""
        return await self._apply(
            lambda state: StateTransitionEngine.hit(state, strict=self.strict),
            action=Action.HIT,
        )

    async def stand(self) -> RoundState:
        """Stand, let the dealer play out and settle the round."""
        return await self._apply(
            lambda state: StateTransitionEngine.stand(state, strict=self.strict),
            action=Action.STAND,
        )

    async def execute_player_action(self, action: Action) -> RoundState:
        """
        Execute a player action.

        Args:
            action: Action to perform
        """
        if action is Action.HIT:
            return await self.hit()
        if action is Action.STAND:
            return await self.stand()
        raise ValueError(f"Unsupported action: {action!r}")

    def valid_actions(self) -> List[Action]:
        """Actions the player may take in the current phase."""
        if self.state is not None and self.state.phase is GamePhase.PLAYING:
            return [Action.HIT, Action.STAND]
        return []

    async def render_state(self) -> None:
        """
        Render the current round state.
        """
        if self.state is not None:
            await self.adapter.render_game_state(
                self.state.to_adapter_format(self.bet_options)
            )

    async def play_round(self) -> Optional[RoundState]:
        """
        Play one round through the adapter: ask for a bet, then for actions
        until the round is over.

        Returns:
            The final state, the unchanged betting state if the bet was
            rejected, or None if the player left or cannot afford a bet
        """
        if self.state is None:
            await self.start_game()
        elif self.state.phase is GamePhase.GAME_OVER:
            await self.reset()

        options = self.state.bet_options(self.bet_options)
        if not options:
            logger.info("No affordable bet with %d chips", self.state.chips)
            return None

        amount = await self.adapter.request_bet(self.state.chips, options)
        if amount is None:
            return None

        await self.place_bet(amount)
        if self.state.phase is GamePhase.BETTING:
            return self.state

        while self.state.phase is GamePhase.PLAYING:
            action = await self.adapter.request_player_action(self.valid_actions())
            await self.execute_player_action(action)

        return self.state

    async def run(self, max_rounds: Optional[int] = None) -> Optional[RoundState]:
        """
        Play rounds until the player leaves, runs out of chips, or
        ``max_rounds`` rounds have been completed.

        Returns:
            The last state
        """
        completed = 0
        await self.initialize()
        try:
            await self.start_game()
            while True:
                state = await self.play_round()
                if state is None:
                    break
                if state.phase is not GamePhase.GAME_OVER:
                    continue

                completed += 1
                if max_rounds is not None and completed >= max_rounds:
                    break
                if not await self.adapter.confirm_new_round():
                    break
        finally:
            await self.shutdown()
        return self.state

    async def _apply(
        self,
        transition: Callable[[RoundState], RoundState],
        action: Optional[Action] = None,
        require_state: bool = True,
    ) -> RoundState:
        if require_state and self.state is None:
            raise RuntimeError("No game in progress, call start_game() first")

        try:
            with self._lock:
                old_state = self.state
                new_state = transition(old_state)
                if new_state is old_state:
                    return old_state
                self.state = new_state
        except EmptyDeckError as e:
            logger.error("Deck exhausted: %s", e)
            await self._publish(
                [(EngineEventType.ERROR, {"error": str(e), "timestamp": time.time()})]
            )
            raise

        await self._publish(_describe_change(old_state, new_state, action))
        await self.render_state()
        return new_state

    async def _publish(self, events: List[Event]) -> None:
        for event_type, data in events:
            self.event_bus.emit(event_type, data)
            await self.adapter.notify_game_event(event_type, data)


def _describe_change(
    old: Optional[RoundState], new: RoundState, action: Optional[Action]
) -> List[Event]:
    """List the events that explain how ``old`` became ``new``."""
    now = time.time()
    events: List[Event] = []

    if new.phase is GamePhase.BETTING:
        events.append(
            (
                EngineEventType.ROUND_STARTED,
                {"round_number": new.round_number, "chips": new.chips, "timestamp": now},
            )
        )
        return events

    if old.phase is GamePhase.BETTING:
        events.append(
            (
                EngineEventType.PLAYER_BET,
                {"amount": new.current_bet, "chips": new.chips, "timestamp": now},
            )
        )
        for card in new.player_hand:
            events.append(_card_dealt(card, is_dealer=False, timestamp=now))
        for i, card in enumerate(new.dealer_hand):
            events.append(
                _card_dealt(card, is_dealer=True, hidden=i == 1, timestamp=now)
            )
        return events

    events.append(
        (EngineEventType.PLAYER_ACTION, {"action": action.value, "timestamp": now})
    )

    for card in new.player_hand.cards[len(old.player_hand) :]:
        events.append(_card_dealt(card, is_dealer=False, timestamp=now))

    if new.phase is not GamePhase.GAME_OVER:
        return events

    if action is Action.STAND:
        dealer_cards = new.dealer_hand.cards
        for index in range(len(old.dealer_hand), len(dealer_cards)):
            events.append(
                (
                    EngineEventType.DEALER_ACTION,
                    {
                        "action": "hits",
                        "score": new.dealer_hand.first(index).value,
                        "timestamp": now,
                    },
                )
            )
            events.append(
                _card_dealt(dealer_cards[index], is_dealer=True, timestamp=now)
            )
        if new.dealer_hand.is_bust:
            events.append(
                (
                    EngineEventType.HAND_BUSTED,
                    {"is_dealer": True, "score": new.dealer_score, "timestamp": now},
                )
            )
        else:
            events.append(
                (
                    EngineEventType.DEALER_ACTION,
                    {"action": "stands", "score": new.dealer_score, "timestamp": now},
                )
            )
    else:
        events.append(
            (
                EngineEventType.HAND_BUSTED,
                {"is_dealer": False, "score": new.player_score, "timestamp": now},
            )
        )

    events.extend(
        [
            (
                EngineEventType.HAND_RESULT,
                {
                    "outcome": new.outcome.value,
                    "message": new.message,
                    "player_score": new.player_score,
                    "dealer_score": new.dealer_hand.value,
                    "timestamp": now,
                },
            ),
            (
                EngineEventType.MONEY_PAYOUT,
                {
                    "bet": new.current_bet,
                    "payout": new.chips - old.chips,
                    "chips": new.chips,
                    "timestamp": now,
                },
            ),
            (
                EngineEventType.ROUND_ENDED,
                {"round_number": new.round_number, "chips": new.chips, "timestamp": now},
            ),
        ]
    )
    return events


def _card_dealt(
    card, is_dealer: bool, hidden: bool = False, timestamp: float = None
) -> Event:
    return (
        EngineEventType.CARD_DEALT,
        {
            "card": None if hidden else str(card),
            "is_dealer": is_dealer,
            "is_hole_card": hidden,
            "timestamp": timestamp or time.time(),
        },
    )
