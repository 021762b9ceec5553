"""
Dummy adapter for the solojack engine, used for testing and simulation.

This module provides a non-interactive adapter that answers from scripts and
records everything the engine sends it.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from solojack.adapters.base import PlatformAdapter
from solojack.blackjack.action import Action

logger = logging.getLogger(__name__)


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    Answers are taken from the scripted lists in order. When a script runs
    out the adapter bets the smallest affordable option, stands, and declines
    another round.
    """

    def __init__(
        self,
        bets: Optional[List[Optional[int]]] = None,
        actions: Optional[List[Action]] = None,
        new_rounds: Optional[List[bool]] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            bets: Bet amounts to answer with, None meaning leave the table
            actions: Player actions to answer with
            new_rounds: Answers to give when asked to play again
            verbose: Whether to print events to stdout (useful for debugging)
        """
        self.bets = list(bets or [])
        self.actions = list(actions or [])
        self.new_rounds = list(new_rounds or [])
        self.verbose = verbose

        self.events = []
        self.rendered_states = []
        self.initialized = False
        self.shut_down = False

    async def initialize(self) -> None:
        self.initialized = True

    async def shutdown(self) -> None:
        self.shut_down = True

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.

        Args:
            state: The current round state in adapter format
        """
        self.rendered_states.append(state)

        if self.verbose:
            print("\n=== Round State ===")
            print(f"Dealer: {state['dealer']['visible_cards']} - {state['dealer']['value']}")
            print(f"Player: {state['player']['hand']} - {state['player']['value']}")
            print(f"{state['message']} (chips: {state['chips']})")
            print("===================\n")

    async def request_bet(self, chips: int, options: Sequence[int]) -> Optional[int]:
        if self.bets:
            return self.bets.pop(0)
        return min(options) if options else None

    async def request_player_action(self, valid_actions: List[Action]) -> Action:
        if self.actions:
            action = self.actions.pop(0)
            if action in valid_actions:
                return action
            logger.warning(
                "Scripted action %s is not valid here (valid: %s), standing instead",
                action.name,
                ", ".join(a.name for a in valid_actions),
            )
        return Action.STAND if Action.STAND in valid_actions else valid_actions[0]

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    async def confirm_new_round(self) -> bool:
        if self.new_rounds:
            return self.new_rounds.pop(0)
        return False

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
