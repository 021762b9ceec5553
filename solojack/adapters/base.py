"""
Base adapter interface for the solojack engine.

This module defines the interface that platform-specific adapters must implement
to present a round and collect the player's decisions.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from solojack.blackjack.action import Action


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    The engine owns the round state and pushes snapshots to the adapter; the
    adapter renders them and forwards the player's intents (bet, hit, stand,
    new round) back. Adapters never modify the state themselves.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current round to the platform.

        Args:
            state: Output of ``RoundState.to_adapter_format``
        """
        pass

    @abstractmethod
    async def request_bet(self, chips: int, options: Sequence[int]) -> Optional[int]:
        """
        Ask the player how much to stake.

        Args:
            chips: Current chip balance
            options: Bet amounts the player can afford

        Returns:
            The chosen amount, or None if the player leaves the table
        """
        pass

    @abstractmethod
    async def request_player_action(self, valid_actions: List[Action]) -> Action:
        """
        Ask the player for their next action.

        Args:
            valid_actions: Actions allowed in the current phase

        Returns:
            The player's chosen action
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    @abstractmethod
    async def confirm_new_round(self) -> bool:
        """
        Ask whether to deal another round after one has finished.

        Returns:
            True to play again
        """
        pass

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the engine is shutting down.
        """
        pass
