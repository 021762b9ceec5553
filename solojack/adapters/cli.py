"""
Command-line interface adapter for the solojack engine.

This module renders a round as plain text and reads the player's choices
from an IOInterface.
"""

import asyncio
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from solojack.adapters.base import PlatformAdapter
from solojack.blackjack.action import Action
from solojack.common.io_interface import ConsoleIOInterface, IOInterface

HIDDEN_CARD = "??"


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the solojack engine.

    This adapter uses the standard console for input/output, providing a
    simple text-based interface to the game.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
        """
        self.io_interface = io_interface or ConsoleIOInterface()

    async def _output(self, message: str) -> None:
        output_async = getattr(self.io_interface, "output_async", None)
        if output_async is not None:
            await output_async(message)
        else:
            self.io_interface.output(message)

    async def _input(self, prompt: str) -> str:
        # Blocking console reads run off the event loop
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.io_interface.input, prompt)

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current round to the console.

        Args:
            state: The current round state in adapter format
        """
        await self._output("\n=== Blackjack ===")
        await self._output(f"Chips: {state['chips']}  Bet: {state['current_bet']}")

        if state["phase"] != "BETTING":
            dealer = state["dealer"]
            if dealer["hide_second_card"]:
                cards = dealer["visible_cards"] + [HIDDEN_CARD]
            else:
                cards = dealer["hand"]
            await self._output(f"Dealer: {', '.join(cards)} ({dealer['value']})")

            player = state["player"]
            await self._output(
                f"You:    {', '.join(player['hand'])} ({player['value']})"
            )

        if state["message"]:
            await self._output(state["message"])
        await self._output("=================\n")

    async def request_bet(self, chips: int, options: Sequence[int]) -> Optional[int]:
        """
        Ask for a bet by number, amount, or ``q`` to leave.

        Returns:
            The chosen amount, or None to leave the table
        """
        if not options:
            await self._output("Not enough chips for any bet.")
            return None

        await self._output(f"You have {chips} chips. Choose a bet:")
        for i, amount in enumerate(options):
            await self._output(f"{i + 1}: ${amount}")
        await self._output("q: leave the table")

        while True:
            try:
                choice = (await self._input("Bet: ")).strip().lower()
            except EOFError:
                return None

            if choice in ("q", "quit"):
                return None
            if choice.isdigit():
                index = int(choice) - 1
                if 0 <= index < len(options):
                    return options[index]
                if int(choice) in options:
                    return int(choice)
            await self._output("Invalid choice. Please try again.")

    async def request_player_action(self, valid_actions: List[Action]) -> Action:
        """
        Request an action from the player via the console.

        Args:
            valid_actions: List of valid actions the player can take

        Returns:
            The player's chosen action
        """
        action_map = {str(i + 1): action for i, action in enumerate(valid_actions)}
        for action in valid_actions:
            action_map[action.value] = action
            action_map[action.shortcut] = action

        options = ", ".join(
            f"{i + 1}: {action.name}" for i, action in enumerate(valid_actions)
        )
        await self._output(f"Your move ({options})")

        while True:
            try:
                choice = (await self._input("Action: ")).strip().lower()
            except EOFError:
                # Closing the input stands on the current hand
                return Action.STAND if Action.STAND in valid_actions else valid_actions[0]

            if choice in action_map:
                return action_map[choice]
            await self._output("Invalid choice. Please try again.")

    async def confirm_new_round(self) -> bool:
        try:
            choice = (await self._input("Play another round? [Y/n] ")).strip().lower()
        except EOFError:
            return False
        return choice in ("", "y", "yes")

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the user of a game event via the console.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        message = self._format_event_message(event_type, data)
        if message:
            await self._output(message)

    def _format_event_message(
        self, event_type: str, data: Dict[str, Any]
    ) -> Optional[str]:
        """
        Format an event message based on the event type.

        Args:
            event_type: The type of event
            data: Data associated with the event

        Returns:
            Formatted message string or None if no message needed
        """
        if event_type == "CARD_DEALT":
            if data.get("is_hole_card"):
                return "Dealer takes a face-down card"
            card = data.get("card", "?")
            if data.get("is_dealer"):
                return f"Dealer gets {card}"
            return f"You get {card}"

        elif event_type == "HAND_BUSTED":
            if data.get("is_dealer"):
                return f"Dealer busts with {data.get('score')}!"
            return f"You bust with {data.get('score')}!"

        elif event_type == "DEALER_ACTION":
            return f"Dealer {data.get('action', 'stands')} on {data.get('score')}"

        elif event_type == "MONEY_PAYOUT":
            payout = data.get("payout", 0)
            bet = data.get("bet", 0)
            if payout > bet:
                return f"You win ${payout - bet}"
            elif payout == bet:
                return f"Push, your ${bet} is returned"
            return f"You lose ${bet}"

        elif event_type == "ERROR":
            return f"Error: {data.get('error')}"

        return None
