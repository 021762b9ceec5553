"""Player decisions available while a round is in play."""
from enum import Enum


class Action(Enum):
    """What the player can do with a live hand. Doubling and splitting are not offered."""

    HIT = "hit"
    STAND = "stand"

    @property
    def shortcut(self) -> str:
        """One-letter alias accepted at the console."""
        return self.value[0]
