"""
Immutable state models for the solojack engine.

This module provides dataclasses for representing the state of a blackjack
round in an immutable manner. These classes are designed to be used with pure
transition functions that create new state instances rather than modifying
existing ones.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence

from solojack.blackjack.constants import (
    DEFAULT_BET_OPTIONS,
    DEFAULT_CHIPS,
    MESSAGE_PLACE_BET,
)
from solojack.common.card import Card
from solojack.common.deck import Deck
from solojack.common.hand import Hand


class GamePhase(Enum):
    """
    Possible phases of a round.

    The dealer plays out inside the stand transition, so there is no
    separate dealer phase.
    """

    BETTING = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class RoundOutcome(Enum):
    """How a finished round was decided."""

    PLAYER_BUST = "player_bust"
    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    PUSH = "push"


@dataclass(frozen=True)
class RoundState:
    """
    Immutable snapshot of a single-player round.

    Attributes:
        deck: Cards left to deal
        player_hand: The player's cards
        dealer_hand: The dealer's cards, the second one is the hole card
        phase: Current phase of the round
        message: Status line for the player
        player_score: Score of the player's hand
        dealer_score: Tracked dealer score; only the up card while playing
        chips: Chip balance, not counting the current stake
        current_bet: Stake of the current round
        outcome: How the round ended, None until it does
        round_number: Number of rounds started from this balance
    """

    deck: Deck = field(default_factory=Deck)
    player_hand: Hand = field(default_factory=Hand)
    dealer_hand: Hand = field(default_factory=Hand)
    phase: GamePhase = GamePhase.BETTING
    message: str = MESSAGE_PLACE_BET
    player_score: int = 0
    dealer_score: int = 0
    chips: int = DEFAULT_CHIPS
    current_bet: int = 0
    outcome: Optional[RoundOutcome] = None
    round_number: int = 1

    def __post_init__(self):
        if self.chips < 0:
            raise ValueError(f"Chip balance cannot be negative: {self.chips}")
        if self.current_bet < 0:
            raise ValueError(f"Bet cannot be negative: {self.current_bet}")

    @property
    def is_playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def dealer_visible_cards(self) -> List[Card]:
        """The dealer's cards a player may see; the hole card stays hidden while playing."""
        if self.phase is GamePhase.PLAYING:
            return list(self.dealer_hand.cards[:1])
        return list(self.dealer_hand.cards)

    @property
    def dealer_display_score(self) -> int:
        """Dealer score to show: the tracked up-card score while playing, the full score after."""
        if self.phase is GamePhase.PLAYING:
            return self.dealer_score
        return self.dealer_hand.value

    def bet_options(self, options: Sequence[int] = DEFAULT_BET_OPTIONS) -> List[int]:
        """Bet amounts the player can currently afford."""
        if self.phase is not GamePhase.BETTING:
            return []
        return [amount for amount in options if 0 < amount <= self.chips]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the round state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the round state
        """
        return {
            "phase": self.phase.name,
            "message": self.message,
            "round_number": self.round_number,
            "chips": self.chips,
            "current_bet": self.current_bet,
            "outcome": self.outcome.value if self.outcome else None,
            "deck_cards_remaining": self.deck.size,
            "player": {
                "hand": [str(card) for card in self.player_hand],
                "score": self.player_score,
                "is_soft": self.player_hand.is_soft,
            },
            "dealer": {
                "hand": [str(card) for card in self.dealer_hand],
                "score": self.dealer_score,
                "value": self.dealer_hand.value,
            },
        }

    def to_adapter_format(
        self, bet_options: Sequence[int] = DEFAULT_BET_OPTIONS
    ) -> Dict[str, Any]:
        """
        Convert the round state to a format suitable for platform adapters.

        The dealer's full hand is included so adapters can animate the reveal,
        but ``hide_second_card`` tells them not to show it yet.

        Returns:
            Dictionary in adapter-friendly format
        """
        playing = self.phase is GamePhase.PLAYING
        return {
            "phase": self.phase.name,
            "message": self.message,
            "chips": self.chips,
            "current_bet": self.current_bet,
            "dealer": {
                "hand": [str(card) for card in self.dealer_hand],
                "visible_cards": [str(card) for card in self.dealer_visible_cards],
                "value": self.dealer_display_score,
                "hide_second_card": playing and len(self.dealer_hand) > 1,
            },
            "player": {
                "hand": [str(card) for card in self.player_hand],
                "value": self.player_score,
            },
            "bet_options": self.bet_options(bet_options),
            "can_bet": self.phase is GamePhase.BETTING and self.chips > 0,
            "can_hit": playing,
            "can_stand": playing,
            "can_reset": self.phase is GamePhase.GAME_OVER,
        }
