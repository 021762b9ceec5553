"""
State transition functions for the solojack engine.

This module provides pure functions for moving a round between phases,
without modifying the original state objects. A request that is not valid
for the current state returns the input state unchanged; with
``strict=True`` it raises instead.
"""

import logging
from dataclasses import replace
from typing import Optional

from solojack.blackjack import scoring
from solojack.blackjack.constants import (
    BLACKJACK,
    DEFAULT_CHIPS,
    INITIAL_CARDS,
    MESSAGE_DEALER_WINS,
    MESSAGE_IN_PROGRESS,
    MESSAGE_PLACE_BET,
    MESSAGE_PLAYER_BUST,
    MESSAGE_PLAYER_WINS,
    MESSAGE_PUSH,
    PUSH_RETURN_MULTIPLIER,
    WIN_RETURN_MULTIPLIER,
)
from solojack.common.deck import Deck, build_deck
from solojack.common.errors import (
    InsufficientChipsError,
    InvalidBetError,
    InvalidPhaseActionError,
)
from solojack.common.hand import Hand
from solojack.common.random_source import RandomSource
from solojack.state.models import GamePhase, RoundOutcome, RoundState

logger = logging.getLogger(__name__)


class StateTransitionEngine:
    """
    Pure functions for state transitions.

    This class contains static methods that implement round transitions.
    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def new_round(
        chips: int = DEFAULT_CHIPS,
        rng: Optional[RandomSource] = None,
        deck: Optional[Deck] = None,
    ) -> RoundState:
        """
        Create the state for a fresh table.

        Args:
            chips: Starting chip balance
            rng: Random source used to shuffle a new deck
            deck: Deck to deal from as-is, instead of a freshly shuffled one

        Returns:
            A state in the betting phase
        """
        if isinstance(chips, bool) or not isinstance(chips, int):
            raise TypeError(f"Chip balance must be an integer, got {chips!r}")
        if chips < 0:
            raise ValueError(f"Chip balance cannot be negative: {chips}")

        return RoundState(
            deck=deck if deck is not None else build_deck(rng),
            chips=chips,
            message=MESSAGE_PLACE_BET,
        )

    @staticmethod
    def reset(
        state: RoundState,
        rng: Optional[RandomSource] = None,
        deck: Optional[Deck] = None,
    ) -> RoundState:
        """
        Start a new round, keeping only the chip balance.

        Args:
            state: Current round state
            rng: Random source used to shuffle the new deck
            deck: Deck to deal from as-is, instead of a freshly shuffled one

        Returns:
            New state in the betting phase
        """
        new_state = RoundState(
            deck=deck if deck is not None else build_deck(rng),
            chips=state.chips,
            message=MESSAGE_PLACE_BET,
            round_number=state.round_number + 1,
        )
        logger.debug(
            "Reset to round %d with %d chips", new_state.round_number, state.chips
        )
        return new_state

    @staticmethod
    def place_bet(state: RoundState, amount: int, strict: bool = False) -> RoundState:
        """
        Place a bet and deal the opening cards.

        Args:
            state: Current round state
            amount: Number of chips to stake
            strict: Raise instead of ignoring an invalid bet

        Returns:
            New state in the playing phase, or ``state`` if the bet was rejected

        Raises:
            InvalidPhaseActionError: In strict mode, if not in the betting phase
            InvalidBetError: In strict mode, if the amount is not a positive integer
            InsufficientChipsError: In strict mode, if the amount exceeds the balance
        """
        if state.phase is not GamePhase.BETTING:
            return _reject(
                state,
                strict,
                InvalidPhaseActionError(f"Cannot bet during {state.phase.name}"),
            )

        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            return _reject(
                state,
                strict,
                InvalidBetError(f"Bet must be a positive integer, got {amount!r}"),
            )

        if amount > state.chips:
            return _reject(state, strict, InsufficientChipsError(amount, state.chips))

        new_state = replace(
            state,
            chips=state.chips - amount,
            current_bet=amount,
            phase=GamePhase.PLAYING,
            message=MESSAGE_IN_PROGRESS,
            outcome=None,
        )
        logger.debug("Bet of %d placed, %d chips left", amount, new_state.chips)

        return StateTransitionEngine.deal_initial_cards(new_state)

    @staticmethod
    def deal_initial_cards(state: RoundState) -> RoundState:
        """
        Deal two cards to the player and then two to the dealer.

        Only the dealer's first card counts toward the tracked dealer score;
        the second one is the hole card.

        Args:
            state: State right after a bet was placed

        Returns:
            New state with both hands dealt
        """
        deck = state.deck
        player_hand = Hand()
        dealer_hand = Hand()

        for _ in range(INITIAL_CARDS):
            card, deck = deck.draw()
            player_hand = player_hand.add_card(card)
        for _ in range(INITIAL_CARDS):
            card, deck = deck.draw()
            dealer_hand = dealer_hand.add_card(card)

        return replace(
            state,
            deck=deck,
            player_hand=player_hand,
            dealer_hand=dealer_hand,
            player_score=player_hand.value,
            dealer_score=dealer_hand.first(1).value,
        )

    @staticmethod
    def hit(state: RoundState, strict: bool = False) -> RoundState:
        """
        Deal one more card to the player.

        Args:
            state: Current round state
            strict: Raise instead of ignoring a hit outside the playing phase

        Returns:
            New state; the round is over if the player busts
        """
        if state.phase is not GamePhase.PLAYING:
            return _reject(
                state,
                strict,
                InvalidPhaseActionError(f"Cannot hit during {state.phase.name}"),
            )

        card, deck = state.deck.draw()
        player_hand = state.player_hand.add_card(card)
        player_score = player_hand.value

        if player_score > BLACKJACK:
            logger.info("Player busts with %d", player_score)
            return replace(
                state,
                deck=deck,
                player_hand=player_hand,
                player_score=player_score,
                phase=GamePhase.GAME_OVER,
                message=MESSAGE_PLAYER_BUST,
                outcome=RoundOutcome.PLAYER_BUST,
            )

        return replace(
            state, deck=deck, player_hand=player_hand, player_score=player_score
        )

    @staticmethod
    def stand(state: RoundState, strict: bool = False) -> RoundState:
        """
        End the player's turn, play out the dealer and settle the bet.

        The dealer draws until reaching 17 or more. A dealer bust or a higher
        player total pays the stake back twice, a tie returns it, and a higher
        dealer total keeps it.

        Args:
            state: Current round state
            strict: Raise instead of ignoring a stand outside the playing phase

        Returns:
            New state in the game over phase
        """
        if state.phase is not GamePhase.PLAYING:
            return _reject(
                state,
                strict,
                InvalidPhaseActionError(f"Cannot stand during {state.phase.name}"),
            )

        deck = state.deck
        dealer_hand = state.dealer_hand
        while scoring.dealer_should_draw(dealer_hand):
            card, deck = deck.draw()
            dealer_hand = dealer_hand.add_card(card)

        dealer_score = dealer_hand.value
        player_score = state.player_hand.value
        chips = state.chips

        if dealer_score > BLACKJACK or player_score > dealer_score:
            outcome = RoundOutcome.PLAYER_WIN
            message = MESSAGE_PLAYER_WINS
            chips += state.current_bet * WIN_RETURN_MULTIPLIER
        elif dealer_score > player_score:
            outcome = RoundOutcome.DEALER_WIN
            message = MESSAGE_DEALER_WINS
        else:
            outcome = RoundOutcome.PUSH
            message = MESSAGE_PUSH
            chips += state.current_bet * PUSH_RETURN_MULTIPLIER

        logger.info(
            "Round settled: player %d, dealer %d, %s", player_score, dealer_score, message
        )

        return replace(
            state,
            deck=deck,
            dealer_hand=dealer_hand,
            dealer_score=dealer_score,
            player_score=player_score,
            phase=GamePhase.GAME_OVER,
            message=message,
            outcome=outcome,
            chips=chips,
        )


def _reject(state: RoundState, strict: bool, error: Exception) -> RoundState:
    if strict:
        raise error
    logger.warning("Ignoring request: %s", error)
    return state


new_round = StateTransitionEngine.new_round
reset = StateTransitionEngine.reset
place_bet = StateTransitionEngine.place_bet
deal_initial_cards = StateTransitionEngine.deal_initial_cards
hit = StateTransitionEngine.hit
stand = StateTransitionEngine.stand
