"""Exceptions raised by the solojack engine."""


class SolojackError(Exception):
    """Base class for all errors raised by solojack."""


class EmptyDeckError(SolojackError, IndexError):
    """Raised when a card is drawn from a deck that has no cards left."""


class InvalidPhaseActionError(SolojackError):
    """Raised in strict mode when an action is requested in the wrong phase."""


class InvalidBetError(SolojackError, ValueError):
    """Raised in strict mode when a bet amount is not a positive integer."""


class InsufficientChipsError(SolojackError):
    """Raised in strict mode when a bet exceeds the chip balance."""

    def __init__(self, amount: int, chips: int):
        super().__init__(f"Cannot bet {amount} with only {chips} chips")
        self.amount = amount
        self.chips = chips
