"""Blackjack-specific constants: thresholds, payouts and table messages."""

BLACKJACK = 21
DEALER_STAND_THRESHOLD = 17
ACE_SOFTENING = 10

DEFAULT_CHIPS = 1000
DEFAULT_BET_OPTIONS = (10, 25, 50, 100)

# Total returned to the player for a stake, including the stake itself
WIN_RETURN_MULTIPLIER = 2
PUSH_RETURN_MULTIPLIER = 1

INITIAL_CARDS = 2

MESSAGE_PLACE_BET = "Place your bet!"
MESSAGE_IN_PROGRESS = "Game in progress"
MESSAGE_PLAYER_BUST = "Bust! Dealer wins!"
MESSAGE_PLAYER_WINS = "Player wins!"
MESSAGE_DEALER_WINS = "Dealer wins!"
MESSAGE_PUSH = "Push!"
