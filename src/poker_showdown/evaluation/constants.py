"""Constants for poker hand evaluation."""
from poker_showdown.core.card import Rank, Suit

# Suit priority for the final tie-break, strongest first.
# This is a house rule: standard poker gives suits no power.
DEFAULT_SUIT_PRIORITY = [Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES]

# Number of cards in a complete poker hand
HAND_SIZE = 5

# Largest hand accepted; bounds the search to C(10, 5) = 252 subsets
MAX_CARDS = 10

# Smallest subset the classifier accepts
MIN_CLASSIFY_SIZE = 2

# The wheel (A-2-3-4-5), ranks sorted descending with the Ace high
WHEEL_RANKS = [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]

# Rank-count tables are lists indexed directly by rank value
RANK_SLOTS = int(Rank.ACE) + 1
