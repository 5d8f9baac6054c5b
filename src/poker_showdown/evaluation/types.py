"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from poker_showdown.core.card import Card
from poker_showdown.core.codec import convert_to_card_code


class HandCategory(Enum):
    """
    Hand categories with their strength ordinal.

    Ordinal 1 is the strongest hand and 10 the weakest. NO_HAND (0) is only
    produced for an empty hand and is never compared against real hands.
    """
    NO_HAND = (0, "No Hand", "No hand is made.")
    ROYAL_FLUSH = (1, "Royal Flush", "A, K, Q, J, 10 of the same suit.")
    STRAIGHT_FLUSH = (2, "Straight Flush", "Five cards in rank sequence, all of the same suit")
    FOUR_OF_A_KIND = (3, "Four of a Kind", "Four cards of the same rank.")
    FULL_HOUSE = (4, "Full House", "Three of a kind and a pair.")
    FLUSH = (5, "Flush", "Five cards of the same suit, not in a sequence.")
    STRAIGHT = (6, "Straight", "Five cards in rank sequence, not all of the same suit.")
    THREE_OF_A_KIND = (7, "Three of a Kind", "Three cards of the same rank.")
    TWO_PAIR = (8, "Two Pair", "Two pairs of the same rank.")
    ONE_PAIR = (9, "One Pair", "Two cards of the same rank.")
    HIGH_CARD = (10, "High Card", "If no other hand is made, the highest card plays.")

    def __init__(self, ordinal: int, title: str, description: str):
        self.ordinal = ordinal
        self.title = title
        self.description = description

    def __str__(self) -> str:
        return self.title


@dataclass(frozen=True)
class ClassifiedHand:
    """
    A classified subset of cards.

    Attributes:
        category: Hand category
        tie_break_cards: The cards sorted by rank, highest first
        source_cards: The cards as they were passed to the classifier
    """
    category: HandCategory
    tie_break_cards: tuple[Card, ...]
    source_cards: tuple[Card, ...]

    @property
    def strength_ordinal(self) -> int:
        return self.category.ordinal


@dataclass(frozen=True)
class HandResult:
    """
    Best hand found in a set of cards.

    Attributes:
        category: Category of the best hand
        best_five_cards: Cards making up the best hand, highest rank first
        classified: The winning classification, if classification ran
    """
    category: HandCategory
    best_five_cards: tuple[Card, ...] = ()
    classified: Optional[ClassifiedHand] = field(default=None, compare=False)

    @property
    def title(self) -> str:
        return self.category.title

    @property
    def strength_ordinal(self) -> int:
        return self.category.ordinal

    @property
    def description(self) -> str:
        return self.category.description

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "handRank": self.title,
            "handRankLevel": self.strength_ordinal,
            "bestFiveCards": [convert_to_card_code(card) for card in self.best_five_cards],
            "description": self.description,
        }


@dataclass(frozen=True)
class WinnerEntry:
    """A player's showdown result."""
    player_id: str
    best_five_cards: tuple[Card, ...]
    all_cards: tuple[Card, ...]
    category: HandCategory

    @property
    def title(self) -> str:
        return self.category.title

    @property
    def strength_ordinal(self) -> int:
        return self.category.ordinal

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.best_five_cards)
        return f"Player {self.player_id}: {self.title} ({cards_str})"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "playerID": self.player_id,
            "bestCombineCards": [convert_to_card_code(card) for card in self.best_five_cards],
            "allCards": [convert_to_card_code(card) for card in self.all_cards],
            "handRank": {
                "handRankTitle": self.title,
                "handRankLevel": self.strength_ordinal,
            },
        }


@dataclass(frozen=True)
class WinnerSet:
    """Every player tied for the best hand."""
    winners: tuple[WinnerEntry, ...]

    @property
    def win_count(self) -> int:
        return len(self.winners)

    @property
    def player_ids(self) -> list[str]:
        return [winner.player_id for winner in self.winners]

    @property
    def split(self) -> bool:
        return self.win_count > 1

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "winCount": self.win_count,
            "winners": [winner.to_json() for winner in self.winners],
        }
