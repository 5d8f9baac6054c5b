"""Poker hand evaluation and showdown resolution."""

from poker_showdown.core.card import Card, Rank, Suit, is_valid_card
from poker_showdown.core.codec import convert_to_card, convert_to_card_code
from poker_showdown.core.hand import PlayerEntry
from poker_showdown.errors import (
    DuplicateCardError,
    EmptyPlayerListError,
    EvaluationConfigError,
    HandEvaluationError,
    InvalidCardCountError,
    InvalidCardError,
    InvalidInputShapeError,
    NoValidHandError,
)
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.combinations import combinations
from poker_showdown.evaluation.comparator import compare_card_values, compare_hands
from poker_showdown.evaluation.evaluator import (
    HandEvaluator, evaluate_winner_hands, evaluator, get_best_hand
)
from poker_showdown.evaluation.types import ClassifiedHand, HandCategory, HandResult, WinnerEntry, WinnerSet

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "is_valid_card",
    "convert_to_card",
    "convert_to_card_code",
    "PlayerEntry",
    "HandEvaluationError",
    "InvalidInputShapeError",
    "InvalidCardCountError",
    "InvalidCardError",
    "DuplicateCardError",
    "EmptyPlayerListError",
    "NoValidHandError",
    "EvaluationConfigError",
    "classify",
    "combinations",
    "compare_hands",
    "compare_card_values",
    "HandEvaluator",
    "evaluator",
    "get_best_hand",
    "evaluate_winner_hands",
    "ClassifiedHand",
    "HandCategory",
    "HandResult",
    "WinnerEntry",
    "WinnerSet",
]
