"""Hand classification.

The category checks are kept as ordered rule tables: each rule pairs a
category with a predicate over precomputed hand features, and the first
matching rule wins. Reordering a table changes poker's hand ranking.
"""
from dataclasses import dataclass
from typing import Callable, Sequence

from poker_showdown.core.card import Card, Rank, is_valid_card
from poker_showdown.errors import InvalidCardCountError, InvalidCardError
from poker_showdown.evaluation.card_utils import (
    get_rank_counts, is_flush, is_straight, ranks_with_count, sort_cards_by_rank
)
from poker_showdown.evaluation.constants import HAND_SIZE, MIN_CLASSIFY_SIZE
from poker_showdown.evaluation.types import ClassifiedHand, HandCategory


@dataclass(frozen=True)
class HandFeatures:
    """
    Facts about a subset that the rules are written against.

    Attributes:
        sorted_cards: Cards sorted highest rank first
        rank_counts: Number of cards per rank, indexed by rank value
        is_flush: Five cards of one suit
        is_straight: Five ranks in sequence (wheel included)
    """
    sorted_cards: tuple[Card, ...]
    rank_counts: tuple[int, ...]
    is_flush: bool
    is_straight: bool

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> 'HandFeatures':
        return cls(
            sorted_cards=tuple(sort_cards_by_rank(cards)),
            rank_counts=tuple(get_rank_counts(cards)),
            is_flush=is_flush(cards),
            is_straight=is_straight(cards),
        )

    def has_rank(self, rank: int) -> bool:
        return self.rank_counts[rank] > 0

    def groups(self, count: int) -> list[int]:
        """Ranks held exactly ``count`` times, highest first."""
        return ranks_with_count(self.rank_counts, count)


@dataclass(frozen=True)
class HandRule:
    """A category and the predicate that selects it."""
    category: HandCategory
    matches: Callable[[HandFeatures], bool]


def _royal_flush(f: HandFeatures) -> bool:
    return f.is_flush and f.is_straight and f.has_rank(Rank.ACE) and f.has_rank(Rank.KING)


def _straight_flush(f: HandFeatures) -> bool:
    return f.is_flush and f.is_straight


def _four_of_a_kind(f: HandFeatures) -> bool:
    return len(f.groups(4)) > 0


def _full_house(f: HandFeatures) -> bool:
    return len(f.groups(3)) > 0 and len(f.groups(2)) > 0


def _flush(f: HandFeatures) -> bool:
    return f.is_flush


def _straight(f: HandFeatures) -> bool:
    return f.is_straight


def _three_of_a_kind(f: HandFeatures) -> bool:
    return len(f.groups(3)) > 0


def _two_pair(f: HandFeatures) -> bool:
    return len(f.groups(2)) == 2


def _one_pair(f: HandFeatures) -> bool:
    return len(f.groups(2)) == 1


def _any_pair(f: HandFeatures) -> bool:
    return len(f.groups(2)) > 0


def _always(f: HandFeatures) -> bool:
    return True


# Complete five-card hands, strongest category first
FIVE_CARD_RULES: tuple[HandRule, ...] = (
    HandRule(HandCategory.ROYAL_FLUSH, _royal_flush),
    HandRule(HandCategory.STRAIGHT_FLUSH, _straight_flush),
    HandRule(HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    HandRule(HandCategory.FULL_HOUSE, _full_house),
    HandRule(HandCategory.FLUSH, _flush),
    HandRule(HandCategory.STRAIGHT, _straight),
    HandRule(HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    HandRule(HandCategory.TWO_PAIR, _two_pair),
    HandRule(HandCategory.ONE_PAIR, _one_pair),
    HandRule(HandCategory.HIGH_CARD, _always),
)

# Two to four cards: flushes, straights, full houses and two pair are out of reach
SHORT_HAND_RULES: tuple[HandRule, ...] = (
    HandRule(HandCategory.FOUR_OF_A_KIND, _four_of_a_kind),
    HandRule(HandCategory.THREE_OF_A_KIND, _three_of_a_kind),
    HandRule(HandCategory.ONE_PAIR, _any_pair),
    HandRule(HandCategory.HIGH_CARD, _always),
)


def rules_for_size(size: int) -> tuple[HandRule, ...]:
    """Rule table that applies to a subset of ``size`` cards."""
    return FIVE_CARD_RULES if size == HAND_SIZE else SHORT_HAND_RULES


def match_category(features: HandFeatures, rules: Sequence[HandRule]) -> HandCategory:
    """Return the category of the first rule that matches."""
    for rule in rules:
        if rule.matches(features):
            return rule.category
    # Every table ends with HIGH_CARD, so this is unreachable
    raise AssertionError("Rule table has no catch-all rule")


def classify(cards: Sequence[Card]) -> ClassifiedHand:
    """
    Classify two to five cards.

    Args:
        cards: Cards to classify

    Returns:
        ClassifiedHand with the category and rank-sorted tie-break cards

    Raises:
        InvalidCardCountError: If fewer than 2 or more than 5 cards are given
        InvalidCardError: If any card is out of range
    """
    if not MIN_CLASSIFY_SIZE <= len(cards) <= HAND_SIZE:
        raise InvalidCardCountError(
            f"Invalid input: {MIN_CLASSIFY_SIZE}-{HAND_SIZE} cards required for classification, got {len(cards)}"
        )

    for index, card in enumerate(cards):
        if not is_valid_card(card):
            raise InvalidCardError(f"Invalid card at index {index}")

    features = HandFeatures.from_cards(cards)
    category = match_category(features, rules_for_size(len(cards)))

    return ClassifiedHand(
        category=category,
        tie_break_cards=features.sorted_cards,
        source_cards=tuple(cards),
    )
