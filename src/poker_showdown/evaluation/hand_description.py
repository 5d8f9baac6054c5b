"""Human-readable descriptions of evaluated hands."""
from typing import List, Optional, Sequence

from poker_showdown.core.card import Card, Rank
from poker_showdown.evaluation.card_utils import get_rank_counts, ranks_with_count
from poker_showdown.evaluation.constants import WHEEL_RANKS
from poker_showdown.evaluation.evaluator import HandEvaluator, evaluator
from poker_showdown.evaluation.types import HandCategory, HandResult


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    def __init__(self, hand_evaluator: Optional[HandEvaluator] = None):
        """Initialize with an evaluator (the global one by default)."""
        self.evaluator = hand_evaluator or evaluator

    def describe_hand(self, cards: List[Card]) -> str:
        """Get a basic description of the hand."""
        return self.evaluator.best_hand(cards).title

    def describe_hand_detailed(self, cards: List[Card]) -> str:
        """Get a detailed description of the hand."""
        return self.describe_result(self.evaluator.best_hand(cards))

    def describe_result(self, result: HandResult) -> str:
        """Detailed description of an already evaluated hand."""
        category = result.category
        cards_used = result.best_five_cards

        if category == HandCategory.NO_HAND or not cards_used:
            return category.title
        if category == HandCategory.ROYAL_FLUSH:
            return category.title
        if category == HandCategory.STRAIGHT_FLUSH:
            return f"{self._straight_high(cards_used).full_name}-high Straight Flush"
        if category == HandCategory.FOUR_OF_A_KIND:
            return self._describe_group(cards_used, 4, "Four")
        if category == HandCategory.FULL_HOUSE:
            return self._describe_full_house(cards_used)
        if category == HandCategory.FLUSH:
            return f"{self._highest_rank(cards_used).full_name}-high Flush"
        if category == HandCategory.STRAIGHT:
            return f"{self._straight_high(cards_used).full_name}-high Straight"
        if category == HandCategory.THREE_OF_A_KIND:
            return self._describe_group(cards_used, 3, "Three")
        if category == HandCategory.TWO_PAIR:
            return self._describe_two_pair(cards_used)
        if category == HandCategory.ONE_PAIR:
            pairs = self._grouped_ranks(cards_used, 2)
            return f"Pair of {pairs[0].plural_name}"
        return f"{self._highest_rank(cards_used).full_name} High"

    def _describe_full_house(self, cards: Sequence[Card]) -> str:
        """Generate detailed description for Full House."""
        trips = self._grouped_ranks(cards, 3)
        pairs = self._grouped_ranks(cards, 2)
        if trips and pairs:
            return f"Full House, {trips[0].plural_name} over {pairs[0].plural_name}"
        return "Full House"

    def _describe_two_pair(self, cards: Sequence[Card]) -> str:
        """Generate detailed description for Two Pair."""
        pairs = self._grouped_ranks(cards, 2)
        if len(pairs) == 2:
            return f"Two Pair, {pairs[0].plural_name} and {pairs[1].plural_name}"
        return "Two Pair"

    def _describe_group(self, cards: Sequence[Card], count: int, word: str) -> str:
        """'Four Aces', 'Three Queens'."""
        ranks = self._grouped_ranks(cards, count)
        return f"{word} {ranks[0].plural_name}"

    @staticmethod
    def _grouped_ranks(cards: Sequence[Card], count: int) -> List[Rank]:
        return [Rank(r) for r in ranks_with_count(get_rank_counts(cards), count)]

    @staticmethod
    def _highest_rank(cards: Sequence[Card]) -> Rank:
        return Rank(max(card.rank for card in cards))

    @classmethod
    def _straight_high(cls, cards: Sequence[Card]) -> Rank:
        """Top card of a straight; the wheel is five-high."""
        ranks = sorted((card.rank for card in cards), reverse=True)
        if ranks == [int(r) for r in WHEEL_RANKS]:
            return Rank.FIVE
        return cls._highest_rank(cards)
