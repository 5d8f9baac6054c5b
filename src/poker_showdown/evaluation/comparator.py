"""Total ordering of classified hands."""
import functools
from typing import Callable, Optional, Sequence

from poker_showdown.core.card import Card
from poker_showdown.evaluation.card_utils import get_actual_rank, sort_cards_by_rank, suit_position
from poker_showdown.evaluation.constants import DEFAULT_SUIT_PRIORITY
from poker_showdown.evaluation.types import ClassifiedHand


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_ordinals(ordinal1: int, ordinal2: int) -> int:
    """
    Compare two strength ordinals.

    Ordinals count down from the strongest category (1) to the weakest (10),
    so the lower ordinal wins. This is the only place that inversion is applied.

    Returns:
        1 if ordinal1 is stronger, -1 if weaker, 0 if equal
    """
    return _sign(ordinal2 - ordinal1)


def compare_sorted_cards(
    sorted_cards1: Sequence[Card],
    sorted_cards2: Sequence[Card],
    suit_priority: Sequence[int] = DEFAULT_SUIT_PRIORITY
) -> int:
    """
    Compare two rank-sorted card sequences.

    Ranks are compared pairwise from the top; the first difference decides.
    If all paired ranks match, the suit of each sequence's top card decides
    using ``suit_priority`` (strongest suit first). The top card is the
    highest rank held in the strongest suit, whatever order the cards are in.

    Returns:
        1 if the first sequence wins, -1 if the second wins, 0 if tied
    """
    for card1, card2 in zip(sorted_cards1, sorted_cards2):
        rank1, rank2 = get_actual_rank(card1), get_actual_rank(card2)
        if rank1 != rank2:
            return 1 if rank1 > rank2 else -1

    if not sorted_cards1 or not sorted_cards2:
        return 0

    top1 = sort_cards_by_rank(sorted_cards1, suit_priority)[0]
    top2 = sort_cards_by_rank(sorted_cards2, suit_priority)[0]
    return _sign(suit_position(top2.suit, suit_priority) - suit_position(top1.suit, suit_priority))


def compare_card_values(
    cards1: Optional[Sequence[Card]],
    cards2: Optional[Sequence[Card]],
    suit_priority: Sequence[int] = DEFAULT_SUIT_PRIORITY
) -> int:
    """
    Compare two card lists by rank sequence, then by top-card suit.

    Missing lists lose to present ones; two missing lists are equal.

    Returns:
        1 if cards1 is better, -1 if cards2 is better, 0 if equal
    """
    if cards1 is None and cards2 is None:
        return 0
    if cards1 is None:
        return -1
    if cards2 is None:
        return 1

    return compare_sorted_cards(
        sort_cards_by_rank(cards1, suit_priority),
        sort_cards_by_rank(cards2, suit_priority),
        suit_priority
    )


def compare_hands(
    hand1: ClassifiedHand,
    hand2: ClassifiedHand,
    suit_priority: Sequence[int] = DEFAULT_SUIT_PRIORITY
) -> int:
    """
    Compare two classified hands.

    Args:
        hand1: First hand to compare
        hand2: Second hand to compare
        suit_priority: Suits strongest first, used only for exact rank ties

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    result = compare_ordinals(hand1.strength_ordinal, hand2.strength_ordinal)
    if result:
        return result
    return compare_sorted_cards(hand1.tie_break_cards, hand2.tie_break_cards, suit_priority)


def hand_sort_key(suit_priority: Sequence[int] = DEFAULT_SUIT_PRIORITY) -> Callable:
    """Key for sorting classified hands weakest first (use reverse=True for best first)."""
    return functools.cmp_to_key(lambda a, b: compare_hands(a, b, suit_priority))
