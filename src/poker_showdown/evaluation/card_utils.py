"""Rank and suit helpers shared by the classifier and the comparator."""
from typing import Sequence

from poker_showdown.core.card import Card
from poker_showdown.evaluation.constants import DEFAULT_SUIT_PRIORITY, HAND_SIZE, RANK_SLOTS, WHEEL_RANKS


def get_actual_rank(card: Card) -> int:
    """Rank used for ordering. The Ace is always 14 here; the wheel is special-cased."""
    return card.rank


def suit_position(suit: int, suit_priority: Sequence[int] = DEFAULT_SUIT_PRIORITY) -> int:
    """Position of a suit in a priority list, strongest first. Unknown suits sort last."""
    priority = list(suit_priority)
    return priority.index(suit) if suit in priority else len(priority)


def sort_cards_by_rank(
    cards: Sequence[Card],
    suit_priority: Sequence[int] = DEFAULT_SUIT_PRIORITY
) -> list[Card]:
    """Return a copy sorted highest rank first, equal ranks by suit priority."""
    return sorted(cards, key=lambda card: (get_actual_rank(card), -suit_position(card.suit, suit_priority)),
                  reverse=True)


def get_rank_counts(cards: Sequence[Card]) -> list[int]:
    """Count cards per rank in a list indexed by rank value (slots 2..14)."""
    counts = [0] * RANK_SLOTS
    for card in cards:
        counts[get_actual_rank(card)] += 1
    return counts


def get_rank_counts_and_kickers(cards: Sequence[Card]) -> tuple[list[int], list[int]]:
    """
    Count cards per rank and list the unpaired ranks.

    Returns:
        Tuple of (rank counts indexed by rank, kicker ranks highest first)
    """
    counts = get_rank_counts(cards)
    kickers = [rank for rank in range(RANK_SLOTS - 1, -1, -1) if counts[rank] == 1]
    return counts, kickers


def ranks_with_count(counts: Sequence[int], count: int) -> list[int]:
    """Ranks appearing exactly ``count`` times, highest first."""
    return [rank for rank in range(len(counts) - 1, -1, -1) if counts[rank] == count]


def is_flush(cards: Sequence[Card]) -> bool:
    """True only for a complete hand whose cards all share one suit."""
    if len(cards) != HAND_SIZE:
        return False
    first_suit = cards[0].suit
    return all(card.suit == first_suit for card in cards)


def is_straight(cards: Sequence[Card]) -> bool:
    """
    True only for a complete hand of five ranks in sequence.

    The wheel (A-2-3-4-5) counts, with the Ace playing low.
    """
    if len(cards) != HAND_SIZE:
        return False

    ranks = [get_actual_rank(card) for card in sort_cards_by_rank(cards)]
    if ranks == [int(r) for r in WHEEL_RANKS]:
        return True

    return all(ranks[i - 1] == ranks[i] + 1 for i in range(1, len(ranks)))
