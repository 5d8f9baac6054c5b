"""Subset generation for best-hand search."""
import itertools
import logging
from typing import Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def combinations(cards: Sequence[T], size: int) -> list[list[T]]:
    """
    Generate all subsets of ``size`` elements.

    Subsets keep the relative order of the input and come out in
    lexicographic order of the original indices, so results are stable
    from call to call. The input is not modified.

    Args:
        cards: Elements to choose from
        size: Number of elements per subset

    Returns:
        List of subsets; empty when ``size`` exceeds the number of elements

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Subset size must be non-negative, got {size}")

    result = [list(combo) for combo in itertools.combinations(cards, size)]
    logger.debug(f"Generated {len(result)} combinations of {size} from {len(cards)} cards")
    return result
