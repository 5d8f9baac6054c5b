"""Main poker hand evaluation interface."""
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Optional, Sequence, Union
import functools
import logging

from poker_showdown.core.card import Card, is_valid_card
from poker_showdown.core.codec import convert_to_card
from poker_showdown.core.hand import PlayerEntry
from poker_showdown.errors import (
    DuplicateCardError,
    EmptyPlayerListError,
    InvalidCardCountError,
    InvalidCardError,
    InvalidInputShapeError,
    NoValidHandError,
)
from poker_showdown.evaluation.classifier import classify
from poker_showdown.evaluation.combinations import combinations
from poker_showdown.evaluation.comparator import compare_card_values, compare_hands
from poker_showdown.evaluation.evaluation_config import EvaluationConfig, get_evaluation_config
from poker_showdown.evaluation.types import ClassifiedHand, HandCategory, HandResult, WinnerEntry, WinnerSet

logger = logging.getLogger(__name__)

PlayerInput = Union[PlayerEntry, Mapping[str, Any]]


class HandEvaluator:
    """
    Finds the best hand in a set of cards and the winners among players.

    Stateless apart from its configuration, so one instance can be shared
    between threads.
    """

    def __init__(self, config: Optional[EvaluationConfig] = None):
        """
        Initialize evaluator.

        Args:
            config: Evaluation settings; the global configuration is used if omitted
        """
        self._config = config

    @property
    def config(self) -> EvaluationConfig:
        if self._config is None:
            self._config = get_evaluation_config()
        return self._config

    def best_hand(self, cards: Sequence[Card]) -> HandResult:
        """
        Get the best possible hand from a set of cards.

        Args:
            cards: Between 0 and ``max_cards`` cards

        Returns:
            HandResult with the best category and its cards

        Raises:
            InvalidInputShapeError: If cards is not a list or tuple
            InvalidCardCountError: If too many cards are given
            InvalidCardError: If a card is out of range
            DuplicateCardError: If a card appears twice
            NoValidHandError: If no subset could be classified
        """
        if cards is None or not isinstance(cards, (list, tuple)):
            raise InvalidInputShapeError()

        if len(cards) == 0:
            return HandResult(category=HandCategory.NO_HAND)

        if len(cards) > self.config.max_cards:
            raise InvalidCardCountError(f"Invalid input: 1-{self.config.max_cards} cards required")

        self._validate_cards(cards)

        # A single card cannot be classified; it simply plays as high card
        if len(cards) == 1:
            return HandResult(category=HandCategory.HIGH_CARD, best_five_cards=tuple(cards))

        if len(cards) < self.config.hand_size:
            classified = classify(cards)
            return self._to_result(classified)

        best = self._search_combinations(cards)
        logger.debug(f"Best hand from {len(cards)} cards: {best.category.title} "
                     f"{[str(c) for c in best.tie_break_cards]}")
        return self._to_result(best)

    def resolve_winners(self, players: Sequence[PlayerInput]) -> WinnerSet:
        """
        Evaluate winners among multiple players.

        Every player whose best hand ties the top hand is a winner, so a
        split pot yields more than one entry.

        Args:
            players: PlayerEntry objects or mappings with player id and cards

        Returns:
            WinnerSet with all tied winners

        Raises:
            EmptyPlayerListError: If players is missing, not a list, or empty
        """
        if not players or not isinstance(players, (list, tuple)):
            raise EmptyPlayerListError()

        entries = [p if isinstance(p, PlayerEntry) else PlayerEntry.from_mapping(p) for p in players]
        results = self._evaluate_players(entries)

        suit_priority = self.config.suit_priority
        ranked = sorted(results, key=functools.cmp_to_key(
            lambda a, b: self._compare_entries(a, b, suit_priority)
        ))

        top = ranked[0]
        winners = tuple(
            entry for entry in ranked
            if entry.strength_ordinal == top.strength_ordinal
            and compare_card_values(entry.best_five_cards, top.best_five_cards, suit_priority) == 0
        )

        logger.debug(f"Resolved {len(winners)} winner(s) among {len(entries)} players: "
                     f"{[w.player_id for w in winners]}")
        return WinnerSet(winners=winners)

    def compare(self, hand1: ClassifiedHand, hand2: ClassifiedHand) -> int:
        """Compare two classified hands using this evaluator's suit priority."""
        return compare_hands(hand1, hand2, self.config.suit_priority)

    def get_best_hand(self, card_codes: Sequence[int]) -> dict:
        """
        Evaluate the best hand from numeric card codes.

        Returns:
            Dict with handRank, handRankLevel, bestFiveCards (codes) and description
        """
        if card_codes is None or not isinstance(card_codes, (list, tuple)):
            raise InvalidInputShapeError()
        cards = [convert_to_card(code) for code in card_codes]
        return self.best_hand(cards).to_json()

    def evaluate_winner_hands(self, players: Sequence[Mapping[str, Any]]) -> WinnerSet:
        """
        Evaluate winners among players whose cards are given as codes.

        Args:
            players: Mappings like {"playerID": "p1", "allCards": [1014, 1013]}
        """
        if not players or not isinstance(players, (list, tuple)):
            raise EmptyPlayerListError()
        entries = [PlayerEntry.from_mapping(player) for player in players]
        return self.resolve_winners(entries)

    def _validate_cards(self, cards: Sequence[Card]) -> None:
        """Reject out-of-range and repeated cards."""
        seen = set()
        for index, card in enumerate(cards):
            if not is_valid_card(card):
                raise InvalidCardError(f"Invalid card at index {index}")
            key = (card.rank, card.suit)
            if key in seen:
                raise DuplicateCardError(f"Duplicate card found {card}")
            seen.add(key)

    def _search_combinations(self, cards: Sequence[Card]) -> ClassifiedHand:
        """Classify every complete-hand subset and keep the strongest."""
        suit_priority = self.config.suit_priority
        best: Optional[ClassifiedHand] = None

        for combo in combinations(cards, self.config.hand_size):
            try:
                candidate = classify(combo)
            except Exception as e:
                logger.error(f"Error evaluating hand combination {[str(c) for c in combo]}: {e}")
                continue

            if best is None or compare_hands(candidate, best, suit_priority) > 0:
                best = candidate

        if best is None:
            raise NoValidHandError()
        return best

    def _evaluate_players(self, entries: List[PlayerEntry]) -> List[WinnerEntry]:
        """Best hand for each player, in input order."""
        if self.config.max_workers > 1 and len(entries) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                return list(pool.map(self._evaluate_player, entries))
        return [self._evaluate_player(entry) for entry in entries]

    def _evaluate_player(self, entry: PlayerEntry) -> WinnerEntry:
        result = self.best_hand(entry.all_cards)
        return WinnerEntry(
            player_id=entry.player_id,
            best_five_cards=result.best_five_cards,
            all_cards=tuple(entry.all_cards),
            category=result.category,
        )

    @staticmethod
    def _compare_entries(a: WinnerEntry, b: WinnerEntry, suit_priority: Sequence[int]) -> int:
        """
        Sort order for showdown: strongest ordinal first, then best cards first.

        An empty hand (No Hand) ranks below every real hand.
        """
        a_empty = a.category == HandCategory.NO_HAND
        b_empty = b.category == HandCategory.NO_HAND
        if a_empty != b_empty:
            return 1 if a_empty else -1
        if a.strength_ordinal != b.strength_ordinal:
            return a.strength_ordinal - b.strength_ordinal
        return compare_card_values(b.best_five_cards, a.best_five_cards, suit_priority)

    @staticmethod
    def _to_result(classified: ClassifiedHand) -> HandResult:
        return HandResult(
            category=classified.category,
            best_five_cards=classified.tie_break_cards,
            classified=classified,
        )


# Global instance
evaluator = HandEvaluator()


def get_best_hand(card_codes: Sequence[int]) -> dict:
    """Evaluate the best hand from card codes using the global evaluator."""
    return evaluator.get_best_hand(card_codes)


def evaluate_winner_hands(players: Sequence[Mapping[str, Any]]) -> WinnerSet:
    """Evaluate winners from card codes using the global evaluator."""
    return evaluator.evaluate_winner_hands(players)
