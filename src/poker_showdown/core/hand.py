"""Player hand input values."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from .card import Card
from .codec import convert_to_card, parse_card

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerEntry:
    """
    A player's cards as submitted for winner resolution.

    Attributes:
        player_id: Opaque identifier for the player
        all_cards: Every card the player may use
    """

    player_id: str
    all_cards: tuple[Card, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but keep the value immutable
        if isinstance(self.all_cards, list):
            object.__setattr__(self, "all_cards", tuple(self.all_cards))

    @classmethod
    def from_codes(cls, player_id: str, card_codes: list[int]) -> "PlayerEntry":
        """Create an entry from numeric card codes (e.g. [1014, 2013])."""
        return cls(player_id=player_id, all_cards=tuple(convert_to_card(code) for code in card_codes))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PlayerEntry":
        """
        Create an entry from a mapping.

        Both ``player_id``/``all_cards`` and ``playerID``/``allCards`` keys are
        understood. Cards may be Card instances or numeric codes.
        """
        player_id = data.get("player_id", data.get("playerID"))
        raw_cards = data.get("all_cards", data.get("allCards"))
        if raw_cards is None:
            return cls(player_id=player_id, all_cards=None)

        cards = [card if isinstance(card, Card) else convert_to_card(card) for card in raw_cards]
        return cls(player_id=player_id, all_cards=tuple(cards))

    @classmethod
    def from_string(cls, player_id: str, hand_str: str) -> "PlayerEntry":
        """
        Create an entry from a string of cards.

        Args:
            player_id: Identifier for the player
            hand_str: Cards separated by commas or spaces, either as
                      two-character strings ("As Kd") or codes ("4014,2013")

        Raises:
            InvalidCardError: If any card cannot be parsed
        """
        tokens = [t for t in hand_str.replace(",", " ").split() if t]
        cards = tuple(parse_card(token) for token in tokens)

        logger.debug(f"Created hand for {player_id} from string '{hand_str}': {[str(c) for c in cards]}")
        return cls(player_id=player_id, all_cards=cards)

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self.all_cards) if self.all_cards is not None else 0

    def __str__(self) -> str:
        if not self.all_cards:
            return f"{self.player_id}: Empty hand"
        return f"{self.player_id}: {' '.join(str(c) for c in self.all_cards)}"
