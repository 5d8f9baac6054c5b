"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Card suits, numbered as they appear in card codes."""
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3
    SPADES = 4

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. The Ace is high (14) except inside the wheel straight."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]

    @property
    def full_name(self) -> str:
        """Name used in hand descriptions, e.g. 'King' in 'King-high Flush'."""
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        """Plural used in hand descriptions, e.g. 'Sixes' in 'Four Sixes'."""
        if self == Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS = {
    Suit.HEARTS: 'h',
    Suit.DIAMONDS: 'd',
    Suit.CLUBS: 'c',
    Suit.SPADES: 's',
}

_RANK_SYMBOLS = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

MIN_RANK = int(Rank.TWO)
MAX_RANK = int(Rank.ACE)
MIN_SUIT = int(Suit.HEARTS)
MAX_SUIT = int(Suit.SPADES)


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    A card is a plain value: two cards are the same card when rank and
    suit match. Out-of-range values can be held so that callers can be
    told which card is wrong; use ``is_valid_card`` before evaluating.

    Attributes:
        rank: Card rank (2-14, 14 is the Ace)
        suit: Card suit (1-4: hearts, diamonds, clubs, spades)
    """
    rank: int
    suit: int

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        if not is_valid_card(self):
            return f"?{self.rank}/{self.suit}"
        return f"{Rank(self.rank)}{Suit(self.suit)}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r, s in _RANK_SYMBOLS.items() if s == rank_str.upper())
            suit = next(t for t, s in _SUIT_SYMBOLS.items() if s == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=int(rank), suit=int(suit))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_card(card: object) -> bool:
    """Check that a card has a rank in 2..14 and a suit in 1..4."""
    if not isinstance(card, Card):
        return False
    return (
        _is_int(card.rank)
        and _is_int(card.suit)
        and MIN_RANK <= card.rank <= MAX_RANK
        and MIN_SUIT <= card.suit <= MAX_SUIT
    )
