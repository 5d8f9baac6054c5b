"""Conversion between cards and their numeric codes.

A card code is ``suit * 1000 + rank``, so the Ace of hearts is 1014 and the
two of spades is 4002.
"""
from poker_showdown.core.card import Card, is_valid_card
from poker_showdown.errors import InvalidCardError

SUIT_MULTIPLIER = 1000


def convert_to_card(card_code: int) -> Card:
    """
    Decode a numeric card code.

    Raises:
        InvalidCardError: If the code is not an int or decodes to an invalid card
    """
    if not isinstance(card_code, int) or isinstance(card_code, bool):
        raise InvalidCardError(f"Invalid card code: {card_code!r}")

    card = Card(rank=card_code % SUIT_MULTIPLIER, suit=card_code // SUIT_MULTIPLIER)
    if not is_valid_card(card):
        raise InvalidCardError(f"Invalid card code: {card_code}")
    return card


def convert_to_card_code(card: Card) -> int:
    """
    Encode a card as its numeric code.

    Raises:
        InvalidCardError: If the card is invalid
    """
    if not is_valid_card(card):
        raise InvalidCardError(f"Invalid card: {card}")
    return card.suit * SUIT_MULTIPLIER + card.rank


def parse_card(token: str) -> Card:
    """
    Parse a card given either as a code ('1014') or a string ('Ah').

    Raises:
        InvalidCardError: If the token is neither
    """
    token = token.strip()
    if token.isascii() and token.isdigit():
        return convert_to_card(int(token))
    try:
        return Card.from_string(token)
    except ValueError as e:
        raise InvalidCardError(str(e))
