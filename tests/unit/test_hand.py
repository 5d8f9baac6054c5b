"""Tests for player hand input values."""
import pytest
from poker_showdown.core.card import Card, Rank, Suit
from poker_showdown.core.hand import PlayerEntry
from poker_showdown.errors import InvalidCardError


@pytest.fixture
def sample_cards():
    """Create a set of sample cards for testing."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.DIAMONDS)
    ]


def test_entry_initialization(sample_cards):
    entry = PlayerEntry("p1", sample_cards)
    assert entry.player_id == "p1"
    assert entry.all_cards == tuple(sample_cards)
    assert entry.size == 3
    assert str(entry) == "p1: As Kh Qd"


def test_empty_entry():
    entry = PlayerEntry("p1")
    assert entry.size == 0
    assert str(entry) == "p1: Empty hand"


def test_from_codes():
    entry = PlayerEntry.from_codes("p1", [4014, 1013, 2012])
    assert entry.all_cards == (Card(14, 4), Card(13, 1), Card(12, 2))


def test_from_codes_invalid():
    with pytest.raises(InvalidCardError):
        PlayerEntry.from_codes("p1", [4015])


@pytest.mark.parametrize("data", [
    {"playerID": "p1", "allCards": [4014, 1013]},
    {"player_id": "p1", "all_cards": [Card(14, 4), 1013]},
])
def test_from_mapping(data):
    entry = PlayerEntry.from_mapping(data)
    assert entry.player_id == "p1"
    assert entry.all_cards == (Card(14, 4), Card(13, 1))


def test_from_mapping_without_cards():
    entry = PlayerEntry.from_mapping({"playerID": "p1"})
    assert entry.all_cards is None
    assert entry.size == 0


@pytest.mark.parametrize("hand_str", ["As Kh Qd", "As,Kh,Qd", "4014,1013,2012", "As, 1013 Qd"])
def test_from_string(hand_str, sample_cards):
    entry = PlayerEntry.from_string("p1", hand_str)
    assert entry.all_cards == tuple(sample_cards)


def test_from_string_invalid():
    with pytest.raises(InvalidCardError):
        PlayerEntry.from_string("p1", "As Xx")
