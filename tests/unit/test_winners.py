"""Tests for showdown winner resolution."""
import pytest

from poker_showdown.core.card import Card
from poker_showdown.core.hand import PlayerEntry
from poker_showdown.errors import DuplicateCardError, EmptyPlayerListError, InvalidCardError
from poker_showdown.evaluation.evaluation_config import EvaluationConfig
from poker_showdown.evaluation.evaluator import HandEvaluator, evaluate_winner_hands


@pytest.fixture
def evaluator():
    return HandEvaluator(EvaluationConfig())


def c(suit: int, rank: int) -> Card:
    return Card(rank=rank, suit=suit)


ROYAL_HEARTS = [c(1, 14), c(1, 13), c(1, 12), c(1, 11), c(1, 10)]


@pytest.mark.parametrize("players", [None, [], (), "p1", {"playerID": "p1"}])
def test_invalid_players(evaluator, players):
    with pytest.raises(EmptyPlayerListError, match="players must be a non-empty array"):
        evaluator.resolve_winners(players)


def test_single_winner(evaluator):
    players = [
        PlayerEntry("1", ROYAL_HEARTS),
        PlayerEntry("2", [c(2, 14), c(2, 13), c(2, 12), c(2, 11), c(2, 9)]),
    ]
    result = evaluator.resolve_winners(players)
    assert result.win_count == 1
    assert result.winners[0].player_id == "1"
    assert result.winners[0].title == "Royal Flush"
    assert not result.split


def test_single_player(evaluator):
    result = evaluator.resolve_winners([PlayerEntry("solo", [c(1, 2), c(2, 7)])])
    assert result.player_ids == ["solo"]


@pytest.mark.parametrize("hand1,hand2", [
    (ROYAL_HEARTS, ROYAL_HEARTS),
    ([c(1, r) for r in (9, 8, 7, 6, 5)], [c(1, r) for r in (9, 8, 7, 6, 5)]),
    ([c(1, 14), c(2, 14), c(3, 14), c(4, 14), c(1, 2)], [c(1, 14), c(2, 14), c(3, 14), c(4, 14), c(2, 2)]),
    ([c(1, 14), c(2, 14), c(3, 14), c(1, 2), c(2, 2)], [c(1, 14), c(2, 14), c(3, 14), c(1, 2), c(2, 2)]),
    ([c(1, 14), c(1, 11), c(1, 8), c(1, 5), c(1, 2)], [c(1, 14), c(1, 11), c(1, 8), c(1, 5), c(1, 2)]),
    ([c(1, 9), c(2, 8), c(3, 7), c(4, 6), c(1, 5)], [c(1, 9), c(2, 8), c(3, 7), c(4, 6), c(2, 5)]),
])
def test_split_pot(evaluator, hand1, hand2):
    result = evaluator.resolve_winners([PlayerEntry("1", hand1), PlayerEntry("2", hand2)])
    assert result.win_count == 2
    assert sorted(result.player_ids) == ["1", "2"]
    assert result.split


def test_kicker_breaks_tie(evaluator):
    players = [
        PlayerEntry("low", [c(1, 14), c(2, 14), c(3, 9), c(4, 7), c(1, 3)]),
        PlayerEntry("high", [c(3, 14), c(4, 14), c(1, 10), c(2, 7), c(3, 3)]),
    ]
    result = evaluator.resolve_winners(players)
    assert result.player_ids == ["high"]


def test_top_card_suit_breaks_tie(evaluator):
    players = [
        PlayerEntry("spades", [c(4, 14), c(1, 13), c(2, 9), c(3, 7), c(4, 3)]),
        PlayerEntry("hearts", [c(1, 14), c(2, 13), c(3, 9), c(4, 7), c(1, 3)]),
    ]
    result = evaluator.resolve_winners(players)
    assert result.player_ids == ["hearts"]


def test_three_way_split_keeps_input_order(evaluator):
    board = [c(1, 14), c(2, 13), c(3, 12), c(4, 11), c(1, 10)]
    players = [
        PlayerEntry("c", board + [c(2, 2)]),
        PlayerEntry("a", board + [c(3, 2)]),
        PlayerEntry("b", board + [c(4, 3)]),
        PlayerEntry("loser", [c(2, 4), c(3, 4)]),
    ]
    result = evaluator.resolve_winners(players)
    assert result.player_ids == ["c", "a", "b"]
    assert all(w.title == "Straight" for w in result.winners)


def test_winner_carries_all_cards(evaluator):
    all_cards = [c(4, 2), c(3, 5)] + ROYAL_HEARTS
    result = evaluator.resolve_winners([PlayerEntry("1", all_cards)])
    winner = result.winners[0]
    assert winner.all_cards == tuple(all_cards)
    assert winner.best_five_cards == tuple(ROYAL_HEARTS)
    assert winner.strength_ordinal == 1


def test_player_errors_propagate(evaluator):
    players = [
        PlayerEntry("1", ROYAL_HEARTS),
        PlayerEntry("2", [c(1, 2), c(1, 2)]),
    ]
    with pytest.raises(DuplicateCardError):
        evaluator.resolve_winners(players)


def test_mapping_players(evaluator):
    players = [
        {"playerID": "1", "allCards": ROYAL_HEARTS},
        {"player_id": "2", "all_cards": [2014, 2013, 2012, 2011, 2009]},
    ]
    assert evaluator.resolve_winners(players).player_ids == ["1"]


def test_threaded_evaluation():
    evaluator = HandEvaluator(EvaluationConfig(max_workers=4))
    players = [PlayerEntry(str(i), [c(1, 2 + i), c(2, 2 + i), c(3, 10)]) for i in range(6)]
    result = evaluator.resolve_winners(players)
    assert result.player_ids == ["5"]
    assert result.winners[0].title == "One Pair"


def test_evaluate_winner_hands_from_codes():
    result = evaluate_winner_hands([
        {"playerID": "player1", "allCards": [1014, 1013, 1012, 1011, 1010]},
        {"playerID": "player2", "allCards": [2014, 2013, 2012, 2011, 2010]},
    ])
    # Identical royal flushes; hearts outrank diamonds on the top card
    assert result.player_ids == ["player1"]
    assert result.to_json() == {
        "winCount": 1,
        "winners": [{
            "playerID": "player1",
            "bestCombineCards": [1014, 1013, 1012, 1011, 1010],
            "allCards": [1014, 1013, 1012, 1011, 1010],
            "handRank": {"handRankTitle": "Royal Flush", "handRankLevel": 1},
        }],
    }


def test_evaluate_winner_hands_invalid_code():
    with pytest.raises(InvalidCardError):
        evaluate_winner_hands([{"playerID": "p", "allCards": [9999]}])


def test_evaluate_winner_hands_empty():
    with pytest.raises(EmptyPlayerListError):
        evaluate_winner_hands([])


def test_empty_hand_loses_to_any_real_hand(evaluator):
    players = [
        PlayerEntry("empty", []),
        PlayerEntry("royal", ROYAL_HEARTS),
        PlayerEntry("junk", [c(2, 2), c(3, 7)]),
    ]
    result = evaluator.resolve_winners(players)
    assert result.player_ids == ["royal"]
    assert result.winners[0].title == "Royal Flush"


def test_empty_hands_split_when_nobody_has_cards(evaluator):
    result = evaluator.resolve_winners([PlayerEntry("a", []), PlayerEntry("b", [])])
    assert result.player_ids == ["a", "b"]
    assert all(w.title == "No Hand" for w in result.winners)


@pytest.mark.parametrize("p1_cards", [
    [c(4, 14), c(1, 14), c(2, 13), c(2, 9), c(2, 4)],
    [c(1, 14), c(4, 14), c(2, 13), c(2, 9), c(2, 4)],
    [c(2, 4), c(2, 9), c(4, 14), c(2, 13), c(1, 14)],
])
def test_card_order_does_not_decide_showdown(evaluator, p1_cards):
    # Equal ranks; p1's Ace of hearts is the strongest top card
    players = [
        PlayerEntry("p1", p1_cards),
        PlayerEntry("p2", [c(2, 14), c(3, 14), c(1, 13), c(1, 9), c(1, 4)]),
    ]
    assert evaluator.resolve_winners(players).player_ids == ["p1"]
