import pytest

from cribbage.counting import score_counted_play
from cribbage.errors import CountExceededError, ErrorKind
from cribbage.models import CombinationName

from .helpers import card, cards

FOUR_FIVES = "FiveOfHearts,FiveOfClubs,FiveOfDiamonds,FiveOfSpades"


@pytest.mark.parametrize(
    "played,play,expected",
    [
        ("", "FiveOfDiamonds", 0),
        ("FiveOfHearts", "FiveOfDiamonds", 2),
        ("FiveOfHearts,FiveOfClubs", "FiveOfDiamonds", 8),
        ("FiveOfHearts,FiveOfClubs,FiveOfDiamonds", "FiveOfSpades", 12),
        (FOUR_FIVES, "TenOfSpades", 0),
        (FOUR_FIVES + ",TenOfSpades", "AceOfClubs", 2),
        ("FiveOfHearts,FourOfClubs", "SixOfClubs", 5),
        ("FiveOfHearts", "SixOfClubs", 0),
        ("FiveOfHearts,FourOfClubs,SixOfClubs", "ThreeOfClubs", 4),
        ("FiveOfHearts,FourOfClubs,SixOfClubs,TwoOfClubs", "ThreeOfClubs", 5),
        ("FiveOfHearts,FourOfClubs,SixOfClubs,TwoOfClubs,ThreeOfClubs", "SevenOfClubs", 6),
        ("AceOfHearts,ThreeOfClubs,FiveOfDiamonds,FourOfClubs", "TwoOfClubs", 7),
        ("FiveOfHearts,FourOfClubs,SixOfClubs,TwoOfClubs,ThreeOfClubs,SevenOfClubs", "AceOfClubs", 7),
        ("FiveOfHearts,FourOfClubs,SixOfClubs", "FiveOfClubs", 3),
        ("FiveOfHearts,FourOfClubs,SixOfClubs,FiveOfClubs", "FourOfClubs", 3),
        ("FiveOfHearts,FourOfClubs,FourOfClubs,ThreeOfClubs", "SixOfClubs", 0),
    ],
)
def test_score_counted_play_matches_known_counts(played, play, expected):
    assert score_counted_play(cards(played), card(play)).total_score == expected


def test_going_past_thirty_one_raises():
    with pytest.raises(CountExceededError) as excinfo:
        score_counted_play(cards(FOUR_FIVES + ",TenOfSpades"), card("TenOfClubs"))
    assert excinfo.value.kind == ErrorKind.BAD_COUNT


def test_count_of_thirty_two_is_rejected_before_scoring():
    # A pair would be on offer here if the play were legal.
    with pytest.raises(CountExceededError):
        score_counted_play(cards("TenOfHearts,TenOfClubs,SixOfSpades"), card("SixOfClubs"))


def test_fifteen_and_pair_are_both_awarded():
    score = score_counted_play(cards("FiveOfHearts,FiveOfClubs"), card("FiveOfDiamonds"))
    names = [combi.name for combi in score.combinations]
    assert names == [CombinationName.FIFTEEN, CombinationName.ROYAL_PAIR]


def test_thirty_one_is_named():
    score = score_counted_play(cards(FOUR_FIVES + ",TenOfSpades"), card("AceOfClubs"))
    assert [combi.name for combi in score.combinations] == [CombinationName.THIRTY_ONE]
    assert len(score.combinations[0].cards) == 6


def test_pair_only_counts_the_trailing_matches():
    score = score_counted_play(cards("FiveOfHearts,SixOfClubs,SixOfDiamonds"), card("SixOfSpades"))
    assert [combi.name for combi in score.combinations] == [CombinationName.ROYAL_PAIR]
    assert score.combinations[0].cards == tuple(cards("SixOfClubs,SixOfDiamonds,SixOfSpades"))


def test_played_cards_are_not_mutated():
    played = cards("FiveOfHearts,FourOfClubs")
    snapshot = list(played)
    score_counted_play(played, card("SixOfClubs"))
    assert played == snapshot


def test_out_of_order_run_of_five_that_makes_fifteen():
    score = score_counted_play(cards("AceOfHearts,ThreeOfClubs,FiveOfDiamonds,FourOfClubs"), card("TwoOfClubs"))
    assert [combi.name for combi in score.combinations] == [CombinationName.FIFTEEN, CombinationName.RUN_OF_FIVE]
    assert score.total_score == 7
