import pytest

from cribbage.cards import Card, Rank, Suit, build_deck, cards_to_labels, count_of, deal, parse_card, parse_hand
from cribbage.errors import BadCardError, ErrorKind, ParseError

from .helpers import cards


def test_parse_card_reads_rank_and_suit():
    card = parse_card("FiveOfHearts")
    assert card.rank == Rank.FIVE
    assert card.suit == Suit.HEARTS
    assert card.value == 5
    assert card.label == "FiveOfHearts"
    assert str(card) == "FiveOfHearts"


def test_face_cards_count_as_ten():
    assert [c.value for c in cards("TenOfClubs,JackOfClubs,QueenOfClubs,KingOfClubs")] == [10, 10, 10, 10]
    assert parse_card("AceOfSpades").value == 1


def test_parse_card_reports_offending_token():
    with pytest.raises(ParseError) as excinfo:
        parse_card("ElevenOfHearts")
    assert excinfo.value.token == "Eleven"
    assert excinfo.value.kind == ErrorKind.PARSE_ERROR

    with pytest.raises(ParseError) as excinfo:
        parse_card("FiveOfStars")
    assert excinfo.value.token == "Stars"

    with pytest.raises(ParseError, match="couldn't be split"):
        parse_card("FiveHearts")


def test_parse_card_is_case_sensitive():
    with pytest.raises(ParseError):
        parse_card("fiveofhearts")


def test_parse_hand_stops_at_first_bad_label():
    with pytest.raises(ParseError) as excinfo:
        parse_hand("FiveOfHearts,BogusOfClubs,SixOfStars")
    assert excinfo.value.token == "Bogus"


def test_labels_round_trip_for_every_card():
    deck = [Card.from_index(index) for index in range(52)]
    assert [parse_card(card.label) for card in deck] == deck
    assert cards_to_labels(deck[:2]) == ["AceOfClubs", "TwoOfClubs"]


def test_index_mapping_is_a_bijection():
    deck = [Card.from_index(index) for index in range(52)]
    assert len(set(deck)) == 52
    assert [card.to_index() for card in deck] == list(range(52))
    assert Card.from_index(0) == Card(Rank.ACE, Suit.CLUBS)
    assert Card.from_index(12) == Card(Rank.KING, Suit.CLUBS)
    assert Card.from_index(13) == Card(Rank.ACE, Suit.DIAMONDS)
    assert Card.from_index(51) == Card(Rank.KING, Suit.SPADES)


@pytest.mark.parametrize("index", [-1, 52, 100])
def test_from_index_rejects_out_of_range(index):
    with pytest.raises(BadCardError):
        Card.from_index(index)


def test_cards_order_by_rank_then_suit():
    assert parse_card("AceOfSpades") < parse_card("TwoOfClubs")
    assert parse_card("JackOfHearts") < parse_card("JackOfSpades")
    assert sorted(cards("KingOfClubs,FiveOfSpades,FiveOfClubs")) == cards("FiveOfClubs,FiveOfSpades,KingOfClubs")


def test_equality_needs_rank_and_suit():
    assert parse_card("FiveOfHearts") == Card(Rank.FIVE, Suit.HEARTS)
    assert parse_card("FiveOfHearts") != parse_card("FiveOfClubs")
    assert len({parse_card("FiveOfHearts"), Card(Rank.FIVE, Suit.HEARTS)}) == 1


def test_card_validation_rejects_plain_values():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card(14, Suit.HEARTS)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="Invalid suit"):
        Card(Rank.ACE, "x")  # type: ignore[arg-type]


def test_count_of_sums_values():
    assert count_of([]) == 0
    assert count_of(cards("FiveOfHearts,KingOfClubs,AceOfSpades")) == 16


def test_build_deck_is_seeded_and_complete():
    deck = build_deck(seed=777)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck == build_deck(seed=777)


def test_deal_raises_when_deck_exhausted():
    deck = cards("AceOfHearts,KingOfDiamonds")
    assert deal(deck, 2) == cards("AceOfHearts,KingOfDiamonds")
    assert deck == []
    with pytest.raises(ValueError, match="Not enough cards"):
        deal(deck, 1)
