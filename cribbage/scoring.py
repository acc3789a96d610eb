from __future__ import annotations

from typing import List, Optional, Sequence

from .cards import Card, Rank
from .combinator import all_combinations_of_min_size
from .errors import BadHandError
from .models import Combination, CombinationKind, Score

# Hand scoring is a pure function of the cards. Nothing here keeps state
# between calls, so the service can call it from any request.


def score_hand(hand: Sequence[Card], starter: Optional[Card] = None, is_crib: bool = False) -> Score:
    """Score a four card hand (or crib) together with the starter.

    Crib selection also calls this with four cards and no starter.
    Raises BadHandError unless the hand has four cards and no card repeats.
    """
    if len(hand) != 4:
        raise BadHandError(f"scoring a hand needs 4 cards, got {len(hand)}")
    cards = list(hand)
    if starter is not None:
        cards.append(starter)
    if len(set(cards)) != len(cards):
        raise BadHandError("hand and starter must be distinct cards")

    score = Score()
    if starter is not None:
        score = nob_score(hand, starter)
    cards.sort()

    for subset in all_combinations_of_min_size(cards, 2):
        score.tally(score_cards(subset, is_crib))
    score.total_score = score.points()
    return score


def nob_score(hand: Sequence[Card], starter: Card) -> Score:
    """A jack in the hand that matches the starter's suit is worth one point."""
    score = Score()
    for card in hand:
        if card.rank == Rank.JACK and card.suit == starter.suit:
            score.tally([Combination.of(CombinationKind.NOB, [card, starter])])
            break
    return score


def score_cards(cards: Sequence[Card], is_crib: bool) -> List[Combination]:
    combis = []
    for combi in (
        score_fifteen(cards),
        score_pair(cards),
        score_run(cards),
        score_flush(cards, is_crib),
    ):
        if combi is not None:
            combis.append(combi)
    return combis


def score_fifteen(cards: Sequence[Card]) -> Optional[Combination]:
    if sum(card.value for card in cards) == 15:
        return Combination.of(CombinationKind.FIFTEEN, cards)
    return None


def score_pair(cards: Sequence[Card]) -> Optional[Combination]:
    if len(cards) < 2:
        return None
    rank = cards[0].rank
    if all(card.rank == rank for card in cards):
        return Combination.of(CombinationKind.RANK_MATCH, cards)
    return None


def score_run(cards: Sequence[Card]) -> Optional[Combination]:
    """Return a run when the (already sorted) cards have contiguous ranks."""
    if len(cards) < 3:
        return None
    first = int(cards[0].rank)
    if [int(card.rank) - first for card in cards] == list(range(len(cards))):
        return Combination.of(CombinationKind.RUN, cards)
    return None


def score_flush(cards: Sequence[Card], is_crib: bool) -> Optional[Combination]:
    # A crib needs all five cards in one suit; a hand can flush with four.
    if len(cards) < 4:
        return None
    if len(cards) == 4 and is_crib:
        return None
    suit = cards[0].suit
    if all(card.suit == suit for card in cards):
        return Combination.of(CombinationKind.SUIT_MATCH, cards)
    return None
