from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .cards import Card, Rank, count_of
from .combinator import all_combinations_of_size
from .counting import score_counted_play
from .crib_tables import my_crib_value, your_crib_value
from .errors import BadHandError, CountExceededError
from .scoring import score_hand

SAME_SUIT_BONUS = 0.01


def select_crib_cards(hand: Sequence[Card], is_my_crib: bool) -> Tuple[Card, Card]:
    """Pick the two cards to send to the crib out of six.

    Every way of keeping four cards is scored as the kept hand's points plus
    (my crib) or minus (opponent's crib) the expected value of the discards.
    The first candidate with the strictly greatest total wins.
    """
    if len(hand) != 6:
        raise BadHandError(f"selecting crib cards needs 6 cards, got {len(hand)}")
    if len(set(hand)) != 6:
        raise BadHandError("selecting crib cards needs 6 distinct cards")

    best: Optional[Tuple[Card, Card]] = None
    best_score = float("-inf")
    for held in all_combinations_of_size(hand, 4, 4):
        first, second = get_crib_cards(hand, held)
        score: float = score_hand(held).total_score
        if is_my_crib:
            score += my_crib_value(first, second)
        else:
            score -= your_crib_value(first, second)
        if first.suit == second.suit:
            score += SAME_SUIT_BONUS
        if score > best_score:
            best_score = score
            best = (first, second)

    assert best is not None
    return best


def get_crib_cards(hand: Sequence[Card], held_cards: Sequence[Card]) -> List[Card]:
    """Return the cards of `hand` that are not in `held_cards`, in hand order."""
    return [card for card in hand if card not in held_cards]


def select_counting_play(played_cards: Sequence[Card], available_cards: Sequence[Card]) -> Optional[Card]:
    """Pick the next card to play during counting, or None for a Go.

    The strategy takes points whenever they are available. Otherwise it looks
    at pairs of its own cards to set up a royal pair, a fifteen or a run
    against an opponent assumed to hold ten-value cards, and failing that
    plays its highest card while holding back fives.
    """
    current_count = count_of(played_cards)
    if not available_cards:
        return None
    if len(available_cards) == 1:
        card = available_cards[0]
        return card if current_count + card.value <= 31 else None

    cards_left = sorted(available_cards)

    best_points = -1
    best_card: Optional[Card] = None
    playable: List[Card] = []
    for candidate in cards_left:
        try:
            score = score_counted_play(played_cards, candidate)
        except CountExceededError:
            continue
        if score.total_score > best_points:
            best_points = score.total_score
            best_card = candidate
        playable.append(candidate)

    if not playable:
        return None
    if len(playable) == 1:
        return playable[0]
    if best_points > 0:
        return best_card

    card_to_play = _strategic_card(current_count, playable)
    if card_to_play is not None:
        return card_to_play

    if playable[-1].value != 5:
        return playable[-1]
    # A lone five stays in hand; a pair of fives would have been played above.
    return playable[-2]


def _strategic_card(current_count: int, playable: Sequence[Card]) -> Optional[Card]:
    # Each rule only wins over a weaker one already chosen.
    weight = 0
    card_to_play: Optional[Card] = None
    for pair in all_combinations_of_size(playable, 2, 2):
        low, high = sorted(pair)

        # Hoping the opponent pairs us so our second card makes a royal pair.
        if low.rank == high.rank and low.rank != Rank.FIVE and current_count + 3 * low.value <= 31:
            if weight < 10:
                card_to_play = high
                weight = 10

        # Hoping for a ten-value card so the other card makes 15 or 21.
        if low.value + high.value + 10 in (15, 21) and weight < 8:
            card_to_play = high
            weight = 8

        gap = abs(int(low.rank) - int(high.rank))
        if gap == 1:
            # Optimistic: the opponent extends the run downward.
            if current_count + low.value - 1 + low.value + high.value <= 31 and weight < 5:
                card_to_play = high
                weight = 5
        elif gap == 2:
            # Hoping the opponent fills the gap.
            if current_count + low.value + high.value + low.value + 1 <= 31 and weight < 5:
                card_to_play = high if high.rank != Rank.FIVE else low
                weight = 5

    return card_to_play
