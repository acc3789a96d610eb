from __future__ import annotations

from typing import List, Sequence

from .cards import Card, count_of
from .errors import CountExceededError
from .models import Combination, CombinationKind, Score
from .scoring import score_run


def score_counted_play(played_cards: Sequence[Card], card: Card) -> Score:
    """Score the counting-phase play of `card` after `played_cards`.

    Raises CountExceededError when the play would take the count past 31.
    """
    count = count_of(played_cards) + card.value
    if count > 31:
        raise CountExceededError(f"invalid card {card.label}: count {count} > 31")

    all_cards: List[Card] = list(played_cards)
    all_cards.append(card)
    combis: List[Combination] = []

    if count == 15:
        combis.append(Combination.of(CombinationKind.FIFTEEN, all_cards))
    elif count == 31:
        combis.append(Combination.of(CombinationKind.THIRTY_ONE, all_cards))

    # Pairs, royal pairs and double royal pairs only count when played back to back.
    matches = 0
    for back in range(1, min(3, len(played_cards)) + 1):
        if all(c.rank == card.rank for c in played_cards[-back:]):
            matches += 1
        else:
            break
    if matches:
        combis.append(Combination.of(CombinationKind.RANK_MATCH, all_cards[-(matches + 1):]))

    # A run need not be played in order: A 5 4 2 3 is a run of five for whoever
    # played the 3. Only the longest trailing run scores.
    for start in range(len(all_cards) - 2):
        run = score_run(sorted(all_cards[start:]))
        if run is not None:
            combis.append(run)
            break

    return Score().tally(combis)
