from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .cards import Card, Rank, Suit


class CombinationKind(str, Enum):
    NOB = "Nob"
    FIFTEEN = "Fifteen"
    RANK_MATCH = "RankMatch"
    RUN = "Run"
    SUIT_MATCH = "SuitMatch"
    THIRTY_ONE = "ThirtyOne"


class CombinationName(str, Enum):
    NOB = "Nob"
    FIFTEEN = "Fifteen"
    PAIR = "Pair"
    RUN_OF_THREE = "RunOfThree"
    RUN_OF_FOUR = "RunOfFour"
    FLUSH_OF_FOUR = "FlushOfFour"
    RUN_OF_FIVE = "RunOfFive"
    FLUSH_OF_FIVE = "FlushOfFive"
    ROYAL_PAIR = "RoyalPair"
    DOUBLE_ROYAL_PAIR = "DoubleRoyalPair"
    RUN_OF_SIX = "RunOfSix"
    RUN_OF_SEVEN = "RunOfSeven"
    THIRTY_ONE = "ThirtyOne"


POINTS = {
    CombinationName.NOB: 1,
    CombinationName.FIFTEEN: 2,
    CombinationName.PAIR: 2,
    CombinationName.RUN_OF_THREE: 3,
    CombinationName.RUN_OF_FOUR: 4,
    CombinationName.FLUSH_OF_FOUR: 4,
    CombinationName.RUN_OF_FIVE: 5,
    CombinationName.FLUSH_OF_FIVE: 5,
    CombinationName.ROYAL_PAIR: 6,
    CombinationName.DOUBLE_ROYAL_PAIR: 12,
    CombinationName.RUN_OF_SIX: 6,
    CombinationName.RUN_OF_SEVEN: 7,
    CombinationName.THIRTY_ONE: 2,
}

_SIZED_NAMES = {
    CombinationKind.RANK_MATCH: {
        2: CombinationName.PAIR,
        3: CombinationName.ROYAL_PAIR,
        4: CombinationName.DOUBLE_ROYAL_PAIR,
    },
    CombinationKind.RUN: {
        3: CombinationName.RUN_OF_THREE,
        4: CombinationName.RUN_OF_FOUR,
        5: CombinationName.RUN_OF_FIVE,
        6: CombinationName.RUN_OF_SIX,
        7: CombinationName.RUN_OF_SEVEN,
    },
    CombinationKind.SUIT_MATCH: {
        4: CombinationName.FLUSH_OF_FOUR,
        5: CombinationName.FLUSH_OF_FIVE,
    },
}


def combination_name(kind: CombinationKind, count: int) -> CombinationName:
    """The one place where a kind and a card count turn into a name."""
    if kind == CombinationKind.NOB:
        return CombinationName.NOB
    if kind == CombinationKind.FIFTEEN:
        return CombinationName.FIFTEEN
    if kind == CombinationKind.THIRTY_ONE:
        return CombinationName.THIRTY_ONE
    try:
        return _SIZED_NAMES[kind][count]
    except KeyError:
        raise ValueError(f"No {kind.value} combination has {count} cards") from None


@dataclass(frozen=True)
class Combination:
    kind: CombinationKind
    cards: Tuple[Card, ...]
    name: CombinationName
    points: int
    rank_info: Optional[Rank] = None
    suit_info: Optional[Suit] = None

    @classmethod
    def of(cls, kind: CombinationKind, cards: Iterable[Card]) -> "Combination":
        cards = tuple(cards)
        name = combination_name(kind, len(cards))
        return cls(
            kind=kind,
            cards=cards,
            name=name,
            points=POINTS[name],
            rank_info=cards[0].rank if kind == CombinationKind.RANK_MATCH else None,
            suit_info=cards[0].suit if kind == CombinationKind.SUIT_MATCH else None,
        )


@dataclass
class Score:
    combinations: List[Combination] = field(default_factory=list)
    total_score: int = 0

    def points(self) -> int:
        return sum(combi.points for combi in self.combinations)

    def tally(self, combis: Iterable[Combination]) -> "Score":
        # One at a time so that subsumed combinations are handled correctly.
        for combi in combis:
            self.add_combination(combi)
        self.total_score = self.points()
        return self

    def add_combination(self, combi: Combination) -> None:
        """Add combi unless something already in the score subsumes it.

        When combi subsumes existing combinations of its kind they are removed.
        A combination identical to one already present is absorbed.
        """
        if combi in self.combinations:
            return
        if combi.kind in (CombinationKind.NOB, CombinationKind.FIFTEEN):
            self.combinations.append(combi)
            return

        subsumed = False
        kept: List[Combination] = []
        for existing in self.combinations:
            if existing.kind != combi.kind:
                kept.append(existing)
            elif existing.kind == CombinationKind.RANK_MATCH:
                if existing.rank_info != combi.rank_info:
                    kept.append(existing)
                elif existing.points >= combi.points:
                    subsumed = True
                    kept.append(existing)
            elif existing.kind == CombinationKind.RUN:
                if existing.points > combi.points:
                    subsumed = True
                    kept.append(existing)
                elif existing.points == combi.points:
                    kept.append(existing)
            elif existing.kind == CombinationKind.SUIT_MATCH:
                if existing.points > combi.points:
                    subsumed = True
                    kept.append(existing)
            else:
                kept.append(existing)
        self.combinations = kept
        if not subsumed:
            self.combinations.append(combi)
