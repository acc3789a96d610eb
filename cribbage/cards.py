from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional

from .errors import BadCardError, ParseError


class Rank(IntEnum):
    ACE = 1
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

    @property
    def label(self) -> str:
        return self.name.title()


class Suit(IntEnum):
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4

    @property
    def label(self) -> str:
        return self.name.title()


RANKS = tuple(Rank)
SUITS = tuple(Suit)

_RANK_BY_LABEL: Dict[str, Rank] = {rank.label: rank for rank in Rank}
_SUIT_BY_LABEL: Dict[str, Suit] = {suit.label: suit for suit in Suit}


# Field order matters: ordering compares rank first, suit only breaks ties.
@dataclass(frozen=True, order=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        """Count value: face cards are 10, an ace is 1."""
        return min(int(self.rank), 10)

    @property
    def label(self) -> str:
        return f"{self.rank.label}Of{self.suit.label}"

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Address the deck as 0..51 where index // 13 is the suit and index % 13 the rank."""
        if not 0 <= index <= 51:
            raise BadCardError(f"card index must be within 0..51, got {index}")
        suit, rank = divmod(index, 13)
        return cls(RANKS[rank], SUITS[suit])

    def to_index(self) -> int:
        return (int(self.suit) - 1) * 13 + int(self.rank) - 1


def parse_card(label: str) -> Card:
    tokens = label.split("Of")
    if len(tokens) != 2:
        raise ParseError(f"{label!r} is an invalid Card because it couldn't be split by 'Of'", label)
    rank = _RANK_BY_LABEL.get(tokens[0])
    if rank is None:
        raise ParseError(f"Error Parsing ordinal in: {label!r}. {tokens[0]!r} is invalid", tokens[0])
    suit = _SUIT_BY_LABEL.get(tokens[1])
    if suit is None:
        raise ParseError(f"Error Parsing suit in: {label!r}. {tokens[1]!r} is invalid", tokens[1])
    return Card(rank, suit)


def parse_hand(csv: str) -> List[Card]:
    return [parse_card(token) for token in csv.split(",")]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def count_of(cards: Iterable[Card]) -> int:
    return sum(card.value for card in cards)


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card.from_index(index) for index in range(52)]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards
