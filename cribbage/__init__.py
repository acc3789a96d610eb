"""Cribbage scoring and strategy engine used by the API service."""

from .cards import Card, RANKS, SUITS, Rank, Suit, build_deck, count_of, deal, parse_card, parse_hand
from .counting import score_counted_play
from .errors import BadCardError, BadHandError, CountExceededError, CribbageError, ErrorKind, ParseError
from .models import Combination, CombinationKind, CombinationName, Score
from .scoring import score_hand
from .select_cards import select_counting_play, select_crib_cards

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "Rank",
    "Suit",
    "build_deck",
    "count_of",
    "deal",
    "parse_card",
    "parse_hand",
    "score_counted_play",
    "BadCardError",
    "BadHandError",
    "CountExceededError",
    "CribbageError",
    "ErrorKind",
    "ParseError",
    "Combination",
    "CombinationKind",
    "CombinationName",
    "Score",
    "score_hand",
    "select_counting_play",
    "select_crib_cards",
]
