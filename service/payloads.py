"""JSON shapes the cribbage web client expects.

Field names (including their inconsistent casing) are part of the wire
format and must not change.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from cribbage.cards import Card
from cribbage.models import Combination, Score


def client_card(card: Card, owner: str = "unknown") -> Dict[str, Any]:
    return {
        "OrdinalName": card.rank.label,
        "Rank": int(card.rank),
        "Value": card.value,
        "Suit": card.suit.label,
        "cardName": card.label,
        "Owner": owner,
        "Ordinal": int(card.rank),
    }


def client_cards(cards: Iterable[Card], owner: str = "unknown") -> List[Dict[str, Any]]:
    return [client_card(card, owner) for card in cards]


def score_info(combi: Combination) -> Dict[str, Any]:
    return {
        "ScoreName": combi.name.value,
        "Score": combi.points,
        "Cards": client_cards(combi.cards),
    }


def score_response(score: Optional[Score] = None) -> Dict[str, Any]:
    if score is None:
        return {"Score": 0, "ScoreInfo": []}
    return {
        "Score": score.total_score,
        "ScoreInfo": [score_info(combi) for combi in score.combinations],
    }


def counted_card_response(card: Optional[Card], score: Optional[Score]) -> Dict[str, Any]:
    return {
        "countedCard": client_card(card) if card is not None else None,
        "Scoring": score_response(score),
    }
