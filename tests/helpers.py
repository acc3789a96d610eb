from __future__ import annotations

import json
from typing import Any, Dict, List

from cribbage.cards import Card, parse_card, parse_hand


def cards(csv: str) -> List[Card]:
    """Build a card list from 'FiveOfHearts,JackOfSpades' style labels."""
    if not csv:
        return []
    return parse_hand(csv)


def card(label: str) -> Card:
    return parse_card(label)


class DummyWebSocket:
    """Collects what the server sends so tests can inspect the JSON frames."""

    def __init__(self) -> None:
        self.sent: List[str] = []
        self.remote_address = ("127.0.0.1", 0)

    async def send(self, message: str) -> None:
        self.sent.append(message)

    def messages(self) -> List[Dict[str, Any]]:
        return [json.loads(raw) for raw in self.sent]
