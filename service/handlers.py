from __future__ import annotations

import random
from http import HTTPStatus
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from urllib.parse import unquote, urlsplit

from cribbage.cards import Card, Rank, parse_card, parse_hand
from cribbage.counting import score_counted_play
from cribbage.errors import CribbageError, ErrorKind
from cribbage.scoring import score_hand
from cribbage.select_cards import select_counting_play, select_crib_cards

from .config import ServerConfig
from .payloads import client_card, client_cards, counted_card_response, score_response

# CribbageApi maps a request path onto the engine and returns the JSON payload.
# Sockets, headers and framing live in server.py.

Response = Tuple[HTTPStatus, Any]

OWNERS = ("player", "computer")


class ApiError(CribbageError):
    def __init__(self, msg: str, kind: ErrorKind = ErrorKind.BAD_COUNT) -> None:
        super().__init__(msg, kind)


def _parse_bool(token: str) -> bool:
    if token == "true":
        return True
    if token == "false":
        return False
    raise ApiError(f"{token!r} is not 'true' or 'false'", ErrorKind.PARSE_ERROR)


def _parse_int(token: str, what: str = "card index") -> int:
    try:
        return int(token)
    except ValueError:
        raise ApiError(f"unable to parse {token!r} into a {what}") from None


def _format_bool(flag: bool) -> str:
    return "true" if flag else "false"


class CribbageApi:
    def __init__(self, config: ServerConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.routes: Dict[str, Callable[[List[str]], Response]] = {
            "cutcards": self.cut_cards,
            "scorehand": self.score_hand,
            "getcribcards": self.get_crib_cards,
            "getnextcountedcard": self.next_counted_card,
            "scorecountedcards": self.score_counted_cards,
            "getrandomhand": self.get_random_hand,
        }

    def dispatch(self, path: str) -> Response:
        """Resolve `/api/<route>/<params...>` and run it."""
        parts = [unquote(part) for part in urlsplit(path).path.split("/")]
        if len(parts) < 3 or parts[0] != "" or parts[1] != "api":
            return HTTPStatus.NOT_FOUND, {"error_kind": "NotFound", "message": f"no route for {path}"}
        handler = self.routes.get(parts[2])
        if handler is None:
            return HTTPStatus.NOT_FOUND, {"error_kind": "NotFound", "message": f"no route for {path}"}
        try:
            return handler(parts[3:])
        except CribbageError as exc:
            return HTTPStatus.BAD_REQUEST, exc.payload()

    # Routes ----------------------------------------------------------

    def cut_cards(self, params: List[str]) -> Response:
        """Cut two cards to see who deals. With `i,j` the same cut is replayed."""
        if not params or params == [""]:
            first, second = self.rng.sample(range(52), 2)
        elif len(params) == 1:
            tokens = params[0].split(",")
            if len(tokens) != 2:
                raise ApiError("there should be two cards seperated by a ',' such as '1,2'")
            first, second = (_parse_int(token) for token in tokens)
        else:
            return self._not_found(params)

        payload = {
            "CutCards": {
                "Player": client_card(Card.from_index(first), "Player"),
                "Computer": client_card(Card.from_index(second), "Computer"),
            },
            "RepeatUrl": f"{self.config.host_name}/cutcards/{first},{second}",
        }
        return HTTPStatus.OK, payload

    def score_hand(self, params: List[str]) -> Response:
        if len(params) != 3:
            return self._not_found(params)
        hand = parse_hand(params[0])
        starter = parse_card(params[1])
        is_crib = _parse_bool(params[2])
        return HTTPStatus.OK, score_response(score_hand(hand, starter, is_crib))

    def get_crib_cards(self, params: List[str]) -> Response:
        if len(params) != 2:
            return self._not_found(params)
        hand = parse_hand(params[0])
        crib = select_crib_cards(hand, _parse_bool(params[1]))
        return HTTPStatus.OK, client_cards(crib)

    def next_counted_card(self, params: List[str]) -> Response:
        # available/count/played; played is empty on the first card of a count.
        if len(params) not in (2, 3):
            return self._not_found(params)
        available = parse_hand(params[0])
        _parse_int(params[1], "count")
        played = parse_hand(params[2]) if len(params) == 3 and params[2] else []
        card = select_counting_play(played, available)
        if card is None:
            return HTTPStatus.OK, counted_card_response(None, None)
        return HTTPStatus.OK, counted_card_response(card, score_counted_play(played, card))

    def score_counted_cards(self, params: List[str]) -> Response:
        if len(params) not in (2, 3):
            return self._not_found(params)
        card = parse_card(params[0])
        if len(params) == 2 or not params[2]:
            count = _parse_int(params[1], "count")
            if count != 0:
                raise ApiError(f"count should be 0 instead of {count}")
            return HTTPStatus.OK, score_response(score_counted_play([], card))
        played = parse_hand(params[2])
        return HTTPStatus.OK, score_response(score_counted_play(played, card))

    def get_random_hand(self, params: List[str]) -> Response:
        if len(params) == 1:
            is_computer_crib = _parse_bool(params[0])
            indices = self.rng.sample(range(52), 13)
        elif len(params) == 3:
            is_computer_crib = _parse_bool(params[0])
            tokens = params[1].split(",")
            if len(tokens) != 12:
                raise ApiError(
                    f"Expected 12 tokens and got {len(tokens)} instead the CSV of indices is incorrect"
                )
            indices = [_parse_int(token) for token in tokens]
            indices.append(_parse_int(params[2]))
        else:
            return self._not_found(params)
        return HTTPStatus.OK, self._random_hand_payload(is_computer_crib, indices)

    # Helpers ---------------------------------------------------------

    def _random_hand_payload(self, is_computer_crib: bool, indices: Sequence[int]) -> Dict[str, Any]:
        if len(set(indices)) != len(indices):
            raise ApiError("card indices must be unique", ErrorKind.BAD_CARD)
        cards = [Card.from_index(index) for index in indices]

        # The crib owner's opponent is dealt first.
        owner = 0 if is_computer_crib else 1
        random_cards: List[Dict[str, Any]] = []
        computer_hand: List[Card] = []
        for card in cards[:12]:
            if OWNERS[owner] == "computer":
                computer_hand.append(card)
            random_cards.append(client_card(card, OWNERS[owner]))
            owner = 1 - owner

        shared = cards[12]
        shared_payload = client_card(shared, "shared")
        crib = select_crib_cards(computer_hand, is_computer_crib)
        dealt = ",".join(str(index) for index in indices[:12])
        return {
            "RandomCards": [shared_payload] + random_cards,
            "ComputerCribCards": client_cards(crib, "computer"),
            "SharedCard": shared_payload,
            "HisNobs": shared.rank == Rank.JACK,
            "RepeatUrl": (
                f"{self.config.host_name}/getrandomhand/{_format_bool(is_computer_crib)}/{dealt}/{indices[12]}"
            ),
        }

    def _not_found(self, params: List[str]) -> Response:
        return HTTPStatus.NOT_FOUND, {"error_kind": "NotFound", "message": f"bad parameters: {'/'.join(params)}"}
