#!/usr/bin/env python3
"""Play counting rounds between the strategy engine and a random player.

Each deal gives both players six cards. The engine discards with
select_crib_cards, the random player throws two random cards, and the
counting phase is played out with Go handling. Average counting points per
deal are logged for both sides, which is a quick way to check that a change
to the counting heuristic actually helps.

Example:
    python scripts/count_sim.py --deals 10000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from cribbage.cards import Card, build_deck, count_of, deal
from cribbage.counting import score_counted_play
from cribbage.select_cards import select_counting_play, select_crib_cards

LOGGER = logging.getLogger("count_sim")

Chooser = Callable[[Sequence[Card], Sequence[Card]], Optional[Card]]


@dataclass
class SimPlayer:
    name: str
    choose: Chooser
    points: int = 0
    hand: List[Card] = field(default_factory=list)


def random_chooser(rng: random.Random) -> Chooser:
    def choose(played: Sequence[Card], available: Sequence[Card]) -> Optional[Card]:
        count = count_of(played)
        legal = [card for card in available if count + card.value <= 31]
        return rng.choice(legal) if legal else None

    return choose


def play_counting(players: List[SimPlayer], first: int) -> None:
    """Play every card in both hands, scoring plays, go's and last card."""
    played: List[Card] = []
    turn = first
    last_to_play: Optional[int] = None
    passed = set()

    while any(player.hand for player in players):
        player = players[turn]
        card = player.choose(played, player.hand) if turn not in passed else None
        if card is None:
            passed.add(turn)
            if len(passed) == len(players) or not any(p.hand for i, p in enumerate(players) if i not in passed):
                # Nobody can continue: one for the go unless the count hit 31.
                if last_to_play is not None and count_of(played) != 31:
                    players[last_to_play].points += 1
                played = []
                passed.clear()
                turn = 1 - last_to_play if last_to_play is not None else 1 - turn
                last_to_play = None
                continue
            turn = 1 - turn
            continue

        player.points += score_counted_play(played, card).total_score
        player.hand.remove(card)
        played.append(card)
        last_to_play = turn
        if count_of(played) == 31:
            played = []
            passed.clear()
            last_to_play = None
        turn = 1 - turn

    if last_to_play is not None and count_of(played) != 31:
        players[last_to_play].points += 1


def run_simulation(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    engine = SimPlayer("engine", select_counting_play)
    rando = SimPlayer("random", random_chooser(rng))
    players = [engine, rando]

    for number in range(args.deals):
        deck = build_deck(seed=rng.randrange(2**32))
        dealer = number % 2
        engine.hand = deal(deck, 6)
        rando.hand = deal(deck, 6)

        discards = select_crib_cards(engine.hand, is_my_crib=dealer == 0)
        engine.hand = [card for card in engine.hand if card not in discards]
        rando.hand = rng.sample(rando.hand, 4)

        # The dealer's opponent leads.
        play_counting(players, first=1 - dealer)

        if args.log_every and (number + 1) % args.log_every == 0:
            LOGGER.info("%s deals played", number + 1)

    for player in players:
        LOGGER.info(
            "%s scored %s counting points (%.3f per deal)",
            player.name,
            player.points,
            player.points / max(args.deals, 1),
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate counting play: strategy engine vs random player")
    parser.add_argument("--deals", type=int, default=1_000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-every", type=int, default=0, help="progress interval in deals (0 disables)")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    run_simulation(args)


if __name__ == "__main__":
    main()
