"""Exact equity by enumerating every completion of the deal."""

import logging
from itertools import combinations
from typing import Iterator, Sequence

from snapcall.game.cards import Card, DECK
from snapcall.game.evaluator import HandRanker
from snapcall.game.hands import HoleCardsKind
from snapcall.game.ranges import Combo
from .scoring import score_deal
from .spot import Spot

logger = logging.getLogger(__name__)


def iter_range_assignments(
    combo_lists: Sequence[Sequence[Combo]],
) -> Iterator[tuple[Combo, ...]]:
    """
    Lazily walk the Cartesian product of several ranges.

    Branches where a combo shares a card with a combo already
    chosen for an earlier range are pruned.
    """
    chosen: list[Combo] = []
    used: set[Card] = set()

    def walk(depth: int) -> Iterator[tuple[Combo, ...]]:
        if depth == len(combo_lists):
            yield tuple(chosen)
            return
        for combo in combo_lists[depth]:
            c1, c2 = combo
            if c1 in used or c2 in used:
                continue
            chosen.append(combo)
            used.add(c1)
            used.add(c2)
            yield from walk(depth + 1)
            chosen.pop()
            used.discard(c1)
            used.discard(c2)

    yield from walk(0)


def _fill_order(spot: Spot, holes: list[list], board: list) -> list[tuple[list, int]]:
    """
    Slots filled from each pool combination, in order: every PARTIAL
    player's second card, every UNKNOWN player's two cards, then the
    missing board cards.
    """
    order = []
    for i, spec in enumerate(spot.players):
        if spec.kind is HoleCardsKind.PARTIAL:
            order.append((holes[i], 1))
    for i, spec in enumerate(spot.players):
        if spec.kind is HoleCardsKind.UNKNOWN:
            order.append((holes[i], 0))
            order.append((holes[i], 1))
    for pos in range(len(spot.board), 5):
        order.append((board, pos))
    return order


def enumerate_equity(spot: Spot, ranker: HandRanker) -> tuple[list[int], int]:
    """
    Visit every valid deal and count wins.

    Args:
        spot: Validated inputs
        ranker: Hand-rank oracle

    Returns:
        Tuple of (per-player win counts, number of deals visited)
    """
    pool = [c for c in DECK if c not in spot.dead]
    range_idx = spot.range_players
    slots = spot.non_range_slots

    # Reused deal buffers
    holes: list[list] = [
        list(spec.cards) + [None] * (2 - len(spec.cards))
        for spec in spot.players
    ]
    board: list = list(spot.board) + [None] * spot.missing_board
    order = _fill_order(spot, holes, board)

    wins = [0] * spot.num_players
    deals = 0

    combo_lists = [spot.players[i].combos for i in range_idx]
    for assignment in iter_range_assignments(combo_lists):
        taken: set[Card] = set()
        for idx, (c1, c2) in zip(range_idx, assignment):
            holes[idx][0] = c1
            holes[idx][1] = c2
            taken.add(c1)
            taken.add(c2)

        rest = [c for c in pool if c not in taken] if taken else pool
        for combo in combinations(rest, slots):
            for (target, pos), card in zip(order, combo):
                target[pos] = card
            score_deal(ranker, holes, board, wins)
            deals += 1

    logger.debug("Enumerated %d deals", deals)
    return wins, deals
