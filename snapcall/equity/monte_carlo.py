"""Monte Carlo equity estimation."""

import logging

import numpy as np

from snapcall.game.cards import Card, DECK
from snapcall.game.evaluator import HandRanker
from snapcall.game.hands import HoleCardsKind
from .scoring import score_deal
from .spot import Spot

logger = logging.getLogger(__name__)


def sample_equity(
    spot: Spot,
    ranker: HandRanker,
    iterations: int,
    rng: np.random.Generator,
    max_attempts: int = 100,
) -> tuple[list[int], int]:
    """
    Estimate equity by dealing random completions.

    Each iteration deals in two phases. Range players go first:
    up to ``max_attempts`` uniform draws from their combo list,
    keeping the first combo that avoids every card already in use.
    If a range player gets no combo, or the rest of the deck is too
    short for the cards still to be dealt, the iteration is dropped.
    The remaining deck is then shuffled once and the other players'
    missing cards and the board are dealt off the top, in player order.

    Args:
        spot: Validated inputs
        ranker: Hand-rank oracle
        iterations: Number of iterations to attempt
        rng: Random source
        max_attempts: Rejection-sampling limit per range player

    Returns:
        Tuple of (per-player win counts, accepted iterations)
    """
    players = spot.players
    range_idx = spot.range_players
    known_board = len(spot.board)
    needed = spot.non_range_slots

    base_available = [c for c in DECK if c not in spot.dead]
    available = list(base_available)

    # Reused deal buffers
    holes: list[list] = [
        list(spec.cards) + [None] * (2 - len(spec.cards))
        for spec in players
    ]
    board: list = list(spot.board) + [None] * spot.missing_board
    taken: set[Card] = set()

    wins = [0] * spot.num_players
    samples = 0
    abandoned = 0

    for _ in range(iterations):
        # Phase 1: range players by rejection sampling
        if range_idx:
            taken.clear()
            dealt = True
            for idx in range_idx:
                combos = players[idx].combos
                for _ in range(max_attempts):
                    c1, c2 = combos[rng.integers(len(combos))]
                    if c1 not in taken and c2 not in taken:
                        taken.add(c1)
                        taken.add(c2)
                        holes[idx][0] = c1
                        holes[idx][1] = c2
                        break
                else:
                    dealt = False
                    break
            if not dealt:
                abandoned += 1
                continue
            available = [c for c in base_available if c not in taken]

        # Phase 2: everyone else from one shuffle of the remaining deck
        if len(available) < needed:
            abandoned += 1
            continue
        rng.shuffle(available)
        cursor = 0
        for idx, spec in enumerate(players):
            if spec.kind is HoleCardsKind.PARTIAL:
                holes[idx][1] = available[cursor]
                cursor += 1
            elif spec.kind is HoleCardsKind.UNKNOWN:
                holes[idx][0] = available[cursor]
                holes[idx][1] = available[cursor + 1]
                cursor += 2

        for pos in range(known_board, 5):
            board[pos] = available[cursor]
            cursor += 1

        score_deal(ranker, holes, board, wins)
        samples += 1

    if abandoned:
        logger.debug("Abandoned %d of %d iterations", abandoned, iterations)
    logger.debug("Sampled %d deals", samples)
    return wins, samples
