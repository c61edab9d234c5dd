"""Choose between exact enumeration and Monte Carlo sampling."""

import logging
import math
from dataclasses import dataclass

from .scoring import SolveMode
from .spot import Spot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModePlan:
    """Outcome of mode selection for one spot."""
    mode: SolveMode
    non_range_slots: int
    pool_size: int
    enum_estimate: int
    budget: int


def estimate_states(spot: Spot) -> tuple[int, int, int]:
    """
    Estimate how many deals exact enumeration would visit.

    The pool size subtracts two cards per range player rather than
    tracking which combos actually overlap, so with several ranges
    the estimate is approximate. It only steers mode selection.

    Returns:
        Tuple of (non_range_slots, pool_size, enum_estimate)
    """
    slots = spot.non_range_slots
    range_players = spot.range_players
    pool_size = max(0, 52 - len(spot.dead) - 2 * len(range_players))

    range_product = math.prod(len(spot.players[i].combos) for i in range_players)
    estimate = range_product * math.comb(pool_size, slots)

    return slots, pool_size, estimate


def select_mode(spot: Spot, budget: int) -> ModePlan:
    """
    Pick exact enumeration when the estimated state space fits
    in ``budget``, Monte Carlo otherwise.
    """
    slots, pool_size, estimate = estimate_states(spot)

    if 0 < estimate <= budget:
        mode = SolveMode.EXACT_ENUMERATION
    else:
        mode = SolveMode.MONTE_CARLO

    logger.debug(
        "Mode %s: slots=%d pool=%d estimate=%d budget=%d",
        mode.value, slots, pool_size, estimate, budget,
    )
    return ModePlan(
        mode=mode,
        non_range_slots=slots,
        pool_size=pool_size,
        enum_estimate=estimate,
        budget=budget,
    )
