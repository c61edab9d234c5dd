"""Equity calculation entry points."""

import logging
from typing import Optional, Sequence

import numpy as np

from snapcall.game.evaluator import HandRanker, TreysRanker
from .config import EquityConfig
from .enumeration import enumerate_equity
from .monte_carlo import sample_equity
from .scoring import EquityResult, SolveMode, normalize_wins
from .selector import select_mode
from .spot import Spot, prepare_spot

logger = logging.getLogger(__name__)


class EquityCalculator:
    """
    Hold'em equity for a hero against one or more villains.

    Uses exact enumeration when the remaining state space fits in
    the iteration budget and Monte Carlo simulation otherwise.
    The calculator keeps no state between calls besides its ranker,
    config and random source.
    """

    def __init__(
        self,
        ranker: Optional[HandRanker] = None,
        config: Optional[EquityConfig] = None,
    ):
        """
        Initialize calculator.

        Args:
            ranker: Hand-rank oracle (defaults to treys)
            config: Engine configuration
        """
        self.ranker = ranker or TreysRanker()
        self.config = config or EquityConfig()
        self.rng = np.random.default_rng(self.config.seed)

    def estimate(
        self,
        board: str,
        hero: str,
        villains: Sequence[str],
        iterations: int = 0,
    ) -> EquityResult:
        """
        Calculate equity for every player.

        Args:
            board: Community cards (0, 3, 4 or 5), e.g. "AhKdQc"
            hero: Hero's hand, two cards or one card, e.g. "AhAd" or "Ah"
            villains: Each villain's hand: cards, one card, "" or a range
            iterations: Enumeration budget and Monte Carlo iteration count
                (0 uses the configured default)

        Returns:
            EquityResult with hero's equity first

        Raises:
            SnapCallError: On invalid input or when no valid deal exists
        """
        return self.estimate_spot(prepare_spot(board, hero, villains), iterations)

    def estimate_spot(self, spot: Spot, iterations: int = 0) -> EquityResult:
        """Calculate equity for an already validated spot."""
        budget = self.config.resolve_iterations(iterations)
        plan = select_mode(spot, budget)

        if plan.mode is SolveMode.EXACT_ENUMERATION:
            wins, samples = enumerate_equity(spot, self.ranker)
        else:
            wins, samples = sample_equity(
                spot,
                self.ranker,
                budget,
                self.rng,
                max_attempts=self.config.max_range_attempts,
            )

        equities = normalize_wins(wins)
        logger.debug("Equities %s from %d samples", equities, samples)

        return EquityResult(
            equities=equities,
            mode=plan.mode,
            samples=samples,
            wins=wins,
            iteration_budget=budget,
            enum_estimate=plan.enum_estimate,
        )


def estimate_equity(
    board: str,
    hero: str,
    villains: Sequence[str],
    iterations: int = 0,
    *,
    config: Optional[EquityConfig] = None,
    ranker: Optional[HandRanker] = None,
) -> EquityResult:
    """
    Calculate hero and villain equities in one call.

    See EquityCalculator.estimate for arguments.
    """
    return EquityCalculator(ranker=ranker, config=config).estimate(
        board, hero, villains, iterations
    )
