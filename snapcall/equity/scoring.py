"""Deal scoring, tie resolution and result aggregation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from snapcall.errors import NoValidSamples
from snapcall.game.cards import Card
from snapcall.game.evaluator import HandRanker


class SolveMode(Enum):
    """Algorithm used to produce a result."""
    EXACT_ENUMERATION = "ExactEnumeration"
    MONTE_CARLO = "MonteCarlo"


@dataclass
class EquityResult:
    """Per-player equities, hero first."""
    equities: list[float]
    mode: SolveMode
    samples: int  # Deals visited or Monte Carlo iterations accepted
    wins: list[int] = field(default_factory=list)
    iteration_budget: int = 0
    enum_estimate: int = 0

    @property
    def hero_equity(self) -> float:
        return self.equities[0]

    def to_dict(self) -> dict:
        return {
            "equities": list(self.equities),
            "mode": self.mode.value,
            "samples": self.samples,
            "wins": list(self.wins),
            "iteration_budget": self.iteration_budget,
            "enum_estimate": self.enum_estimate,
        }


def score_deal(
    ranker: HandRanker,
    holes: Sequence[Sequence[Card]],
    board: Sequence[Card],
    wins: list[int],
) -> None:
    """
    Rank every player's 7 cards and credit the winners.

    Every player sharing the best rank gets +1; a split pot is
    not divided here; normalization over the total win count
    takes care of it.
    """
    ranks = [ranker.rank((*hole, *board)) for hole in holes]
    award_wins(ranks, wins)


def award_wins(ranks: Sequence[int], wins: list[int]) -> None:
    best = max(ranks)
    for i, rank in enumerate(ranks):
        if rank == best:
            wins[i] += 1


def normalize_wins(wins: Sequence[int]) -> list[float]:
    """
    Convert win counters to percentages summing to 100.

    Raises:
        NoValidSamples: If no deal credited any player
    """
    total = sum(wins)
    if total == 0:
        raise NoValidSamples("No valid deals were produced for these inputs")
    return [w / total * 100.0 for w in wins]
