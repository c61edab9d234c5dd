"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from snapcall.equity import EquityCalculator, EquityConfig
from snapcall.game.evaluator import TreysRanker


class ConstantRanker:
    """Every hand ties."""

    def rank(self, cards):
        return 0


class HoleCardRanker:
    """Ranks by hole cards only: higher top card wins, board ignored."""

    def rank(self, cards):
        return max(c.rank for c in cards[:2])


class RecordingRanker:
    """Ties every hand and records each 7-card input."""

    def __init__(self):
        self.calls = []

    def rank(self, cards):
        self.calls.append(tuple(cards))
        return 0


@pytest.fixture(scope="session")
def treys_ranker():
    return TreysRanker()


@pytest.fixture
def calculator(treys_ranker):
    return EquityCalculator(ranker=treys_ranker, config=EquityConfig(seed=1234))


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def constant_ranker():
    return ConstantRanker()


@pytest.fixture
def hole_card_ranker():
    return HoleCardRanker()


@pytest.fixture
def recording_ranker():
    return RecordingRanker()
