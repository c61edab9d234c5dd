"""Tests for mode selection."""

import math

from snapcall.equity.config import EquityConfig
from snapcall.equity.scoring import SolveMode
from snapcall.equity.selector import estimate_states, select_mode
from snapcall.equity.spot import prepare_spot


class TestEstimateStates:
    def test_river_all_exact(self):
        spot = prepare_spot("2h5h9cTdJs", "AhKh", ["QsQc"])
        assert estimate_states(spot) == (0, 43, 1)

    def test_turn_all_exact(self):
        spot = prepare_spot("2h5h9cTd", "AhKh", ["QsQc"])
        assert estimate_states(spot) == (1, 44, 44)

    def test_preflop_unknown_villain(self):
        spot = prepare_spot("", "AhAd", [""])
        slots, pool, estimate = estimate_states(spot)
        assert slots == 7
        assert pool == 50
        assert estimate == math.comb(50, 7)

    def test_partial_hero(self):
        spot = prepare_spot("2h5h9cTdJs", "Ah", ["QsQc"])
        assert estimate_states(spot) == (1, 44, 44)

    def test_range_villain(self):
        spot = prepare_spot("2c7d9h", "AhAd", ["KK"])
        # 6 KK combos, pool of 52 - 5 known - 2 for the range
        assert estimate_states(spot) == (2, 45, 6 * math.comb(45, 2))

    def test_range_filtered_before_estimate(self):
        spot = prepare_spot("Kc7d9h", "AhAd", ["KK"])
        slots, pool, estimate = estimate_states(spot)
        assert estimate == 3 * math.comb(pool, slots)


class TestSelectMode:
    def test_river_always_exact(self):
        spot = prepare_spot("2h5h9cTdJs", "AhKh", ["QsQc"])
        assert select_mode(spot, 1).mode is SolveMode.EXACT_ENUMERATION

    def test_budget_boundary(self):
        spot = prepare_spot("2h5h9cTd", "AhKh", ["QsQc"])
        assert select_mode(spot, 44).mode is SolveMode.EXACT_ENUMERATION
        assert select_mode(spot, 43).mode is SolveMode.MONTE_CARLO

    def test_preflop_falls_back_to_monte_carlo(self):
        spot = prepare_spot("", "AhAd", [""])
        plan = select_mode(spot, 10_000)
        assert plan.mode is SolveMode.MONTE_CARLO
        assert plan.budget == 10_000

    def test_range_budget(self):
        spot = prepare_spot("2c7d9h", "AhAd", ["KK"])
        assert select_mode(spot, 10_000).mode is SolveMode.EXACT_ENUMERATION
        assert select_mode(spot, 5_000).mode is SolveMode.MONTE_CARLO


class TestResolveIterations:
    def test_zero_means_default(self):
        assert EquityConfig().resolve_iterations(0) == 10_000

    def test_explicit(self):
        assert EquityConfig().resolve_iterations(250) == 250

    def test_custom_default(self):
        assert EquityConfig(default_iterations=500).resolve_iterations(0) == 500
