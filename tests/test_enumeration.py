"""Tests for exact enumeration."""

import math

import pytest

from snapcall.equity.enumeration import enumerate_equity, iter_range_assignments
from snapcall.equity.spot import prepare_spot
from snapcall.game.cards import Card, parse_cards


def combo(text):
    c1, c2 = parse_cards(text)
    return (c1, c2)


class TestRangeAssignments:
    def test_prunes_collisions(self):
        lists = [
            [combo("AsKs"), combo("AhKh")],
            [combo("AsQs"), combo("QdQc")],
        ]
        assignments = list(iter_range_assignments(lists))
        assert assignments == [
            (combo("AsKs"), combo("QdQc")),
            (combo("AhKh"), combo("AsQs")),
            (combo("AhKh"), combo("QdQc")),
        ]

    def test_no_ranges_yields_one_empty_assignment(self):
        assert list(iter_range_assignments([])) == [()]

    def test_is_lazy(self):
        lists = [[combo("AsKs"), combo("AhKh")]]
        gen = iter_range_assignments(lists)
        assert next(gen) == (combo("AsKs"),)

    def test_total_collision(self):
        lists = [[combo("AsAc")], [combo("AsAc")]]
        assert list(iter_range_assignments(lists)) == []


class TestEnumerateEquity:
    def test_river_single_deal(self, treys_ranker):
        # QQ pairs up nothing but still beats ace-high
        spot = prepare_spot("2h5h9cTdJs", "AhKh", ["QsQc"])
        wins, deals = enumerate_equity(spot, treys_ranker)
        assert deals == 1
        assert wins == [0, 1]

    def test_turn_counts(self, constant_ranker):
        spot = prepare_spot("2h5h9cTd", "AhKh", ["QsQc"])
        wins, deals = enumerate_equity(spot, constant_ranker)
        assert deals == 44
        # Every deal is a tie, so both players are credited every time
        assert wins == [44, 44]

    def test_hole_card_stub(self, hole_card_ranker):
        spot = prepare_spot("2h5h9cTd", "AhKh", ["QsQc"])
        wins, deals = enumerate_equity(spot, hole_card_ranker)
        assert wins == [44, 0]

    def test_partial_and_unknown_slots(self, recording_ranker):
        spot = prepare_spot("2c7d9hTsJc", "Ah", ["", "KdKc"])
        wins, deals = enumerate_equity(spot, recording_ranker)
        # One card for the hero, two for the unknown villain
        assert deals == math.comb(52 - 8, 3)
        hero_ah = Card.from_string("Ah")
        for call in recording_ranker.calls[::3]:
            assert call[0] == hero_ah

    def test_every_deal_is_unique(self, recording_ranker):
        spot = prepare_spot("2c7d9hTsJc", "Ah", ["Qd", "KK"])
        wins, deals = enumerate_equity(spot, recording_ranker)
        calls = recording_ranker.calls
        assert deals == 6 * math.comb(52 - 7 - 2, 2)
        assert len(calls) == 3 * deals
        for i in range(0, len(calls), 3):
            hero, villain, ranged = calls[i:i + 3]
            board = hero[2:]
            assert villain[2:] == board == ranged[2:]
            cards = hero[:2] + villain[:2] + ranged[:2] + board
            assert len(set(cards)) == 11

    def test_range_count(self, constant_ranker):
        spot = prepare_spot("2c7d9hTsJc", "Ah", ["KK"])
        wins, deals = enumerate_equity(spot, constant_ranker)
        # 6 KK combos x 44 remaining cards for the hero's second card
        assert deals == 6 * 44

    def test_colliding_ranges_visit_nothing(self, constant_ranker):
        spot = prepare_spot("2c7d9hTsJc", "AhAd", ["AA", "AA"])
        assert enumerate_equity(spot, constant_ranker) == ([0, 0, 0], 0)

    def test_deterministic(self, treys_ranker):
        spot = prepare_spot("2c7d9h", "AhAd", ["KK"])
        first = enumerate_equity(spot, treys_ranker)
        second = enumerate_equity(spot, treys_ranker)
        assert first == second
        assert first[1] == 6 * math.comb(45, 2)


@pytest.mark.parametrize("board", ["2c7d9h", "2c7d9hTs"])
def test_range_of_one_matches_exact_hand(treys_ranker, board):
    exact = enumerate_equity(prepare_spot(board, "AhAd", ["KhKd"]), treys_ranker)
    ranged = enumerate_equity(prepare_spot(board, "AhAd", ["KhKd,KhKd"]), treys_ranker)
    assert exact == ranged
