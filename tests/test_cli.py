"""Tests for the command-line interface."""

import json

from snapcall.cli import main


class TestEquityCommand:
    def test_table_output(self, capsys):
        code = main(["equity", "AhAd", "KhKd", "-b", "2c7d9h", "-i", "990"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Hero" in out
        assert "Villain 1" in out
        assert "flop" in out
        assert "ExactEnumeration" in out

    def test_json_output(self, capsys):
        code = main(["equity", "AhKh", "QsQc", "-b", "2h5h9cTdJs", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["mode"] == "ExactEnumeration"
        assert data["equities"] == [0.0, 100.0]

    def test_random_villains(self, capsys):
        code = main(["equity", "AhAd", "-r", "2", "-i", "500", "--seed", "3", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["mode"] == "MonteCarlo"
        assert len(data["equities"]) == 3

    def test_range_shows_example_combo(self, capsys):
        code = main(["equity", "AhAd", "AKs", "-b", "2c7d9h", "-i", "3000"])
        out = capsys.readouterr().out
        assert code == 0
        assert "e.g. AcKc (AKs)" in out

    def test_hero_range_rejected(self, capsys):
        code = main(["equity", "AKs", "QQ"])
        assert code == 1
        assert "HeroMustBeKnownOrPartial" in capsys.readouterr().out

    def test_no_villains(self, capsys):
        code = main(["equity", "AhAd"])
        assert code == 1
        assert "NoVillains" in capsys.readouterr().out


class TestEvalCommand:
    def test_royal_flush(self, capsys):
        code = main(["eval", "As Ks Qs Js Ts"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Straight Flush" in out

    def test_too_few_cards(self, capsys):
        assert main(["eval", "As Ks"]) == 1
        assert "InvalidHandSize" in capsys.readouterr().out


class TestPotOddsCommand:
    def test_required_equity(self, capsys):
        code = main(["pot-odds", "-p", "100", "-b", "50"])
        out = capsys.readouterr().out
        assert code == 0
        assert "25.00%" in out

    def test_invalid_amounts(self, capsys):
        assert main(["pot-odds", "-p", "100", "-b", "0"]) == 1


def test_overfull_table_is_reported(capsys):
    assert main(["equity", "AhAd", "-r", "23", "-i", "10"]) == 1
    assert "NoValidSamples" in capsys.readouterr().out


def test_eval_duplicate_cards(capsys):
    assert main(["eval", "As As Qs Js Ts"]) == 1
    assert "DuplicateCard" in capsys.readouterr().out
