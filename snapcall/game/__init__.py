"""Cards, hands, ranges and hand ranking."""

from .cards import Card, Rank, Suit, DECK, parse_card, parse_cards
from .board import parse_board
from .ranges import parse_range
from .hands import HoleCards, HoleCardsKind, parse_hole_cards
from .evaluator import HandRanker, TreysRanker, describe_hand

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "DECK",
    "parse_card",
    "parse_cards",
    "parse_board",
    "parse_range",
    "HoleCards",
    "HoleCardsKind",
    "parse_hole_cards",
    "HandRanker",
    "TreysRanker",
    "describe_hand",
]
