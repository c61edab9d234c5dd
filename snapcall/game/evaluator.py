"""Hand ranking backed by the treys library."""

from typing import Optional, Protocol, Sequence

from treys import Evaluator

from snapcall.errors import DuplicateCard, InvalidHandSize
from .cards import Card, DECK, format_cards


class HandRanker(Protocol):
    """
    Hand-rank oracle used by the equity engine.

    Given 7 cards (2 hole + 5 board), return a value where
    greater means stronger. Equal values tie.
    """

    def rank(self, cards: Sequence[Card]) -> int:
        ...


class TreysRanker:
    """
    HandRanker built on treys.

    treys scores run 1 (royal flush) to 7462 (7-high), lower
    being better, so the score is negated to make higher stronger.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator or Evaluator()
        # Card.to_treys parses a string; do it once per card
        self._treys = {card: card.to_treys() for card in DECK}

    def score(self, cards: Sequence[Card]) -> int:
        """Raw treys score (lower is better) of 5-7 cards."""
        if not 5 <= len(cards) <= 7:
            raise InvalidHandSize(f"Hand must have 5-7 cards, got {len(cards)}")
        treys = self._treys
        return self.evaluator.evaluate(
            [treys[c] for c in cards[:2]],
            [treys[c] for c in cards[2:]],
        )

    def rank(self, cards: Sequence[Card]) -> int:
        return -self.score(cards)

    def hand_class(self, cards: Sequence[Card]) -> str:
        """Hand class name, e.g. 'Flush' or 'Two Pair'."""
        score = self.score(cards)
        return self.evaluator.class_to_string(self.evaluator.get_rank_class(score))


def describe_hand(cards: Sequence[Card], ranker: Optional[TreysRanker] = None) -> str:
    """
    Get the hand class of 5-7 cards.

    Args:
        cards: Cards to evaluate
        ranker: Ranker to reuse (a fresh one is built otherwise)

    Returns:
        Hand class string

    Raises:
        InvalidHandSize: If fewer than 5 or more than 7 cards are given
        DuplicateCard: If a card appears twice
    """
    if len(set(cards)) != len(cards):
        raise DuplicateCard(f"Hand contains duplicate cards: {format_cards(cards)}")
    ranker = ranker or TreysRanker()
    return ranker.hand_class(cards)
