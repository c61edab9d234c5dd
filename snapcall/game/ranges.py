"""Hand range grammar and combo expansion."""

import re
from itertools import combinations, product
from typing import Iterable

from snapcall.errors import InvalidRangeSyntax
from .cards import Card, Rank, Suit, RANK_STR, STR_RANK, strip_separators

Combo = tuple[Card, Card]

_RANK = "[2-9TJQKA]"

# "AhKd" inside a range union
_EXPLICIT_RE = re.compile(rf"^({_RANK}[SHDC])({_RANK}[SHDC])$")
# "AK", "AKs", "AKo", "TT", each optionally followed by "+"
_SHORTHAND_RE = re.compile(rf"^({_RANK})({_RANK})([SO]?)(\+?)$")
# "A5s-A2s", "TT-77"
_INTERVAL_RE = re.compile(rf"^({_RANK})({_RANK})([SO]?)-({_RANK})({_RANK})([SO]?)$")


def _canonical(c1: Card, c2: Card) -> Combo:
    """Order a combo so the higher card (by rank, then suit) comes first."""
    if (c1.rank, c1.suit) < (c2.rank, c2.suit):
        return (c2, c1)
    return (c1, c2)


def pair_combos(rank: int) -> list[Combo]:
    """All 6 combos of a pocket pair."""
    return [
        _canonical(Card(Rank(rank), s1), Card(Rank(rank), s2))
        for s1, s2 in combinations(Suit, 2)
    ]


def unpaired_combos(high: int, low: int, suitedness: str = "") -> list[Combo]:
    """
    Combos of a non-pair hand.

    Args:
        high: Higher rank
        low: Lower rank
        suitedness: "s" (4 combos), "o" (12 combos) or "" (all 16)

    Returns:
        List of combos
    """
    combos = []
    for s1, s2 in product(Suit, repeat=2):
        if suitedness == "s" and s1 != s2:
            continue
        if suitedness == "o" and s1 == s2:
            continue
        combos.append((Card(Rank(high), s1), Card(Rank(low), s2)))
    return combos


def _ordered(r1: int, r2: int) -> tuple[int, int]:
    return (r1, r2) if r1 >= r2 else (r2, r1)


def _expand_shorthand(term: str, match: re.Match) -> list[Combo]:
    high, low = _ordered(STR_RANK[match.group(1)], STR_RANK[match.group(2)])
    suitedness = match.group(3).lower()
    plus = bool(match.group(4))

    if high == low:
        if suitedness:
            raise InvalidRangeSyntax(f"Pairs cannot be suited or offsuit: {term!r}")
        ranks = range(high, 15) if plus else [high]
        return [combo for rank in ranks for combo in pair_combos(rank)]

    # Plus on a non-pair climbs the kicker up to one below the top card
    kickers = range(low, high) if plus else [low]
    return [
        combo
        for kicker in kickers
        for combo in unpaired_combos(high, kicker, suitedness)
    ]


def _expand_interval(term: str, match: re.Match) -> list[Combo]:
    hi_a, lo_a = _ordered(STR_RANK[match.group(1)], STR_RANK[match.group(2)])
    hi_b, lo_b = _ordered(STR_RANK[match.group(4)], STR_RANK[match.group(5)])
    suit_a = match.group(3).lower()
    suit_b = match.group(6).lower()

    if suit_a != suit_b:
        raise InvalidRangeSyntax(f"Interval ends differ in suitedness: {term!r}")

    if hi_a == lo_a and hi_b == lo_b:
        if suit_a:
            raise InvalidRangeSyntax(f"Pairs cannot be suited or offsuit: {term!r}")
        start, end = sorted((hi_a, hi_b))
        return [combo for rank in range(start, end + 1) for combo in pair_combos(rank)]

    if hi_a != hi_b or hi_a == lo_a or hi_b == lo_b:
        raise InvalidRangeSyntax(
            f"Interval must keep the same top card: {term!r}"
        )

    start, end = sorted((lo_a, lo_b))
    return [
        combo
        for kicker in range(start, end + 1)
        for combo in unpaired_combos(hi_a, kicker, suit_a)
    ]


def _expand_term(term: str) -> list[Combo]:
    upper = term.upper()

    match = _EXPLICIT_RE.match(upper)
    if match:
        c1 = Card.from_string(match.group(1))
        c2 = Card.from_string(match.group(2))
        if c1 == c2:
            raise InvalidRangeSyntax(f"Combo repeats a card: {term!r}")
        return [(c1, c2)]

    match = _SHORTHAND_RE.match(upper)
    if match:
        return _expand_shorthand(term, match)

    match = _INTERVAL_RE.match(upper)
    if match:
        return _expand_interval(term, match)

    raise InvalidRangeSyntax(f"Invalid range term: {term!r}")


def parse_range(range_str: str) -> list[Combo]:
    """
    Expand a range expression into concrete two-card combos.

    Examples:
        "TT"       -> 6 combos
        "TT+"      -> TT, JJ, QQ, KK, AA (30 combos)
        "AKs"      -> 4 combos
        "ATo+"     -> ATo, AJo, AQo, AKo (48 combos)
        "A5s-A2s"  -> A5s, A4s, A3s, A2s (16 combos)
        "KK+,A2s+" -> union, duplicates removed

    Raises:
        InvalidRangeSyntax: If any term is malformed
    """
    terms = [strip_separators(t) for t in range_str.split(",")]
    terms = [t for t in terms if t]
    if not terms:
        raise InvalidRangeSyntax(f"Empty range: {range_str!r}")

    combos: list[Combo] = []
    seen: set[frozenset[Card]] = set()
    for term in terms:
        for combo in _expand_term(term):
            key = frozenset(combo)
            if key not in seen:
                seen.add(key)
                combos.append(combo)

    return combos


def filter_dead(combos: Iterable[Combo], dead: set[Card]) -> list[Combo]:
    """Drop combos that share a card with any dead card."""
    return [c for c in combos if c[0] not in dead and c[1] not in dead]


def combo_to_string(combo: Combo) -> str:
    return f"{combo[0]}{combo[1]}"


def canonical_name(combo: Combo) -> str:
    """Shorthand class of a combo, e.g. 'AKs', 'QQ', '72o'."""
    high, low = _ordered(combo[0].rank, combo[1].rank)
    if high == low:
        return f"{RANK_STR[high]}{RANK_STR[low]}"
    suffix = "s" if combo[0].suit == combo[1].suit else "o"
    return f"{RANK_STR[high]}{RANK_STR[low]}{suffix}"
