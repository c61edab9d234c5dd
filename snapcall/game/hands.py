"""Hole-card specifications.

A player's hole cards are one of four shapes:

- EXACT: both cards known ("AhAd")
- PARTIAL: one card known, the other dealt from the deck ("Ah")
- UNKNOWN: both cards dealt from the deck ("")
- RANGE: one combo drawn from a range expression ("TT+,AKs")

``HoleCards`` is a tagged sum type: a single dataclass whose ``kind``
decides which of ``cards`` / ``combos`` is meaningful.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from snapcall.errors import DuplicateCard, InvalidCardToken
from .cards import Card, format_cards, parse_cards, strip_separators
from .ranges import Combo, filter_dead, parse_range


class HoleCardsKind(Enum):
    """Shape of a hole-card specification."""
    EXACT = "exact"
    PARTIAL = "partial"
    UNKNOWN = "unknown"
    RANGE = "range"


@dataclass(frozen=True)
class HoleCards:
    """One player's hole-card specification."""
    kind: HoleCardsKind
    cards: tuple[Card, ...] = ()  # known cards: 2 for EXACT, 1 for PARTIAL
    combos: tuple[Combo, ...] = field(default=(), repr=False)  # RANGE only
    source: str = ""

    @classmethod
    def exact(cls, c1: Card, c2: Card, source: str = "") -> "HoleCards":
        if c1 == c2:
            raise DuplicateCard(f"Hand repeats a card: {c1}")
        return cls(HoleCardsKind.EXACT, cards=(c1, c2), source=source)

    @classmethod
    def partial(cls, card: Card, source: str = "") -> "HoleCards":
        return cls(HoleCardsKind.PARTIAL, cards=(card,), source=source)

    @classmethod
    def unknown(cls) -> "HoleCards":
        return cls(HoleCardsKind.UNKNOWN)

    @classmethod
    def from_range(cls, combos, source: str = "") -> "HoleCards":
        return cls(HoleCardsKind.RANGE, combos=tuple(combos), source=source)

    @property
    def is_range(self) -> bool:
        return self.kind is HoleCardsKind.RANGE

    @property
    def missing(self) -> int:
        """Hole cards this player still needs from the deck (ranges excluded)."""
        if self.kind is HoleCardsKind.PARTIAL:
            return 1
        if self.kind is HoleCardsKind.UNKNOWN:
            return 2
        return 0

    def without_dead(self, dead: set[Card]) -> "HoleCards":
        """Copy of a RANGE spec with combos touching ``dead`` removed."""
        if not self.is_range:
            return self
        return replace(self, combos=tuple(filter_dead(self.combos, dead)))

    def __str__(self) -> str:
        if self.kind is HoleCardsKind.EXACT:
            return format_cards(self.cards)
        if self.kind is HoleCardsKind.PARTIAL:
            return f"{self.cards[0]} ??"
        if self.kind is HoleCardsKind.UNKNOWN:
            return "?? ??"
        return f"{self.source} ({len(self.combos)} combos)"


def parse_hole_cards(s: str) -> HoleCards:
    """
    Parse a player's hand specification.

    Tried in order: two exact cards, one known card, empty string
    (fully unknown), then the range grammar.

    Raises:
        DuplicateCard: Both exact cards are the same card
        InvalidRangeSyntax: Text is neither one/two cards nor a valid range
    """
    source = s.strip()

    try:
        cards = parse_cards(source)
    except InvalidCardToken:
        cards = None

    if cards is not None:
        if len(cards) == 2:
            return HoleCards.exact(cards[0], cards[1], source=source)
        if len(cards) == 1:
            return HoleCards.partial(cards[0], source=source)

    if not strip_separators(source):
        return HoleCards.unknown()

    # Anything else, "AhKd,AhQd" included, must be a range
    return HoleCards.from_range(parse_range(source), source=source)
