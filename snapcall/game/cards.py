"""Card representation and card-token parsing."""

from dataclasses import dataclass
from enum import IntEnum

from treys import Card as TreysCard

from snapcall.errors import InvalidCardToken


class Rank(IntEnum):
    """Rank value; ACE plays high."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Suit index, in deck order."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Token characters, keyed by enum member (members hash like their ints)
RANK_STR: dict[Rank, str] = dict(zip(Rank, "23456789TJQKA"))
STR_RANK: dict[str, Rank] = {ch: rank for rank, ch in RANK_STR.items()}

SUIT_STR: dict[Suit, str] = dict(zip(Suit, "cdhs"))
STR_SUIT: dict[str, Suit] = {ch: suit for suit, ch in SUIT_STR.items()}

# Characters allowed between card tokens
SEPARATORS = " \t\r\n,"


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'th', '2C'."""
        if len(s) != 2:
            raise InvalidCardToken(f"Invalid card string: {s!r}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise InvalidCardToken(f"Invalid rank in {s!r}: {rank_char}")
        if suit_char not in STR_SUIT:
            raise InvalidCardToken(f"Invalid suit in {s!r}: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def full_deck() -> list[Card]:
    """All 52 cards in a fixed order (ranks ascending, suits within rank)."""
    return [
        Card(rank, suit)
        for rank in Rank
        for suit in Suit
    ]


DECK: tuple[Card, ...] = tuple(full_deck())


def strip_separators(s: str) -> str:
    """Remove whitespace and commas from a card string."""
    return "".join(ch for ch in s if ch not in SEPARATORS)


def parse_card(s: str) -> Card:
    """Parse a single card token, tolerating surrounding separators."""
    return Card.from_string(strip_separators(s))


def parse_cards(s: str) -> tuple[Card, ...]:
    """
    Parse a card sequence into cards.

    Tokens may be concatenated or separated by spaces/commas:
    "AhKs", "Ah Ks" and "Ah,Ks" all give (Ah, Ks). An empty
    string gives an empty tuple.
    """
    cleaned = strip_separators(s)
    if len(cleaned) % 2 != 0:
        raise InvalidCardToken(f"Invalid card string: {s!r}")

    return tuple(
        Card.from_string(cleaned[i:i + 2])
        for i in range(0, len(cleaned), 2)
    )


def format_cards(cards) -> str:
    """Space-separated card tokens."""
    return " ".join(str(c) for c in cards)
