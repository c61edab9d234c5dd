"""Community card validation."""

from snapcall.errors import DuplicateCard, InvalidBoardLength
from .cards import Card, parse_cards

VALID_BOARD_LENGTHS = (0, 3, 4, 5)

STREET_NAMES = {0: "preflop", 3: "flop", 4: "turn", 5: "river"}


def parse_board(board_str: str) -> tuple[Card, ...]:
    """
    Parse a board string into 0, 3, 4 or 5 cards.

    Only duplicates within the board itself are rejected here;
    conflicts with hole cards are checked by the caller.

    Raises:
        InvalidCardToken: If a card token is malformed
        InvalidBoardLength: If the board has 1, 2 or more than 5 cards
        DuplicateCard: If a card appears twice on the board
    """
    cards = parse_cards(board_str)

    if len(cards) not in VALID_BOARD_LENGTHS:
        raise InvalidBoardLength(
            f"Board must have 0, 3, 4, or 5 cards, got {len(cards)}"
        )

    seen: set[Card] = set()
    for card in cards:
        if card in seen:
            raise DuplicateCard(f"Duplicate board card: {card}")
        seen.add(card)

    return cards


def street_name(board: tuple[Card, ...]) -> str:
    return STREET_NAMES[len(board)]
