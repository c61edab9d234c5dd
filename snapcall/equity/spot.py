"""Validated input of one equity calculation."""

from dataclasses import dataclass
from typing import Sequence

from snapcall.errors import (
    DeckExhausted, DuplicateCard, EmptyRange, HeroMustBeKnownOrPartial,
    InvalidCardToken, InvalidRangeSyntax, NoVillains,
)
from snapcall.game.board import parse_board
from snapcall.game.cards import Card
from snapcall.game.hands import HoleCards, HoleCardsKind, parse_hole_cards


@dataclass(frozen=True)
class Spot:
    """
    Board plus every player's hole-card spec, hero first.

    ``dead`` holds every fixed known card: the board, both cards
    of each EXACT hand and the known card of each PARTIAL hand.
    Range combos have already been filtered against it.
    """
    board: tuple[Card, ...]
    players: tuple[HoleCards, ...]
    dead: frozenset[Card]

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def missing_board(self) -> int:
        return 5 - len(self.board)

    @property
    def range_players(self) -> list[int]:
        return [i for i, p in enumerate(self.players) if p.is_range]

    @property
    def non_range_slots(self) -> int:
        """Cards dealt from the pool outside of ranges (holes then board)."""
        return sum(p.missing for p in self.players) + self.missing_board


def _parse_hero(hero: str) -> HoleCards:
    try:
        spec = parse_hole_cards(hero)
    except InvalidRangeSyntax as e:
        raise InvalidCardToken(f"Hero hand is not valid cards: {hero!r}") from e

    if spec.kind not in (HoleCardsKind.EXACT, HoleCardsKind.PARTIAL):
        raise HeroMustBeKnownOrPartial(
            f"Hero must be two cards or one card, got {hero!r}"
        )
    return spec


def prepare_spot(board: str, hero: str, villains: Sequence[str]) -> Spot:
    """
    Parse and validate all inputs of a calculation.

    Raises:
        NoVillains: If ``villains`` is empty
        InvalidCardToken / InvalidBoardLength / InvalidRangeSyntax: On bad text
        HeroMustBeKnownOrPartial: If the hero is a range or unknown
        DuplicateCard: If a known card is used twice
        DeckExhausted: If the deck cannot seat every player
        EmptyRange: If a range loses all combos to dead cards
    """
    if not villains:
        raise NoVillains("Need at least 1 villain")

    board_cards = parse_board(board)
    players = [_parse_hero(hero)]
    players.extend(parse_hole_cards(v) for v in villains)

    dead: set[Card] = set(board_cards)
    for idx, spec in enumerate(players):
        for card in spec.cards:
            if card in dead:
                raise DuplicateCard(
                    f"Duplicate known card {card} for player {idx + 1}"
                )
            dead.add(card)

    if len(board_cards) + 2 * len(players) > 52:
        raise DeckExhausted(
            f"Too many players/cards for a 52-card deck: "
            f"{len(players)} players, {len(board_cards)} board cards"
        )

    filtered = []
    for idx, spec in enumerate(players):
        spec = spec.without_dead(dead)
        if spec.is_range and not spec.combos:
            raise EmptyRange(
                f"Range {spec.source!r} for player {idx + 1} has no combos "
                f"left after removing known cards"
            )
        filtered.append(spec)

    return Spot(
        board=board_cards,
        players=tuple(filtered),
        dead=frozenset(dead),
    )
