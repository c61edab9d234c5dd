"""Structured errors raised by the equity engine.

Every error is a ``ValueError`` subclass so callers that only know about
``ValueError`` keep working, while binding layers can switch on ``kind``.
"""


class SnapCallError(ValueError):
    """Base class for all engine errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, str]:
        """Serializable form for callers that cannot handle exceptions."""
        return {"kind": self.kind, "message": self.message}


class InvalidCardToken(SnapCallError):
    """A card token could not be parsed."""


class InvalidHandSize(SnapCallError):
    """A hand passed for evaluation does not have 5-7 cards."""


class InvalidBoardLength(SnapCallError):
    """The board does not hold 0, 3, 4 or 5 cards."""


class InvalidRangeSyntax(SnapCallError):
    """A range expression could not be parsed."""


class EmptyRange(InvalidRangeSyntax):
    """A range has no combos left once dead cards are removed."""


class DuplicateCard(SnapCallError):
    """The same card appears more than once among the known cards."""


class HeroMustBeKnownOrPartial(SnapCallError):
    """The hero was given as a range or left fully unknown."""


class NoVillains(SnapCallError):
    """At least one villain is required."""


class DeckExhausted(SnapCallError):
    """There are not enough cards in the deck to deal every player."""


class NoValidSamples(SnapCallError):
    """Every deal or sample was rejected, so no equity can be computed."""
