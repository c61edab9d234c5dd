"""Pot odds."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PotOdds:
    """Break-even numbers for a call."""
    pot: float
    bet: float
    call: float

    @property
    def total_pot(self) -> float:
        """Pot after the bet and our call."""
        return self.pot + self.bet + self.call

    @property
    def required_equity(self) -> float:
        """Equity (percent) needed for the call to break even."""
        return self.call / self.total_pot * 100.0


def pot_odds(pot: float, bet: float, call: Optional[float] = None) -> PotOdds:
    """
    Compute pot odds for calling a bet.

    Args:
        pot: Pot before the opponent's bet
        bet: Opponent's bet
        call: Amount we must call (defaults to the bet)

    Returns:
        PotOdds
    """
    if call is None:
        call = bet
    if pot < 0:
        raise ValueError(f"Pot must be non-negative, got {pot}")
    if bet <= 0 or call <= 0:
        raise ValueError("Bet and call amounts must be positive")
    return PotOdds(pot=pot, bet=bet, call=call)
