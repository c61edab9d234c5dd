"""
SnapCall: Texas Hold'em Equity Calculator

Computes win/tie equity for a hero against one or more villains
whose hands may be exact, half-known, unknown or given as ranges,
using exact enumeration when the deal space is small enough and
Monte Carlo simulation otherwise.
"""

__version__ = "0.1.0"

from .errors import SnapCallError
from .equity import EquityCalculator, EquityConfig, EquityResult, SolveMode, estimate_equity

__all__ = [
    "SnapCallError",
    "EquityCalculator",
    "EquityConfig",
    "EquityResult",
    "SolveMode",
    "estimate_equity",
]
