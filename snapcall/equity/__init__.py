"""Equity engine module."""

from .config import EquityConfig
from .scoring import EquityResult, SolveMode
from .spot import Spot, prepare_spot
from .selector import ModePlan, select_mode
from .calculator import EquityCalculator, estimate_equity

__all__ = [
    "EquityConfig",
    "EquityResult",
    "SolveMode",
    "Spot",
    "prepare_spot",
    "ModePlan",
    "select_mode",
    "EquityCalculator",
    "estimate_equity",
]
