"""Equity engine configuration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EquityConfig:
    """Configuration for equity calculations."""
    default_iterations: int = 10_000  # Budget used when a call passes 0
    max_range_attempts: int = 100     # Rejection-sampling draws per range player
    seed: Optional[int] = None        # Monte Carlo seed (None = fresh entropy)

    def resolve_iterations(self, iterations: int) -> int:
        """Per-call iteration budget; 0 means the default."""
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        return iterations or self.default_iterations
