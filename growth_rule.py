from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GrowthRule:
    """
    Thresholds for a single grow cycle.

    - sunlight_threshold: hours of sunlight needed for full growth
    - full_growth: height gained when watered with enough sunlight
    - partial_growth: height gained when watered with too little sunlight
    """
    sunlight_threshold: float = 4
    full_growth: int = 2
    partial_growth: int = 1

    def growth_for(self, watered: bool, sunlight_hours: float) -> int:
        """Return how much a plant grows this cycle."""
        if not watered:
            return 0
        if sunlight_hours >= self.sunlight_threshold:
            return self.full_growth
        return self.partial_growth


DEFAULT_GROWTH_RULE = GrowthRule()
