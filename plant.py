from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict

from growth_rule import DEFAULT_GROWTH_RULE, GrowthRule

_LOGGER = logging.getLogger(__name__)


class Plant:
    """
    A single plant in a garden plot.

    Stores:
    - name: fixed at construction
    - height: only ever raised by grow()
    - watered: set by water(), cleared by grow()
    - sunlight_hours: accumulated by give_sunlight(), cleared by grow()
    """

    def __init__(
        self,
        name: str,
        height: float = 0,
        watered: bool = False,
        sunlight_hours: float = 0,
        rule: GrowthRule = DEFAULT_GROWTH_RULE,
    ):
        if height < 0:
            raise ValueError("height must be non-negative")
        if sunlight_hours < 0:
            raise ValueError("sunlight_hours must be non-negative")
        self._name = name
        self.height = height
        self.watered = watered
        self.sunlight_hours = sunlight_hours
        self.rule = rule

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return (
            f"Plant({self._name!r}, height={self.height}, "
            f"watered={self.watered}, sunlight_hours={self.sunlight_hours})"
        )

    def water(self) -> None:
        self.watered = True

    def give_sunlight(self, hours: float) -> None:
        if hours < 0:
            raise ValueError("hours must be non-negative")
        self.sunlight_hours += hours

    def grow(self) -> int:
        """
        Run one grow cycle and return the height gained.

        Watering and sunlight are consumed even when the plant does not grow.
        """
        gained = self.rule.growth_for(self.watered, self.sunlight_hours)
        self.height += gained
        _LOGGER.debug(
            "%s grew by %s (watered=%s, sunlight=%s)",
            self._name,
            gained,
            self.watered,
            self.sunlight_hours,
        )
        self.watered = False
        self.sunlight_hours = 0
        return gained

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "height": self.height,
            "watered": self.watered,
            "sunlight_hours": self.sunlight_hours,
            "rule": asdict(self.rule),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Plant":
        """
        Build a plant from to_dict() output.

        Raises ValueError for malformed entries, KeyError when the name is missing.
        """
        if not isinstance(data, dict):
            raise ValueError("plant entry must be a mapping")
        watered = data.get("watered", False)
        if not isinstance(watered, bool):
            raise ValueError("watered must be a bool")
        rule_data = data.get("rule")
        if rule_data is None:
            rule = DEFAULT_GROWTH_RULE
        elif isinstance(rule_data, dict):
            rule = GrowthRule(**rule_data)
        else:
            raise ValueError("rule must be a mapping")
        return cls(
            str(data["name"]),
            height=data.get("height", 0),
            watered=watered,
            sunlight_hours=data.get("sunlight_hours", 0),
            rule=rule,
        )
