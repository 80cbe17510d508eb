from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from plant import Plant


class GardenPlot:
    """
    An ordered, append-only collection of plants.

    The plot keeps the caller's Plant objects, so changes made through any
    handle are visible here.
    """

    def __init__(self):
        self.plants: List[Plant] = []

    def __len__(self) -> int:
        return len(self.plants)

    def __iter__(self) -> Iterator[Plant]:
        return iter(self.plants)

    def add_plant(self, plant: Plant) -> None:
        self.plants.append(plant)

    def tallest_plant(self) -> Optional[Plant]:
        """Return the tallest plant, the earliest one on ties, or None if empty."""
        tallest: Optional[Plant] = None
        for p in self.plants:
            if tallest is None or p.height > tallest.height:
                tallest = p
        return tallest

    def all_watered(self) -> bool:
        # True for an empty plot
        return all(p.watered for p in self.plants)

    def to_dict(self) -> Dict[str, Any]:
        return {"plants": [p.to_dict() for p in self.plants]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GardenPlot":
        if not isinstance(data, dict):
            raise ValueError("garden data must be a mapping")
        items = data.get("plants", [])
        if not isinstance(items, list):
            raise ValueError("plants must be a list")
        plot = cls()
        for item in items:
            plot.add_plant(Plant.from_dict(item))
        return plot
