"""Shared steps for the garden tests."""

from plant import Plant


def water_and_grow(plant: Plant, sunlight: float = 0) -> int:
    """Water ``plant``, give it ``sunlight`` hours, grow it and return the height gained."""
    before = plant.height
    plant.water()
    plant.give_sunlight(sunlight)
    plant.grow()
    return plant.height - before
