import os

# Headless pygame for the viewer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from garden_plot import GardenPlot
from plant import Plant


@pytest.fixture
def plot():
    return GardenPlot()


@pytest.fixture
def tomato():
    return Plant("Tomato")


@pytest.fixture
def carrot():
    return Plant("Carrot", height=2)


@pytest.fixture
def sunflower():
    return Plant("Sunflower", height=5)
