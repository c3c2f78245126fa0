import matplotlib

# Headless backend for plotting tests
matplotlib.use("Agg")

import pytest

from intensitylist import IntensityList


@pytest.fixture
def manager():
    intensities = IntensityList()
    yield intensities
    intensities.clear()


@pytest.fixture
def stepped(manager):
    """[[10,1],[20,2],[30,1],[40,0]]"""
    manager.update(10, 30, 1, "add")
    manager.update(20, 40, 1, "add")
    return manager
