import pytest

from rectfit import config
from rectfit.primitives import Rect


@pytest.fixture
def unit():
    return Rect.from_coords(0, 0, 1, 1)  # w: 1, h: 1


@pytest.fixture
def small():
    return Rect.from_coords(1, 2, 3, 5)  # w: 2, h: 3


@pytest.fixture
def large():
    return Rect.from_coords(1, 2, 5, 8)  # w: 4, h: 6


@pytest.fixture
def propagate(monkeypatch):
    """Switch the degenerate policy to IEEE propagation for one test."""
    monkeypatch.setitem(config.NUMERIC, 'on_degenerate', 'propagate')
