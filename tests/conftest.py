"""Shared test fixtures for breakmap."""

import numpy as np
import pytest

from breakmap.core.color import RGBA


@pytest.fixture
def red_to_green():
    """9-color ramp from pure red to pure green."""
    return [RGBA(255 - i * 255 // 8, i * 255 // 8, 0, 255) for i in range(9)]


@pytest.fixture
def black():
    return RGBA(0, 0, 0, 255)


@pytest.fixture
def white():
    return RGBA(255, 255, 255, 255)


@pytest.fixture
def int_samples():
    """Integer raster samples 1..8, each occurring once."""
    return np.arange(1, 9, dtype=np.int32).reshape(2, 4)


@pytest.fixture
def rng():
    return np.random.default_rng(42)
