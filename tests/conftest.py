"""
Shared fixtures for the colour_palette test suite.
"""
import numpy as np
import pytest

from colour_palette import RgbColour, seed_default_rng


@pytest.fixture
def rng():
    """Seeded numpy Generator for reproducible sampling."""
    return np.random.default_rng(1234)


@pytest.fixture(autouse=True)
def seeded_default_rng():
    """Reseed the process-wide generator so calls without rng= are repeatable."""
    seed_default_rng(20240101)
    yield


@pytest.fixture
def reference_colours():
    """A spread of in-gamut, chromatic and achromatic sRGB colours."""
    return [
        RgbColour(255, 0, 0),
        RgbColour(0, 255, 0),
        RgbColour(0, 0, 255),
        RgbColour(255, 200, 0),
        RgbColour(18, 140, 126),
        RgbColour(120, 60, 200),
        RgbColour(250, 128, 114),
        RgbColour(0, 0, 0),
        RgbColour(255, 255, 255),
        RgbColour(128, 128, 128),
    ]


@pytest.fixture
def chromatic_colours(reference_colours):
    """reference_colours without the greys."""
    return reference_colours[:7]
