"""
Tests for whole-palette transforms.
"""
import itertools

import numpy as np
import pytest

from colour_palette import transform
from colour_palette.colour_models import HsbColour, LabColour, RgbColour
from colour_palette.core_types import ColourSpace


def assert_same_colours(actual, expected, atol=1e-6):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert type(a) is type(e)
        np.testing.assert_allclose(a.values(), e.values(), atol=atol)


class TestInvolutions:
    """Round-trip laws."""

    def test_invert_twice(self, reference_colours):
        twice = transform.invert(transform.invert(reference_colours))
        assert_same_colours(twice, reference_colours)

    def test_rotate_zero_is_identity(self, reference_colours):
        assert_same_colours(transform.rotate_hue(reference_colours, 0), reference_colours)

    def test_opposite_twice_restores_hue(self, chromatic_colours):
        twice = transform.opposite(transform.opposite(chromatic_colours))
        assert_same_colours(twice, chromatic_colours)

    @pytest.mark.parametrize(
        "source, target", list(itertools.product(ColourSpace, repeat=2))
    )
    def test_colour_space_round_trip(self, reference_colours, source, target):
        """Converting to any space and back restores the channels."""
        start = [c.to(source) for c in reference_colours]
        there = transform.to_colour_space(start, target)
        assert all(c.space is target for c in there)
        back = transform.to_colour_space(there, source)
        assert_same_colours(back, start)


class TestWarmerCooler:
    """Palette-wide hue shifts respect their caps."""

    def test_warmer_never_passes_90_from_either_side(self, rng):
        colours = [HsbColour(h, 50, 50) for h in rng.uniform(0, 360, 50)]
        for before, after in zip(colours, transform.warmer(colours, 60)):
            if before.hue <= 90:
                assert before.hue <= after.hue <= 90
            elif before.hue < 270:
                assert 90 <= after.hue <= before.hue

    def test_cooler_never_passes_270_from_either_side(self, rng):
        colours = [HsbColour(h, 50, 50) for h in rng.uniform(0, 360, 50)]
        for before, after in zip(colours, transform.cooler(colours, 60)):
            if 90 < before.hue < 270:
                assert before.hue <= after.hue <= 270
            elif before.hue >= 270:
                assert 270 <= after.hue <= before.hue

    def test_absolute_degrees(self):
        result = transform.warmer([HsbColour(300, 50, 50)], 20, relative=False)
        assert result[0].hue == pytest.approx(320)

    def test_preconditions(self):
        colours = [HsbColour(10, 50, 50)]
        with pytest.raises(ValueError):
            transform.warmer(colours, -5)
        with pytest.raises(ValueError):
            transform.cooler(colours, 101)
        # degrees above 100 are fine when absolute
        transform.cooler(colours, 150, relative=False)

    def test_preconditions_checked_for_empty_input(self):
        with pytest.raises(ValueError):
            transform.warmer([], -1)


class TestConversion:
    def test_rejects_non_enum(self):
        with pytest.raises(TypeError):
            transform.to_colour_space([RgbColour(1, 2, 3)], "lab")

    def test_returns_new_list(self):
        colours = [RgbColour(10, 20, 30)]
        converted = transform.to_colour_space(colours, ColourSpace.LAB)
        assert converted is not colours
        assert isinstance(converted[0], LabColour)
        assert isinstance(colours[0], RgbColour)
