"""
Tests for property sorts, hue-wheel sorts and the similarity/difference tour.
"""
import pytest

from colour_palette import query, sorting
from colour_palette.colour_models import HsbColour, HspColour, RgbColour
from colour_palette.constants import NAMED_HUES
from colour_palette.core_types import ColourSortingProperty as P
from colour_palette.hue_math import circular_distance

PROPERTY_KEYS = {
    P.BRIGHTEST: (query.perceived_brightness_of, True),
    P.DIMMEST: (query.perceived_brightness_of, False),
    P.LIGHTEST: (query.lightness_of, True),
    P.DARKEST: (query.lightness_of, False),
    P.MOST_INTENSE: (query.intensity_of, True),
    P.LEAST_INTENSE: (query.intensity_of, False),
    P.DEEPEST: (query.saturation_of, True),
    P.DULLEST: (query.saturation_of, False),
    P.RICHEST: (query.richness_of, True),
    P.MUTED: (query.richness_of, False),
}


class TestSortBy:
    """Property sorts are monotonic and stable."""

    @pytest.mark.parametrize("prop", list(PROPERTY_KEYS))
    def test_monotonic(self, reference_colours, prop):
        key, descending = PROPERTY_KEYS[prop]
        values = [key(c) for c in sorting.sort_by(reference_colours, prop)]
        for a, b in zip(values, values[1:]):
            assert (a >= b) if descending else (a <= b)

    @pytest.mark.parametrize("name", list(NAMED_HUES))
    def test_named_hue_distance_non_decreasing(self, reference_colours, name):
        ordered = sorting.sort_by(reference_colours, P(name))
        distances = [circular_distance(c.hue, NAMED_HUES[name]) for c in ordered]
        assert distances == sorted(distances)

    def test_stable_on_equal_keys(self):
        first = RgbColour(40, 40, 40)
        second = RgbColour(40, 40, 40, alpha=0.3)
        bright = RgbColour(255, 255, 255)
        assert sorting.sort_by([first, bright, second], P.DIMMEST) == [
            first,
            second,
            bright,
        ]
        ordered = sorting.sort_by([first, bright, second], P.BRIGHTEST)
        assert ordered[1] is first and ordered[2] is second

    def test_short_input_unchanged(self):
        assert sorting.sort_by([], P.BRIGHTEST) == []
        assert sorting.sort_by([RgbColour(1, 2, 3)], P.SIMILARITY) == [
            RgbColour(1, 2, 3)
        ]

    def test_rejects_unknown_property(self):
        with pytest.raises(TypeError):
            sorting.sort_by([RgbColour(1, 2, 3), RgbColour(3, 2, 1)], "brightest")


class TestSortByHue:
    """Directional hue-wheel ordering."""

    def _palette(self):
        return [HsbColour(h, 50, 50) for h in (200, 10, 300, 50)]

    def test_clockwise_from_zero(self):
        ordered = sorting.sort_by_hue(self._palette())
        assert [c.hue for c in ordered] == [300, 200, 50, 10]

    def test_clockwise_from_start(self):
        ordered = sorting.sort_by_hue(self._palette(), starting_from=100)
        assert [c.hue for c in ordered] == [50, 10, 300, 200]

    def test_counter_clockwise_from_start(self):
        ordered = sorting.sort_by_hue(
            self._palette(), starting_from=100, clockwise=False
        )
        assert [c.hue for c in ordered] == [10, 50, 200, 300]

    def test_start_out_of_range(self):
        with pytest.raises(ValueError):
            sorting.sort_by_hue(self._palette(), starting_from=400)


class TestTour:
    """Greedy similarity/difference ordering with first-found tie-breaks."""

    def _palette(self):
        # equal saturation and brightness: difference is the hue distance
        c, a, d, b = (HspColour(h, 50, 50) for h in (180, 0, 200, 10))
        return [c, a, d, b], {"a": a, "b": b, "c": c, "d": d}

    def test_similarity(self):
        colours, named = self._palette()
        expected = [named[k] for k in "abcd"]
        assert sorting.sort_by_similarity(colours) == expected
        assert sorting.sort_by(colours, P.SIMILARITY) == expected

    def test_difference(self):
        colours, named = self._palette()
        expected = [named[k] for k in "acbd"]
        assert sorting.sort_by_difference(colours) == expected
        assert sorting.sort_by(colours, P.DIFFERENCE) == expected

    def test_tour_is_a_permutation(self, reference_colours):
        ordered = sorting.sort_by_similarity(reference_colours)
        assert sorted(map(id, ordered)) == sorted(map(id, reference_colours))

    def test_two_colours(self):
        a, b = RgbColour(255, 0, 0), RgbColour(0, 0, 255)
        assert sorting.sort_by_similarity([a, b]) == [a, b]
