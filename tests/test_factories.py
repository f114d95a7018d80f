"""
Tests for single-colour generation and the palette construction strategies.
"""
import numpy as np
import pytest

from colour_palette import factory
from colour_palette.colour_models import HsbColour, LabColour, RgbColour
from colour_palette.core_types import ColourSpace
from colour_palette.generator import generate_colour, generate_random_colour
from colour_palette.hue_math import circular_distance


def hues(colours):
    return [c.hue for c in colours]


def assert_hues(colours, expected, atol=1e-6):
    for actual, want in zip(hues(colours), expected):
        assert circular_distance(actual % 360, want % 360) <= atol
    assert len(colours) == len(expected)


class TestGenerateColour:
    """Seeded single-colour generation."""

    def test_offset_without_variability(self):
        colour = generate_colour(RgbColour(255, 0, 0), 60, perceived_brightness=False)
        assert isinstance(colour, RgbColour)
        np.testing.assert_allclose(colour.values(), (255, 255, 0), atol=1e-9)

    def test_out_of_gamut_perceived_brightness_is_clipped(self):
        """Bright yellow turned blue cannot keep its brightness."""
        yellow = RgbColour(255, 255, 0)
        colour = generate_colour(yellow, 180)
        np.testing.assert_allclose(colour.values(), (0, 0, 255), atol=1e-9)
        assert yellow.to_hsp().perceived_brightness == pytest.approx(94.13, abs=0.01)
        assert colour.to_hsp().perceived_brightness == pytest.approx(33.76, abs=0.01)

    def test_alpha_and_space_preserved(self):
        seed = RgbColour(255, 0, 0, alpha=0.4).to_lab()
        colour = generate_colour(seed, 120)
        assert isinstance(colour, LabColour)
        assert colour.alpha == 0.4

    def test_hue_jitter_bounded(self, rng):
        seed = HsbColour(100, 50, 50)
        for _ in range(100):
            colour = generate_colour(
                seed, 30, hue_variability=20, perceived_brightness=False, rng=rng
            )
            assert 120 <= colour.hue <= 140

    def test_saturation_clamped(self, rng):
        seed = HsbColour(0, 100, 50)
        for _ in range(100):
            colour = generate_colour(
                seed, 0, saturation_variability=100, perceived_brightness=False, rng=rng
            )
            assert 50 <= colour.saturation <= 100

    def test_bad_variability_rejected(self):
        with pytest.raises(ValueError):
            generate_colour(RgbColour(1, 2, 3), 0, brightness_variability=101)

    def test_random_colour_within_ranges(self, rng):
        for _ in range(50):
            colour = generate_random_colour(
                ColourSpace.HSB,
                min_hue=300,
                max_hue=60,
                min_saturation=20,
                max_saturation=40,
                min_brightness=30,
                max_brightness=60,
                perceived_brightness=False,
                rng=rng,
            )
            assert colour.hue >= 300 or colour.hue <= 60
            assert 20 <= colour.saturation <= 40
            assert 30 <= colour.brightness <= 60


class TestAdjacent:
    """Colours alternating around the seed."""

    def test_odd_count_includes_seed(self):
        seed = RgbColour(255, 0, 0)
        colours = factory.adjacent(
            seed, number_of_colours=3, distance=60, perceived_brightness=False
        )
        assert colours[0] is seed
        assert_hues(colours, [0, 60, 300])
        for colour in colours:
            assert colour.saturation == pytest.approx(100)

    def test_even_count_omits_seed(self):
        seed = HsbColour(0, 80, 80)
        colours = factory.adjacent(
            seed, number_of_colours=4, distance=30, perceived_brightness=False
        )
        assert seed not in colours
        assert_hues(colours, [30, 330, 60, 300])

    def test_invalid_count(self):
        with pytest.raises(ValueError):
            factory.adjacent(RgbColour(1, 2, 3), number_of_colours=0)

    def test_invalid_hue_variability(self):
        with pytest.raises(ValueError):
            factory.adjacent(RgbColour(1, 2, 3), hue_variability=400)


class TestPolyad:
    """Evenly spaced colours."""

    def test_clockwise_spacing(self):
        seed = HsbColour(10, 60, 60)
        colours = factory.polyad(seed, number_of_colours=4, perceived_brightness=False)
        assert colours[0] is seed
        assert_hues(colours, [10, 100, 190, 280])

    def test_counter_clockwise_spacing(self):
        seed = HsbColour(10, 60, 60)
        colours = factory.polyad(
            seed, number_of_colours=4, perceived_brightness=False, clockwise=False
        )
        assert_hues(colours, [10, 280, 190, 100])

    def test_saturation_unchanged(self):
        seed = RgbColour(200, 40, 90)
        colours = factory.polyad(seed, number_of_colours=5, perceived_brightness=False)
        for colour in colours:
            assert colour.saturation == pytest.approx(seed.saturation)


class TestSplitComplementary:
    """Colours around the seed's opposite."""

    def test_odd_count(self):
        colours = factory.split_complementary(
            HsbColour(0, 70, 70), number_of_colours=3, perceived_brightness=False
        )
        assert_hues(colours, [0, 210, 150])

    def test_even_count_includes_opposite(self):
        colours = factory.split_complementary(
            HsbColour(0, 70, 70), number_of_colours=4, perceived_brightness=False
        )
        assert_hues(colours, [0, 180, 210, 150])

    def test_single_colour_is_seed(self):
        seed = HsbColour(40, 70, 70)
        assert factory.split_complementary(seed, number_of_colours=1) == [seed]


class TestOpposites:
    """Pairs of colours and their opposites."""

    def test_black_and_white_inserted(self):
        black, white = RgbColour(0, 0, 0), RgbColour(255, 255, 255)
        colours = factory.opposites([black, white])
        assert len(colours) == 4
        assert colours[0] is black and colours[2] is white
        np.testing.assert_allclose(colours[1].values(), black.values(), atol=1e-9)
        np.testing.assert_allclose(colours[3].values(), white.values(), atol=1e-9)

    def test_appended_after_originals(self):
        red, green = HsbColour(0, 100, 100), HsbColour(120, 100, 100)
        colours = factory.opposites([red, green], insert_opposites=False)
        assert colours[:2] == [red, green]
        assert_hues(colours[2:], [180, 300])


class TestRandom:
    """Random palettes: fast path and hue distribution."""

    def test_fast_path_count_and_space(self, rng):
        colours = factory.random(
            8, colour_space=ColourSpace.LAB, distribute_hues=False, rng=rng
        )
        assert len(colours) == 8
        assert all(isinstance(c, LabColour) for c in colours)

    def test_fast_path_hues_unrelated(self, rng):
        colours = factory.random(8, distribute_hues=False, rng=rng)
        steps = np.diff(hues(colours)) % 360
        assert np.ptp(steps) > 1.0

    def test_distributed_hues_step_from_seed(self, rng):
        colours = factory.random(
            4,
            colour_space=ColourSpace.HSB,
            perceived_brightness=False,
            distribution_variability=0,
            rng=rng,
        )
        start = colours[0].hue
        assert_hues(colours, [start, start - 90, start - 180, start - 270])

    def test_counter_clockwise_distribution(self, rng):
        colours = factory.random(
            3,
            colour_space=ColourSpace.HSB,
            perceived_brightness=False,
            distribution_variability=0,
            clockwise=False,
            rng=rng,
        )
        start = colours[0].hue
        assert_hues(colours, [start, start + 120, start + 240])

    def test_distribution_variability_bounds_hues(self, rng):
        colours = factory.random(
            6,
            colour_space=ColourSpace.HSB,
            perceived_brightness=False,
            distribution_variability=10,
            rng=rng,
        )
        start = colours[0].hue
        for i, colour in enumerate(colours[1:], start=1):
            assert circular_distance(colour.hue, (start - 60 * i) % 360) <= 5 + 1e-9

    def test_ranges_respected(self, rng):
        colours = factory.random(
            12,
            colour_space=ColourSpace.HSB,
            min_saturation=20,
            max_saturation=40,
            min_brightness=30,
            max_brightness=60,
            perceived_brightness=False,
            rng=rng,
        )
        for colour in colours:
            assert 20 <= colour.saturation <= 40
            assert 30 <= colour.brightness <= 60

    def test_reproducible_with_same_seed(self):
        first = factory.random(5, rng=np.random.default_rng(99))
        second = factory.random(5, rng=np.random.default_rng(99))
        assert first == second

    def test_invalid_ranges(self):
        with pytest.raises(ValueError):
            factory.random(3, min_saturation=50, max_saturation=40)
        with pytest.raises(ValueError):
            factory.random(3, max_hue=400)


class TestDebugLogging:
    """Factories print one config line when debug is set."""

    def test_adjacent_debug_line(self, capsys):
        factory.adjacent(RgbColour(255, 0, 0), debug=True)
        out = capsys.readouterr().out
        assert out.startswith("[debug] [adjacent] Number of colours: 5  Distance: 30")
        assert "Perceived brightness: on" in out

    def test_silent_by_default(self, capsys):
        factory.polyad(RgbColour(255, 0, 0))
        assert capsys.readouterr().out == ""
