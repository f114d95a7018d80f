"""
Tests for formatting and logging helpers and GenerationParameters.
"""
import pytest

from colour_palette.core_types import (
    ColourSpace,
    GenerationParameters,
    coerce_to_rgba,
    rgb_to_hex,
)
from colour_palette.utils import (
    debug_log,
    format_bool_on_off,
    format_number_compact,
    key_value_pairs_to_string,
    print_config_line,
    warn,
)


class TestFormatting:
    def test_bool_and_numbers(self):
        assert format_bool_on_off(True) == "on"
        assert format_bool_on_off(False) == "off"
        assert format_number_compact(12345) == "12,345"
        assert format_number_compact(30.0) == "30"
        assert format_number_compact(0.125) == "0.125"
        assert format_number_compact(None) == "auto"
        assert format_number_compact("rgb") == "rgb"

    def test_pairs(self):
        text = key_value_pairs_to_string([("Colours", 5), ("Clockwise", False)])
        assert text == "Colours: 5  Clockwise: off"


class TestLogging:
    def test_config_line_is_a_debug_line(self, capsys):
        print_config_line("polyad", [("Colours", 4), ("Clockwise", True)])
        out = capsys.readouterr().out
        assert out == "[debug] [polyad] Colours: 4  Clockwise: on\n"

    def test_debug_and_warn(self, capsys):
        debug_log("hello")
        warn("careful")
        captured = capsys.readouterr()
        assert captured.out == "[debug] hello\n"
        assert captured.err == "[warn] careful\n"


class TestGenerationParameters:
    def test_defaults_validate(self):
        params = GenerationParameters().validate()
        assert params.has_default_ranges()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"number_of_colours": 0},
            {"hue_variability": 361},
            {"saturation_variability": -1},
            {"min_brightness": 60, "max_brightness": 50},
            {"max_hue": 400},
            {"distribution_variability": -2},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GenerationParameters(**kwargs).validate()

    def test_colour_space_type_checked(self):
        with pytest.raises(TypeError):
            GenerationParameters(colour_space="rgb").validate()

    def test_as_pairs_labels(self):
        pairs = list(
            GenerationParameters(colour_space=ColourSpace.LAB).as_pairs(
                "number_of_colours", "colour_space"
            )
        )
        assert pairs == [("Number of colours", 5), ("Colour space", "lab")]


class TestHelpers:
    def test_rgb_to_hex_rounds_and_clamps(self):
        assert rgb_to_hex((254.6, -3, 300)) == "#ff00ff"

    def test_coerce_to_rgba(self):
        assert coerce_to_rgba([1, 2, 3]) == (1.0, 2.0, 3.0, 1.0)
        with pytest.raises(ValueError):
            coerce_to_rgba([1, 2, 3, 4, 5])
