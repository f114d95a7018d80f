# colour_palette/factory.py
from __future__ import annotations

"""
Palette construction strategies.

Each factory validates its parameters through GenerationParameters and
returns a new list of colours; ColourPalette wraps these with its
growable/unique flags.

Exports:
  adjacent(seed, ...)            : seed plus colours at +d, -d, +2d, -2d, ...
  polyad(seed, ...)              : n colours evenly spaced around the wheel
  random(n, ...)                 : random colours, optionally hue-distributed
  split_complementary(seed, ...) : seed plus colours around its opposite
  opposites(colours, ...)        : every colour together with its opposite

Passing debug=True prints one config line per call, e.g.
  [debug] [polyad] Number of colours: 4  Clockwise: on  Perceived brightness: on
"""

import math
from typing import Iterable, List, Optional

import numpy as np

from .colour_models import ColourModel, random_colour
from .constants import (
    DEFAULT_DISTANCE,
    DEFAULT_NUMBER_OF_COLOURS,
    DEFAULT_PERCEIVED_BRIGHTNESS,
    DEFAULT_SPLIT_NUMBER_OF_COLOURS,
    DISTRIBUTION_VARIABILITY_RATIO,
    HUE_MAX,
    PERCENT_MAX,
)
from .core_types import ColourSpace, GenerationParameters
from .generator import generate_colour, generate_random_colour
from .utils import print_config_line, warn

_VARIABILITY_FIELDS = (
    "hue_variability",
    "saturation_variability",
    "brightness_variability",
    "perceived_brightness",
)


def _alternating_offset(index: int, distance: float) -> float:
    """Offset of the index-th generated colour: +d, -d, +2d, -2d, ..."""
    sign = -1.0 if index % 2 == 0 else 1.0
    return sign * distance * math.ceil(index / 2)


def _varied(
    seed: ColourModel,
    offset: float,
    params: GenerationParameters,
    rng: Optional[np.random.Generator],
) -> ColourModel:
    return generate_colour(
        seed,
        offset,
        hue_variability=params.hue_variability,
        saturation_variability=params.saturation_variability,
        brightness_variability=params.brightness_variability,
        perceived_brightness=params.perceived_brightness,
        rng=rng,
    )


def adjacent(
    seed: ColourModel,
    number_of_colours: int = DEFAULT_NUMBER_OF_COLOURS,
    distance: float = DEFAULT_DISTANCE,
    hue_variability: float = 0.0,
    saturation_variability: float = 0.0,
    brightness_variability: float = 0.0,
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
    rng: Optional[np.random.Generator] = None,
    debug: bool = False,
) -> List[ColourModel]:
    """
    Colours adjacent to seed on the hue wheel.

    An odd count includes seed first; the generated colours alternate
    around it at +distance, -distance, +2*distance, ...
    """
    params = GenerationParameters(
        number_of_colours=number_of_colours,
        distance=distance,
        hue_variability=hue_variability,
        saturation_variability=saturation_variability,
        brightness_variability=brightness_variability,
        perceived_brightness=perceived_brightness,
    ).validate()
    if debug:
        print_config_line(
            "adjacent",
            params.as_pairs("number_of_colours", "distance", *_VARIABILITY_FIELDS),
        )

    colours: List[ColourModel] = []
    remaining = number_of_colours
    if number_of_colours % 2 == 1:
        colours.append(seed)
        remaining -= 1

    for i in range(1, remaining + 1):
        colours.append(_varied(seed, _alternating_offset(i, distance), params, rng))
    return colours


def polyad(
    seed: ColourModel,
    number_of_colours: int = DEFAULT_NUMBER_OF_COLOURS,
    hue_variability: float = 0.0,
    saturation_variability: float = 0.0,
    brightness_variability: float = 0.0,
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
    clockwise: bool = True,
    rng: Optional[np.random.Generator] = None,
    debug: bool = False,
) -> List[ColourModel]:
    """Seed followed by colours spaced 360 / n degrees apart."""
    params = GenerationParameters(
        number_of_colours=number_of_colours,
        hue_variability=hue_variability,
        saturation_variability=saturation_variability,
        brightness_variability=brightness_variability,
        perceived_brightness=perceived_brightness,
        clockwise=clockwise,
    ).validate()
    if debug:
        print_config_line(
            "polyad",
            params.as_pairs("number_of_colours", "clockwise", *_VARIABILITY_FIELDS),
        )

    step = HUE_MAX / number_of_colours
    if not clockwise:
        step = -step

    colours: List[ColourModel] = [seed]
    for i in range(1, number_of_colours):
        colours.append(_varied(seed, step * i, params, rng))
    return colours


def random(
    number_of_colours: int,
    colour_space: ColourSpace = ColourSpace.RGB,
    min_hue: float = 0.0,
    max_hue: float = HUE_MAX,
    min_saturation: float = 0.0,
    max_saturation: float = PERCENT_MAX,
    min_brightness: float = 0.0,
    max_brightness: float = PERCENT_MAX,
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
    distribute_hues: bool = True,
    distribution_variability: Optional[float] = None,
    clockwise: bool = True,
    rng: Optional[np.random.Generator] = None,
    debug: bool = False,
) -> List[ColourModel]:
    """
    Randomly generated colours.

    Without hue distribution and with unconstrained ranges, every colour is
    an independent random value of colour_space. Otherwise a random seed is
    drawn within the ranges and each following hue steps by
    (min_hue - max_hue) / n (negated counter-clockwise), sampled within
    distribution_variability degrees of the stepped hue. Saturation and
    brightness stay within their ranges throughout.
    """
    params = GenerationParameters(
        number_of_colours=number_of_colours,
        colour_space=colour_space,
        min_hue=min_hue,
        max_hue=max_hue,
        min_saturation=min_saturation,
        max_saturation=max_saturation,
        min_brightness=min_brightness,
        max_brightness=max_brightness,
        perceived_brightness=perceived_brightness,
        distribute_hues=distribute_hues,
        distribution_variability=distribution_variability,
        clockwise=clockwise,
    ).validate()
    if debug:
        print_config_line(
            "random",
            params.as_pairs(
                "number_of_colours",
                "colour_space",
                "distribute_hues",
                "distribution_variability",
                "min_hue",
                "max_hue",
            ),
        )

    if not distribute_hues and params.has_default_ranges():
        return [random_colour(colour_space, rng) for _ in range(number_of_colours)]

    step = (min_hue - max_hue) / number_of_colours
    if not clockwise:
        step = -step
    if step == 0 and number_of_colours > 1:
        warn(f"hue range {min_hue}..{max_hue} is empty; colours will share a hue")

    if distribution_variability is None:
        distribution_variability = abs(step) * DISTRIBUTION_VARIABILITY_RATIO
    radius = distribution_variability / 2.0

    def sample(lo_hue: float, hi_hue: float) -> ColourModel:
        return generate_random_colour(
            colour_space,
            lo_hue,
            hi_hue,
            min_saturation,
            max_saturation,
            min_brightness,
            max_brightness,
            perceived_brightness,
            rng,
        )

    seed = sample(min_hue, max_hue)
    colours: List[ColourModel] = [seed]
    hue = seed.hue
    for _ in range(1, number_of_colours):
        hue += step
        colours.append(sample((hue - radius) % HUE_MAX, (hue + radius) % HUE_MAX))
    return colours


def split_complementary(
    seed: ColourModel,
    number_of_colours: int = DEFAULT_SPLIT_NUMBER_OF_COLOURS,
    distance: float = DEFAULT_DISTANCE,
    hue_variability: float = 0.0,
    saturation_variability: float = 0.0,
    brightness_variability: float = 0.0,
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
    rng: Optional[np.random.Generator] = None,
    debug: bool = False,
) -> List[ColourModel]:
    """
    Seed, then colours spread around its opposite.

    An even count includes the opposite itself; the rest alternate around
    it at +distance, -distance, +2*distance, ...
    """
    params = GenerationParameters(
        number_of_colours=number_of_colours,
        distance=distance,
        hue_variability=hue_variability,
        saturation_variability=saturation_variability,
        brightness_variability=brightness_variability,
        perceived_brightness=perceived_brightness,
    ).validate()
    if debug:
        print_config_line(
            "split_complementary",
            params.as_pairs("number_of_colours", "distance", *_VARIABILITY_FIELDS),
        )

    colours: List[ColourModel] = [seed]
    opposite = seed.opposite
    remaining = number_of_colours
    if number_of_colours % 2 == 0:
        colours.append(opposite)
        remaining -= 1

    for i in range(1, remaining):
        colours.append(
            _varied(opposite, _alternating_offset(i, distance), params, rng)
        )
    return colours


def opposites(
    colours: Iterable[ColourModel], insert_opposites: bool = True
) -> List[ColourModel]:
    """
    Every colour and its opposite: interleaved pairs when insert_opposites,
    otherwise all originals followed by all opposites.
    """
    originals = list(colours)
    if insert_opposites:
        result: List[ColourModel] = []
        for colour in originals:
            result.extend((colour, colour.opposite))
        return result
    return originals + [colour.opposite for colour in originals]


__all__ = ["adjacent", "polyad", "random", "split_complementary", "opposites"]
