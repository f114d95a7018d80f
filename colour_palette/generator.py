# colour_palette/generator.py
from __future__ import annotations

"""
Single-colour generation used by the palette factories.

Seeded colours are derived in HSP (perceived brightness) or HSB and
converted back into the seed's own colour space, alpha preserved.
"""

from typing import Optional, Type, Union

import numpy as np

from .colour_models import ColourModel, HsbColour, HspColour
from .constants import DEFAULT_PERCEIVED_BRIGHTNESS, HUE_MAX, PERCENT_MAX
from .core_types import ColourSpace, check_range, clamp_value
from .hue_math import jitter

_Working = Union[Type[HspColour], Type[HsbColour]]


def _working_model(perceived_brightness: bool) -> _Working:
    return HspColour if perceived_brightness else HsbColour


def generate_colour(
    seed: ColourModel,
    hue_offset: float,
    hue_variability: float = 0.0,
    saturation_variability: float = 0.0,
    brightness_variability: float = 0.0,
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
    rng: Optional[np.random.Generator] = None,
) -> ColourModel:
    """
    Colour offset from seed by hue_offset degrees, with optional jitter.

    Each variability is the full width of a uniform jitter centred on zero.
    Hue wraps mod 360; saturation and brightness are clamped to 0..100.

    In HSP the seed's perceived brightness may be out of gamut for the new
    hue; the result is clipped to the sRGB cube and comes out darker.
    """
    check_range("hue_variability", hue_variability, 0.0, HUE_MAX)
    check_range("saturation_variability", saturation_variability, 0.0, PERCENT_MAX)
    check_range("brightness_variability", brightness_variability, 0.0, PERCENT_MAX)

    model = _working_model(perceived_brightness)
    working = seed.to_hsp() if perceived_brightness else seed.to_hsb()
    hue, saturation, brightness, alpha = working.to_list_with_alpha()

    hue += hue_offset
    if hue_variability > 0:
        hue += jitter(hue_variability, rng)
    hue %= HUE_MAX

    if saturation_variability > 0:
        saturation = clamp_value(
            saturation + jitter(saturation_variability, rng), 0.0, PERCENT_MAX
        )
    if brightness_variability > 0:
        brightness = clamp_value(
            brightness + jitter(brightness_variability, rng), 0.0, PERCENT_MAX
        )

    return model(hue, saturation, brightness, alpha).to(seed.space)


def generate_random_colour(
    colour_space: ColourSpace = ColourSpace.RGB,
    min_hue: float = 0.0,
    max_hue: float = HUE_MAX,
    min_saturation: float = 0.0,
    max_saturation: float = PERCENT_MAX,
    min_brightness: float = 0.0,
    max_brightness: float = PERCENT_MAX,
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
    rng: Optional[np.random.Generator] = None,
) -> ColourModel:
    """
    Random colour within the given hue, saturation and brightness ranges,
    expressed in colour_space. min_hue > max_hue wraps through 0.
    """
    check_range("min_hue", min_hue, 0.0, HUE_MAX)
    check_range("max_hue", max_hue, 0.0, HUE_MAX)
    check_range("min_saturation", min_saturation, 0.0, max_saturation)
    check_range("max_saturation", max_saturation, 0.0, PERCENT_MAX)
    check_range("min_brightness", min_brightness, 0.0, max_brightness)
    check_range("max_brightness", max_brightness, 0.0, PERCENT_MAX)

    colour = _working_model(perceived_brightness).random(
        rng,
        min_hue=min_hue,
        max_hue=max_hue,
        min_saturation=min_saturation,
        max_saturation=max_saturation,
        min_value=min_brightness,
        max_value=max_brightness,
    )
    return colour.to(colour_space)


__all__ = ["generate_colour", "generate_random_colour"]
