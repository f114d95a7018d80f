# colour_palette/core_types.py
from __future__ import annotations

"""
Core type aliases, enums, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import (
    DEFAULT_DISTANCE,
    DEFAULT_NUMBER_OF_COLOURS,
    DEFAULT_PERCEIVED_BRIGHTNESS,
    HUE_MAX,
    PERCENT_MAX,
    RGB_MAX,
)

# Basic aliases

HexStr = str

UnitRGB = NDArray[np.float64]  # (..., 3) sRGB in 0..1
Channels = NDArray[np.float64]  # (..., 3) or (..., 4) native channels

# Enums


class ColourSpace(Enum):
    """The nine supported colour spaces."""

    CMYK = "cmyk"
    HSI = "hsi"
    HSL = "hsl"
    HSP = "hsp"
    HSB = "hsb"
    LAB = "lab"
    OKLAB = "oklab"
    RGB = "rgb"
    XYZ = "xyz"


class ColourSortingProperty(Enum):
    """Properties a palette can be sorted by."""

    BRIGHTEST = "brightest"
    DIMMEST = "dimmest"
    LIGHTEST = "lightest"
    DARKEST = "darkest"
    MOST_INTENSE = "most_intense"
    LEAST_INTENSE = "least_intense"
    DEEPEST = "deepest"
    DULLEST = "dullest"
    RICHEST = "richest"
    MUTED = "muted"
    RED = "red"
    RED_ORANGE = "red_orange"
    ORANGE = "orange"
    YELLOW_ORANGE = "yellow_orange"
    YELLOW = "yellow"
    YELLOW_GREEN = "yellow_green"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    BLUE_VIOLET = "blue_violet"
    VIOLET = "violet"
    MAGENTA = "magenta"
    SIMILARITY = "similarity"
    DIFFERENCE = "difference"


# Value objects


@dataclass(frozen=True)
class HueInterval:
    """Closed hue interval in degrees with wrap-around semantics."""

    lo: float  # [0, 360]
    hi: float  # [0, 360]

    @property
    def span(self) -> float:
        """Width of the interval, walking upwards from lo to hi."""
        if self.lo <= self.hi:
            return self.hi - self.lo
        return (HUE_MAX - self.lo) + self.hi


@dataclass(frozen=True)
class GenerationParameters:
    """
    Configuration shared by the palette factories.

    Only the fields a factory uses matter to it; validate() checks all of
    them against their domains so any factory can build one and call it.
    """

    number_of_colours: int = DEFAULT_NUMBER_OF_COLOURS
    distance: float = DEFAULT_DISTANCE
    hue_variability: float = 0.0
    saturation_variability: float = 0.0
    brightness_variability: float = 0.0
    perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS
    clockwise: bool = True
    colour_space: ColourSpace = ColourSpace.RGB
    min_hue: float = 0.0
    max_hue: float = HUE_MAX
    min_saturation: float = 0.0
    max_saturation: float = PERCENT_MAX
    min_brightness: float = 0.0
    max_brightness: float = PERCENT_MAX
    distribute_hues: bool = True
    distribution_variability: Optional[float] = None

    def validate(self) -> "GenerationParameters":
        """Raise ValueError for any value outside its domain. Returns self."""
        if self.number_of_colours <= 0:
            raise ValueError(
                f"number_of_colours must be > 0, got {self.number_of_colours}"
            )
        check_range("hue_variability", self.hue_variability, 0.0, HUE_MAX)
        check_range(
            "saturation_variability", self.saturation_variability, 0.0, PERCENT_MAX
        )
        check_range(
            "brightness_variability", self.brightness_variability, 0.0, PERCENT_MAX
        )
        check_range("min_hue", self.min_hue, 0.0, HUE_MAX)
        check_range("max_hue", self.max_hue, 0.0, HUE_MAX)
        check_range("min_saturation", self.min_saturation, 0.0, self.max_saturation)
        check_range("max_saturation", self.max_saturation, 0.0, PERCENT_MAX)
        check_range("min_brightness", self.min_brightness, 0.0, self.max_brightness)
        check_range("max_brightness", self.max_brightness, 0.0, PERCENT_MAX)
        if (
            self.distribution_variability is not None
            and self.distribution_variability < 0
        ):
            raise ValueError(
                "distribution_variability must be >= 0, "
                f"got {self.distribution_variability}"
            )
        if not isinstance(self.colour_space, ColourSpace):
            raise TypeError(
                f"colour_space must be a ColourSpace, got {self.colour_space!r}"
            )
        return self

    def has_default_ranges(self) -> bool:
        """True when the hue, saturation and brightness ranges are unconstrained."""
        return (
            self.min_hue == 0
            and self.max_hue == HUE_MAX
            and self.min_saturation == 0
            and self.max_saturation == PERCENT_MAX
            and self.min_brightness == 0
            and self.max_brightness == PERCENT_MAX
        )

    def as_pairs(self, *names: str) -> Iterator[Tuple[str, Any]]:
        """Yield (label, value) pairs for the named fields, for config lines."""
        for name in names:
            value = getattr(self, name)
            if isinstance(value, ColourSpace):
                value = value.value
            label = name.replace("_", " ").capitalize()
            yield label, value


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def check_range(name: str, value: float, lo: float, hi: float) -> float:
    """Return value if lo <= value <= hi, else raise ValueError naming it."""
    if not lo <= value <= hi:
        raise ValueError(f"{name} must be within [{lo}, {hi}], got {value}")
    return value


def rgb_to_hex(rgb: Sequence[float]) -> HexStr:
    """RGB (0..255, floats allowed) to lowercase hex string '#rrggbb'."""
    r, g, b = (int(round(clamp_value(float(c), 0.0, RGB_MAX))) for c in rgb[:3])
    return f"#{r:02x}{g:02x}{b:02x}"


def coerce_to_rgba(
    value: Union[Sequence[float], NDArray[np.generic]],
) -> Tuple[float, float, float, float]:
    """
    Coerce a 3- or 4-length sequence or array to (r, g, b, alpha).
    RGB channels are 0..255; a fourth value is alpha in 0..1.
    """
    values: List[float] = [float(v) for v in np.asarray(value).ravel()]
    if len(values) not in (3, 4):
        raise ValueError(f"expected 3 or 4 channel values, got {len(values)}")
    alpha = values[3] if len(values) == 4 else 1.0
    return (values[0], values[1], values[2], alpha)


__all__ = [
    # aliases / types
    "HexStr",
    "UnitRGB",
    "Channels",
    # enums
    "ColourSpace",
    "ColourSortingProperty",
    # value objects
    "HueInterval",
    "GenerationParameters",
    # helpers
    "clamp_value",
    "check_range",
    "rgb_to_hex",
    "coerce_to_rgba",
]
