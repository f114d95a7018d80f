# colour_palette/colour_models.py
from __future__ import annotations

"""
Colour value types for the nine supported colour spaces.

Every colour is an immutable frozen dataclass carrying its native channels
and an alpha in 0..1. Conversions go through an explicit table keyed by
ColourSpace (native channels <-> unit sRGB); converting to a colour's own
space returns it unchanged.

Exports:
  ColourModel                     : shared capability (conversion, hue operators)
  RgbColour, CmykColour, HsbColour, HslColour, HsiColour, HspColour,
  LabColour, OklabColour, XyzColour
  MODEL_OF                        : ColourSpace -> model class
  convert(colour, space)          : table-driven conversion
  random_colour(space, rng=None)  : random colour in a space's native range

Hue conventions:
  - HSB/HSL/HSI/HSP store their hue; the other spaces report their HSB hue.
  - Achromatic colours have hue 0.
  - Hue operators on a non-hue space run in HSB and convert back.
"""

import dataclasses
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

import numpy as np

from . import colour_convert as cc
from .constants import (
    CMYK_MAX,
    COOLEST_HUE,
    D65_WHITE,
    HUE_MAX,
    LAB_L_MAX,
    OKLAB_L_MAX,
    PERCENT_MAX,
    RGB_MAX,
    WARMEST_HUE,
)
from .core_types import ColourSpace, HexStr, UnitRGB, check_range, rgb_to_hex
from .hue_math import circular_distance, default_rng, random_between, random_hue

C = TypeVar("C", bound="ColourModel")


# Conversion table


def _rgb_from_channels(values: np.ndarray) -> UnitRGB:
    return values / RGB_MAX


def _rgb_to_channels(rgb: UnitRGB) -> np.ndarray:
    return rgb * RGB_MAX


_TO_UNIT_RGB: Dict[ColourSpace, Callable[[np.ndarray], UnitRGB]] = {
    ColourSpace.RGB: _rgb_from_channels,
    ColourSpace.CMYK: cc.cmyk_to_rgb,
    ColourSpace.HSB: cc.hsb_to_rgb,
    ColourSpace.HSL: cc.hsl_to_rgb,
    ColourSpace.HSI: cc.hsi_to_rgb,
    ColourSpace.HSP: cc.hsp_to_rgb,
    ColourSpace.LAB: cc.lab_to_rgb,
    ColourSpace.OKLAB: cc.oklab_to_rgb,
    ColourSpace.XYZ: cc.xyz_to_rgb,
}

_FROM_UNIT_RGB: Dict[ColourSpace, Callable[[UnitRGB], np.ndarray]] = {
    ColourSpace.RGB: _rgb_to_channels,
    ColourSpace.CMYK: cc.rgb_to_cmyk,
    ColourSpace.HSB: cc.rgb_to_hsb,
    ColourSpace.HSL: cc.rgb_to_hsl,
    ColourSpace.HSI: cc.rgb_to_hsi,
    ColourSpace.HSP: cc.rgb_to_hsp,
    ColourSpace.LAB: cc.rgb_to_lab,
    ColourSpace.OKLAB: cc.rgb_to_oklab,
    ColourSpace.XYZ: cc.rgb_to_xyz,
}

MODEL_OF: Dict[ColourSpace, Type["ColourModel"]] = {}


def _register(cls: Type[C]) -> Type[C]:
    MODEL_OF[cls.space] = cls
    return cls


def convert(colour: "ColourModel", space: ColourSpace) -> "ColourModel":
    """Convert colour to space via unit sRGB, clipping to the sRGB cube."""
    if colour.space is space:
        return colour
    rgb = np.clip(colour.unit_rgb(), 0.0, 1.0)
    channels = _FROM_UNIT_RGB[space](rgb)
    return MODEL_OF[space](*(float(v) for v in channels), alpha=colour.alpha)


def random_colour(
    space: ColourSpace, rng: Optional[np.random.Generator] = None
) -> "ColourModel":
    """Random colour across the full native range of space."""
    return MODEL_OF[space].random(rng=rng)


# Base capability


class ColourModel:
    """
    Shared behaviour of every colour value type.

    Subclasses are frozen dataclasses whose fields are their channels
    followed by alpha.
    """

    space: ClassVar[ColourSpace]
    alpha: float

    # channels

    def values(self) -> Tuple[float, ...]:
        """Native channel values, without alpha."""
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))[:-1]

    def to_list_with_alpha(self) -> List[float]:
        return [*self.values(), self.alpha]

    def unit_rgb(self) -> UnitRGB:
        """This colour as unit sRGB, not clipped."""
        return _TO_UNIT_RGB[self.space](np.asarray(self.values(), dtype=np.float64))

    def to_hex(self) -> HexStr:
        return rgb_to_hex(self.to_rgb().values())

    # conversion

    def to(self, space: ColourSpace) -> "ColourModel":
        return convert(self, space)

    def cast_to(self, other: "ColourModel") -> "ColourModel":
        """Convert to the colour space other is expressed in."""
        return convert(self, other.space)

    def to_rgb(self) -> "RgbColour":
        return convert(self, ColourSpace.RGB)  # type: ignore[return-value]

    def to_cmyk(self) -> "CmykColour":
        return convert(self, ColourSpace.CMYK)  # type: ignore[return-value]

    def to_hsb(self) -> "HsbColour":
        return convert(self, ColourSpace.HSB)  # type: ignore[return-value]

    def to_hsl(self) -> "HslColour":
        return convert(self, ColourSpace.HSL)  # type: ignore[return-value]

    def to_hsi(self) -> "HsiColour":
        return convert(self, ColourSpace.HSI)  # type: ignore[return-value]

    def to_hsp(self) -> "HspColour":
        return convert(self, ColourSpace.HSP)  # type: ignore[return-value]

    def to_lab(self) -> "LabColour":
        return convert(self, ColourSpace.LAB)  # type: ignore[return-value]

    def to_oklab(self) -> "OklabColour":
        return convert(self, ColourSpace.OKLAB)  # type: ignore[return-value]

    def to_xyz(self) -> "XyzColour":
        return convert(self, ColourSpace.XYZ)  # type: ignore[return-value]

    # hue (provided by the two mixins below)

    hue: float
    saturation: float

    def with_hue(self: C, hue: float) -> C:
        """Same colour with its hue replaced, expressed in this colour's space."""
        raise NotImplementedError

    # single-colour operators

    @property
    def inverted(self: C) -> C:
        raise NotImplementedError

    @property
    def opposite(self: C) -> C:
        """This colour rotated 180 degrees around the hue wheel."""
        return self.rotate_hue(180.0)

    def rotate_hue(self: C, amount: float) -> C:
        return self.with_hue((self.hue + amount) % HUE_MAX)

    def warmer(self: C, amount: float, relative: bool = True) -> C:
        """
        Move the hue towards 90 degrees.

        If relative, amount is the percentage of the remaining distance to
        cover; otherwise it is a number of degrees.

        | hue        | result              |
        |------------|---------------------|
        | [0, 90]    | min(hue + adj, 90)  |
        | [270, 360) | (hue + adj) % 360   |
        | (90, 270)  | max(hue - adj, 90)  |
        """
        hue = self.hue
        adjustment = _hue_adjustment(hue, WARMEST_HUE, amount, relative)
        if hue <= WARMEST_HUE:
            new_hue = min(hue + adjustment, WARMEST_HUE)
        elif hue >= COOLEST_HUE:
            new_hue = (hue + adjustment) % HUE_MAX
        else:
            new_hue = max(hue - adjustment, WARMEST_HUE)
        return self.with_hue(new_hue)

    def cooler(self: C, amount: float, relative: bool = True) -> C:
        """
        Move the hue towards 270 degrees. Mirrors warmer().

        | hue        | result              |
        |------------|---------------------|
        | [0, 90]    | (hue - adj) % 360   |
        | [270, 360) | max(hue - adj, 270) |
        | (90, 270)  | min(hue + adj, 270) |
        """
        hue = self.hue
        adjustment = _hue_adjustment(hue, COOLEST_HUE, amount, relative)
        if hue <= WARMEST_HUE:
            new_hue = (hue - adjustment) % HUE_MAX
        elif hue >= COOLEST_HUE:
            new_hue = max(hue - adjustment, COOLEST_HUE)
        else:
            new_hue = min(hue + adjustment, COOLEST_HUE)
        return self.with_hue(new_hue)

    @classmethod
    def random(cls: Type[C], rng: Optional[np.random.Generator] = None) -> C:
        return RgbColour.random(rng=rng).to(cls.space)  # type: ignore[return-value]


def _hue_adjustment(hue: float, anchor: float, amount: float, relative: bool) -> float:
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    if relative:
        check_range("amount", amount, 0.0, PERCENT_MAX)
        return circular_distance(hue, anchor) * (amount / PERCENT_MAX)
    return float(amount)


class _ChannelColourModel(ColourModel):
    """Colour spaces without a hue channel: RGB, CMYK, Lab, Oklab, XYZ."""

    @property  # type: ignore[override]
    def hue(self) -> float:
        return self.to_hsb().hue

    @property  # type: ignore[override]
    def saturation(self) -> float:
        return self.to_hsb().saturation

    def with_hue(self: C, hue: float) -> C:
        hsb = dataclasses.replace(self.to_hsb(), hue=hue % HUE_MAX)
        return hsb.to(self.space)  # type: ignore[return-value]


class _HueColourModel(ColourModel):
    """Colour spaces whose first channel is a hue: HSB, HSL, HSI, HSP."""

    def with_hue(self: C, hue: float) -> C:
        return dataclasses.replace(self, hue=hue % HUE_MAX)  # type: ignore[type-var]

    @property
    def inverted(self: C) -> C:
        """Opposite hue, third channel mirrored, saturation kept."""
        h, s, v = self.values()
        inverse = ((h + 180.0) % HUE_MAX, s, PERCENT_MAX - v, self.alpha)
        return type(self)(*inverse)

    @classmethod
    def random(
        cls: Type[C],
        rng: Optional[np.random.Generator] = None,
        min_hue: float = 0.0,
        max_hue: float = HUE_MAX,
        min_saturation: float = 0.0,
        max_saturation: float = PERCENT_MAX,
        min_value: float = 0.0,
        max_value: float = PERCENT_MAX,
    ) -> C:
        """
        Random colour within the given ranges. The hue range wraps through 0
        when min_hue > max_hue; min_value/max_value bound the third channel.
        """
        hue = random_hue(min_hue, max_hue, rng)
        sat = random_between(min_saturation, max_saturation, rng)
        value = random_between(min_value, max_value, rng)
        return cls(hue, sat, value)  # type: ignore[call-arg]


# Concrete colour spaces


@_register
@dataclass(frozen=True)
class RgbColour(_ChannelColourModel):
    """sRGB with channels in 0..255."""

    space: ClassVar[ColourSpace] = ColourSpace.RGB

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def inverted(self) -> "RgbColour":
        return RgbColour(
            RGB_MAX - self.red, RGB_MAX - self.green, RGB_MAX - self.blue, self.alpha
        )

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "RgbColour":
        gen = default_rng() if rng is None else rng
        r, g, b = (int(v) for v in gen.integers(0, int(RGB_MAX) + 1, size=3))
        return cls(r, g, b)


@_register
@dataclass(frozen=True)
class CmykColour(_ChannelColourModel):
    """Cyan, magenta, yellow, black in 0..100."""

    space: ClassVar[ColourSpace] = ColourSpace.CMYK

    cyan: float
    magenta: float
    yellow: float
    black: float
    alpha: float = 1.0

    @property
    def inverted(self) -> "CmykColour":
        return CmykColour(
            CMYK_MAX - self.cyan,
            CMYK_MAX - self.magenta,
            CMYK_MAX - self.yellow,
            CMYK_MAX - self.black,
            self.alpha,
        )

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "CmykColour":
        return cls(*(random_between(0.0, CMYK_MAX, rng) for _ in range(4)))


@_register
@dataclass(frozen=True)
class HsbColour(_HueColourModel):
    """Hue, saturation, brightness (HSV)."""

    space: ClassVar[ColourSpace] = ColourSpace.HSB

    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0


@_register
@dataclass(frozen=True)
class HslColour(_HueColourModel):
    """Hue, saturation, lightness."""

    space: ClassVar[ColourSpace] = ColourSpace.HSL

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0


@_register
@dataclass(frozen=True)
class HsiColour(_HueColourModel):
    """Hue, saturation, intensity (mean of the RGB channels)."""

    space: ClassVar[ColourSpace] = ColourSpace.HSI

    hue: float
    saturation: float
    intensity: float
    alpha: float = 1.0


@_register
@dataclass(frozen=True)
class HspColour(_HueColourModel):
    """Hue, saturation, perceived brightness."""

    space: ClassVar[ColourSpace] = ColourSpace.HSP

    hue: float
    saturation: float
    perceived_brightness: float
    alpha: float = 1.0


@_register
@dataclass(frozen=True)
class LabColour(_ChannelColourModel):
    """CIE L*a*b* (D65)."""

    space: ClassVar[ColourSpace] = ColourSpace.LAB

    lightness: float
    a: float
    b: float
    alpha: float = 1.0

    @property
    def inverted(self) -> "LabColour":
        return LabColour(LAB_L_MAX - self.lightness, -self.a, -self.b, self.alpha)


@_register
@dataclass(frozen=True)
class OklabColour(_ChannelColourModel):
    """Oklab, lightness in 0..1."""

    space: ClassVar[ColourSpace] = ColourSpace.OKLAB

    lightness: float
    a: float
    b: float
    alpha: float = 1.0

    @property
    def inverted(self) -> "OklabColour":
        return OklabColour(OKLAB_L_MAX - self.lightness, -self.a, -self.b, self.alpha)


@_register
@dataclass(frozen=True)
class XyzColour(_ChannelColourModel):
    """CIE 1931 XYZ (D65), Y = 100 for white."""

    space: ClassVar[ColourSpace] = ColourSpace.XYZ

    x: float
    y: float
    z: float
    alpha: float = 1.0

    @property
    def inverted(self) -> "XyzColour":
        """Reflected through the D65 white point."""
        wx, wy, wz = D65_WHITE
        return XyzColour(wx - self.x, wy - self.y, wz - self.z, self.alpha)


__all__ = [
    "ColourModel",
    "RgbColour",
    "CmykColour",
    "HsbColour",
    "HslColour",
    "HsiColour",
    "HspColour",
    "LabColour",
    "OklabColour",
    "XyzColour",
    "MODEL_OF",
    "convert",
    "random_colour",
]
