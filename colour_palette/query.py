# colour_palette/query.py
from __future__ import annotations

"""
Palette queries: single-pass reductions, nearest/furthest lookup and the
pairwise colour difference.

Reductions are left folds over the palette. "Most" reductions keep the
accumulator unless the next colour is strictly greater, "least" reductions
keep it only while it is strictly smaller, so ties resolve the way a
pairwise fold does: brightest/lightest/... keep the earlier colour on a tie,
dimmest/darkest/... take the later one. Named-hue lookups keep the earlier
colour on a tie.

Exports:
  brightest, dimmest           : HSP perceived brightness
  lightest, darkest            : HSL lightness
  most_intense, least_intense  : HSI intensity
  deepest, dullest             : saturation
  richest, muted               : HSB saturation + brightness
  nearest_to_hue(colours, hue) : named-hue lookups use this
  colour_difference(a, b)
  closest(colours, colour), furthest(colours, colour)
  difference_matrix(colours)   : n x n, NaN diagonal
"""

from functools import reduce
from typing import Callable, List, Sequence

import numpy as np

from .colour_models import ColourModel
from .constants import HUE_MAX, NAMED_HUES
from .core_types import check_range
from .hue_math import circular_distance, circular_distances
from .utils import require_non_empty

ColourKey = Callable[[ColourModel], float]


# Keys


def perceived_brightness_of(colour: ColourModel) -> float:
    return colour.to_hsp().perceived_brightness


def lightness_of(colour: ColourModel) -> float:
    return colour.to_hsl().lightness


def intensity_of(colour: ColourModel) -> float:
    return colour.to_hsi().intensity


def saturation_of(colour: ColourModel) -> float:
    return colour.saturation


def richness_of(colour: ColourModel) -> float:
    hsb = colour.to_hsb()
    return hsb.saturation + hsb.brightness


# Folds


def _fold_most(colours: Sequence[ColourModel], key: ColourKey) -> ColourModel:
    keyed = [(key(c), c) for c in colours]
    return reduce(lambda a, b: b if a[0] < b[0] else a, keyed)[1]


def _fold_least(colours: Sequence[ColourModel], key: ColourKey) -> ColourModel:
    keyed = [(key(c), c) for c in colours]
    return reduce(lambda a, b: a if a[0] < b[0] else b, keyed)[1]


def brightest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "brightest")
    return _fold_most(colours, perceived_brightness_of)


def dimmest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "dimmest")
    return _fold_least(colours, perceived_brightness_of)


def lightest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "lightest")
    return _fold_most(colours, lightness_of)


def darkest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "darkest")
    return _fold_least(colours, lightness_of)


def most_intense(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "most_intense")
    return _fold_most(colours, intensity_of)


def least_intense(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "least_intense")
    return _fold_least(colours, intensity_of)


def deepest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "deepest")
    return _fold_most(colours, saturation_of)


def dullest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "dullest")
    return _fold_least(colours, saturation_of)


def richest(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "richest")
    return _fold_most(colours, richness_of)


def muted(colours: Sequence[ColourModel]) -> ColourModel:
    require_non_empty(colours, "muted")
    return _fold_least(colours, richness_of)


def nearest_to_hue(colours: Sequence[ColourModel], hue: float) -> ColourModel:
    """Colour whose hue is circularly nearest to hue; ties keep the earlier."""
    check_range("hue", hue, 0.0, HUE_MAX)
    require_non_empty(colours, "nearest_to_hue")
    keyed = [(circular_distance(c.hue, hue), c) for c in colours]
    return reduce(lambda a, b: a if a[0] <= b[0] else b, keyed)[1]


def nearest_to_named_hue(colours: Sequence[ColourModel], name: str) -> ColourModel:
    """nearest_to_hue for one of the NAMED_HUES, e.g. 'blue_violet'."""
    if name not in NAMED_HUES:
        raise ValueError(f"unknown hue name {name!r}")
    return nearest_to_hue(colours, NAMED_HUES[name])


# Difference


def colour_difference(a: ColourModel, b: ColourModel) -> float:
    """
    Hue distance plus the mean of the saturation and perceived brightness
    differences, all measured in HSP. Hue carries twice the weight.
    """
    h1, s1, p1 = a.to_hsp().values()
    h2, s2, p2 = b.to_hsp().values()
    return circular_distance(h1, h2) + (abs(s1 - s2) + abs(p1 - p2)) / 2.0


def _differences_to(colours: Sequence[ColourModel], colour: ColourModel) -> List[float]:
    return [colour_difference(colour, c) for c in colours]


def closest(colours: Sequence[ColourModel], colour: ColourModel) -> ColourModel:
    """Colour in colours least different from colour; first found wins ties."""
    require_non_empty(colours, "closest")
    diffs = _differences_to(colours, colour)
    best = 0
    for i in range(1, len(diffs)):
        if diffs[i] < diffs[best]:
            best = i
    return colours[best]


def furthest(colours: Sequence[ColourModel], colour: ColourModel) -> ColourModel:
    """Colour in colours most different from colour; first found wins ties."""
    require_non_empty(colours, "furthest")
    diffs = _differences_to(colours, colour)
    best = 0
    for i in range(1, len(diffs)):
        if diffs[i] > diffs[best]:
            best = i
    return colours[best]


def difference_matrix(colours: Sequence[ColourModel]) -> np.ndarray:
    """
    Pairwise colour_difference as an (n, n) float64 array.

    The diagonal is NaN: a colour is never compared with itself.
    """
    n = len(colours)
    hsp = np.array([c.to_hsp().values() for c in colours], dtype=np.float64)
    hsp = hsp.reshape(n, 3)
    out = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        hue_delta = circular_distances(hsp[i, 0], hsp[:, 0])
        rest = np.abs(hsp[:, 1] - hsp[i, 1]) + np.abs(hsp[:, 2] - hsp[i, 2])
        out[i] = hue_delta + rest / 2.0
    np.fill_diagonal(out, np.nan)
    return out


__all__ = [
    "brightest",
    "dimmest",
    "lightest",
    "darkest",
    "most_intense",
    "least_intense",
    "deepest",
    "dullest",
    "richest",
    "muted",
    "nearest_to_hue",
    "nearest_to_named_hue",
    "colour_difference",
    "closest",
    "furthest",
    "difference_matrix",
    "perceived_brightness_of",
    "lightness_of",
    "intensity_of",
    "saturation_of",
    "richness_of",
]
