# colour_palette/transform.py
from __future__ import annotations

"""
Whole-palette transforms. Each returns a new list in the input order;
ColourPalette applies them in place.
"""

from typing import Iterable, List

from .colour_models import ColourModel
from .constants import PERCENT_MAX
from .core_types import ColourSpace, check_range


def _check_amount(amount: float, relative: bool) -> None:
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    if relative:
        check_range("amount", amount, 0.0, PERCENT_MAX)


def invert(colours: Iterable[ColourModel]) -> List[ColourModel]:
    return [colour.inverted for colour in colours]


def opposite(colours: Iterable[ColourModel]) -> List[ColourModel]:
    return [colour.opposite for colour in colours]


def rotate_hue(colours: Iterable[ColourModel], amount: float) -> List[ColourModel]:
    """Rotate every hue by amount degrees; negative rotates the other way."""
    return [colour.rotate_hue(amount) for colour in colours]


def warmer(
    colours: Iterable[ColourModel], amount: float, relative: bool = True
) -> List[ColourModel]:
    """Move every hue towards 90 degrees. See ColourModel.warmer."""
    _check_amount(amount, relative)
    return [colour.warmer(amount, relative) for colour in colours]


def cooler(
    colours: Iterable[ColourModel], amount: float, relative: bool = True
) -> List[ColourModel]:
    """Move every hue towards 270 degrees. See ColourModel.cooler."""
    _check_amount(amount, relative)
    return [colour.cooler(amount, relative) for colour in colours]


def to_colour_space(
    colours: Iterable[ColourModel], colour_space: ColourSpace
) -> List[ColourModel]:
    if not isinstance(colour_space, ColourSpace):
        raise TypeError(f"colour_space must be a ColourSpace, got {colour_space!r}")
    return [colour.to(colour_space) for colour in colours]


__all__ = ["invert", "opposite", "rotate_hue", "warmer", "cooler", "to_colour_space"]
