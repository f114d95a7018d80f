# colour_palette/palette.py
from __future__ import annotations

"""
ColourPalette: an owned, ordered, mutable sequence of colours.

Construction copies its input. Two flags are fixed at construction:
  growable : when False, length-changing operations raise FixedLengthError
  unique   : when True, no two colours may compare equal; an operation that
             would create a duplicate raises DuplicateColourError

Every mutation is validated against both flags before it is committed, so
a failed operation leaves the palette unchanged.

Quick start:
  from colour_palette import ColourPalette, RgbColour
  palette = ColourPalette.adjacent(RgbColour(255, 0, 0), number_of_colours=3)
  palette.warmer(20)
  palette.sort_by_hue()
"""

from collections.abc import MutableSequence
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union, overload

import numpy as np
from PIL import ImageColor

from . import factory, query, sorting, transform
from .colour_models import ColourModel, RgbColour
from .constants import (
    DEFAULT_DISTANCE,
    DEFAULT_NUMBER_OF_COLOURS,
    DEFAULT_PERCEIVED_BRIGHTNESS,
    DEFAULT_SPLIT_NUMBER_OF_COLOURS,
    HUE_MAX,
    PERCENT_MAX,
    RGB_MAX,
)
from .core_types import ColourSortingProperty, ColourSpace, HexStr, coerce_to_rgba
from .errors import DuplicateColourError, FixedLengthError
from .utils import hex_list

ColourInput = Union[ColourModel, str, Sequence[float], np.ndarray]


def _parse_colour(value: Any) -> ColourModel:
    """A foreign colour input as an RgbColour; models pass through."""
    if isinstance(value, ColourModel):
        return value
    if isinstance(value, str):
        rgba = ImageColor.getrgb(value)
        alpha = rgba[3] / RGB_MAX if len(rgba) == 4 else 1.0
        return RgbColour(float(rgba[0]), float(rgba[1]), float(rgba[2]), alpha)
    if isinstance(value, (list, tuple, np.ndarray)):
        return RgbColour(*coerce_to_rgba(value))
    raise TypeError(f"cannot interpret {value!r} as a colour")


def _first_duplicate(colours: Sequence[ColourModel]) -> Optional[DuplicateColourError]:
    seen: Dict[ColourModel, int] = {}
    for index, colour in enumerate(colours):
        if colour in seen:
            return DuplicateColourError(colour, seen[colour])
        seen[colour] = index
    return None


def _named_hue(name: str) -> property:
    def getter(self: "ColourPalette") -> ColourModel:
        return query.nearest_to_named_hue(self._colours, name)

    getter.__doc__ = f"Colour whose hue is nearest to {name.replace('_', ' ')}."
    return property(getter)


class ColourPalette(MutableSequence):
    """Ordered collection of ColourModel values with palette operations."""

    def __init__(
        self,
        colours: Iterable[ColourModel] = (),
        *,
        growable: bool = True,
        unique: bool = False,
    ) -> None:
        self._growable = bool(growable)
        self._unique = bool(unique)
        initial = list(colours)
        for colour in initial:
            if not isinstance(colour, ColourModel):
                raise TypeError(f"palette entries must be ColourModel, got {colour!r}")
        if self._unique:
            duplicate = _first_duplicate(initial)
            if duplicate is not None:
                raise duplicate
        self._colours: List[ColourModel] = initial

    # Factories

    @classmethod
    def empty(cls, *, growable: bool = True, unique: bool = False) -> "ColourPalette":
        return cls((), growable=growable, unique=unique)

    @classmethod
    def from_colours(
        cls,
        colours: Iterable[ColourInput],
        colour_space: Optional[ColourSpace] = None,
        *,
        growable: bool = True,
        unique: bool = False,
    ) -> "ColourPalette":
        """
        Palette from models, CSS colour strings ('#ff8800', 'teal',
        'rgb(10, 20, 30)') or 3/4-number RGB(A) sequences. Foreign inputs
        become RgbColour; everything is converted to colour_space if given.
        """
        parsed = [_parse_colour(value) for value in colours]
        if colour_space is not None:
            parsed = transform.to_colour_space(parsed, colour_space)
        return cls(parsed, growable=growable, unique=unique)

    @classmethod
    def adjacent(
        cls,
        seed: ColourModel,
        number_of_colours: int = DEFAULT_NUMBER_OF_COLOURS,
        distance: float = DEFAULT_DISTANCE,
        hue_variability: float = 0.0,
        saturation_variability: float = 0.0,
        brightness_variability: float = 0.0,
        perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
        *,
        growable: bool = True,
        unique: bool = False,
        rng: Optional[np.random.Generator] = None,
        debug: bool = False,
    ) -> "ColourPalette":
        colours = factory.adjacent(
            seed,
            number_of_colours,
            distance,
            hue_variability,
            saturation_variability,
            brightness_variability,
            perceived_brightness,
            rng=rng,
            debug=debug,
        )
        return cls(colours, growable=growable, unique=unique)

    @classmethod
    def polyad(
        cls,
        seed: ColourModel,
        number_of_colours: int = DEFAULT_NUMBER_OF_COLOURS,
        hue_variability: float = 0.0,
        saturation_variability: float = 0.0,
        brightness_variability: float = 0.0,
        perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
        clockwise: bool = True,
        *,
        growable: bool = True,
        unique: bool = False,
        rng: Optional[np.random.Generator] = None,
        debug: bool = False,
    ) -> "ColourPalette":
        colours = factory.polyad(
            seed,
            number_of_colours,
            hue_variability,
            saturation_variability,
            brightness_variability,
            perceived_brightness,
            clockwise,
            rng=rng,
            debug=debug,
        )
        return cls(colours, growable=growable, unique=unique)

    @classmethod
    def random(
        cls,
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
        *,
        growable: bool = True,
        unique: bool = False,
        rng: Optional[np.random.Generator] = None,
        debug: bool = False,
    ) -> "ColourPalette":
        colours = factory.random(
            number_of_colours,
            colour_space,
            min_hue,
            max_hue,
            min_saturation,
            max_saturation,
            min_brightness,
            max_brightness,
            perceived_brightness,
            distribute_hues,
            distribution_variability,
            clockwise,
            rng=rng,
            debug=debug,
        )
        return cls(colours, growable=growable, unique=unique)

    @classmethod
    def split_complementary(
        cls,
        seed: ColourModel,
        number_of_colours: int = DEFAULT_SPLIT_NUMBER_OF_COLOURS,
        distance: float = DEFAULT_DISTANCE,
        hue_variability: float = 0.0,
        saturation_variability: float = 0.0,
        brightness_variability: float = 0.0,
        perceived_brightness: bool = DEFAULT_PERCEIVED_BRIGHTNESS,
        *,
        growable: bool = True,
        unique: bool = False,
        rng: Optional[np.random.Generator] = None,
        debug: bool = False,
    ) -> "ColourPalette":
        colours = factory.split_complementary(
            seed,
            number_of_colours,
            distance,
            hue_variability,
            saturation_variability,
            brightness_variability,
            perceived_brightness,
            rng=rng,
            debug=debug,
        )
        return cls(colours, growable=growable, unique=unique)

    @classmethod
    def opposites(
        cls,
        colours: Iterable[ColourModel],
        insert_opposites: bool = True,
        *,
        growable: bool = True,
        unique: bool = False,
    ) -> "ColourPalette":
        return cls(
            factory.opposites(colours, insert_opposites),
            growable=growable,
            unique=unique,
        )

    # Flags and snapshots

    @property
    def is_growable(self) -> bool:
        return self._growable

    @property
    def is_unique(self) -> bool:
        return self._unique

    @property
    def colours(self) -> Tuple[ColourModel, ...]:
        """Immutable snapshot of the current colours."""
        return tuple(self._colours)

    def copy(self) -> "ColourPalette":
        return ColourPalette(
            self._colours, growable=self._growable, unique=self._unique
        )

    def to_hex_list(self) -> List[HexStr]:
        return hex_list(self._colours)

    # Validated commit

    def _commit(self, candidate: List[ColourModel], operation: str) -> None:
        if not self._growable and len(candidate) != len(self._colours):
            raise FixedLengthError(operation)
        if self._unique:
            duplicate = _first_duplicate(candidate)
            if duplicate is not None:
                raise duplicate
        self._colours = candidate

    def _replace_all(self, colours: List[ColourModel], operation: str) -> None:
        self._commit(list(colours), operation)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._colours)

    @overload
    def __getitem__(self, index: int) -> ColourModel: ...

    @overload
    def __getitem__(self, index: slice) -> List[ColourModel]: ...

    def __getitem__(self, index):
        return self._colours[index]

    def __setitem__(self, index, value) -> None:
        candidate = list(self._colours)
        if isinstance(index, slice):
            values = list(value)
            for colour in values:
                if not isinstance(colour, ColourModel):
                    raise TypeError(
                        f"palette entries must be ColourModel, got {colour!r}"
                    )
            candidate[index] = values
        else:
            if not isinstance(value, ColourModel):
                raise TypeError(f"palette entries must be ColourModel, got {value!r}")
            candidate[index] = value
        self._commit(candidate, "assign")

    def __delitem__(self, index) -> None:
        if not self._growable:
            raise FixedLengthError("delete")
        candidate = list(self._colours)
        del candidate[index]
        self._colours = candidate

    def insert(self, index: int, value: ColourModel) -> None:
        if not isinstance(value, ColourModel):
            raise TypeError(f"palette entries must be ColourModel, got {value!r}")
        candidate = list(self._colours)
        candidate.insert(index, value)
        self._commit(candidate, "insert")

    def extend(self, values: Iterable[ColourModel]) -> None:
        values = list(values)
        for colour in values:
            if not isinstance(colour, ColourModel):
                raise TypeError(f"palette entries must be ColourModel, got {colour!r}")
        if values:
            self._commit(self._colours + values, "extend")

    def clear(self) -> None:
        if not self._growable:
            raise FixedLengthError("clear")
        self._colours = []

    def reverse(self) -> None:
        self._colours = self._colours[::-1]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColourPalette):
            return self._colours == other._colours
        if isinstance(other, (list, tuple)):
            return self._colours == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Iterable[ColourModel]) -> "ColourPalette":
        """New growable, non-unique palette holding both sets of colours."""
        if not isinstance(other, (ColourPalette, list, tuple)):
            return NotImplemented
        return ColourPalette([*self._colours, *other])

    def __repr__(self) -> str:
        return (
            f"ColourPalette({self._colours!r}, growable={self._growable}, "
            f"unique={self._unique})"
        )

    # Transforms (in place)

    def invert(self) -> None:
        self._replace_all(transform.invert(self._colours), "invert")

    def opposite(self) -> None:
        self._replace_all(transform.opposite(self._colours), "opposite")

    def rotate_hue(self, amount: float) -> None:
        self._replace_all(transform.rotate_hue(self._colours, amount), "rotate_hue")

    def warmer(self, amount: float, relative: bool = True) -> None:
        self._replace_all(transform.warmer(self._colours, amount, relative), "warmer")

    def cooler(self, amount: float, relative: bool = True) -> None:
        self._replace_all(transform.cooler(self._colours, amount, relative), "cooler")

    def to_colour_space(self, colour_space: ColourSpace) -> None:
        self._replace_all(
            transform.to_colour_space(self._colours, colour_space), "to_colour_space"
        )

    # Sorting (in place)

    def sort_by(self, sorting_property: ColourSortingProperty) -> None:
        self._replace_all(sorting.sort_by(self._colours, sorting_property), "sort_by")

    def sort_by_hue(self, starting_from: float = 0.0, clockwise: bool = True) -> None:
        self._replace_all(
            sorting.sort_by_hue(self._colours, starting_from, clockwise), "sort_by_hue"
        )

    # Queries

    def closest(self, colour: ColourModel) -> ColourModel:
        return query.closest(self._colours, colour)

    def furthest(self, colour: ColourModel) -> ColourModel:
        return query.furthest(self._colours, colour)

    @property
    def brightest(self) -> ColourModel:
        return query.brightest(self._colours)

    @property
    def dimmest(self) -> ColourModel:
        return query.dimmest(self._colours)

    @property
    def lightest(self) -> ColourModel:
        return query.lightest(self._colours)

    @property
    def darkest(self) -> ColourModel:
        return query.darkest(self._colours)

    @property
    def most_intense(self) -> ColourModel:
        return query.most_intense(self._colours)

    @property
    def least_intense(self) -> ColourModel:
        return query.least_intense(self._colours)

    @property
    def deepest(self) -> ColourModel:
        return query.deepest(self._colours)

    @property
    def dullest(self) -> ColourModel:
        return query.dullest(self._colours)

    @property
    def richest(self) -> ColourModel:
        return query.richest(self._colours)

    @property
    def muted(self) -> ColourModel:
        return query.muted(self._colours)

    red = _named_hue("red")
    red_orange = _named_hue("red_orange")
    orange = _named_hue("orange")
    yellow_orange = _named_hue("yellow_orange")
    yellow = _named_hue("yellow")
    yellow_green = _named_hue("yellow_green")
    green = _named_hue("green")
    cyan = _named_hue("cyan")
    blue = _named_hue("blue")
    blue_violet = _named_hue("blue_violet")
    violet = _named_hue("violet")
    magenta = _named_hue("magenta")


__all__ = ["ColourPalette", "ColourInput"]
