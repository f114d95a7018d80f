# colour_palette/sorting.py
from __future__ import annotations

"""
Palette ordering.

sort_by() is a stable sort keyed by a ColourSortingProperty; the
SIMILARITY and DIFFERENCE properties build a greedy tour instead.

Tour:
  1. Pairwise difference matrix (query.difference_matrix), diagonal unused.
  2. Start: similarity picks the lowest nearest-neighbour difference
     (ties: highest furthest-neighbour); difference picks the highest
     furthest-neighbour difference (ties: lowest nearest-neighbour).
  3. Repeatedly append the remaining colour closest to (similarity) or
     furthest from (difference) the last one placed.
"""

from functools import partial
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from .colour_models import ColourModel
from .constants import HUE_MAX, NAMED_HUES
from .core_types import ColourSortingProperty, check_range
from .hue_math import circular_distance
from .query import (
    difference_matrix,
    intensity_of,
    lightness_of,
    perceived_brightness_of,
    richness_of,
    saturation_of,
)

SortKey = Callable[[ColourModel], float]


def _hue_distance_to(anchor: float, colour: ColourModel) -> float:
    return circular_distance(colour.hue, anchor)


# property -> (key, descending)
_SORT_KEYS: Dict[ColourSortingProperty, Tuple[SortKey, bool]] = {
    ColourSortingProperty.BRIGHTEST: (perceived_brightness_of, True),
    ColourSortingProperty.DIMMEST: (perceived_brightness_of, False),
    ColourSortingProperty.LIGHTEST: (lightness_of, True),
    ColourSortingProperty.DARKEST: (lightness_of, False),
    ColourSortingProperty.MOST_INTENSE: (intensity_of, True),
    ColourSortingProperty.LEAST_INTENSE: (intensity_of, False),
    ColourSortingProperty.DEEPEST: (saturation_of, True),
    ColourSortingProperty.DULLEST: (saturation_of, False),
    ColourSortingProperty.RICHEST: (richness_of, True),
    ColourSortingProperty.MUTED: (richness_of, False),
}
for _name, _hue in NAMED_HUES.items():
    _SORT_KEYS[ColourSortingProperty(_name)] = (partial(_hue_distance_to, _hue), False)


def sort_by(
    colours: Sequence[ColourModel], sorting_property: ColourSortingProperty
) -> List[ColourModel]:
    """New list ordered by sorting_property; equal keys keep their order."""
    if len(colours) <= 1:
        return list(colours)
    if sorting_property is ColourSortingProperty.SIMILARITY:
        return sort_by_similarity(colours)
    if sorting_property is ColourSortingProperty.DIFFERENCE:
        return sort_by_difference(colours)
    if sorting_property not in _SORT_KEYS:
        raise TypeError(
            "sorting_property must be a ColourSortingProperty, "
            f"got {sorting_property!r}"
        )
    key, descending = _SORT_KEYS[sorting_property]
    return sorted(colours, key=key, reverse=descending)


def sort_by_hue(
    colours: Sequence[ColourModel],
    starting_from: float = 0.0,
    clockwise: bool = True,
) -> List[ColourModel]:
    """
    Order around the hue wheel from starting_from.

    Clockwise: hues below the start are lifted by 360 and the result runs
    from the highest hue down. Counter-clockwise: hues below the start are
    lowered by 360 and the result runs upwards.
    """
    check_range("starting_from", starting_from, 0.0, HUE_MAX)
    if len(colours) <= 1:
        return list(colours)

    def unwrapped(colour: ColourModel) -> float:
        hue = colour.hue
        if hue < starting_from:
            hue += HUE_MAX if clockwise else -HUE_MAX
        return hue

    return sorted(colours, key=unwrapped, reverse=clockwise)


def _starting_index(
    row_min: np.ndarray, row_max: np.ndarray, similarity: bool
) -> int:
    start = 0
    lowest, highest = row_min[0], row_max[0]
    for i in range(1, len(row_min)):
        least, most = row_min[i], row_max[i]
        if similarity:
            better = least < lowest or (least == lowest and most > highest)
        else:
            better = most > highest or (most == highest and least < lowest)
        if better:
            start, lowest, highest = i, least, most
    return start


def _tour(colours: Sequence[ColourModel], similarity: bool) -> List[ColourModel]:
    if len(colours) <= 1:
        return list(colours)
    diffs = difference_matrix(colours)
    start = _starting_index(
        np.nanmin(diffs, axis=1), np.nanmax(diffs, axis=1), similarity
    )

    order = [start]
    remaining = [i for i in range(len(colours)) if i != start]
    while remaining:
        row = diffs[order[-1]]
        best = remaining[0]
        for j in remaining[1:]:
            if (row[j] < row[best]) if similarity else (row[j] > row[best]):
                best = j
        order.append(best)
        remaining.remove(best)
    return [colours[i] for i in order]


def sort_by_similarity(colours: Sequence[ColourModel]) -> List[ColourModel]:
    """Greedy tour placing each colour next to its least different neighbour."""
    return _tour(colours, similarity=True)


def sort_by_difference(colours: Sequence[ColourModel]) -> List[ColourModel]:
    """Greedy tour placing each colour next to its most different neighbour."""
    return _tour(colours, similarity=False)


__all__ = ["sort_by", "sort_by_hue", "sort_by_similarity", "sort_by_difference"]
