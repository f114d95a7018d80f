# colour_palette/hue_math.py
from __future__ import annotations

"""
Hue wheel arithmetic and random sampling.

Exports:
  circular_distance(hue_a, hue_b) -> float
  circular_distances(source_hue, target_hues) -> np.ndarray
  jitter(magnitude, rng=None) -> float
  random_between(lo, hi, rng=None) -> float
  random_hue(min_hue, max_hue, rng=None) -> float
  default_rng() / seed_default_rng(seed)

Random source:
  Every sampling function takes an optional numpy Generator. When omitted,
  a process-wide generator is used; seed_default_rng() makes it
  reproducible.
"""

from typing import Optional

import numpy as np

from .constants import HUE_MAX
from .core_types import HueInterval, check_range

_DEFAULT_RNG: np.random.Generator = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Process-wide generator used when no rng is passed."""
    return _DEFAULT_RNG


def seed_default_rng(seed: Optional[int]) -> np.random.Generator:
    """Replace the process-wide generator with one seeded from seed."""
    global _DEFAULT_RNG
    _DEFAULT_RNG = np.random.default_rng(seed)
    return _DEFAULT_RNG


def _resolve(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return _DEFAULT_RNG if rng is None else rng


# Distances


def circular_distance(hue_a: float, hue_b: float) -> float:
    """Shortest angular distance between two hues on the 360 degree wheel."""
    check_range("hue_a", hue_a, 0.0, HUE_MAX)
    check_range("hue_b", hue_b, 0.0, HUE_MAX)
    delta = abs(hue_a - hue_b)
    return min(delta, HUE_MAX - delta)


def circular_distances(source_hue: float, target_hues: np.ndarray) -> np.ndarray:
    """Vectorised circular_distance for one source against many targets."""
    delta = np.abs(np.asarray(target_hues, dtype=np.float64) - source_hue)
    return np.minimum(delta, HUE_MAX - delta)


# Sampling


def jitter(magnitude: float, rng: Optional[np.random.Generator] = None) -> float:
    """Uniform sample in [-magnitude / 2, magnitude / 2]."""
    if magnitude <= 0:
        raise ValueError(f"magnitude must be > 0, got {magnitude}")
    return float(_resolve(rng).random() * magnitude - magnitude / 2.0)


def random_between(
    lo: float, hi: float, rng: Optional[np.random.Generator] = None
) -> float:
    """Uniform sample in [lo, hi]; returns lo when the range is empty."""
    if hi <= lo:
        return float(lo)
    return float(lo + _resolve(rng).random() * (hi - lo))


def random_hue(
    min_hue: float, max_hue: float, rng: Optional[np.random.Generator] = None
) -> float:
    """
    Uniform hue in [min_hue, max_hue], walking upwards from min_hue.

    When min_hue > max_hue the interval wraps through 0, so (300, 60) covers
    300..360 and 0..60. The result is always in [0, 360).
    """
    check_range("min_hue", min_hue, 0.0, HUE_MAX)
    check_range("max_hue", max_hue, 0.0, HUE_MAX)
    interval = HueInterval(min_hue, max_hue)
    offset = random_between(0.0, interval.span, rng)
    return (min_hue + offset) % HUE_MAX


__all__ = [
    "default_rng",
    "seed_default_rng",
    "circular_distance",
    "circular_distances",
    "jitter",
    "random_between",
    "random_hue",
]
