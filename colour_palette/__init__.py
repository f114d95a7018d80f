# colour_palette/__init__.py
"""
colour_palette package.

Purpose:
  Generate, transform, query and sort colour palettes across nine colour
  spaces (RGB, CMYK, HSB, HSL, HSI, HSP, Lab, Oklab, XYZ).

Public API:
  ColourPalette : mutable palette with factories, transforms, queries, sorts.
  RgbColour ... XyzColour : immutable colour values, one per colour space.
  ColourSpace, ColourSortingProperty : enums.
  factory      : palette construction strategies returning lists.
  transform    : whole-palette transforms returning lists.
  query        : reductions, closest/furthest, colour_difference.
  sorting      : property, hue-wheel and similarity/difference ordering.
  colour_convert: vectorised colour space conversions.
  seed_default_rng : make the process-wide random source reproducible.

Quick start:
  from colour_palette import ColourPalette, RgbColour
  palette = ColourPalette.polyad(RgbColour(255, 0, 0), number_of_colours=3)
  palette.to_hex_list()
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import factory
from . import query
from . import sorting
from . import transform
from . import utils

from .colour_models import (  # noqa: E402
    CmykColour,
    ColourModel,
    HsbColour,
    HsiColour,
    HslColour,
    HspColour,
    LabColour,
    OklabColour,
    RgbColour,
    XyzColour,
    random_colour,
)
from .core_types import ColourSortingProperty, ColourSpace  # noqa: E402
from .errors import DuplicateColourError, FixedLengthError, PaletteError  # noqa: E402
from .hue_math import seed_default_rng  # noqa: E402
from .palette import ColourPalette  # noqa: E402

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "factory",
    "query",
    "sorting",
    "transform",
    "utils",
    "ColourPalette",
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
    "random_colour",
    "ColourSpace",
    "ColourSortingProperty",
    "PaletteError",
    "DuplicateColourError",
    "FixedLengthError",
    "seed_default_rng",
]
