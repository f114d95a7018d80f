# colour_palette/constants.py
"""
Defaults and tunables used across the project.

- Factory defaults (DEFAULT_*)
- Hue wheel anchors (WARMEST_HUE, COOLEST_HUE, NAMED_HUES)
- Channel ranges per colour space
- Conversion constants (D65 white point, HSP weights, Lab constants)
"""
from __future__ import annotations

from typing import Dict, Tuple

# =================
# Factory defaults
# =================
DEFAULT_NUMBER_OF_COLOURS: int = 5
DEFAULT_SPLIT_NUMBER_OF_COLOURS: int = 3
DEFAULT_DISTANCE: float = 30.0
DEFAULT_PERCEIVED_BRIGHTNESS: bool = True

# Fraction of the hue step used as distribution jitter when none is given.
DISTRIBUTION_VARIABILITY_RATIO: float = 0.25

# ==========
# Hue wheel
# ==========
HUE_MAX: float = 360.0
PERCENT_MAX: float = 100.0

WARMEST_HUE: float = 90.0
COOLEST_HUE: float = 270.0

# Named hue points, every 30 degrees from red.
NAMED_HUES: Dict[str, float] = {
    "red": 0.0,
    "red_orange": 30.0,
    "orange": 60.0,
    "yellow_orange": 90.0,
    "yellow": 120.0,
    "yellow_green": 150.0,
    "green": 180.0,
    "cyan": 210.0,
    "blue": 240.0,
    "blue_violet": 270.0,
    "violet": 300.0,
    "magenta": 330.0,
}

# ===============
# Channel ranges
# ===============
RGB_MAX: float = 255.0
CMYK_MAX: float = 100.0
LAB_L_MAX: float = 100.0
OKLAB_L_MAX: float = 1.0

# ======================
# Conversion constants
# ======================
# D65 reference white, XYZ scaled so that Y = 100.
D65_WHITE: Tuple[float, float, float] = (95.047, 100.0, 108.883)

# HSP perceived brightness weights (Finley).
HSP_WEIGHTS: Tuple[float, float, float] = (0.299, 0.587, 0.114)

LAB_EPSILON: float = 216.0 / 24389.0
LAB_KAPPA: float = 24389.0 / 27.0

__all__ = [
    "DEFAULT_NUMBER_OF_COLOURS",
    "DEFAULT_SPLIT_NUMBER_OF_COLOURS",
    "DEFAULT_DISTANCE",
    "DEFAULT_PERCEIVED_BRIGHTNESS",
    "DISTRIBUTION_VARIABILITY_RATIO",
    "HUE_MAX",
    "PERCENT_MAX",
    "WARMEST_HUE",
    "COOLEST_HUE",
    "NAMED_HUES",
    "RGB_MAX",
    "CMYK_MAX",
    "LAB_L_MAX",
    "OKLAB_L_MAX",
    "D65_WHITE",
    "HSP_WEIGHTS",
    "LAB_EPSILON",
    "LAB_KAPPA",
]
