# colour_palette/colour_convert.py
from __future__ import annotations

"""
Colour conversions (sRGB, D65). Vectorised NumPy implementations.

All conversions pivot on unit sRGB: float64 arrays [..., 3] in 0..1.
Native channel scales:
  hsb / hsl / hsi / hsp : hue 0..360, saturation and third channel 0..100
  cmyk                  : [..., 4] in 0..100
  xyz                   : Y = 100 for the white point
  lab                   : L 0..100
  oklab                 : L 0..1

Exports:
  rgb_to_linear(srgb), linear_to_rgb(linear)
  rgb_hue(rgb)
  rgb_to_hsb / hsb_to_rgb
  rgb_to_hsl / hsl_to_rgb
  rgb_to_hsi / hsi_to_rgb
  rgb_to_hsp / hsp_to_rgb, perceived_brightness(rgb)
  rgb_to_cmyk / cmyk_to_rgb
  rgb_to_xyz / xyz_to_rgb
  xyz_to_lab / lab_to_xyz, rgb_to_lab / lab_to_rgb
  rgb_to_oklab / oklab_to_rgb
"""

import numpy as np

from .constants import D65_WHITE, HSP_WEIGHTS, LAB_EPSILON, LAB_KAPPA
from .core_types import Channels, UnitRGB


def _as_float(arr: np.ndarray) -> np.ndarray:
    return np.asarray(arr, dtype=np.float64)


def _stack(*parts: np.ndarray) -> np.ndarray:
    return np.stack(parts, axis=-1).astype(np.float64, copy=False)


# sRGB to linear and back


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    Convert sRGB (non-linear 0..1) to linear RGB (0..1). Vectorised.
    Args:
      srgb: array[...] in 0..1 (float)
    Returns:
      float64 array, same shape
    """
    u = _as_float(srgb)
    with np.errstate(invalid="ignore"):
        return np.where(u <= 0.04045, u / 12.92, ((u + 0.055) / 1.055) ** 2.4)


def linear_to_rgb(linear: np.ndarray) -> np.ndarray:
    """Linear RGB to sRGB. Negative inputs are clipped to 0 before encoding."""
    u = np.clip(_as_float(linear), 0.0, None)
    return np.where(u <= 0.0031308, u * 12.92, 1.055 * u ** (1.0 / 2.4) - 0.055)


# Hue (hexcone)


def rgb_hue(rgb: UnitRGB) -> np.ndarray:
    """
    Hexcone hue in degrees [0, 360) for unit RGB [..., 3].
    Achromatic inputs (max == min) get hue 0.
    """
    u = _as_float(rgb)
    r, g, b = u[..., 0], u[..., 1], u[..., 2]
    mx = u.max(axis=-1)
    chroma = mx - u.min(axis=-1)
    with np.errstate(divide="ignore", invalid="ignore"):
        sector = np.where(
            mx == r,
            ((g - b) / chroma) % 6.0,
            np.where(mx == g, (b - r) / chroma + 2.0, (r - g) / chroma + 4.0),
        )
    hue = np.where(chroma == 0.0, 0.0, sector * 60.0)
    return hue % 360.0


def _hue_unit_rgb(hue: np.ndarray) -> np.ndarray:
    """Fully saturated, full value RGB for a hue (max channel 1, min 0)."""
    h = _as_float(hue)
    full = np.full_like(h, 100.0)
    return hsb_to_rgb(_stack(h, full, full))


# HSB (HSV)


def rgb_to_hsb(rgb: UnitRGB) -> Channels:
    """Unit RGB [..., 3] to HSB [..., 3] (degrees, percent, percent)."""
    u = _as_float(rgb)
    mx = u.max(axis=-1)
    chroma = mx - u.min(axis=-1)
    with np.errstate(divide="ignore", invalid="ignore"):
        sat = np.where(mx == 0.0, 0.0, chroma / mx)
    return _stack(rgb_hue(u), sat * 100.0, mx * 100.0)


def hsb_to_rgb(hsb: Channels) -> UnitRGB:
    """HSB [..., 3] to unit RGB [..., 3]."""
    c = _as_float(hsb)
    h = c[..., 0] % 360.0
    s = c[..., 1] / 100.0
    v = c[..., 2] / 100.0

    def f(n: float) -> np.ndarray:
        k = (n + h / 60.0) % 6.0
        return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)

    return _stack(f(5.0), f(3.0), f(1.0))


# HSL


def rgb_to_hsl(rgb: UnitRGB) -> Channels:
    """Unit RGB [..., 3] to HSL [..., 3]."""
    u = _as_float(rgb)
    mx = u.max(axis=-1)
    mn = u.min(axis=-1)
    chroma = mx - mn
    light = (mx + mn) / 2.0
    denom = 1.0 - np.abs(2.0 * light - 1.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        sat = np.where(chroma == 0.0, 0.0, chroma / denom)
    return _stack(rgb_hue(u), sat * 100.0, light * 100.0)


def hsl_to_rgb(hsl: Channels) -> UnitRGB:
    """HSL [..., 3] to unit RGB [..., 3]."""
    c = _as_float(hsl)
    h = c[..., 0] % 360.0
    s = c[..., 1] / 100.0
    light = c[..., 2] / 100.0
    a = s * np.minimum(light, 1.0 - light)

    def f(n: float) -> np.ndarray:
        k = (n + h / 30.0) % 12.0
        return light - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return _stack(f(0.0), f(8.0), f(4.0))


# HSI


def rgb_to_hsi(rgb: UnitRGB) -> Channels:
    """Unit RGB [..., 3] to HSI [..., 3]. Hue uses the hexcone model."""
    u = _as_float(rgb)
    intensity = u.sum(axis=-1) / 3.0
    with np.errstate(divide="ignore", invalid="ignore"):
        sat = np.where(intensity == 0.0, 0.0, 1.0 - u.min(axis=-1) / intensity)
    return _stack(rgb_hue(u), sat * 100.0, intensity * 100.0)


def hsi_to_rgb(hsi: Channels) -> UnitRGB:
    """
    HSI [..., 3] to unit RGB [..., 3].

    The result is min + scale * pure_hue, where min = I(1 - S) and the scale
    is chosen so the channel mean equals I.
    """
    c = _as_float(hsi)
    s = c[..., 1] / 100.0
    intensity = c[..., 2] / 100.0
    pure = _hue_unit_rgb(c[..., 0])
    floor = intensity * (1.0 - s)
    scale = 3.0 * intensity * s / pure.sum(axis=-1)
    return floor[..., None] + scale[..., None] * pure


# HSP


def perceived_brightness(rgb: UnitRGB) -> np.ndarray:
    """HSP perceived brightness in 0..1: sqrt(.299 R^2 + .587 G^2 + .114 B^2)."""
    u = _as_float(rgb)
    weights = np.asarray(HSP_WEIGHTS, dtype=np.float64)
    return np.sqrt((u * u * weights).sum(axis=-1))


def rgb_to_hsp(rgb: UnitRGB) -> Channels:
    """Unit RGB [..., 3] to HSP [..., 3]. Saturation matches HSB's."""
    u = _as_float(rgb)
    hsb = rgb_to_hsb(u)
    return _stack(hsb[..., 0], hsb[..., 1], perceived_brightness(u) * 100.0)


def hsp_to_rgb(hsp: Channels) -> UnitRGB:
    """
    HSP [..., 3] to unit RGB [..., 3].

    Takes the HSB colour with the same hue and saturation at full value and
    scales it until its perceived brightness equals P. Bright, deeply
    saturated blues can land outside the sRGB cube; callers clip.
    """
    c = _as_float(hsp)
    full = hsb_to_rgb(_stack(c[..., 0], c[..., 1], np.full_like(c[..., 0], 100.0)))
    scale = (c[..., 2] / 100.0) / perceived_brightness(full)
    return full * scale[..., None]


# CMYK


def rgb_to_cmyk(rgb: UnitRGB) -> Channels:
    """Unit RGB [..., 3] to CMYK [..., 4] in percent."""
    u = _as_float(rgb)
    k = 1.0 - u.max(axis=-1)
    denom = 1.0 - k
    with np.errstate(divide="ignore", invalid="ignore"):
        cmy = np.where(
            (denom == 0.0)[..., None], 0.0, (1.0 - u - k[..., None]) / denom[..., None]
        )
    return np.concatenate([cmy, k[..., None]], axis=-1) * 100.0


def cmyk_to_rgb(cmyk: Channels) -> UnitRGB:
    """CMYK [..., 4] in percent to unit RGB [..., 3]."""
    c = _as_float(cmyk) / 100.0
    return (1.0 - c[..., :3]) * (1.0 - c[..., 3:4])


# XYZ (D65)

_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)
_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)


def rgb_to_xyz(rgb: UnitRGB) -> Channels:
    """Unit sRGB [..., 3] to XYZ [..., 3] (Y = 100 for white)."""
    return rgb_to_linear(rgb) @ _RGB_TO_XYZ.T * 100.0


def xyz_to_rgb(xyz: Channels) -> UnitRGB:
    """XYZ [..., 3] to unit sRGB [..., 3]. Not clipped to the cube."""
    linear = (_as_float(xyz) / 100.0) @ _XYZ_TO_RGB.T
    return linear_to_rgb(linear)


# Lab (D65)


def xyz_to_lab(xyz: Channels) -> Channels:
    """XYZ [..., 3] to CIE Lab [..., 3]."""
    scaled = _as_float(xyz) / np.asarray(D65_WHITE, dtype=np.float64)

    def f(t: np.ndarray) -> np.ndarray:
        with np.errstate(invalid="ignore"):
            return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16.0) / 116.0)

    fx, fy, fz = f(scaled[..., 0]), f(scaled[..., 1]), f(scaled[..., 2])
    return _stack(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_xyz(lab: Channels) -> Channels:
    """CIE Lab [..., 3] to XYZ [..., 3]."""
    c = _as_float(lab)
    fy = (c[..., 0] + 16.0) / 116.0
    fx = fy + c[..., 1] / 500.0
    fz = fy - c[..., 2] / 200.0

    def finv(t: np.ndarray) -> np.ndarray:
        cube = t**3
        return np.where(cube > LAB_EPSILON, cube, (116.0 * t - 16.0) / LAB_KAPPA)

    white = np.asarray(D65_WHITE, dtype=np.float64)
    return _stack(finv(fx), finv(fy), finv(fz)) * white


def rgb_to_lab(rgb: UnitRGB) -> Channels:
    """
    sRGB to CIE Lab (D65).
    Accepts unit floats [..., 3]. Preserves shape. Returns float64.
    """
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_rgb(lab: Channels) -> UnitRGB:
    """CIE Lab [..., 3] to unit sRGB [..., 3]. Not clipped to the cube."""
    return xyz_to_rgb(lab_to_xyz(lab))


# Oklab

_LINEAR_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
_LMS_TO_LINEAR = np.linalg.inv(_LINEAR_TO_LMS)
_OKLAB_TO_LMS = np.linalg.inv(_LMS_TO_OKLAB)


def rgb_to_oklab(rgb: UnitRGB) -> Channels:
    """Unit sRGB [..., 3] to Oklab [..., 3]."""
    lms = rgb_to_linear(rgb) @ _LINEAR_TO_LMS.T
    return np.cbrt(lms) @ _LMS_TO_OKLAB.T


def oklab_to_rgb(oklab: Channels) -> UnitRGB:
    """Oklab [..., 3] to unit sRGB [..., 3]. Not clipped to the cube."""
    lms = (_as_float(oklab) @ _OKLAB_TO_LMS.T) ** 3
    return linear_to_rgb(lms @ _LMS_TO_LINEAR.T)


__all__ = [
    "rgb_to_linear",
    "linear_to_rgb",
    "rgb_hue",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsi",
    "hsi_to_rgb",
    "perceived_brightness",
    "rgb_to_hsp",
    "hsp_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_oklab",
    "oklab_to_rgb",
]
