"""OKLCH <-> sRGB conversions.

Reference: https://bottosson.github.io/posts/oklab/

Functions accept python floats or numpy arrays. Scalars come back as 0-d
numpy arrays (or shape (3,) for stacked RGB).
"""

import numpy as np
from numpy.typing import ArrayLike

# === OKLab <-> Linear RGB matrices (Ottosson) ===

# Linear RGB -> LMS
_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# LMS cube root -> OKLab
_LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# OKLab -> LMS cube root
_OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

# LMS -> Linear RGB
_LMS_TO_RGB = (
    (+4.0767416621, -3.3077115913, +0.2309699292),
    (-1.2684380046, +2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, +1.7076147010),
)

# sRGB transfer function
_ENCODE_THRESHOLD = 0.0031308
_DECODE_THRESHOLD = 0.04045


def _mul3(m, x, y, z):
    """Multiply a 3x3 matrix by the column (x, y, z)."""
    return (
        m[0][0]*x + m[0][1]*y + m[0][2]*z,
        m[1][0]*x + m[1][1]*y + m[1][2]*z,
        m[2][0]*x + m[2][1]*y + m[2][2]*z,
    )


# === Core Conversions ===

def oklch_to_oklab(L: ArrayLike, C: ArrayLike, H: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """OKLCH -> OKLab. H in degrees."""
    H_rad = np.asarray(H, dtype=np.float64) * (np.pi / 180)
    return L, C * np.cos(H_rad), C * np.sin(H_rad)


def oklab_to_oklch(L: ArrayLike, a: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """OKLab -> OKLCH. Returns H in degrees [0, 360)."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    C = np.sqrt(a**2 + b**2)
    H = (np.arctan2(b, a) * (180 / np.pi)) % 360
    return L, C, H


def oklab_to_linear_rgb(L: ArrayLike, a: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """OKLab -> Linear RGB via LMS."""
    l_, m_, s_ = _mul3(_OKLAB_TO_LMS, L, a, b)
    return _mul3(_LMS_TO_RGB, l_**3, m_**3, s_**3)


def linear_rgb_to_oklab(r: ArrayLike, g: ArrayLike, b: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Linear RGB -> OKLab via LMS."""
    l, m, s = _mul3(_RGB_TO_LMS, r, g, b)
    return _mul3(_LMS_TO_OKLAB, np.cbrt(l), np.cbrt(m), np.cbrt(s))


def linear_to_srgb(x: ArrayLike) -> np.ndarray:
    """Linear RGB -> sRGB gamma encoding (per channel)."""
    x = np.asarray(x, dtype=np.float64)
    low = x * 12.92
    high = 1.055 * np.power(np.maximum(x, 1e-10), 1/2.4) - 0.055
    return np.where(x <= _ENCODE_THRESHOLD, low, high)


def srgb_to_linear(x: ArrayLike) -> np.ndarray:
    """sRGB -> Linear RGB gamma decoding (per channel)."""
    x = np.asarray(x, dtype=np.float64)
    low = x / 12.92
    high = np.power(np.maximum(x + 0.055, 0.0) / 1.055, 2.4)
    return np.where(x <= _DECODE_THRESHOLD, low, high)


# === Convenience Composites ===

def oklch_to_srgb(L: ArrayLike, C: ArrayLike, H: ArrayLike) -> np.ndarray:
    """OKLCH -> gamma-encoded sRGB.

    Args:
        L: Lightness (0-1)
        C: Chroma (0-~0.4)
        H: Hue in degrees

    Returns:
        RGB array with shape (..., 3). Values fall outside [0,1] when the
        color is out of gamut; nothing is clipped here.
    """
    L, a, b = oklch_to_oklab(np.asarray(L, dtype=np.float64), np.asarray(C, dtype=np.float64), H)
    r, g, b = oklab_to_linear_rgb(L, a, b)
    return np.stack([linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b)], axis=-1)


def srgb_to_oklch(rgb: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Gamma-encoded sRGB with shape (..., 3) in [0,1] -> (L, C, H)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = (srgb_to_linear(rgb[..., i]) for i in range(3))
    return oklab_to_oklch(*linear_rgb_to_oklab(r, g, b))
