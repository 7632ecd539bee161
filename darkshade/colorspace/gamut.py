"""sRGB gamut checks and the chroma boundary search.

Not all (L, C, H) combinations produce valid sRGB. For a fixed L and H,
chroma is in gamut from 0 up to some boundary and out of gamut above it;
the search below finds that boundary by bisection.
"""

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from darkshade import defaults

from .oklch import oklch_to_srgb

if TYPE_CHECKING:
    from darkshade.types import Color

# === Gamut checking ===

def is_in_gamut(
    L: ArrayLike,
    C: ArrayLike,
    H: ArrayLike,
    tolerance: float = defaults.GAMUT_TOLERANCE,
) -> np.ndarray:
    """Check if OKLCH values produce valid sRGB (all channels in [0,1])."""
    rgb = oklch_to_srgb(L, C, H)
    in_range = (rgb >= -tolerance) & (rgb <= 1 + tolerance)
    return np.all(in_range, axis=-1)


def is_out_of_gamut(color: "Color", tolerance: float = defaults.GAMUT_TOLERANCE) -> bool:
    """True when *color* would have to be clipped to display in sRGB."""
    return not bool(is_in_gamut(color.L, color.C, color.H, tolerance))


def gamut_clip(L: ArrayLike, C: ArrayLike, H: ArrayLike) -> np.ndarray:
    """Convert to sRGB and hard-clip to [0,1].

    This is what a display does with an out-of-gamut color; hue and
    lightness may shift.
    """
    return np.clip(oklch_to_srgb(L, C, H), 0.0, 1.0)


# === Max chroma search ===

def max_chroma_for_lh(
    L: ArrayLike,
    H: ArrayLike,
    epsilon: float = defaults.CHROMA_SEARCH_EPSILON,
    max_c: float = defaults.MAX_SEARCH_CHROMA,
    tolerance: float = defaults.GAMUT_TOLERANCE,
) -> np.ndarray:
    """Find the largest in-gamut chroma for each (L, H) by binary search.

    The bracket starts at [0, max_c] and is halved until its width is at
    most *epsilon*, so the number of steps is ceil(log2(max_c / epsilon))
    whatever the input. The lower end is returned: it is always a chroma
    that tested in gamut (or 0).

    Works elementwise on arrays; every element shares the same bracket
    width, so one loop serves them all.
    """
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")

    L = np.asarray(L, dtype=np.float64)
    H = np.asarray(H, dtype=np.float64)
    lo = np.zeros_like(L)
    hi = np.full_like(L, max_c)

    width = max_c
    while width > epsilon:
        mid = (lo + hi) / 2
        clipped = ~is_in_gamut(L, mid, H, tolerance)
        hi = np.where(clipped, mid, hi)
        lo = np.where(clipped, lo, mid)
        width /= 2

    return lo


def max_chroma(L: float, H: float, epsilon: float = defaults.CHROMA_SEARCH_EPSILON) -> float:
    """Scalar form of max_chroma_for_lh()."""
    return float(max_chroma_for_lh(L, H, epsilon=epsilon))


def relative_chroma(L: float, C: float, H: float) -> float:
    """Chroma as a fraction of the most chroma available at this L and H.

    Anything at or past the boundary counts as fully saturated (1.0),
    including the degenerate case where no chroma at all is in gamut.
    """
    max_c = max_chroma(L, H)
    if C > max_c or max_c <= 0.0:
        return 1.0
    return C / max_c
