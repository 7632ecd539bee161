"""Write OKLCH colors out as hex, rgb() or oklch() text.

All three formats describe the color as it would actually be displayed:
out-of-gamut input is hard-clipped in sRGB first, the same thing a browser
does with it.
"""

from typing import Callable

import numpy as np

from darkshade import defaults
from darkshade.types import Color, OutputFormat

from .gamut import gamut_clip
from .oklch import srgb_to_oklch


def displayed_srgb(color: Color) -> np.ndarray:
    """sRGB channels in [0,1] that *color* shows up as."""
    return np.asarray(gamut_clip(color.L, color.C, color.H), dtype=np.float64)


def to_rgb255(color: Color) -> tuple[int, int, int]:
    """Displayed color as 8-bit channels, rounding halves up."""
    rgb = np.floor(displayed_srgb(color) * 255.0 + 0.5).astype(int)
    return int(rgb[0]), int(rgb[1]), int(rgb[2])


def format_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*to_rgb255(color))


def format_rgb(color: Color) -> str:
    return "rgb({}, {}, {})".format(*to_rgb255(color))


def format_oklch(color: Color) -> str:
    """oklch(L C H) with L to 2 places, C to 3 and H to 2."""
    L, C, H = (float(v) for v in srgb_to_oklch(displayed_srgb(color)))
    if C < defaults.ACHROMATIC_THRESHOLD:
        # Hue of a gray is meaningless float noise
        H = 0.0
    H = round(H, 2) % 360.0
    return f"oklch({L:.2f} {C:.3f} {H:.2f})"


_FORMATTERS: dict[OutputFormat, Callable[[Color], str]] = {
    OutputFormat.HEX: format_hex,
    OutputFormat.RGB: format_rgb,
    OutputFormat.OKLCH: format_oklch,
}


def format_color(color: Color, fmt: "OutputFormat | str") -> str:
    """Serialize *color* in the requested format.

    Raises:
        UnsupportedFormatError: If *fmt* is not a known OutputFormat
    """
    return _FORMATTERS[OutputFormat.coerce(fmt)](color)
