"""OKLCH color space conversions, gamut boundary search, and color text I/O.

This module provides:
- OKLCH <-> sRGB conversions (numpy arrays or python floats)
- Gamut checking and the max-chroma binary search
- Relative chroma (chroma as a fraction of the gamut boundary)
- Parsing CSS-style color text and writing hex / rgb() / oklch() text

Example:
    from darkshade.colorspace import parse_color, max_chroma, format_color

    color = parse_color("#ffe4df")
    headroom = max_chroma(color.L, color.H)
    print(format_color(color, "oklch"))
"""

from .oklch import (
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    oklch_to_srgb,
    srgb_to_oklch,
)

from .gamut import (
    is_in_gamut,
    is_out_of_gamut,
    gamut_clip,
    max_chroma_for_lh,
    max_chroma,
    relative_chroma,
)

from .parsing import parse_color
from .serialize import format_color, format_hex, format_rgb, format_oklch, to_rgb255

__all__ = [
    # OKLCH conversions
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'oklch_to_srgb',
    'srgb_to_oklch',
    # Gamut
    'is_in_gamut',
    'is_out_of_gamut',
    'gamut_clip',
    'max_chroma_for_lh',
    'max_chroma',
    'relative_chroma',
    # Text I/O
    'parse_color',
    'format_color',
    'format_hex',
    'format_rgb',
    'format_oklch',
    'to_rgb255',
]
