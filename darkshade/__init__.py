"""darkshade: gamut-aware OKLCH color darkening.

Example:
    from darkshade import transform

    transform("#FFE4DF")                  # hex, relative chroma
    transform("#FFE4DF", "oklch", False)  # oklch text, absolute chroma
"""

from darkshade.types import (
    Color,
    ColorParseError,
    DarkshadeError,
    OutputFormat,
    TransformDiagnostics,
    UnsupportedFormatError,
)
from darkshade.colorspace import max_chroma, relative_chroma, parse_color, format_color
from darkshade.pipeline import (
    DarkenResult,
    apply_hue_floor,
    darken_color,
    darken_lightness,
    transform,
)

__all__ = [
    'Color',
    'OutputFormat',
    'TransformDiagnostics',
    'DarkenResult',
    'DarkshadeError',
    'ColorParseError',
    'UnsupportedFormatError',
    'max_chroma',
    'relative_chroma',
    'apply_hue_floor',
    'darken_lightness',
    'darken_color',
    'parse_color',
    'format_color',
    'transform',
]
