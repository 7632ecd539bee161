"""Parse CSS-style color text into an OKLCH Color.

Accepted forms (case-insensitive, surrounding whitespace ignored):

- hex with or without ``#``: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``
- ``rgb(255, 228, 223)``, ``rgba(...)``, ``rgb(100% 89% 87% / 0.5)``
- ``hsl(9, 100%, 94%)``, ``hsla(...)``
- ``oklch(0.93 0.03 28)``, ``oklch(93% 0.03 28deg)``
- ``oklab(0.93 0.03 0.01)``
- CSS named colors (``rebeccapurple``)

Alpha is accepted and dropped; the darkening pipeline is opaque-only.
"""

from __future__ import annotations

import colorsys
import logging
import math
import re

import numpy as np
from matplotlib.colors import CSS4_COLORS

from darkshade.types import Color, ColorParseError

from .oklch import oklab_to_oklch, srgb_to_oklch

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"#?([0-9a-f]{3,8})")
_FUNC_RE = re.compile(r"([a-z]+)\((.*)\)")
_NUMBER_RE = re.compile(r"([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg)?")

# CSS scales percentages of OKLCH/OKLab chroma and a/b against 0.4
_OK_PERCENT_REFERENCE = 0.4


def _split_args(body: str) -> list[str]:
    """Split function arguments, dropping a trailing alpha component."""
    if "/" in body:
        body, _alpha = body.split("/", 1)
        # Legacy comma syntax never mixes with slash alpha
        if "," in body:
            raise ColorParseError(f"Mixed separators in color arguments: {body!r}")
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if len(parts) == 4:
            parts = parts[:3]
    else:
        parts = body.split()
    if len(parts) != 3 or not all(parts):
        raise ColorParseError(f"Expected three color components, got {body!r}")
    return parts


def _number(token: str, percent_of: float | None = None, allow_deg: bool = False) -> float:
    """Parse one numeric component.

    Args:
        token: Component text, e.g. ``"0.5"``, ``"50%"``, ``"120deg"``
        percent_of: Value that 100% maps to; None rejects percentages
        allow_deg: Accept a ``deg`` unit suffix
    """
    match = _NUMBER_RE.fullmatch(token)
    if match is None:
        raise ColorParseError(f"Not a number: {token!r}")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise ColorParseError(f"Number out of range: {token!r}")
    unit = match.group(2)
    if unit == "%":
        if percent_of is None:
            raise ColorParseError(f"Percentage not allowed here: {token!r}")
        return value / 100.0 * percent_of
    if unit == "deg" and not allow_deg:
        raise ColorParseError(f"Angle not allowed here: {token!r}")
    return value


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _from_srgb(r: float, g: float, b: float) -> Color:
    L, C, H = srgb_to_oklch(np.array([r, g, b], dtype=np.float64))
    return Color(float(L), float(C), float(H))


def _parse_hex(digits: str) -> Color:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    elif len(digits) in (6, 8):
        digits = digits[:6]
    else:
        raise ColorParseError(f"Hex color must have 3, 4, 6 or 8 digits: {digits!r}")
    r, g, b = (int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    return _from_srgb(r, g, b)


def _parse_rgb(args: list[str]) -> Color:
    channels = [_clamp01(_number(a, percent_of=255.0) / 255.0) for a in args]
    return _from_srgb(*channels)


def _parse_hsl(args: list[str]) -> Color:
    h = _number(args[0], allow_deg=True) % 360.0
    # Saturation and lightness are percentages with or without the % sign
    s = _clamp01(_number(args[1], percent_of=100.0) / 100.0)
    l = _clamp01(_number(args[2], percent_of=100.0) / 100.0)
    r, g, b = colorsys.hls_to_rgb(h / 360.0, l, s)
    return _from_srgb(r, g, b)


def _parse_oklch(args: list[str]) -> Color:
    L = _number(args[0], percent_of=1.0)
    C = _number(args[1], percent_of=_OK_PERCENT_REFERENCE)
    H = _number(args[2], allow_deg=True)
    if C < 0:
        raise ColorParseError(f"Chroma must be non-negative: {args[1]!r}")
    return Color(L, C, H)


def _parse_oklab(args: list[str]) -> Color:
    L = _number(args[0], percent_of=1.0)
    a = _number(args[1], percent_of=_OK_PERCENT_REFERENCE)
    b = _number(args[2], percent_of=_OK_PERCENT_REFERENCE)
    _, C, H = oklab_to_oklch(L, a, b)
    if not math.isfinite(C):
        raise ColorParseError(f"Chroma out of range: {a!r}, {b!r}")
    return Color(L, float(C), float(H))


_FUNCTIONS = {
    "rgb": _parse_rgb,
    "rgba": _parse_rgb,
    "hsl": _parse_hsl,
    "hsla": _parse_hsl,
    "oklch": _parse_oklch,
    "oklab": _parse_oklab,
}


def parse_color(text: str) -> Color:
    """Parse color text into an OKLCH Color.

    Raises:
        ColorParseError: If *text* is not a recognizable color
    """
    if not isinstance(text, str):
        raise ColorParseError(f"Color must be text, got {type(text).__name__}")

    value = text.strip().lower()
    if not value:
        raise ColorParseError("Empty color")

    named = CSS4_COLORS.get(value)
    if named is not None:
        return _parse_hex(named.lstrip("#").lower())

    match = _HEX_RE.fullmatch(value)
    if match is not None:
        return _parse_hex(match.group(1))

    match = _FUNC_RE.fullmatch(value)
    if match is not None:
        name, body = match.groups()
        parser = _FUNCTIONS.get(name)
        if parser is None:
            raise ColorParseError(f"Unknown color function: {name}()")
        color = parser(_split_args(body.strip()))
        logger.debug("Parsed %r as %s", text, color)
        return color

    raise ColorParseError(f"Unrecognized color: {text!r}")
