"""Core data types for darkshade - framework-agnostic."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from darkshade import defaults


class DarkshadeError(Exception):
    """Base class for errors raised by darkshade."""


class ColorParseError(DarkshadeError, ValueError):
    """Input text is not a recognizable color."""


class UnsupportedFormatError(DarkshadeError, ValueError):
    """Requested output format is not one of the known variants."""


def normalize_hue(h: float) -> float:
    """Wrap hue degrees into [0, 360)."""
    h = float(h) % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if h >= 360.0 else h


@dataclass(frozen=True)
class Color:
    """A single OKLCH color.

    Attributes:
        L: Lightness (nominally 0-1)
        C: Chroma, never negative
        H: Hue in degrees, normalized into [0, 360)
    """

    L: float
    C: float
    H: float

    def __post_init__(self):
        if not all(math.isfinite(v) for v in (self.L, self.C, self.H)):
            raise ValueError(f"Color components must be finite, got {(self.L, self.C, self.H)}")
        if self.C < 0:
            raise ValueError(f"Chroma must be non-negative, got {self.C}")
        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, 'L', float(self.L))
        object.__setattr__(self, 'C', float(self.C))
        object.__setattr__(self, 'H', normalize_hue(self.H))

    @property
    def is_achromatic(self) -> bool:
        return self.C < defaults.ACHROMATIC_THRESHOLD

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.L, self.C, self.H)


class OutputFormat(Enum):
    """Text formats a processed color can be written in."""

    HEX = "hex"
    RGB = "rgb"
    OKLCH = "oklch"

    @classmethod
    def coerce(cls, value: "OutputFormat | str") -> "OutputFormat":
        """Accept an OutputFormat or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedFormatError(f"Unsupported output format: {value!r}")


@dataclass(frozen=True)
class TransformDiagnostics:
    """What happened during one darkening run.

    Handed to the optional ``on_diagnostic`` hook of ``transform``. Numeric
    fields are None when the run failed before reaching them.
    """

    input_text: str
    output_format: str
    use_relative_chroma: bool
    input_color: Optional[Color] = None
    base_relative_chroma: Optional[float] = None
    relative_chroma: Optional[float] = None
    lightness: Optional[float] = None
    unclamped_chroma: Optional[float] = None
    output_color: Optional[Color] = None
    output_in_gamut: Optional[bool] = None
    result: str = defaults.INVALID_COLOR
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
