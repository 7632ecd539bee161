"""Central place for darkshade default settings."""

# Gamut boundary search
MAX_SEARCH_CHROMA: float = 0.4  # Theoretical OKLCH chroma ceiling for sRGB
CHROMA_SEARCH_EPSILON: float = 0.001
GAMUT_TOLERANCE: float = 1e-6  # sRGB channel slack for float noise at 0 and 1

# Achromatic detection
ACHROMATIC_THRESHOLD: float = 0.001

# Hue saturation floor: hues in (LOW, HIGH] keep at least FLOOR relative chroma
HUE_FLOOR_LOW: float = 30.0
HUE_FLOOR_HIGH: float = 210.0
HUE_FLOOR_RELATIVE_CHROMA: float = 0.8

# Lightness remap: L' = min(SLOPE * L - OFFSET, CAP)
LIGHTNESS_SLOPE: float = 2.0
LIGHTNESS_OFFSET: float = 1.3
LIGHTNESS_CAP: float = 0.5

# Artistic chroma cap applied after gamut handling
CHROMA_CEILING: float = 0.2

# Output
INVALID_COLOR: str = "Invalid color"
DEFAULT_OUTPUT_FORMAT: str = "hex"
DEFAULT_INPUT_COLOR: str = "#FFE4DF"
