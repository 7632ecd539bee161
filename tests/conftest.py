"""Test configuration for darkshade."""

import numpy as np
import pytest


@pytest.fixture(scope="session")
def sample_colors() -> list[str]:
    """A spread of inputs: light, dark, saturated, gray, every hue region."""
    rng = np.random.default_rng(7)
    fixed = [
        "#FFE4DF", "#808080", "#ffffff", "#000000", "#ff0000", "#00ff00",
        "#0000ff", "#ffff00", "#00ffff", "#ff00ff", "#336699", "#f5deb3",
        "oklch(0.9 0.05 100)", "oklch(0.95 0.01 180)", "oklch(0.7 0.3 320)",
    ]
    random = ["#{:02x}{:02x}{:02x}".format(*rng.integers(0, 256, size=3)) for _ in range(25)]
    return fixed + random
