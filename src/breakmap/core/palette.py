"""Palettes: color sequences from matplotlib colormaps or hex strings."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .color import RGBA
from .validation import validate_colormap_name, validate_output_count


def palette_from_cmap(cmap_name: str, n: int) -> list[RGBA]:
    """Sample ``n`` evenly spaced colors from a matplotlib colormap."""
    import matplotlib.pyplot as plt

    validate_colormap_name(cmap_name)
    n = validate_output_count(n, "palette_from_cmap")
    cmap = plt.get_cmap(cmap_name)
    positions = np.linspace(0.0, 1.0, n)
    rgba_float = cmap(positions)  # (n, 4) float in [0, 1]
    rgba = np.rint(rgba_float * 255).astype(np.uint8)
    return [RGBA(*(int(v) for v in row)) for row in rgba]


def palette_from_hex(values: Iterable[str]) -> list[RGBA]:
    """Parse hex strings (or matplotlib color names) into RGBA colors."""
    return [RGBA.from_hex(v) for v in values]
