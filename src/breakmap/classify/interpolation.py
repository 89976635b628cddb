"""Color resampling: subsample or interpolate a palette to a target length.

All functions are pure. Channel arithmetic is integer-only and truncates
toward zero (not floor), so a descending channel rounds up towards its
start value rather than down.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np

from ..core.color import CHANNELS, RGBA
from ..core.validation import validate_nonempty_colors, validate_output_count

ChannelRanges = Callable[[str, int], np.ndarray]


def blend(start: int, end: int, numerator: int, denominator: int) -> int:
    """``start + (end - start) * numerator / denominator``, truncated toward zero."""
    product = (end - start) * numerator
    quotient = abs(product) // abs(denominator)
    if (product < 0) != (denominator < 0):
        quotient = -quotient
    return start + quotient


def _blend_array(
    start: np.ndarray, end: np.ndarray, numerator: np.ndarray, denominator: int
) -> np.ndarray:
    """Vectorised ``blend`` over int64 arrays (denominator > 0)."""
    product = (end - start) * numerator
    return start + np.sign(product) * (np.abs(product) // denominator)


def spread(colors: Sequence[RGBA], n: int) -> list[RGBA]:
    """Pick ``n`` representative colors out of a longer palette.

    Output ``i`` takes ``colors[round(i * (m - 1) / (n - 1))]`` with halves
    rounding up, so both endpoints survive. A 9-color red-to-green ramp
    spread to 3 yields the first, the 5th and the last color.
    """
    validate_nonempty_colors(colors, "spread")
    n = validate_output_count(n, "spread")
    if len(colors) == n:
        return list(colors)

    last = len(colors) - 1
    out = [colors[0]]
    for i in range(1, n):
        out.append(colors[math.floor(i * last / (n - 1) + 0.5)])
    return out


def color_sequence(n: int, get_ranges: ChannelRanges) -> list[RGBA]:
    """Assemble per-channel value arrays into ``n`` colors."""
    per_channel = [np.asarray(get_ranges(ch, n), dtype=np.int64) for ch in CHANNELS]
    return [
        RGBA(int(r), int(g), int(b), int(a))
        for r, g, b, a in zip(*(arr[:n] for arr in per_channel))
    ]


def choose_colors(colors: Sequence[RGBA], n: int) -> list[RGBA]:
    """Expand a palette to ``n`` colors by per-channel linear interpolation.

    Output ``i`` sits at fractional source position ``i * (m - 1) / (n - 1)``
    and blends its two neighbouring source colors. The first and last
    outputs equal the first and last source colors exactly.
    """
    validate_nonempty_colors(colors, "choose_colors")
    n = validate_output_count(n, "choose_colors")

    def ranges(channel: str, count: int) -> np.ndarray:
        hues = np.array([c.channel(channel) for c in colors], dtype=np.int64)
        mult = len(hues) - 1
        denom = count - 1
        if count < 2:
            return hues[:1]
        scaled = np.arange(count, dtype=np.int64) * mult
        j = scaled // denom
        out = hues[np.minimum(j, mult)].copy()
        inner = j < mult
        out[inner] = _blend_array(
            hues[j[inner]], hues[j[inner] + 1], scaled[inner] % denom, denom
        )
        return out

    return color_sequence(n, ranges)


def choose_gradient(color1: RGBA, color2: RGBA, n: int) -> list[RGBA]:
    """``n`` colors stepping linearly from ``color1`` to ``color2``."""
    n = validate_output_count(n, "choose_gradient")

    def ranges(channel: str, count: int) -> np.ndarray:
        start = color1.channel(channel)
        end = color2.channel(channel)
        if count < 2:
            return np.array([start], dtype=np.int64)
        steps = np.arange(count, dtype=np.int64)
        return _blend_array(
            np.int64(start), np.int64(end), steps, count - 1
        )

    return color_sequence(n, ranges)
