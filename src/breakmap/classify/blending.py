"""BlendingColorClassifier: independent break and color lists, reconciled on export."""

from __future__ import annotations

import logging
import numbers
from typing import Callable, Iterable

from ..core.boundary import DEFAULT_BOUNDARY, ClassBoundaryType
from ..core.color import RGBA
from ..core.colormap import ColorMap
from ..core.histogram import HistogramLike
from .base import DEFAULT_FALLBACK_COLOR, DEFAULT_NO_DATA_COLOR, ColorClassifier, T
from .interpolation import choose_colors, choose_gradient, spread

logger = logging.getLogger(__name__)


def _flatten(items: tuple) -> list:
    """Accept either ``f(a, b, c)`` or ``f([a, b, c])``."""
    if len(items) == 1 and not isinstance(items[0], (RGBA, str, bytes)):
        try:
            return list(items[0])
        except TypeError:
            pass
    return list(items)


class BlendingColorClassifier(ColorClassifier[T]):
    """Ordered breaks and colors that may differ in length until normalized.

    Breaks are kept in insertion order with no sorting or de-duplication:
    until ``normalize()`` they only set how many colors are needed.
    ``normalize()`` subsamples surplus colors or interpolates missing ones
    so both lists end up the same length. ``to_color_map()`` always
    normalizes first.

    Usage::

        clf = BlendingColorClassifier()
        clf.add_breaks(0, 10, 20, 30, 40).add_colors(RGBA(255, 0, 0), RGBA(0, 0, 255))
        clf.normalize().get_colors()  # five colors, red to blue
    """

    def __init__(
        self,
        classification_type: ClassBoundaryType | str = DEFAULT_BOUNDARY,
        no_data_color: RGBA = DEFAULT_NO_DATA_COLOR,
        fallback_color: RGBA = DEFAULT_FALLBACK_COLOR,
    ) -> None:
        super().__init__(
            classification_type=classification_type,
            no_data_color=no_data_color,
            fallback_color=fallback_color,
        )
        self._breaks: list[T] = []
        self._colors: list[RGBA] = []

    def __len__(self) -> int:
        return len(self._breaks)

    def get_breaks(self) -> list[T]:
        return list(self._breaks)

    def get_colors(self) -> list[RGBA]:
        return list(self._colors)

    def add_breaks(self, *breaks) -> BlendingColorClassifier[T]:
        """Append breaks as given."""
        self._breaks.extend(_flatten(breaks))
        return self

    def add_colors(self, *colors) -> BlendingColorClassifier[T]:
        """Append colors as given."""
        self._colors.extend(_flatten(colors))
        return self

    def map_breaks(self, f: Callable[[T], T]) -> BlendingColorClassifier[T]:
        self._breaks = [f(b) for b in self._breaks]
        return self

    def map_colors(self, f: Callable[[RGBA], RGBA]) -> BlendingColorClassifier[T]:
        self._colors = [f(c) for c in self._colors]
        return self

    def normalize(self) -> BlendingColorClassifier[T]:
        """Resample the colors so there is exactly one per break."""
        n_breaks, n_colors = len(self._breaks), len(self._colors)
        if n_breaks < n_colors:
            logger.debug("Spreading %d colors over %d breaks", n_colors, n_breaks)
            self._colors = spread(self._colors, n_breaks)
        elif n_breaks > n_colors:
            logger.debug("Interpolating %d colors to %d breaks", n_colors, n_breaks)
            self._colors = choose_colors(self._colors, n_breaks)
        return self

    def alpha_gradient(
        self,
        start: RGBA = RGBA.from_int(0),
        stop: RGBA = RGBA.from_int(0xFF),
    ) -> BlendingColorClassifier[T]:
        """Ramp alpha from ``start.alpha`` to ``stop.alpha`` across the colors.

        Red, green and blue are left untouched.
        """
        if not self._colors:
            return self
        alphas = [c.alpha for c in choose_gradient(start, stop, len(self._colors))]
        self._colors = [c.with_alpha(a) for c, a in zip(self._colors, alphas)]
        return self

    def set_alpha(self, alpha: int) -> BlendingColorClassifier[T]:
        """Give every color the same absolute alpha (0-255)."""
        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Integral):
            raise TypeError(
                f"set_alpha expects an integer alpha in 0-255, got {alpha!r}. "
                "Use set_alpha_percent for fractional opacity."
            )
        self._colors = [c.with_alpha(alpha) for c in self._colors]
        return self

    def set_alpha_percent(self, pct: float) -> BlendingColorClassifier[T]:
        """Give every color the same alpha, as a fraction of full opacity."""
        self._colors = [
            RGBA.from_alpha_percent(*c.unzip_rgb(), pct) for c in self._colors
        ]
        return self

    def to_color_map(self, histogram: HistogramLike | None = None) -> ColorMap:
        self.normalize()
        return super().to_color_map(histogram)
