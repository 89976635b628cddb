"""ColorMap: the (breaks, colors, options) export handed to the renderer."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

import pandas as pd

from .boundary import ClassBoundaryType
from .color import RGBA
from .histogram import HistogramLike
from .validation import validate_parallel


@dataclass(frozen=True)
class ColorMapOptions:
    """Rendering options travelling with a color map.

    ``no_data_color`` and ``fallback_color`` are packed 0xRRGGBBAA ints.
    With ``strict`` set, values matching no break raise instead of
    taking the fallback color.
    """

    classification_type: ClassBoundaryType = ClassBoundaryType.LESS_THAN
    no_data_color: int = 0x00000000
    fallback_color: int = 0x00000000
    strict: bool = False


@dataclass(frozen=True)
class ColorMap:
    """Immutable break -> packed color association.

    Usage::

        cmap = classifier.to_color_map()
        cmap.color_for(42.0)   # packed 0xRRGGBBAA
        cmap.to_frame()        # legend table
    """

    breaks: tuple
    colors: tuple[int, ...]
    options: ColorMapOptions = ColorMapOptions()
    _cache: dict | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_parallel(self.breaks, self.colors)
        object.__setattr__(self, "breaks", tuple(self.breaks))
        object.__setattr__(self, "colors", tuple(int(c) for c in self.colors))

    @classmethod
    def from_sequences(
        cls,
        breaks: Sequence[Any],
        colors: Sequence[int],
        options: ColorMapOptions | None = None,
    ) -> ColorMap:
        return cls(tuple(breaks), tuple(colors), options or ColorMapOptions())

    def __len__(self) -> int:
        return len(self.breaks)

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    def cache(self, histogram: HistogramLike) -> ColorMap:
        """Return a copy with every histogram value's color pre-resolved."""
        resolved = {value: self._resolve(value) for value in histogram.values()}
        return replace(self, _cache=resolved)

    def color_for(self, value: Any) -> int:
        """Packed color for a single sample value."""
        if _is_no_data(value):
            return self.options.no_data_color
        if self._cache is not None and value in self._cache:
            return self._cache[value]
        return self._resolve(value)

    def rgba_for(self, value: Any) -> RGBA:
        return RGBA.from_int(self.color_for(value))

    def to_frame(self) -> pd.DataFrame:
        """Legend table: one row per break with its color in several forms."""
        rgba = [RGBA.from_int(c) for c in self.colors]
        return pd.DataFrame({
            "break": list(self.breaks),
            "color": list(self.colors),
            "hex": [c.to_hex() for c in rgba],
            "red": [c.red for c in rgba],
            "green": [c.green for c in rgba],
            "blue": [c.blue for c in rgba],
            "alpha": [c.alpha for c in rgba],
        })

    def _resolve(self, value: Any) -> int:
        if _is_no_data(value):
            return self.options.no_data_color
        idx = self._find_class(value)
        if idx is None:
            if self.options.strict:
                raise ValueError(
                    f"Value {value!r} matches no class break "
                    f"({self.options.classification_type.value})."
                )
            return self.options.fallback_color
        return self.colors[idx]

    def _find_class(self, value: Any) -> int | None:
        kind = self.options.classification_type
        breaks = self.breaks
        if kind is ClassBoundaryType.LESS_THAN:
            return next((i for i, b in enumerate(breaks) if value < b), None)
        if kind is ClassBoundaryType.LESS_THAN_OR_EQUAL_TO:
            return next((i for i, b in enumerate(breaks) if value <= b), None)
        if kind is ClassBoundaryType.GREATER_THAN:
            return next((i for i in reversed(range(len(breaks))) if value > breaks[i]), None)
        if kind is ClassBoundaryType.GREATER_THAN_OR_EQUAL_TO:
            return next((i for i in reversed(range(len(breaks))) if value >= breaks[i]), None)
        return next((i for i, b in enumerate(breaks) if value == b), None)


def _is_no_data(value: Any) -> bool:
    return value is None or (isinstance(value, numbers.Real) and math.isnan(value))
