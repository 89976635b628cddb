"""ColorClassifier: base class for break -> color classifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from ..core.boundary import DEFAULT_BOUNDARY, ClassBoundaryType
from ..core.color import TRANSPARENT, RGBA
from ..core.colormap import ColorMap, ColorMapOptions
from ..core.histogram import HistogramLike
from ..core.validation import validate_boundary_type

# Sample value type being classified (int or float rasters)
T = TypeVar("T", int, float)

DEFAULT_NO_DATA_COLOR = TRANSPARENT
DEFAULT_FALLBACK_COLOR = TRANSPARENT


class ColorClassifier(ABC, Generic[T]):
    """Mutable builder of a (breaks, colors) classification.

    Update methods change the instance in place and return it, so calls
    chain. Instances hold no lock: share one between threads only with
    exclusive access.
    """

    def __init__(
        self,
        classification_type: ClassBoundaryType | str = DEFAULT_BOUNDARY,
        no_data_color: RGBA = DEFAULT_NO_DATA_COLOR,
        fallback_color: RGBA = DEFAULT_FALLBACK_COLOR,
    ) -> None:
        self._classification_type = validate_boundary_type(classification_type)
        self._no_data_color = no_data_color
        self._fallback_color = fallback_color

    @property
    def classification_type(self) -> ClassBoundaryType:
        return self._classification_type

    @abstractmethod
    def get_breaks(self) -> list[T]:
        """Class breaks, index-aligned with ``get_colors()``."""
        ...

    @abstractmethod
    def get_colors(self) -> list[RGBA]:
        ...

    @abstractmethod
    def map_breaks(self, f: Callable[[T], T]) -> ColorClassifier[T]:
        """Replace every break with ``f(break)``, keeping its color."""
        ...

    @abstractmethod
    def map_colors(self, f: Callable[[RGBA], RGBA]) -> ColorClassifier[T]:
        """Replace every color with ``f(color)``, keeping its break."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @property
    def length(self) -> int:
        """Number of breaks."""
        return len(self)

    def set_no_data_color(self, color: RGBA) -> ColorClassifier[T]:
        self._no_data_color = color
        return self

    def get_no_data_color(self) -> RGBA:
        return self._no_data_color

    def set_fallback_color(self, color: RGBA) -> ColorClassifier[T]:
        """Color for values not captured by any class."""
        self._fallback_color = color
        return self

    def get_fallback_color(self) -> RGBA:
        return self._fallback_color

    @property
    def cmap_options(self) -> ColorMapOptions:
        return ColorMapOptions(
            classification_type=self._classification_type,
            no_data_color=self._no_data_color.int,
            fallback_color=self._fallback_color.int,
            strict=False,
        )

    def to_color_map(self, histogram: HistogramLike | None = None) -> ColorMap:
        """Export the classification, pre-resolving colors for ``histogram``."""
        cmap = ColorMap.from_sequences(
            self.get_breaks(),
            [c.int for c in self.get_colors()],
            self.cmap_options,
        )
        if histogram is not None:
            return cmap.cache(histogram)
        return cmap

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(classification_type="
            f"{self._classification_type.value!r}, length={len(self)})"
        )
