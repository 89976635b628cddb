"""breakmap: classify raster sample values into display colors."""

from ._version import __version__
from .core.boundary import ClassBoundaryType
from .core.color import RGBA, TRANSPARENT
from .core.colormap import ColorMap, ColorMapOptions
from .core.histogram import Histogram, HistogramLike
from .core.palette import palette_from_cmap, palette_from_hex
from .classify import (
    ColorClassifier,
    StrictColorClassifier,
    BlendingColorClassifier,
    strict_classification,
    strict_from_quantile_breaks,
    blending_classification,
    blending_from_palette,
)

__all__ = [
    "__version__",
    "ClassBoundaryType",
    "RGBA",
    "TRANSPARENT",
    "ColorMap",
    "ColorMapOptions",
    "Histogram",
    "HistogramLike",
    "palette_from_cmap",
    "palette_from_hex",
    "ColorClassifier",
    "StrictColorClassifier",
    "BlendingColorClassifier",
    "strict_classification",
    "strict_from_quantile_breaks",
    "blending_classification",
    "blending_from_palette",
]
