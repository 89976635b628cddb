"""Convenience constructors for strict and blending classifiers."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..core.boundary import DEFAULT_BOUNDARY, ClassBoundaryType
from ..core.color import RGBA
from ..core.histogram import HistogramLike
from ..core.palette import palette_from_cmap
from .blending import BlendingColorClassifier
from .strict import StrictColorClassifier


def strict_classification(
    classifications: Iterable[tuple],
    no_data_color: RGBA | None = None,
    classification_type: ClassBoundaryType | str = DEFAULT_BOUNDARY,
) -> StrictColorClassifier:
    """Build a strict classifier from ``(break, color)`` pairs."""
    clf = StrictColorClassifier(classification_type)
    clf.add_classifications(classifications)
    if no_data_color is not None:
        clf.set_no_data_color(no_data_color)
    return clf


def strict_from_quantile_breaks(
    histogram: HistogramLike,
    colors: Sequence[RGBA],
    classification_type: ClassBoundaryType | str = DEFAULT_BOUNDARY,
) -> StrictColorClassifier:
    """One class per color, with breaks at the histogram's quantiles.

    When the histogram yields fewer breaks than there are colors, the
    trailing colors are dropped.
    """
    breaks = histogram.get_quantile_breaks(len(colors))
    return strict_classification(
        zip(breaks, colors), classification_type=classification_type
    )


def blending_classification(
    breaks: Iterable,
    colors: Iterable[RGBA],
    no_data_color: RGBA | None = None,
    classification_type: ClassBoundaryType | str = DEFAULT_BOUNDARY,
) -> BlendingColorClassifier:
    """Build a blending classifier; colors are not normalized yet."""
    clf = BlendingColorClassifier(classification_type)
    clf.add_breaks(list(breaks)).add_colors(list(colors))
    if no_data_color is not None:
        clf.set_no_data_color(no_data_color)
    return clf


def blending_from_palette(
    breaks: Sequence,
    cmap_name: str = "viridis",
    n_colors: int | None = None,
    classification_type: ClassBoundaryType | str = DEFAULT_BOUNDARY,
) -> BlendingColorClassifier:
    """Blending classifier whose colors are sampled from a matplotlib colormap.

    ``n_colors`` defaults to one color per break.
    """
    n = len(breaks) if n_colors is None else n_colors
    return blending_classification(
        breaks,
        palette_from_cmap(cmap_name, n),
        classification_type=classification_type,
    )
