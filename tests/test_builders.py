"""Tests for the classifier construction helpers."""

import pytest

from breakmap.core.boundary import ClassBoundaryType
from breakmap.core.color import RGBA
from breakmap.core.histogram import Histogram
from breakmap.classify import (
    BlendingColorClassifier,
    StrictColorClassifier,
    blending_classification,
    blending_from_palette,
    strict_classification,
    strict_from_quantile_breaks,
)

RED = RGBA(255, 0, 0)
GREEN = RGBA(0, 255, 0)
BLUE = RGBA(0, 0, 255)
PALETTE = [RED, GREEN, BLUE, RGBA(9, 9, 9)]


class _ShortHistogram:
    """Histogram stand-in that returns fewer breaks than requested."""

    def get_quantile_breaks(self, count):
        return [1.0, 2.0][:count]

    def values(self):
        return [1.0, 2.0]


class TestStrictClassification:
    def test_from_pairs(self):
        clf = strict_classification([(2, GREEN), (1, RED)])
        assert isinstance(clf, StrictColorClassifier)
        assert clf.get_breaks() == [1, 2]
        assert clf.get_colors() == [RED, GREEN]

    def test_no_data_color_applied(self):
        clf = strict_classification([(1, RED)], no_data_color=BLUE)
        assert clf.get_no_data_color() == BLUE

    def test_classification_type(self):
        clf = strict_classification([(1, RED)], classification_type="greater_than")
        assert clf.classification_type is ClassBoundaryType.GREATER_THAN


class TestStrictFromQuantileBreaks:
    def test_one_class_per_color(self, int_samples):
        hist = Histogram.from_values(int_samples)
        clf = strict_from_quantile_breaks(hist, PALETTE)
        assert clf.get_breaks() == [2, 4, 6, 8]
        assert clf.get_colors() == PALETTE

    def test_fewer_breaks_truncates_palette(self):
        clf = strict_from_quantile_breaks(_ShortHistogram(), PALETTE)
        assert clf.get_breaks() == [1.0, 2.0]
        assert clf.get_colors() == [RED, GREEN]

    def test_repeated_values_collapse(self):
        hist = Histogram.from_values([5, 5, 5, 5])
        clf = strict_from_quantile_breaks(hist, PALETTE[:3])
        assert clf.get_breaks() == [5]
        assert clf.get_colors() == [RED]


class TestBlendingClassification:
    def test_not_normalized(self):
        clf = blending_classification([0, 1, 2, 3], [RED, BLUE])
        assert isinstance(clf, BlendingColorClassifier)
        assert clf.get_breaks() == [0, 1, 2, 3]
        assert clf.get_colors() == [RED, BLUE]

    def test_no_data_color_applied(self):
        clf = blending_classification([0], [RED], no_data_color=GREEN)
        assert clf.get_no_data_color() == GREEN

    def test_from_palette(self):
        clf = blending_from_palette([0.0, 0.5, 1.0], "viridis")
        colors = clf.get_colors()
        assert len(colors) == 3
        assert colors[0] != colors[-1]
        assert all(c.alpha == 255 for c in colors)

    def test_from_palette_more_colors(self):
        clf = blending_from_palette([0, 1], "plasma", n_colors=6)
        assert len(clf.get_colors()) == 6
        clf.normalize()
        assert len(clf.get_colors()) == 2

    def test_from_palette_invalid_cmap_raises(self):
        with pytest.raises(ValueError, match="Unknown colormap"):
            blending_from_palette([0, 1], "not_a_real_cmap")
