"""Tests for ColorMap lookup, caching and legend export."""

import math

import numpy as np
import pandas as pd
import pytest

from breakmap.core.boundary import ClassBoundaryType
from breakmap.core.color import RGBA
from breakmap.core.colormap import ColorMap, ColorMapOptions
from breakmap.core.histogram import Histogram

NO_DATA = 0x000000FF
FALLBACK = 0xFFFFFFFF


def make_cmap(kind, strict=False):
    opts = ColorMapOptions(kind, NO_DATA, FALLBACK, strict)
    return ColorMap.from_sequences([10, 20, 30], [1, 2, 3], opts)


class TestColorMapInit:
    def test_mismatched_lengths_raise(self):
        with pytest.raises(ValueError, match="one color per break"):
            ColorMap.from_sequences([1, 2], [1])

    def test_default_options(self):
        cmap = ColorMap.from_sequences([1], [5])
        assert cmap.options == ColorMapOptions()
        assert cmap.options.strict is False

    def test_immutable(self):
        cmap = ColorMap.from_sequences([1], [5])
        with pytest.raises(AttributeError):
            cmap.breaks = (2,)


class TestColorFor:
    @pytest.mark.parametrize(
        "kind, value, expected",
        [
            (ClassBoundaryType.LESS_THAN, 5, 1),
            (ClassBoundaryType.LESS_THAN, 10, 2),
            (ClassBoundaryType.LESS_THAN, 30, FALLBACK),
            (ClassBoundaryType.LESS_THAN_OR_EQUAL_TO, 10, 1),
            (ClassBoundaryType.LESS_THAN_OR_EQUAL_TO, 30, 3),
            (ClassBoundaryType.GREATER_THAN, 35, 3),
            (ClassBoundaryType.GREATER_THAN, 15, 1),
            (ClassBoundaryType.GREATER_THAN, 10, FALLBACK),
            (ClassBoundaryType.GREATER_THAN_OR_EQUAL_TO, 10, 1),
            (ClassBoundaryType.EXACT, 20, 2),
            (ClassBoundaryType.EXACT, 21, FALLBACK),
        ],
    )
    def test_boundary_types(self, kind, value, expected):
        assert make_cmap(kind).color_for(value) == expected

    def test_nan_is_no_data(self):
        assert make_cmap(ClassBoundaryType.LESS_THAN).color_for(math.nan) == NO_DATA
        assert make_cmap(ClassBoundaryType.LESS_THAN).color_for(None) == NO_DATA

    def test_float32_nan_is_no_data(self):
        cmap = make_cmap(ClassBoundaryType.LESS_THAN)
        value = np.array([np.nan], dtype=np.float32)[0]
        assert cmap.color_for(value) == NO_DATA
        assert cmap.color_for(np.float32("nan")) == NO_DATA

    def test_strict_unmatched_raises(self):
        cmap = make_cmap(ClassBoundaryType.EXACT, strict=True)
        with pytest.raises(ValueError, match="matches no class break"):
            cmap.color_for(21)

    def test_rgba_for(self):
        cmap = ColorMap.from_sequences([10], [RGBA(1, 2, 3, 4).int])
        assert cmap.rgba_for(5) == RGBA(1, 2, 3, 4)


class TestCache:
    def test_cache_returns_new_map(self):
        cmap = make_cmap(ClassBoundaryType.LESS_THAN)
        cached = cmap.cache(Histogram.from_values([5, 15, 40]))
        assert cached.is_cached
        assert not cmap.is_cached
        assert cached == cmap

    def test_cached_values_match_lookup(self):
        cmap = make_cmap(ClassBoundaryType.LESS_THAN)
        cached = cmap.cache(Histogram.from_values([5, 15, 40]))
        for value in (5, 15, 40, 25):
            assert cached.color_for(value) == cmap.color_for(value)


class TestToFrame:
    def test_columns(self):
        cmap = ColorMap.from_sequences([0.5, 1.5], [RGBA(255, 0, 0).int, RGBA(0, 0, 255, 0).int])
        df = cmap.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["break", "color", "hex", "red", "green", "blue", "alpha"]
        assert df["hex"].tolist() == ["#ff0000ff", "#0000ff00"]
        assert df["break"].tolist() == [0.5, 1.5]
        assert df["alpha"].tolist() == [255, 0]
