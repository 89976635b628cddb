"""ClassBoundaryType: how a value compares against a class break."""

from __future__ import annotations

from enum import Enum


class ClassBoundaryType(str, Enum):
    """Boundary comparison carried alongside a classification.

    Classifiers store it untouched; only ``ColorMap.color_for`` reads it.
    """

    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    EXACT = "exact"


DEFAULT_BOUNDARY = ClassBoundaryType.LESS_THAN
