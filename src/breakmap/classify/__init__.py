"""Strict and blending break -> color classifiers."""

from .base import ColorClassifier
from .strict import StrictColorClassifier
from .blending import BlendingColorClassifier
from .builders import (
    strict_classification,
    strict_from_quantile_breaks,
    blending_classification,
    blending_from_palette,
)

__all__ = [
    "ColorClassifier",
    "StrictColorClassifier",
    "BlendingColorClassifier",
    "strict_classification",
    "strict_from_quantile_breaks",
    "blending_classification",
    "blending_from_palette",
]
