"""StrictColorClassifier: exact break -> color mapping, no interpolation."""

from __future__ import annotations

from typing import Callable, Iterable

from ..core.boundary import DEFAULT_BOUNDARY, ClassBoundaryType
from ..core.color import RGBA
from .base import DEFAULT_FALLBACK_COLOR, DEFAULT_NO_DATA_COLOR, ColorClassifier, T


class StrictColorClassifier(ColorClassifier[T]):
    """Unique-key mapping from break to color.

    Classifying an existing break overwrites its color. Breaks can be
    added in any order; ``get_breaks()`` always returns them sorted and
    ``get_colors()`` follows the same order.

    Usage::

        clf = StrictColorClassifier()
        clf.classify(10, RGBA(0, 0, 255)).classify(0, RGBA(255, 0, 0))
        clf.get_breaks()  # [0, 10]
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
        self._classifications: dict[T, RGBA] = {}

    def __len__(self) -> int:
        return len(self._classifications)

    def classify(self, class_break: T, class_color: RGBA) -> StrictColorClassifier[T]:
        """Insert or overwrite the color for ``class_break``."""
        self._classifications[class_break] = class_color
        return self

    def add_classifications(
        self, classifications: Iterable[tuple[T, RGBA]]
    ) -> StrictColorClassifier[T]:
        """Classify each pair in order; a later duplicate break wins."""
        for class_break, class_color in classifications:
            self.classify(class_break, class_color)
        return self

    def get_breaks(self) -> list[T]:
        return sorted(self._classifications)

    def get_colors(self) -> list[RGBA]:
        return [self._classifications[b] for b in self.get_breaks()]

    def map_breaks(self, f: Callable[[T], T]) -> StrictColorClassifier[T]:
        # breaks that collide under f keep the color inserted last
        self._classifications = {f(k): v for k, v in self._classifications.items()}
        return self

    def map_colors(self, f: Callable[[RGBA], RGBA]) -> StrictColorClassifier[T]:
        self._classifications = {k: f(v) for k, v in self._classifications.items()}
        return self
