"""Precondition checks with clear error messages."""

from __future__ import annotations

from typing import Any, Sequence

from .boundary import ClassBoundaryType


def validate_nonempty_colors(colors: Sequence[Any], operation: str) -> Sequence[Any]:
    """Interpolation needs at least one source color."""
    if len(colors) == 0:
        raise ValueError(
            f"{operation} requires a non-empty color sequence. "
            "Add colors before resampling."
        )
    return colors


def validate_output_count(n: int, operation: str) -> int:
    """Interpolation must produce at least one output color."""
    if int(n) != n:
        raise TypeError(f"{operation} output count must be an integer, got {n!r}.")
    if n < 1:
        raise ValueError(
            f"{operation} output count must be at least 1, got {n}."
        )
    return int(n)


def validate_boundary_type(value: Any) -> ClassBoundaryType:
    """Coerce a boundary type or its string value into ClassBoundaryType."""
    try:
        return ClassBoundaryType(value)
    except ValueError:
        valid = [b.value for b in ClassBoundaryType]
        raise ValueError(
            f"Unknown classification type {value!r}. Expected one of {valid}."
        ) from None


def validate_colormap_name(name: str) -> str:
    """Validate that a matplotlib colormap name exists."""
    import matplotlib.pyplot as plt

    try:
        plt.get_cmap(name)
    except ValueError:
        raise ValueError(
            f"Unknown colormap '{name}'. Use a matplotlib colormap name "
            f"like 'viridis', 'plasma', 'RdYlGn', etc."
        ) from None
    return name


def validate_parallel(breaks: Sequence[Any], colors: Sequence[Any]) -> None:
    """A color map export needs exactly one color per break."""
    if len(breaks) != len(colors):
        raise ValueError(
            f"Color map needs one color per break: got {len(breaks)} breaks "
            f"and {len(colors)} colors."
        )
