"""
Geometry helpers for 2D obstacle point sets.
"""

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties toward +inf.
    
    Keeps every value inside the half-open interval [n - 0.5, n + 0.5)
    of the integer it rounds to, including negative values.
    """
    return int(math.floor(value + 0.5))


def stack_points(xs: Sequence[float], ys: Sequence[float]) -> np.ndarray:
    """
    Combine separate coordinate sequences into an (N, 2) array.
    
    Args:
        xs: X coordinates
        ys: Y coordinates
    
    Returns:
        Array of 2D points (N, 2), float64
    
    Raises:
        ConfigurationError: If the sequences differ in length or hold non-finite values
    """
    try:
        xs = np.asarray(xs, dtype=float).reshape(-1)
        ys = np.asarray(ys, dtype=float).reshape(-1)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"obstacle coordinates must be numbers: {e}") from e
    if xs.shape != ys.shape:
        raise ConfigurationError(
            f"obstacle coordinate arrays differ in length: {len(xs)} x vs {len(ys)} y"
        )
    points = np.column_stack([xs, ys]) if len(xs) else np.empty((0, 2))
    if not np.isfinite(points).all():
        raise ConfigurationError("obstacle coordinates must be finite")
    return points


def compute_bounds(points: np.ndarray,
                   bounds: Optional[Tuple[float, float, float, float]] = None
                   ) -> Tuple[int, int, int, int]:
    """
    Compute the integer extent of a point set.
    
    Args:
        points: Array of 2D points (N, 2)
        bounds: Optional (min_x, min_y, max_x, max_y) merged into the extent
    
    Returns:
        Tuple of (min_x, min_y, max_x, max_y), each rounded half up
    """
    corners = []
    if len(points):
        corners.append(points.min(axis=0))
        corners.append(points.max(axis=0))
    if bounds is not None:
        corners.append(np.array(bounds[:2], dtype=float))
        corners.append(np.array(bounds[2:], dtype=float))
    if not corners:
        raise ConfigurationError("cannot derive grid bounds from an empty obstacle set")

    corners = np.vstack(corners)
    min_x, min_y = corners.min(axis=0)
    max_x, max_y = corners.max(axis=0)
    return (round_half_up(min_x), round_half_up(min_y),
            round_half_up(max_x), round_half_up(max_y))
