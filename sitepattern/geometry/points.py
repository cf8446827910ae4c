"""Point set normalisation."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def as_point_set(points) -> np.ndarray:
    """
    Convert an array-like of (x, y) pairs into an (n, 2) float array.

    Parameters
    ----------
    points : array-like
        Sequence of (x, y) pairs, an (n, 2) array or a DataFrame with two
        numeric columns.

    Returns
    -------
    np.ndarray
        Array of shape (n, 2) with dtype float64. The input is copied, never
        modified in place.

    Raises
    ------
    ValueError
        If the input is not two-dimensional with two columns or contains
        non-finite coordinates.
    """
    coords = np.array(points, dtype=float)

    if coords.size == 0:
        return coords.reshape(0, 2)

    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(
            f"Points must have shape (n, 2), got {coords.shape}"
        )

    if not np.all(np.isfinite(coords)):
        raise ValueError("Point coordinates must be finite (no NaN or inf)")

    return coords


def bounding_box(points) -> tuple:
    """
    Return (xmin, xmax, ymin, ymax) of a point set.

    Parameters
    ----------
    points : array-like
        Point set.

    Returns
    -------
    tuple
        Extent of the points.
    """
    coords = as_point_set(points)
    if len(coords) == 0:
        raise ValueError("Cannot compute the extent of an empty point set")

    xmin, ymin = coords.min(axis=0)
    xmax, ymax = coords.max(axis=0)
    return float(xmin), float(xmax), float(ymin), float(ymax)
