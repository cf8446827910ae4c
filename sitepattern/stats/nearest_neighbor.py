"""Average nearest-neighbour (ANN) statistic."""

import logging

import numpy as np
from scipy.spatial import cKDTree

from ..exceptions import InsufficientPointsError
from ..geometry import as_point_set

logger = logging.getLogger(__name__)


def nearest_neighbor_distances(points) -> np.ndarray:
    """
    Compute the distance from every point to its nearest other point.

    Parameters
    ----------
    points : array-like
        Point set with at least 2 points.

    Returns
    -------
    np.ndarray
        Array of length n with Euclidean nearest-neighbour distances.
        Coincident points have distance 0.

    Raises
    ------
    InsufficientPointsError
        If fewer than 2 points are given.
    """
    coords = as_point_set(points)
    n_points = len(coords)

    if n_points < 2:
        raise InsufficientPointsError(n_points)

    tree = cKDTree(coords)
    distances, _ = tree.query(coords, k=2)  # k=2 to get first NN (not self)

    return distances[:, 1]


def compute_ann(points) -> float:
    """
    Compute the average nearest-neighbour distance of a point set.

    Parameters
    ----------
    points : array-like
        Point set with at least 2 points.

    Returns
    -------
    float
        Mean over all points of the distance to the closest other point.

    Raises
    ------
    InsufficientPointsError
        If fewer than 2 points are given.
    """
    distances = nearest_neighbor_distances(points)
    ann = float(distances.mean())

    logger.debug(f"ANN over {len(distances)} points: {ann:.4f}")

    return ann
