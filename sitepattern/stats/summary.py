"""Summaries comparing an observed ANN with its null distribution."""

import logging
from typing import Dict

import numpy as np

from ..exceptions import InsufficientPointsError
from ..geometry import as_point_set, as_window
from .nearest_neighbor import compute_ann

logger = logging.getLogger(__name__)

# Standard error constant of the Clark-Evans test under complete spatial randomness
CLARK_EVANS_SE_CONSTANT = 0.26136


def percentile_rank(observed_ann: float, null_distribution) -> float:
    """
    Percentage of simulated ANN values that are <= the observed ANN.

    Low ranks mean the observed sites are closer together than random
    placements usually are; high ranks mean they are further apart.
    """
    null = np.asarray(null_distribution, dtype=float)
    if len(null) == 0:
        raise ValueError("Null distribution is empty")
    return float(100.0 * np.sum(null <= observed_ann) / len(null))


def monte_carlo_p_values(observed_ann: float, null_distribution) -> Dict[str, float]:
    """
    One-sided Monte Carlo p-values for both tails.

    Parameters
    ----------
    observed_ann : float
        Observed ANN.
    null_distribution : array-like
        Simulated ANN values.

    Returns
    -------
    dict
        'clustered': (1 + #{null <= observed}) / (N + 1)
        'dispersed': (1 + #{null >= observed}) / (N + 1)
    """
    null = np.asarray(null_distribution, dtype=float)
    if len(null) == 0:
        raise ValueError("Null distribution is empty")

    n = len(null)
    return {
        "clustered": float((1 + np.sum(null <= observed_ann)) / (n + 1)),
        "dispersed": float((1 + np.sum(null >= observed_ann)) / (n + 1)),
    }


def clark_evans(points, window) -> Dict[str, float]:
    """
    Clark-Evans aggregation index of a point set.

    R = observed ANN / expected ANN, where the expected ANN under complete
    spatial randomness is 0.5 / sqrt(n / A). No edge correction is applied.

    Parameters
    ----------
    points : array-like
        Point set with at least 2 points.
    window : Window, dict or tuple
        Analysis window; its area is used as A.

    Returns
    -------
    dict
        'observed_ann', 'expected_ann', 'clark_evans_r', 'density',
        'standard_error' and 'z_score'.
    """
    coords = as_point_set(points)
    window = as_window(window)

    n = len(coords)
    if n < 2:
        raise InsufficientPointsError(n)

    area = window.area
    density = n / area
    observed = compute_ann(coords)
    expected = 0.5 / np.sqrt(density)
    se = CLARK_EVANS_SE_CONSTANT / np.sqrt(n * density)

    return {
        "observed_ann": observed,
        "expected_ann": float(expected),
        "clark_evans_r": float(observed / expected),
        "density": float(density),
        "standard_error": float(se),
        "z_score": float((observed - expected) / se),
    }


def summarize_test(result, points=None) -> Dict:
    """
    Summarize a significance test result.

    The summary reports where the observed ANN falls in the null
    distribution; it does not label the pattern as clustered or dispersed.

    Parameters
    ----------
    result : SignificanceResult
        Output of run_significance_test.
    points : array-like, optional
        Observed points. If given, Clark-Evans values are included.

    Returns
    -------
    dict
        Summary statistics.
    """
    null = np.asarray(result.null_distribution, dtype=float)

    summary = {
        "n_points": result.n_points,
        "trials": result.trials,
        "seed": result.seed,
        "spawn_key": list(result.spawn_key),
        "observed_ann": result.observed_ann,
        "null": {
            "mean": float(null.mean()),
            "std": float(null.std()),
            "min": float(null.min()),
            "max": float(null.max()),
            "percentile_2_5": float(np.percentile(null, 2.5)),
            "percentile_97_5": float(np.percentile(null, 97.5)),
        },
        "percentile_rank": percentile_rank(result.observed_ann, null),
        "p_values": monte_carlo_p_values(result.observed_ann, null),
    }

    if points is not None:
        summary["clark_evans"] = clark_evans(points, result.window)

    logger.info(
        f"Observed ANN {summary['observed_ann']:.4f} at percentile "
        f"{summary['percentile_rank']:.1f} of {result.trials} simulations"
    )

    return summary
