"""Monte Carlo significance test for average nearest-neighbour distances."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import numpy as np

from ..exceptions import InvalidTrialCountError, InvalidWindowError
from ..geometry import Window, as_point_set, as_window
from .nearest_neighbor import compute_ann

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 1000

# Upper bound on rejection-sampling rounds for polygon windows
MAX_REJECTION_ROUNDS = 1000

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


@dataclass
class SignificanceResult:
    """Observed ANN together with its simulated null distribution."""

    observed_ann: float
    null_distribution: np.ndarray
    n_points: int
    trials: int
    window: Window
    seed: Optional[int] = None
    spawn_key: Tuple[int, ...] = ()

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "observed_ann": self.observed_ann,
            "null_distribution": self.null_distribution.tolist(),
            "n_points": self.n_points,
            "trials": self.trials,
            "window": self.window.to_dict(),
            "seed": self.seed,
            "spawn_key": list(self.spawn_key),
        }


def _as_generator(seed: SeedLike) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def generate_random_points(count: int, window, seed: SeedLike = None) -> np.ndarray:
    """
    Generate points uniformly at random inside a window.

    x and y are drawn independently from uniform distributions over the
    window's x and y extents. For polygon windows, points falling outside the
    polygon are redrawn.

    Parameters
    ----------
    count : int
        Number of points to generate.
    window : Window, dict or tuple
        Analysis window, or (xmin, xmax, ymin, ymax).
    seed : int, SeedSequence or Generator, optional
        Source of randomness. The same int or SeedSequence always produces
        the same points.

    Returns
    -------
    np.ndarray
        Array of shape (count, 2).

    Raises
    ------
    InvalidWindowError
        If the window is degenerate or inverted.
    ValueError
        If count is negative.
    """
    window = as_window(window)

    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    rng = _as_generator(seed)

    if not window.is_polygon:
        x = rng.uniform(window.xmin, window.xmax, size=count)
        y = rng.uniform(window.ymin, window.ymax, size=count)
        return np.column_stack([x, y])

    accepted = []
    n_accepted = 0
    for _ in range(MAX_REJECTION_ROUNDS):
        if n_accepted >= count:
            break
        needed = count - n_accepted
        x = rng.uniform(window.xmin, window.xmax, size=needed)
        y = rng.uniform(window.ymin, window.ymax, size=needed)
        candidates = np.column_stack([x, y])
        inside = candidates[window.contains(candidates)]
        accepted.append(inside)
        n_accepted += len(inside)
    else:
        if n_accepted < count:
            raise RuntimeError(
                f"Could only place {n_accepted} of {count} points inside the polygon window"
            )

    if not accepted:
        return np.empty((0, 2))

    return np.concatenate(accepted)[:count]


def _validate_trials(trials) -> int:
    if isinstance(trials, bool) or not isinstance(trials, (int, np.integer)):
        raise InvalidTrialCountError(trials)
    if trials <= 0:
        raise InvalidTrialCountError(trials)
    return int(trials)


def run_significance_test(
    observed,
    window,
    trials: int = DEFAULT_TRIALS,
    seed: Optional[Union[int, np.random.SeedSequence]] = None,
    n_jobs: int = 1,
) -> SignificanceResult:
    """
    Compare the observed ANN against ANNs of uniformly random point sets.

    Each trial draws as many random points as there are observed points,
    inside the same window, and records their ANN. Every trial gets its own
    random stream spawned from ``seed``, so the null distribution for a given
    seed is the same regardless of ``n_jobs``.

    Parameters
    ----------
    observed : array-like
        Observed point set with at least 2 points.
    window : Window, dict or tuple
        Analysis window.
    trials : int
        Number of simulated point sets.
    seed : int or SeedSequence, optional
        Root seed. If None, fresh entropy is drawn and stored on the result.
    n_jobs : int
        Number of worker threads used to run trials.

    Returns
    -------
    SignificanceResult
        Observed ANN and the null distribution (length ``trials``).

    Raises
    ------
    InvalidTrialCountError
        If trials is not a positive integer.
    InvalidWindowError
        If the window is degenerate or inverted, or observed points lie
        outside it.
    InsufficientPointsError
        If fewer than 2 observed points are given.
    """
    trials = _validate_trials(trials)
    window = as_window(window)

    if n_jobs < 1:
        raise ValueError(f"n_jobs must be >= 1, got {n_jobs}")

    coords = as_point_set(observed)
    observed_ann = compute_ann(coords)
    n_points = len(coords)

    n_outside = int((~window.contains(coords)).sum())
    if n_outside:
        raise InvalidWindowError(
            f"{n_outside} of {n_points} observed points lie outside the analysis window"
        )

    if isinstance(seed, np.random.SeedSequence):
        # Rebuilt so the caller's sequence is not advanced by spawn()
        root = np.random.SeedSequence(
            seed.entropy, spawn_key=seed.spawn_key, pool_size=seed.pool_size
        )
    else:
        root = np.random.SeedSequence(seed)
    child_seeds = root.spawn(trials)

    logger.info(
        f"Running {trials} trials with {n_points} points per trial "
        f"(observed ANN={observed_ann:.4f}, n_jobs={n_jobs})"
    )

    def run_trial(i: int) -> float:
        simulated = generate_random_points(n_points, window, seed=child_seeds[i])
        ann = compute_ann(simulated)
        logger.debug(f"Trial {i}: ANN={ann:.4f}")
        return ann

    null_distribution = np.empty(trials, dtype=float)

    if n_jobs == 1:
        for i in range(trials):
            null_distribution[i] = run_trial(i)
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as executor:
            for i, ann in enumerate(executor.map(run_trial, range(trials))):
                null_distribution[i] = ann

    null_distribution.setflags(write=False)

    logger.info(
        f"Null distribution: mean={null_distribution.mean():.4f}, "
        f"std={null_distribution.std():.4f}"
    )

    return SignificanceResult(
        observed_ann=observed_ann,
        null_distribution=null_distribution,
        n_points=n_points,
        trials=trials,
        window=window,
        seed=root.entropy,
        spawn_key=tuple(root.spawn_key),
    )
