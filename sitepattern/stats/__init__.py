"""Point pattern statistics."""

from .nearest_neighbor import compute_ann, nearest_neighbor_distances
from .simulation import (
    DEFAULT_TRIALS,
    SignificanceResult,
    generate_random_points,
    run_significance_test,
)
from .summary import clark_evans, monte_carlo_p_values, percentile_rank, summarize_test
from .density import kernel_density_surface, scott_bandwidth

__all__ = [
    "DEFAULT_TRIALS",
    "SignificanceResult",
    "clark_evans",
    "compute_ann",
    "generate_random_points",
    "kernel_density_surface",
    "monte_carlo_p_values",
    "nearest_neighbor_distances",
    "percentile_rank",
    "run_significance_test",
    "scott_bandwidth",
    "summarize_test",
]
