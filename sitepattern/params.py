"""Parameter management for significance test runs."""

from dataclasses import asdict, dataclass
from typing import Optional

from .stats.simulation import DEFAULT_TRIALS


@dataclass
class SimulationParameters:
    """Parameters for a site pattern analysis run."""

    # Monte Carlo test
    trials: int = DEFAULT_TRIALS
    seed: Optional[int] = None
    n_jobs: int = 1

    # Window derived from site extent
    window_buffer: float = 0.0

    # Density surface
    kde_bandwidth: Optional[float] = None  # None -> Scott's rule
    kde_gridsize: int = 200

    def to_dict(self):
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict):
        """Create from dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__annotations__})


def validate_parameters(params: SimulationParameters) -> tuple[bool, list[str]]:
    """
    Validate parameters.

    Parameters
    ----------
    params : SimulationParameters
        Parameters to validate.

    Returns
    -------
    tuple of (bool, list)
        (is_valid, list of error messages)
    """
    errors = []

    if isinstance(params.trials, bool) or not isinstance(params.trials, int) or params.trials < 1:
        errors.append("trials must be a positive integer")
    if params.n_jobs < 1:
        errors.append("n_jobs must be >= 1")
    if params.window_buffer < 0:
        errors.append("window_buffer must be >= 0")
    if params.kde_bandwidth is not None and params.kde_bandwidth <= 0:
        errors.append("kde_bandwidth must be > 0")
    if params.kde_gridsize < 2:
        errors.append("kde_gridsize must be >= 2")

    is_valid = len(errors) == 0

    return is_valid, errors
