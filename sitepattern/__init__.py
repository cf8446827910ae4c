"""
sitepattern: nearest-neighbour tests for archaeological site distributions.

This package provides tools to:
- Load site locations and derive an analysis window
- Compute the average nearest-neighbour (ANN) distance of a site pattern
- Build a Monte Carlo null distribution from uniformly random placements
- Summarize where the observed ANN falls in that distribution
- Estimate kernel density surfaces of site intensity
- Plot results and record run manifests
"""

__version__ = "0.1.0"

from . import geometry, stats, io, viz, export
from .exceptions import (
    InsufficientPointsError,
    InvalidTrialCountError,
    InvalidWindowError,
    SitePatternError,
)
from .geometry import Window
from .stats import compute_ann, generate_random_points, run_significance_test

__all__ = [
    "geometry",
    "stats",
    "io",
    "viz",
    "export",
    "Window",
    "compute_ann",
    "generate_random_points",
    "run_significance_test",
    "InsufficientPointsError",
    "InvalidTrialCountError",
    "InvalidWindowError",
    "SitePatternError",
    "__version__",
]
