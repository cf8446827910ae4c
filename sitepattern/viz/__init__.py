"""Visualization utilities."""

from .distribution_plots import plot_density_surface, plot_null_distribution
from .site_plots import plot_sites

__all__ = [
    "plot_density_surface",
    "plot_null_distribution",
    "plot_sites",
]
