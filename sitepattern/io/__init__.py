"""I/O utilities for loading and validating site tables."""

from .loader import detect_coordinate_columns, load_sites, sites_to_points
from .validator import validate_sites

__all__ = [
    "detect_coordinate_columns",
    "load_sites",
    "sites_to_points",
    "validate_sites",
]
