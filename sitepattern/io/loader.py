"""Loader for site location tables with automatic column detection."""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
import pandas as pd

from ..geometry import as_point_set

logger = logging.getLogger(__name__)

X_CANDIDATES = ["x", "easting", "east", "lon", "long", "longitude", "x_coord"]
Y_CANDIDATES = ["y", "northing", "north", "lat", "latitude", "y_coord"]
ID_CANDIDATES = ["site_id", "site", "id", "name", "site_name"]


def _find_column(columns, candidates) -> Optional[str]:
    lookup = {str(col).lower(): col for col in columns}
    for candidate in candidates:
        if candidate in lookup:
            return lookup[candidate]
    return None


def detect_coordinate_columns(df: pd.DataFrame) -> Dict[str, Optional[str]]:
    """
    Auto-detect coordinate and identifier columns.

    Column names are matched case-insensitively against common spellings
    (x/easting/longitude, y/northing/latitude, site_id/name).

    Parameters
    ----------
    df : pd.DataFrame
        Site table.

    Returns
    -------
    dict
        Dictionary with detected 'x_col', 'y_col' and 'id_col' (None when
        not found).
    """
    mappings = {
        "x_col": _find_column(df.columns, X_CANDIDATES),
        "y_col": _find_column(df.columns, Y_CANDIDATES),
        "id_col": _find_column(df.columns, ID_CANDIDATES),
    }

    for key, col in mappings.items():
        if col is not None:
            logger.info(f"Detected {key}: {col}")

    return mappings


def load_sites(
    file_path: Union[str, Path],
    x_col: Optional[str] = None,
    y_col: Optional[str] = None,
) -> pd.DataFrame:
    """
    Load site locations from a CSV file.

    Parameters
    ----------
    file_path : str or Path
        Path to CSV file.
    x_col : str, optional
        Name of the x coordinate column. Auto-detected if None.
    y_col : str, optional
        Name of the y coordinate column. Auto-detected if None.

    Returns
    -------
    pd.DataFrame
        Site table with numeric 'x' and 'y' columns followed by the remaining
        columns. Rows with missing coordinates are dropped.

    Raises
    ------
    ValueError
        If the coordinate columns cannot be found.
    """
    logger.info(f"Loading sites from {file_path}")
    df = pd.read_csv(file_path)

    if x_col is None or y_col is None:
        mappings = detect_coordinate_columns(df)
        x_col = x_col or mappings["x_col"]
        y_col = y_col or mappings["y_col"]

    for label, col in (("x", x_col), ("y", y_col)):
        if col is None:
            raise ValueError(
                f"Could not detect the {label} coordinate column in {file_path}; "
                f"available columns: {df.columns.tolist()}"
            )
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found in {file_path}")

    other_cols = [c for c in df.columns if c not in (x_col, y_col, "x", "y")]
    sites = pd.DataFrame(
        {
            "x": pd.to_numeric(df[x_col], errors="coerce"),
            "y": pd.to_numeric(df[y_col], errors="coerce"),
        }
    )
    sites = pd.concat([sites, df[other_cols]], axis=1)

    missing = sites[["x", "y"]].isna().any(axis=1)
    if missing.any():
        logger.warning(f"Dropping {int(missing.sum())} sites with missing coordinates")
        sites = sites.loc[~missing].reset_index(drop=True)

    logger.info(f"Loaded {len(sites)} sites from {file_path}")

    return sites


def sites_to_points(df: pd.DataFrame, x_col: str = "x", y_col: str = "y") -> np.ndarray:
    """
    Extract an (n, 2) point set from a site table.

    Parameters
    ----------
    df : pd.DataFrame
        Site table.
    x_col, y_col : str
        Coordinate columns.

    Returns
    -------
    np.ndarray
        Point set.
    """
    for col in (x_col, y_col):
        if col not in df.columns:
            raise ValueError(f"Column '{col}' not found in site table")

    return as_point_set(df[[x_col, y_col]].to_numpy(dtype=float))
