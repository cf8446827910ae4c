"""Validation of site tables before analysis."""

import logging
from typing import List, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


def validate_sites(
    df: pd.DataFrame, x_col: str = "x", y_col: str = "y", window=None
) -> Tuple[bool, List[str]]:
    """
    Validate that a site table can be used for point pattern analysis.

    Parameters
    ----------
    df : pd.DataFrame
        Site table.
    x_col, y_col : str
        Coordinate columns.
    window : Window, optional
        If given, sites outside the window are reported as errors.

    Returns
    -------
    tuple of (bool, list)
        (is_valid, list of warning/error messages)
    """
    messages = []
    is_valid = True

    for col in (x_col, y_col):
        if col not in df.columns:
            messages.append(f"ERROR: Coordinate column '{col}' not found.")
            is_valid = False

    if not is_valid:
        _log_messages(is_valid, messages)
        return is_valid, messages

    for col in (x_col, y_col):
        if not pd.api.types.is_numeric_dtype(df[col]):
            messages.append(f"ERROR: Coordinate column '{col}' is not numeric.")
            is_valid = False

    if len(df) < 2:
        messages.append(
            f"ERROR: At least 2 sites are needed for nearest-neighbour analysis, found {len(df)}."
        )
        is_valid = False

    if is_valid:
        n_missing = int(df[[x_col, y_col]].isna().any(axis=1).sum())
        if n_missing:
            messages.append(f"ERROR: {n_missing} sites have missing coordinates.")
            is_valid = False

        n_duplicates = int(df.duplicated(subset=[x_col, y_col]).sum())
        if n_duplicates:
            messages.append(
                f"WARNING: {n_duplicates} sites share coordinates with another site "
                "(nearest-neighbour distance 0)."
            )

    if is_valid and window is not None:
        inside = window.contains(df[[x_col, y_col]].to_numpy(dtype=float))
        n_outside = int((~inside).sum())
        if n_outside:
            messages.append(f"ERROR: {n_outside} sites lie outside the analysis window.")
            is_valid = False

    _log_messages(is_valid, messages)
    return is_valid, messages


def _log_messages(is_valid: bool, messages: List[str]) -> None:
    logger.info(f"Validation completed: {'PASSED' if is_valid else 'FAILED'}")
    for msg in messages:
        if msg.startswith("ERROR"):
            logger.error(msg)
        else:
            logger.warning(msg)
