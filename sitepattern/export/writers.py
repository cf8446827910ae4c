"""Writers for simulation outputs."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pandas as pd

logger = logging.getLogger(__name__)


def export_null_distribution(result, output_file: str) -> str:
    """
    Export the null distribution to CSV, one row per trial.

    Parameters
    ----------
    result : SignificanceResult
        Output of run_significance_test.
    output_file : str
        Output CSV path.

    Returns
    -------
    str
        Path of the written file.
    """
    df = pd.DataFrame(
        {
            "trial": range(result.trials),
            "ann": result.null_distribution,
        }
    )
    df.to_csv(output_file, index=False)

    logger.info(f"Exported {len(df)} simulated ANN values to {output_file}")

    return str(output_file)


def export_summary(summary: Dict[str, Any], output_file: str) -> str:
    """Write a test summary to JSON."""
    with open(output_file, "w") as f:
        json.dump(summary, f, indent=2, default=str)

    logger.info(f"Summary saved to {output_file}")

    return str(output_file)


def export_all(result, summary: Dict[str, Any], output_dir: str) -> Dict[str, str]:
    """
    Export the null distribution and summary into a directory.

    Parameters
    ----------
    result : SignificanceResult
        Output of run_significance_test.
    summary : dict
        Output of summarize_test.
    output_dir : str
        Output directory, created if missing.

    Returns
    -------
    dict
        Mapping of output name to file path.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    return {
        "null_distribution": export_null_distribution(
            result, str(output_dir / "null_distribution.csv")
        ),
        "summary": export_summary(summary, str(output_dir / "summary.json")),
    }
