"""Manifest creation for documenting run parameters and metadata."""

import hashlib
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def compute_file_hash(file_path: str, algorithm: str = "sha256") -> str:
    """
    Compute hash of a file.

    Parameters
    ----------
    file_path : str
        Path to file.
    algorithm : str
        Hash algorithm ('md5', 'sha256').

    Returns
    -------
    str
        Hex digest of file hash.
    """
    hash_func = hashlib.new(algorithm)

    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(4096), b""):
            hash_func.update(chunk)

    return hash_func.hexdigest()


def create_manifest(
    result,
    input_files: list,
    parameters: Optional[Dict[str, Any]] = None,
    summary: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a manifest documenting a significance test run.

    Parameters
    ----------
    result : SignificanceResult
        Output of run_significance_test.
    input_files : list
        List of input file paths.
    parameters : dict, optional
        Run parameters (SimulationParameters.to_dict()).
    summary : dict, optional
        Output of summarize_test.

    Returns
    -------
    dict
        Manifest dictionary.
    """
    from .. import __version__

    manifest = {
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "input": {
            "files": [],
            "n_points": result.n_points,
        },
        "window": result.window.to_dict(),
        "simulation": {
            "trials": result.trials,
            "seed": result.seed,
            "spawn_key": list(result.spawn_key),
            "observed_ann": result.observed_ann,
        },
        "parameters": parameters or {},
        "summary": summary,
    }

    for file_path in input_files:
        if Path(file_path).exists():
            file_info = {
                "path": str(file_path),
                "name": Path(file_path).name,
                "size_bytes": Path(file_path).stat().st_size,
                "sha256": compute_file_hash(file_path, "sha256"),
            }
            manifest["input"]["files"].append(file_info)
        else:
            logger.warning(f"Input file not found, not hashed: {file_path}")

    import numpy as np
    import scipy
    import sklearn

    manifest["software"] = {
        "python_version": sys.version,
        "sitepattern_version": __version__,
        "numpy_version": np.__version__,
        "scipy_version": scipy.__version__,
        "sklearn_version": sklearn.__version__,
    }

    return manifest


def save_manifest(manifest: Dict[str, Any], output_file: str) -> None:
    """
    Save manifest to JSON file.

    Parameters
    ----------
    manifest : dict
        Manifest dictionary.
    output_file : str
        Output JSON file path.
    """
    logger.info(f"Saving manifest to {output_file}")

    with open(output_file, "w") as f:
        json.dump(manifest, f, indent=2, default=str)

    logger.info("Manifest saved")


def validate_manifest(manifest: Dict[str, Any]) -> tuple[bool, list]:
    """
    Validate manifest structure.

    Parameters
    ----------
    manifest : dict
        Manifest dictionary to validate.

    Returns
    -------
    tuple of (bool, list)
        (is_valid, list of error messages)
    """
    errors = []

    required_keys = ["timestamp", "version", "input", "window", "simulation", "parameters"]
    for key in required_keys:
        if key not in manifest:
            errors.append(f"Missing required key: {key}")

    if "input" in manifest:
        if "files" not in manifest["input"]:
            errors.append("Missing 'files' in input section")

    if "simulation" in manifest:
        for key in ("trials", "observed_ann"):
            if key not in manifest["simulation"]:
                errors.append(f"Missing '{key}' in simulation section")

    is_valid = len(errors) == 0

    return is_valid, errors
