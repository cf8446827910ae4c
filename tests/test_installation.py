"""Test packaging metadata and parameter handling."""

from pathlib import Path

import pytest

from sitepattern.params import SimulationParameters, validate_parameters


def test_pyproject_python_version():
    """Test that pyproject.toml declares a Python 3 requirement."""
    import toml

    repo_root = Path(__file__).parent.parent
    pyproject = toml.load(repo_root / "pyproject.toml")

    python_version = pyproject["project"]["requires-python"]
    assert ">=3.9" in python_version, "Should require Python >= 3.9"


def test_pyproject_dependencies():
    """Test that pyproject.toml lists the runtime stack."""
    import toml

    repo_root = Path(__file__).parent.parent
    pyproject = toml.load(repo_root / "pyproject.toml")

    deps = " ".join(pyproject["project"]["dependencies"])
    for package in ("numpy", "scipy", "pandas", "scikit-learn", "matplotlib", "plotly", "click"):
        assert package in deps, f"{package} not in dependencies"


def test_pyproject_console_script():
    """Test that the sitepattern command is declared."""
    import toml

    repo_root = Path(__file__).parent.parent
    pyproject = toml.load(repo_root / "pyproject.toml")

    assert pyproject["project"]["scripts"]["sitepattern"] == "sitepattern.cli:main"


def test_default_parameters():
    """Test default simulation parameters."""
    params = SimulationParameters()

    assert params.trials == 1000
    assert params.seed is None
    assert validate_parameters(params) == (True, [])


def test_parameters_from_dict_ignores_unknown_keys():
    """Test creating parameters from a dict with extra keys."""
    params = SimulationParameters.from_dict({"trials": 50, "seed": 9, "colour": "red"})

    assert params.trials == 50
    assert params.seed == 9
    assert params.to_dict()["trials"] == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"trials": 0},
        {"trials": 2.5},
        {"n_jobs": 0},
        {"window_buffer": -1.0},
        {"kde_bandwidth": 0.0},
        {"kde_gridsize": 1},
    ],
)
def test_invalid_parameters(overrides):
    """Test that invalid parameters are reported."""
    is_valid, errors = validate_parameters(SimulationParameters(**overrides))

    assert not is_valid
    assert len(errors) == 1
