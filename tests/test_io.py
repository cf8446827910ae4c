"""Tests for io module."""

import tempfile
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from sitepattern.geometry import Window
from sitepattern.io import detect_coordinate_columns, load_sites, sites_to_points, validate_sites


def create_test_sites_df(n_sites=10):
    """Create a site table with projected coordinate columns."""
    rng = np.random.default_rng(0)
    return pd.DataFrame(
        {
            "Site_ID": [f"site_{i}" for i in range(n_sites)],
            "Easting": rng.uniform(500000, 510000, n_sites),
            "Northing": rng.uniform(4200000, 4210000, n_sites),
            "period": ["Bronze Age"] * n_sites,
        }
    )


class TestLoader:
    """Tests for loading site tables."""

    def test_detect_coordinate_columns(self):
        """Test case-insensitive detection of coordinate columns."""
        mappings = detect_coordinate_columns(create_test_sites_df())

        assert mappings["x_col"] == "Easting"
        assert mappings["y_col"] == "Northing"
        assert mappings["id_col"] == "Site_ID"

    def test_detect_lon_lat(self):
        """Test detection of longitude/latitude columns."""
        df = pd.DataFrame({"Longitude": [1.0], "Latitude": [2.0]})
        mappings = detect_coordinate_columns(df)

        assert mappings["x_col"] == "Longitude"
        assert mappings["y_col"] == "Latitude"

    def test_load_sites(self):
        """Test loading a CSV with auto-detected columns."""
        df = create_test_sites_df()

        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = Path(tmpdir) / "sites.csv"
            df.to_csv(csv_file, index=False)

            sites = load_sites(csv_file)

        assert list(sites.columns[:2]) == ["x", "y"]
        assert "Site_ID" in sites.columns
        assert "period" in sites.columns
        assert len(sites) == len(df)
        np.testing.assert_allclose(sites["x"], df["Easting"])

    def test_load_sites_explicit_columns(self):
        """Test loading with explicitly named columns."""
        df = pd.DataFrame({"a": [0.0, 1.0], "b": [2.0, 3.0]})

        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = Path(tmpdir) / "sites.csv"
            df.to_csv(csv_file, index=False)

            sites = load_sites(csv_file, x_col="a", y_col="b")

        assert sites["x"].tolist() == [0.0, 1.0]
        assert sites["y"].tolist() == [2.0, 3.0]

    def test_load_sites_drops_missing(self):
        """Test that rows without coordinates are dropped."""
        df = pd.DataFrame({"x": [0.0, None, 2.0], "y": [0.0, 1.0, "n/a"]})

        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = Path(tmpdir) / "sites.csv"
            df.to_csv(csv_file, index=False)

            sites = load_sites(csv_file)

        assert len(sites) == 1

    def test_load_sites_undetected_columns_raises(self):
        """Test that unknown coordinate columns raise."""
        df = pd.DataFrame({"foo": [0.0], "bar": [1.0]})

        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = Path(tmpdir) / "sites.csv"
            df.to_csv(csv_file, index=False)

            with pytest.raises(ValueError):
                load_sites(csv_file)

    def test_sites_to_points(self):
        """Test extracting a point set."""
        df = pd.DataFrame({"x": [0, 1, 2], "y": [3, 4, 5]})
        points = sites_to_points(df)

        assert points.shape == (3, 2)
        assert points[2].tolist() == [2.0, 5.0]


class TestValidator:
    """Tests for site table validation."""

    def test_valid_sites(self):
        """Test that a clean table passes."""
        df = pd.DataFrame({"x": [0.0, 1.0, 2.0], "y": [0.0, 1.0, 2.0]})
        is_valid, messages = validate_sites(df)

        assert is_valid
        assert messages == []

    def test_too_few_sites(self):
        """Test that a single site fails."""
        is_valid, messages = validate_sites(pd.DataFrame({"x": [0.0], "y": [0.0]}))

        assert not is_valid
        assert any(msg.startswith("ERROR") for msg in messages)

    def test_missing_column(self):
        """Test that a missing coordinate column fails."""
        is_valid, messages = validate_sites(pd.DataFrame({"x": [0.0, 1.0]}))

        assert not is_valid

    def test_non_numeric_column(self):
        """Test that text coordinates fail."""
        df = pd.DataFrame({"x": ["a", "b"], "y": [0.0, 1.0]})
        is_valid, messages = validate_sites(df)

        assert not is_valid

    def test_duplicate_coordinates_warn(self):
        """Test that duplicated sites only warn."""
        df = pd.DataFrame({"x": [0.0, 0.0, 1.0], "y": [0.0, 0.0, 1.0]})
        is_valid, messages = validate_sites(df)

        assert is_valid
        assert any(msg.startswith("WARNING") for msg in messages)

    def test_sites_outside_window(self):
        """Test that sites outside the analysis window fail."""
        df = pd.DataFrame({"x": [0.0, 5.0, 20.0], "y": [0.0, 5.0, 5.0]})
        is_valid, messages = validate_sites(df, window=Window.from_bounds(0, 10, 0, 10))

        assert not is_valid
        assert any("outside" in msg for msg in messages)
