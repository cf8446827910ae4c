"""Tests for viz module."""

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import plotly.graph_objects as go  # noqa: E402

from sitepattern.geometry import Window  # noqa: E402
from sitepattern.stats import kernel_density_surface, run_significance_test  # noqa: E402
from sitepattern.viz import plot_density_surface, plot_null_distribution, plot_sites  # noqa: E402


def create_test_sites(n_points=20):
    """Create random site coordinates."""
    rng = np.random.default_rng(0)
    return rng.uniform(0, 100, size=(n_points, 2))


class TestPlots:
    """Tests for plotting functions."""

    def test_plot_null_distribution(self):
        """Test histogram with observed ANN line."""
        result = run_significance_test(create_test_sites(), (0, 100, 0, 100), trials=20, seed=0)

        fig = plot_null_distribution(result, bins=10)
        ax = fig.axes[0]

        assert len(ax.patches) == 10
        assert len(ax.lines) == 1
        assert ax.lines[0].get_xdata()[0] == result.observed_ann

    def test_plot_density_surface(self):
        """Test density plot with sites and window outline."""
        sites = create_test_sites()
        window = Window.from_bounds(0, 100, 0, 100)
        X, Y, Z = kernel_density_surface(sites, window, bandwidth=10.0, gridsize=20)

        fig = plot_density_surface(X, Y, Z, points=sites, window=window)

        # Main axes plus colorbar
        assert len(fig.axes) == 2

    def test_plot_sites(self):
        """Test site scatter with window outline and labels."""
        sites = create_test_sites()
        labels = [f"site_{i}" for i in range(len(sites))]

        fig = plot_sites(sites, window=Window.from_bounds(0, 100, 0, 100), labels=labels)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
        assert fig.data[-1].name == "Window"

    def test_plot_sites_polygon_window(self):
        """Test that polygon windows are closed outlines."""
        window = Window.from_polygon([(0, 0), (100, 0), (0, 100)])

        fig = plot_sites([(10, 10), (20, 20)], window=window)

        outline = fig.data[-1]
        assert len(outline.x) == 4
        assert outline.x[0] == outline.x[-1]
