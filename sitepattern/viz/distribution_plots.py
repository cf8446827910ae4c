"""Matplotlib figures for the null distribution and density surface."""

import logging
from typing import Optional

import numpy as np

from ..geometry import as_point_set

logger = logging.getLogger(__name__)


def plot_null_distribution(
    result,
    bins: int = 30,
    figsize: tuple = (8, 5),
    title: Optional[str] = None,
):
    """
    Plot the simulated ANN distribution with the observed ANN marked.

    Parameters
    ----------
    result : SignificanceResult
        Output of run_significance_test.
    bins : int
        Number of histogram bins.
    figsize : tuple
        Figure size.
    title : str, optional
        Plot title.

    Returns
    -------
    matplotlib.figure.Figure
        Figure object.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)
    ax.hist(result.null_distribution, bins=bins, color="lightgray", edgecolor="gray")
    ax.axvline(
        result.observed_ann,
        color="red",
        linestyle="--",
        linewidth=2,
        label=f"Observed ANN = {result.observed_ann:.2f}",
    )
    ax.set_xlabel("Average Nearest-Neighbour Distance")
    ax.set_ylabel("Number of Simulations")
    ax.set_title(title or f"ANN under Random Placement ({result.trials} simulations)")
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig


def plot_density_surface(
    X: np.ndarray,
    Y: np.ndarray,
    Z: np.ndarray,
    points=None,
    window=None,
    cmap: str = "inferno",
    levels: int = 20,
    figsize: tuple = (8, 8),
    title: str = "Site Density",
):
    """
    Plot a kernel density surface with optional site overlay.

    Parameters
    ----------
    X, Y, Z : np.ndarray
        Meshgrids from kernel_density_surface.
    points : array-like, optional
        Sites to overlay.
    window : Window, optional
        Window outline to draw.
    cmap : str
        Colormap name.
    levels : int
        Number of contour levels.
    figsize : tuple
        Figure size.
    title : str
        Plot title.

    Returns
    -------
    matplotlib.figure.Figure
        Figure object.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)
    contour = ax.contourf(X, Y, Z, levels=levels, cmap=cmap)
    fig.colorbar(contour, ax=ax, label="Density")

    if points is not None:
        coords = as_point_set(points)
        ax.scatter(coords[:, 0], coords[:, 1], s=10, c="white", edgecolors="black", linewidths=0.5)

    if window is not None:
        outline = _window_outline(window)
        ax.plot(outline[:, 0], outline[:, 1], color="black", linewidth=1)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(title)
    ax.set_aspect("equal")

    return fig


def _window_outline(window) -> np.ndarray:
    if window.is_polygon:
        vertices = np.asarray(window.vertices, dtype=float)
    else:
        vertices = np.array(
            [
                [window.xmin, window.ymin],
                [window.xmax, window.ymin],
                [window.xmax, window.ymax],
                [window.xmin, window.ymax],
            ]
        )
    return np.vstack([vertices, vertices[:1]])
