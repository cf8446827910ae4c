"""Interactive site scatter plots."""

import logging
from typing import Optional

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from ..geometry import as_point_set
from .distribution_plots import _window_outline

logger = logging.getLogger(__name__)


def plot_sites(
    points,
    window=None,
    labels=None,
    color_by=None,
    size: float = 6,
    opacity: float = 0.8,
    title: Optional[str] = None,
    width: int = 800,
    height: int = 600,
) -> go.Figure:
    """
    Create a scatter plot of site locations.

    Parameters
    ----------
    points : array-like
        Site locations.
    window : Window, optional
        Analysis window drawn as an outline.
    labels : array-like, optional
        Per-site labels shown on hover.
    color_by : array-like, optional
        Per-site values used for colouring.
    size : float
        Marker size in pixels.
    opacity : float
        Marker opacity.
    title : str, optional
        Plot title.
    width : int
        Figure width in pixels.
    height : int
        Figure height in pixels.

    Returns
    -------
    plotly.graph_objects.Figure
        Plotly figure object.
    """
    coords = as_point_set(points)

    plot_data = pd.DataFrame({"x": coords[:, 0], "y": coords[:, 1]})
    hover_name = None
    if labels is not None:
        plot_data["site"] = np.asarray(labels)
        hover_name = "site"

    color_col = None
    if color_by is not None:
        plot_data["group"] = np.asarray(color_by)
        color_col = "group"

    fig = px.scatter(
        plot_data,
        x="x",
        y="y",
        color=color_col,
        hover_name=hover_name,
        opacity=opacity,
        title=title or f"Sites (n={len(coords)})",
    )
    fig.update_traces(marker=dict(size=size))

    if window is not None:
        outline = _window_outline(window)
        fig.add_trace(
            go.Scatter(
                x=outline[:, 0],
                y=outline[:, 1],
                mode="lines",
                line=dict(color="black", width=1),
                name="Window",
                hoverinfo="skip",
            )
        )

    fig.update_layout(
        width=width,
        height=height,
        xaxis_title="X",
        yaxis_title="Y",
        plot_bgcolor="white",
        xaxis=dict(showgrid=True, gridcolor="lightgray"),
        yaxis=dict(
            showgrid=True,
            gridcolor="lightgray",
            scaleanchor="x",
            scaleratio=1,
        ),
    )

    return fig
