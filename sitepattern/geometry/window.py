"""Analysis window within which point patterns are observed and simulated."""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np
from matplotlib.path import Path as MplPath

from ..exceptions import InvalidWindowError
from .points import as_point_set, bounding_box

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Window:
    """
    Axis-aligned analysis window, optionally restricted to a polygon.

    The extents are always the bounding box of the window. When ``vertices``
    is set, the window is the polygon they describe and the extents are its
    bounding box.
    """

    xmin: float
    xmax: float
    ymin: float
    ymax: float
    vertices: Optional[Tuple[Tuple[float, float], ...]] = field(default=None)

    def __post_init__(self):
        validate_extent(self.xmin, self.xmax, self.ymin, self.ymax)

        if self.vertices is not None:
            if len(self.vertices) < 3:
                raise InvalidWindowError(
                    f"A polygon window needs at least 3 vertices, got {len(self.vertices)}"
                )
            xs = [v[0] for v in self.vertices]
            ys = [v[1] for v in self.vertices]
            if (min(xs), max(xs), min(ys), max(ys)) != (
                self.xmin,
                self.xmax,
                self.ymin,
                self.ymax,
            ):
                raise InvalidWindowError(
                    "Polygon vertices do not match the window extent"
                )
            if _shoelace_area(self.vertices) == 0:
                raise InvalidWindowError("Polygon window has zero area")

    @classmethod
    def from_bounds(cls, xmin: float, xmax: float, ymin: float, ymax: float) -> "Window":
        """Create a rectangular window from its extents."""
        return cls(float(xmin), float(xmax), float(ymin), float(ymax))

    @classmethod
    def from_points(cls, points, buffer: float = 0.0) -> "Window":
        """
        Derive a rectangular window from the extent of a point set.

        Parameters
        ----------
        points : array-like
            Observed points.
        buffer : float
            Distance added on every side of the extent.

        Returns
        -------
        Window
            Window covering all points.

        Raises
        ------
        InvalidWindowError
            If the points span no width or height and no buffer is given.
        """
        if buffer < 0:
            raise ValueError(f"Window buffer must be >= 0, got {buffer}")

        coords = as_point_set(points)
        if len(coords) == 0:
            raise InvalidWindowError("Cannot derive a window from an empty point set")

        xmin, xmax, ymin, ymax = bounding_box(coords)
        window = cls.from_bounds(
            xmin - buffer, xmax + buffer, ymin - buffer, ymax + buffer
        )
        logger.info(
            f"Derived window from {len(coords)} points: "
            f"x=[{window.xmin:.2f}, {window.xmax:.2f}], "
            f"y=[{window.ymin:.2f}, {window.ymax:.2f}]"
        )
        return window

    @classmethod
    def from_polygon(cls, vertices) -> "Window":
        """Create a polygonal window from an (n, 2) sequence of vertices."""
        coords = as_point_set(vertices)
        if len(coords) < 3:
            raise InvalidWindowError(
                f"A polygon window needs at least 3 vertices, got {len(coords)}"
            )
        xmin, xmax, ymin, ymax = bounding_box(coords)
        return cls(
            xmin,
            xmax,
            ymin,
            ymax,
            vertices=tuple((float(x), float(y)) for x, y in coords),
        )

    @property
    def is_polygon(self) -> bool:
        return self.vertices is not None

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def area(self) -> float:
        if self.is_polygon:
            return _shoelace_area(self.vertices)
        return self.width * self.height

    def contains(self, points) -> np.ndarray:
        """
        Test which points lie inside the window.

        Bounds of a rectangular window are inclusive.

        Parameters
        ----------
        points : array-like
            Point set.

        Returns
        -------
        np.ndarray
            Boolean mask, one entry per point.
        """
        coords = as_point_set(points)
        mask = (
            (coords[:, 0] >= self.xmin)
            & (coords[:, 0] <= self.xmax)
            & (coords[:, 1] >= self.ymin)
            & (coords[:, 1] <= self.ymax)
        )
        if self.is_polygon and len(coords) > 0:
            mask &= MplPath(np.asarray(self.vertices)).contains_points(coords)
        return mask

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "xmin": self.xmin,
            "xmax": self.xmax,
            "ymin": self.ymin,
            "ymax": self.ymax,
            "vertices": [list(v) for v in self.vertices] if self.vertices else None,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Window":
        """Create from dictionary."""
        if d.get("vertices"):
            return cls.from_polygon(d["vertices"])
        return cls.from_bounds(d["xmin"], d["xmax"], d["ymin"], d["ymax"])


def validate_extent(xmin, xmax, ymin, ymax) -> None:
    """
    Check that window extents are finite and non-degenerate.

    Raises
    ------
    InvalidWindowError
        If any extent is not finite or min >= max on either axis.
    """
    try:
        values = [float(v) for v in (xmin, xmax, ymin, ymax)]
    except (TypeError, ValueError):
        raise InvalidWindowError(
            f"Window extents must be numbers, got {(xmin, xmax, ymin, ymax)!r}"
        )

    if not all(math.isfinite(v) for v in values):
        raise InvalidWindowError(f"Window extents must be finite, got {values}")

    xmin, xmax, ymin, ymax = values
    if xmin >= xmax:
        raise InvalidWindowError(
            f"Degenerate or inverted x extent: xmin={xmin} must be < xmax={xmax}"
        )
    if ymin >= ymax:
        raise InvalidWindowError(
            f"Degenerate or inverted y extent: ymin={ymin} must be < ymax={ymax}"
        )


def as_window(window) -> Window:
    """
    Coerce a Window, mapping or (xmin, xmax, ymin, ymax) sequence to a Window.

    Raises
    ------
    InvalidWindowError
        If the extents are degenerate or cannot be interpreted.
    """
    if isinstance(window, Window):
        validate_extent(window.xmin, window.xmax, window.ymin, window.ymax)
        return window
    if isinstance(window, dict):
        try:
            return Window.from_dict(window)
        except KeyError as e:
            raise InvalidWindowError(f"Window mapping is missing key {e}")
    if isinstance(window, (str, bytes)):
        raise InvalidWindowError(
            f"Expected a Window or (xmin, xmax, ymin, ymax), got {window!r}"
        )
    try:
        xmin, xmax, ymin, ymax = window
    except (TypeError, ValueError):
        raise InvalidWindowError(
            f"Expected a Window or (xmin, xmax, ymin, ymax), got {window!r}"
        )
    validate_extent(xmin, xmax, ymin, ymax)
    return Window.from_bounds(xmin, xmax, ymin, ymax)


def _shoelace_area(vertices) -> float:
    coords = np.asarray(vertices, dtype=float)
    x, y = coords[:, 0], coords[:, 1]
    return float(0.5 * abs(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1))))
