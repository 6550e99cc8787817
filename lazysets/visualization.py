"""
Plotting of two-dimensional lazy sets from their support vectors.
"""

from __future__ import annotations
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.axes
from matplotlib.patches import Polygon
import numpy as np

from .exceptions import DimensionMismatchError
from .lazy_set import LazySet


def support_polygon(lazy_set: LazySet, /, *, n_directions: int = 64) -> np.ndarray:
    """
    Returns the support vectors of a 2D set along equally spaced directions.

    The polygon spanned by these points is an inner approximation of the set
    that becomes exact for polytopes once every facet normal is sampled.

    Args:
        lazy_set: A set of dimension 2.
        n_directions: Number of unit directions on the circle.

    Returns:
        np.ndarray: Array of shape (n_directions, 2), ordered by angle.
    """
    if lazy_set.dim != 2:
        raise DimensionMismatchError("support_polygon", 2, lazy_set.dim)
    if n_directions < 3:
        raise ValueError("At least three directions are needed to draw a polygon.")
    angles = np.linspace(0.0, 2.0 * np.pi, n_directions, endpoint=False)
    directions = np.column_stack((np.cos(angles), np.sin(angles)))
    return np.array([lazy_set.support_vector(d) for d in directions])


def plot_2d(
    lazy_set: LazySet,
    /,
    *,
    n_directions: int = 64,
    ax: Optional[matplotlib.axes.Axes] = None,
    **kwargs,
) -> matplotlib.axes.Axes:
    """
    Draws a 2D lazy set as the polygon of its support vectors.

    Args:
        lazy_set: A set of dimension 2.
        n_directions: Number of sampled directions.
        ax: Axes to draw on. A new figure is created if None.
        **kwargs: Passed to matplotlib.patches.Polygon.

    Returns:
        matplotlib.axes.Axes: The axes drawn on.
    """
    vertices = support_polygon(lazy_set, n_directions=n_directions)
    if ax is None:
        _, ax = plt.subplots()
    kwargs.setdefault("alpha", 0.5)
    ax.add_patch(Polygon(vertices, closed=True, **kwargs))
    ax.update_datalim(vertices)
    ax.autoscale_view()
    return ax
