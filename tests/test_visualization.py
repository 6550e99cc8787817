"""
Tests for the visualization module.
"""

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pytest
from numpy.testing import assert_allclose

from lazysets.cartesian_product import CartesianProduct
from lazysets.exceptions import DimensionMismatchError
from lazysets.sets import Ball2, Hyperrectangle, Singleton
from lazysets.visualization import plot_2d, support_polygon

# Use a non-interactive backend for testing
matplotlib.use("Agg")


class TestSupportPolygon:
    def test_box_vertices(self):
        box = Hyperrectangle(np.zeros(2), np.array([1.0, 2.0]))
        vertices = support_polygon(box, n_directions=8)
        assert vertices.shape == (8, 2)
        assert all(box.contains(v) for v in vertices)
        assert_allclose(vertices[1], [1.0, 2.0])

    def test_product_of_intervals(self):
        cp = CartesianProduct(
            Hyperrectangle(np.array([0.0]), np.array([1.0])),
            Singleton(np.array([3.0])),
        )
        vertices = support_polygon(cp, n_directions=4)
        assert_allclose(vertices[:, 1], 3.0)

    def test_wrong_dimension(self):
        with pytest.raises(DimensionMismatchError):
            support_polygon(Ball2(np.zeros(3), 1.0))

    def test_too_few_directions(self):
        with pytest.raises(ValueError):
            support_polygon(Ball2(np.zeros(2), 1.0), n_directions=2)


class TestPlot2d:
    def test_returns_axes_with_patch(self):
        ax = plot_2d(Ball2(np.zeros(2), 1.0), n_directions=16, color="red")
        assert len(ax.patches) == 1
        plt.close("all")

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        returned = plot_2d(Hyperrectangle(np.zeros(2), np.ones(2)), ax=ax)
        assert returned is ax
        plt.close(fig)
