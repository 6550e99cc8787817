"""
Concrete convex sets implementing the LazySet contract.

Hierarchy:
- LazySet (Abstract Base)
    - VoidSet: neutral placeholder {0} of a given dimension
    - Singleton: {p}
    - Ball2: closed Euclidean ball
    - Hyperrectangle: axis-aligned box
    - HPolytope: {x | Ax <= b}, support vectors by linear programming
"""

from __future__ import annotations
import logging
from typing import Any

import numpy as np
from scipy.optimize import linprog

from .exceptions import EmptySetError, LazySetError, UnboundedDirectionError
from .lazy_set import LazySet

logger = logging.getLogger(__name__)


def _as_vector(v: Any, name: str) -> np.ndarray:
    v = np.asarray(v, dtype=float)
    if v.ndim != 1:
        raise ValueError(f"{name} must be a one-dimensional array.")
    return v


class VoidSet(LazySet):
    """
    Neutral placeholder set of a given dimension.

    It behaves as the singleton {0}: the support vector is the origin in
    every direction, and only the origin is contained.
    """

    def __init__(self, n: int) -> None:
        """
        Args:
            n: The ambient dimension. Must be a positive integer.
        """
        if int(n) != n or n < 1:
            raise ValueError(f"VoidSet dimension must be a positive integer, got {n}.")
        self._dim = int(n)

    @property
    def dim(self) -> int:
        return self._dim

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        self._validate_vector(d, "support_vector")
        return np.zeros(self._dim)

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        x = self._validate_vector(x, "contains")
        return bool(np.all(np.abs(x) <= rtol))

    def __repr__(self) -> str:
        return f"VoidSet({self._dim})"


class Singleton(LazySet):
    """
    Represents a set with a single element: S = {p}.
    """

    def __init__(self, element: np.ndarray) -> None:
        self._element = _as_vector(element, "element")

    @property
    def element(self) -> np.ndarray:
        """The unique point of the set."""
        return self._element

    @property
    def dim(self) -> int:
        return self._element.shape[0]

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """Returns the element for every direction."""
        self._validate_vector(d, "support_vector")
        return self._element.copy()

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        x = self._validate_vector(x, "contains")
        scale = max(1.0, float(np.linalg.norm(self._element)))
        return bool(np.linalg.norm(x - self._element) <= rtol * scale)

    def __repr__(self) -> str:
        return f"Singleton({self._element.tolist()})"


class Ball2(LazySet):
    """
    Represents a closed Euclidean ball: B = {x | ||x - c|| <= r}.
    """

    def __init__(self, center: np.ndarray, radius: float) -> None:
        """
        Args:
            center: The center vector c.
            radius: The radius r. Must be non-negative.
        """
        self._center = _as_vector(center, "center")
        if radius < 0:
            raise ValueError("Radius must be non-negative.")
        self._radius = float(radius)

    @property
    def center(self) -> np.ndarray:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def dim(self) -> int:
        return self._center.shape[0]

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """
        Returns x* = c + r * (d / ||d||).

        For the zero direction every point is a maximizer; the center is
        returned.
        """
        d = self._validate_vector(d, "support_vector")
        n = np.linalg.norm(d)
        if n < 1e-14:
            return self._center.copy()
        return self._center + (self._radius / n) * d

    def support_function(self, d: np.ndarray) -> float:
        """Returns h(d) = ⟨d, c⟩ + r ||d||."""
        d = self._validate_vector(d, "support_function")
        return float(np.dot(d, self._center) + self._radius * np.linalg.norm(d))

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        x = self._validate_vector(x, "contains")
        dist = np.linalg.norm(x - self._center)
        margin = rtol * max(1.0, self._radius)
        return bool(dist <= self._radius + margin)

    def __repr__(self) -> str:
        return f"Ball2(center={self._center.tolist()}, radius={self._radius})"


class Hyperrectangle(LazySet):
    """
    Represents an axis-aligned box: H = {x | |x_i - c_i| <= r_i for all i}.
    """

    def __init__(self, center: np.ndarray, radius: np.ndarray) -> None:
        """
        Args:
            center: The center vector c.
            radius: The per-axis radii r. Must be non-negative and have the
                same length as the center.
        """
        self._center = _as_vector(center, "center")
        self._radius = _as_vector(radius, "radius")
        if self._center.shape != self._radius.shape:
            raise ValueError("Center and radius must have the same length.")
        if np.any(self._radius < 0):
            raise ValueError("Radii must be non-negative.")

    @classmethod
    def from_bounds(cls, low: np.ndarray, high: np.ndarray) -> Hyperrectangle:
        """Builds the box [low_1, high_1] x ... x [low_n, high_n]."""
        low = _as_vector(low, "low")
        high = _as_vector(high, "high")
        return cls((high + low) / 2.0, (high - low) / 2.0)

    @property
    def center(self) -> np.ndarray:
        return self._center

    @property
    def radius(self) -> np.ndarray:
        return self._radius

    @property
    def dim(self) -> int:
        return self._center.shape[0]

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """
        Returns the vertex c + r * sign(d).

        Zero components of d select the upper bound of that axis.
        """
        d = self._validate_vector(d, "support_vector")
        return self._center + np.where(d >= 0, self._radius, -self._radius)

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        x = self._validate_vector(x, "contains")
        margin = rtol * np.maximum(1.0, self._radius)
        return bool(np.all(np.abs(x - self._center) <= self._radius + margin))

    def __repr__(self) -> str:
        return (
            f"Hyperrectangle(center={self._center.tolist()}, "
            f"radius={self._radius.tolist()})"
        )


class HPolytope(LazySet):
    """
    Represents a polyhedron in constraint form: P = {x | Ax <= b}.

    The set may be unbounded; support vectors are computed by solving
    max ⟨d, x⟩ subject to Ax <= b.
    """

    def __init__(self, A: np.ndarray, b: np.ndarray) -> None:
        """
        Args:
            A: Constraint matrix of shape (m, n).
            b: Offsets of shape (m,).
        """
        A = np.asarray(A, dtype=float)
        if A.ndim != 2:
            raise ValueError("A must be a two-dimensional array.")
        b = _as_vector(b, "b")
        if A.shape[0] != b.shape[0]:
            raise ValueError(
                f"A has {A.shape[0]} rows but b has {b.shape[0]} entries."
            )
        self._A = A
        self._b = b

    @property
    def A(self) -> np.ndarray:
        return self._A

    @property
    def b(self) -> np.ndarray:
        return self._b

    @property
    def dim(self) -> int:
        return self._A.shape[1]

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """
        Returns a maximizer of ⟨d, x⟩ over the polytope.

        Raises:
            UnboundedDirectionError: If the polytope is unbounded in d.
            EmptySetError: If the constraints are infeasible.
        """
        d = self._validate_vector(d, "support_vector")
        res = linprog(
            -d, A_ub=self._A, b_ub=self._b, bounds=(None, None), method="highs"
        )
        if res.status == 0:
            return res.x
        logger.info("HPolytope support vector LP failed: %s", res.message)
        if res.status == 1:
            raise LazySetError(f"Linear program failed: {res.message}")
        # HiGHS may not tell infeasible and unbounded apart; a zero objective
        # settles feasibility.
        if not self._is_feasible():
            raise EmptySetError("The polytope constraints are infeasible.")
        raise UnboundedDirectionError(
            f"The polytope is unbounded in direction {d.tolist()}."
        )

    def _is_feasible(self) -> bool:
        res = linprog(
            np.zeros(self.dim),
            A_ub=self._A,
            b_ub=self._b,
            bounds=(None, None),
            method="highs",
        )
        return res.status == 0

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        x = self._validate_vector(x, "contains")
        margin = rtol * np.maximum(1.0, np.abs(self._b))
        return bool(np.all(self._A @ x <= self._b + margin))

    def __repr__(self) -> str:
        return f"HPolytope(m={self._A.shape[0]}, n={self._A.shape[1]})"
