"""
Defines the LazySet base class, the contract shared by every convex set.

A lazy set is described by what it can answer rather than by a coordinate
representation. Three queries are required of every set, concrete or
combinator:

- `dim`: the ambient dimension.
- `support_vector(d)`: a point of the set maximising ⟨d, x⟩.
- `contains(x)`: membership of a point.

Combinators (e.g. Cartesian products) are themselves LazySets, so they can
be nested arbitrarily.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import numpy as np

from .checks.lazy_set import LazySetAxiomChecks
from .exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from .cartesian_product import CartesianProduct, CartesianProductArray


class LazySet(LazySetAxiomChecks, ABC):
    """
    Abstract base class for a convex set in R^n.
    """

    @property
    @abstractmethod
    def dim(self) -> int:
        """The ambient dimension of the set."""

    @abstractmethod
    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """
        Returns a support vector of the set in a given direction.

        Args:
            d: A direction of length `dim`.

        Returns:
            np.ndarray: A point x of the set with ⟨d, x⟩ = sup{⟨d, y⟩ : y ∈ S}.
                If d is the zero vector the result depends on the set.

        Raises:
            DimensionMismatchError: If len(d) != dim.
        """

    @abstractmethod
    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        """
        Returns True if the point x lies in the set.

        Args:
            x: A point of length `dim`.
            rtol: Relative tolerance for floating-point comparisons.

        Raises:
            DimensionMismatchError: If len(x) != dim.
        """

    def support_function(self, d: np.ndarray) -> float:
        """
        Returns the support function h(d) = sup{⟨d, x⟩ : x ∈ S}.
        """
        d = self._validate_vector(d, "support_function")
        return float(np.dot(d, self.support_vector(d)))

    def directional_bound(self, d: np.ndarray) -> tuple[np.ndarray, float]:
        """
        Returns the extreme point and the support value in direction d.

        Returns:
            tuple[np.ndarray, float]: (x_max, h(d)).
        """
        d = self._validate_vector(d, "directional_bound")
        x_max = self.support_vector(d)
        return x_max, float(np.dot(d, x_max))

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def __mul__(self, other: Any) -> CartesianProduct | CartesianProductArray:
        """
        Returns the Cartesian product of this set and another.

        Multiplying into a CartesianProductArray appends this set to it.
        """
        from .cartesian_product import CartesianProduct, CartesianProductArray

        if not isinstance(other, LazySet):
            return NotImplemented
        if isinstance(other, CartesianProductArray):
            return other.append(self)
        return CartesianProduct(self, other)

    def _validate_vector(self, v: Any, operation: str) -> np.ndarray:
        """
        Converts v to a one-dimensional float array of length `dim`.

        Raises:
            ValueError: If v is not one-dimensional.
            DimensionMismatchError: If len(v) != dim.
        """
        v = np.asarray(v, dtype=float)
        if v.ndim != 1:
            raise ValueError(
                f"{operation}: expected a one-dimensional vector, "
                f"got an array of shape {v.shape}."
            )
        n = self.dim
        if v.shape[0] != n:
            raise DimensionMismatchError(
                f"{self.__class__.__name__}.{operation}", n, v.shape[0]
            )
        return v
