"""
Provides a self-checking mechanism for LazySet implementations.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import DimensionMismatchError


class LazySetAxiomChecks:
    """A mixin for checking the support vector contract of a LazySet."""

    def _random_direction(self) -> np.ndarray:
        d = np.random.randn(self.dim)
        # Avoid a zero direction, whose support vector is set dependent.
        while self.dim > 0 and np.linalg.norm(d) < 1e-12:
            d = np.random.randn(self.dim)
        return d

    def _check_support_vector_shape(self, d: np.ndarray) -> np.ndarray:
        x = np.asarray(self.support_vector(d))
        if x.shape != (self.dim,):
            raise AssertionError(
                f"Support vector has shape {x.shape}, expected ({self.dim},)."
            )
        return x

    def _check_support_vector_membership(self, x: np.ndarray, rtol: float) -> None:
        if not self.contains(x, rtol=rtol):
            raise AssertionError(
                f"Support vector {x} is not contained in the set."
            )

    def _check_support_value_dominates(
        self, d: np.ndarray, x: np.ndarray, rtol: float, atol: float
    ) -> None:
        """
        Verifies ⟨d, σ(d)⟩ >= ⟨d, σ(d')⟩ for another random direction d'.
        σ(d') lies in the set, so it cannot beat the maximiser in direction d.
        """
        other = self.support_vector(self._random_direction())
        lhs = float(np.dot(d, x))
        rhs = float(np.dot(d, other))
        if lhs < rhs - atol - rtol * abs(rhs):
            raise AssertionError(
                f"Support value check failed. ⟨d, σ(d)⟩={lhs:.4e} is smaller "
                f"than ⟨d, σ(d')⟩={rhs:.4e}."
            )

    def _check_dimension_mismatch_raises(self) -> None:
        wrong = np.zeros(self.dim + 1)
        for operation in (self.support_vector, self.contains):
            try:
                operation(wrong)
            except DimensionMismatchError:
                continue
            raise AssertionError(
                f"{operation.__name__} accepted a vector of length {self.dim + 1}."
            )

    def check(
        self, n_checks: int = 10, /, *, rtol: float = 1e-6, atol: float = 1e-8
    ) -> None:
        """
        Runs randomized checks of the support vector contract.

        Args:
            n_checks: The number of random directions to test.
            rtol: Relative tolerance.
            atol: Absolute tolerance.

        Raises:
            AssertionError: If any check fails.
        """
        for _ in range(n_checks):
            d = self._random_direction()
            x = self._check_support_vector_shape(d)
            self._check_support_vector_membership(x, rtol)
            self._check_support_value_dominates(d, x, rtol, atol)
        self._check_dimension_mismatch_raises()
        print(
            f"✅ All {n_checks} support vector checks passed for "
            f"{self.__class__.__name__}."
        )
