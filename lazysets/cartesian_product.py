"""
Lazy Cartesian products of convex sets.

Two representations of the same mathematical object are provided:

- `CartesianProduct`: the product X × Y of two sets. Products of more sets
  are obtained by nesting, right-associatively: X × (Y × Z).
- `CartesianProductArray`: the product of a flat, growable list of sets,
  queried in a single pass without recursion.

Neither materializes the product. Directions and points are split into
consecutive blocks sized by the factors' dimensions, each block is handed to
its factor, and the results are concatenated.

Note:
    Growing a `CartesianProductArray` (with `*`, `append` or `extend`)
    mutates it in place and returns the same object. Every name bound to
    that array sees the growth. Grow a `copy()` to leave it unchanged.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from .lazy_set import LazySet
from .sets import VoidSet

logger = logging.getLogger(__name__)


def _require_lazy_set(s: Any) -> LazySet:
    if not isinstance(s, LazySet):
        raise TypeError(
            f"Cartesian product operands must be LazySet instances, "
            f"got {type(s).__name__}."
        )
    return s


class CartesianProduct(LazySet):
    """
    Represents the Cartesian product X × Y of two convex sets.

    The product of three or more sets is obtained recursively, see
    `from_sequence`. For a flat representation of many sets use
    `CartesianProductArray`.
    """

    def __init__(self, X: LazySet, Y: LazySet) -> None:
        """
        Args:
            X: The first factor.
            Y: The second factor.
        """
        self._X = _require_lazy_set(X)
        self._Y = _require_lazy_set(Y)

    @staticmethod
    def from_sequence(sets: Sequence[LazySet]) -> LazySet:
        """
        Builds the product of a sequence of sets by right-associative nesting.

        Args:
            sets: The factors, in block order.

        Returns:
            LazySet: `VoidSet(1)` for an empty sequence, the set itself for
                a single set, X × Y for two sets and
                S_1 × (S_2 × (... × S_k)) otherwise.
        """
        sets = list(sets)
        logger.debug("Building nested Cartesian product of %d sets", len(sets))
        if len(sets) == 0:
            return VoidSet(1)
        if len(sets) == 1:
            return _require_lazy_set(sets[0])

        # Fold from the right so that long sequences do not recurse.
        product = CartesianProduct(sets[-2], sets[-1])
        for s in reversed(sets[:-2]):
            product = CartesianProduct(s, product)
        return product

    @property
    def X(self) -> LazySet:
        """The first factor."""
        return self._X

    @property
    def Y(self) -> LazySet:
        """The second factor."""
        return self._Y

    @property
    def dim(self) -> int:
        """The sum of the factors' dimensions."""
        return self._X.dim + self._Y.dim

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """
        Returns the support vector in direction d.

        The support vector of a product is the concatenation of the factors'
        support vectors in the corresponding blocks of d. If d is the zero
        vector the result depends on the factors.
        """
        d = self._validate_vector(d, "support_vector")
        n = self._X.dim
        return np.concatenate(
            (self._X.support_vector(d[:n]), self._Y.support_vector(d[n:]))
        )

    def support_function(self, d: np.ndarray) -> float:
        """Returns h(d) as the sum of the factors' support functions."""
        d = self._validate_vector(d, "support_function")
        n = self._X.dim
        return self._X.support_function(d[:n]) + self._Y.support_function(d[n:])

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        """
        Returns True iff each block of x lies in the corresponding factor.
        """
        x = self._validate_vector(x, "contains")
        n = self._X.dim
        return self._X.contains(x[:n], rtol=rtol) and self._Y.contains(
            x[n:], rtol=rtol
        )

    def __repr__(self) -> str:
        return f"CartesianProduct({self._X!r}, {self._Y!r})"


class CartesianProductArray(LazySet):
    """
    Represents the Cartesian product of a finite list of convex sets.

    The order of the list defines the block layout of directions and points.
    The dimension is recomputed on each access, so it stays correct as sets
    are appended.
    """

    def __init__(self, sets: Optional[Union[Iterable[LazySet], int]] = None) -> None:
        """
        Args:
            sets: The factors, in block order. If an integer is given, an
                empty product is created and the integer is kept as a size
                hint only. If None (default), the product is empty.
        """
        self._size_hint = 0
        if sets is None:
            self._array: List[LazySet] = []
        elif isinstance(sets, (int, np.integer)):
            if sets < 0:
                raise ValueError("Size hint must be non-negative.")
            self._size_hint = int(sets)
            self._array = []
        else:
            self._array = [_require_lazy_set(s) for s in sets]

    @property
    def array(self) -> List[LazySet]:
        """The factors, in block order. This is the live list, not a copy."""
        return self._array

    @property
    def size_hint(self) -> int:
        """The expected number of factors given at construction."""
        return self._size_hint

    def append(self, s: LazySet) -> CartesianProductArray:
        """
        Appends a set as the last factor.

        Returns:
            CartesianProductArray: This product, modified in place.
        """
        self._array.append(_require_lazy_set(s))
        logger.debug("Appended %r; product now has %d factors", s, len(self._array))
        return self

    def extend(self, sets: Iterable[LazySet]) -> CartesianProductArray:
        """
        Appends several sets as the last factors, in order.

        Returns:
            CartesianProductArray: This product, modified in place.
        """
        new = [_require_lazy_set(s) for s in sets]
        self._array.extend(new)
        logger.debug(
            "Merged %d factors; product now has %d factors",
            len(new),
            len(self._array),
        )
        return self

    def copy(self) -> CartesianProductArray:
        """Returns a product over the same factors with its own list."""
        return CartesianProductArray(self._array)

    def __mul__(self, other: Any) -> CartesianProductArray:
        """
        Multiplies from the right.

        `cpa * S` appends S. `cpa1 * cpa2` appends the factors of cpa2 to
        cpa1. In both cases the left product is modified and returned.
        """
        if isinstance(other, CartesianProductArray):
            return self.extend(list(other.array))
        if isinstance(other, LazySet):
            return self.append(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> CartesianProductArray:
        """
        Multiplies from the left.

        `S * cpa` appends S at the end of cpa, exactly as `cpa * S` does; it
        does not prepend. cpa is modified and returned.
        """
        if isinstance(other, LazySet):
            return self.append(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self._array)

    def __iter__(self) -> Iterator[LazySet]:
        return iter(self._array)

    def __getitem__(self, index: int) -> LazySet:
        return self._array[index]

    @property
    def dim(self) -> int:
        """The sum of the factors' dimensions, 0 for an empty product."""
        return sum(s.dim for s in self._array)

    def _blocks(self) -> Iterator[tuple[LazySet, slice]]:
        # Yields each factor with the slice of coordinates it owns.
        start = 0
        for s in self._array:
            stop = start + s.dim
            yield s, slice(start, stop)
            start = stop

    def support_vector(self, d: np.ndarray) -> np.ndarray:
        """
        Returns the support vector in direction d.

        Each factor's support vector is written into its block of the
        result. If d is the zero vector the result depends on the factors.
        """
        d = self._validate_vector(d, "support_vector")
        svec = np.empty_like(d)
        for s, block in self._blocks():
            svec[block] = s.support_vector(d[block])
        return svec

    def support_function(self, d: np.ndarray) -> float:
        """Returns h(d) as the sum of the factors' support functions."""
        d = self._validate_vector(d, "support_function")
        return float(sum(s.support_function(d[block]) for s, block in self._blocks()))

    def contains(self, x: np.ndarray, /, *, rtol: float = 1e-6) -> bool:
        """
        Returns True iff each block of x lies in the corresponding factor.

        Stops at the first block that is not contained. The empty product
        contains only the zero-length point.
        """
        x = self._validate_vector(x, "contains")
        for s, block in self._blocks():
            if not s.contains(x[block], rtol=rtol):
                return False
        return True

    def __repr__(self) -> str:
        return f"CartesianProductArray({self._array!r})"


def cartesian_product(sets: Sequence[LazySet]) -> LazySet:
    """
    Returns the nested Cartesian product of a sequence of sets.

    See `CartesianProduct.from_sequence`.
    """
    return CartesianProduct.from_sequence(sets)
