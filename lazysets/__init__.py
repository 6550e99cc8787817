from lazysets.exceptions import (
    LazySetError,
    DimensionMismatchError,
    UnboundedDirectionError,
    EmptySetError,
)

from lazysets.lazy_set import LazySet

from lazysets.sets import (
    VoidSet,
    Singleton,
    Ball2,
    Hyperrectangle,
    HPolytope,
)

from lazysets.cartesian_product import (
    CartesianProduct,
    CartesianProductArray,
    cartesian_product,
)

from lazysets.checks import LazySetAxiomChecks
