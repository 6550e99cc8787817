from .lazy_set import LazySetAxiomChecks

__all__ = ["LazySetAxiomChecks"]
