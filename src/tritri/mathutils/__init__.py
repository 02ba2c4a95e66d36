"""Vector, matrix and predicate helpers used by the intersection solvers."""
