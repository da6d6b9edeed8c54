"""
Tolerance constants scaled to a numeric type.

Comparisons in property checks and tests must loosen as precision drops,
so every tolerance here is a multiple of the backend's machine epsilon.
"""

from .backend import NumericBackend

# Multiples of machine epsilon
REL_TOL_EPS_MULTIPLE = 64
ABS_TOL_EPS_MULTIPLE = 64


class ToleranceConstants:
    """Container for precision-dependent tolerances."""

    def __init__(self, backend: NumericBackend):
        """
        Initialize tolerances for a numeric backend.

        Args:
            backend: NumericBackend whose epsilon scales the tolerances
        """
        self.backend = backend
        eps = float(backend.eps)
        self.rel_tol = REL_TOL_EPS_MULTIPLE * eps
        self.abs_tol = ABS_TOL_EPS_MULTIPLE * eps

    def is_close(self, a, b, scale: float = 1.0) -> bool:
        """Check if a and b agree within the (optionally scaled) tolerances."""
        return bool(abs(a - b) <= (self.abs_tol + self.rel_tol * abs(b)) * scale)

    def is_zero(self, value, scale: float = 1.0) -> bool:
        return bool(abs(value) <= self.abs_tol * scale)
