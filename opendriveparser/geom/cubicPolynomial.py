from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.polynomial import polynomial as P


@dataclass(frozen=True)
class CubicPolynomial:
    """Cubic polynomial a + b*ds + c*ds^2 + d*ds^3 with ds = sQuery - s.

    This is the geometry value handed to the map builder for every lane
    section: the section's lane offset coefficients anchored at the
    section's start offset.
    """
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    s: float = 0.0

    @property
    def coeffs(self) -> list[float]:
        """Array of coefficients for usage with numpy.polynomial.polynomial.polyval"""
        return [self.a, self.b, self.c, self.d]

    def evaluate(self, s):
        """Value at the longitudinal offset(s) s, scalar or array."""
        return self._polyval(s, self.coeffs)

    def tangent(self, s):
        """First derivative at the longitudinal offset(s) s."""
        return self._polyval(s, P.polyder(self.coeffs))

    def _polyval(self, s, coeffs):
        ds = np.asarray(s, dtype=float) - self.s
        value = P.polyval(ds, coeffs)
        if np.ndim(value) == 0:
            return float(value)
        return value

    def __repr__(self) -> str:
        return "CubicPolynomial(a={}, b={}, c={}, d={}, s={})".format(
            self.a, self.b, self.c, self.d, self.s)
