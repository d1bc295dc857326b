from .cubicPolynomial import CubicPolynomial

__all__ = ["CubicPolynomial"]
