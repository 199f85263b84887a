"""Exceptions raised by curve construction and evaluation.

All exceptions derive from :class:`ValueError`, so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class SplineError(ValueError):
    """Base class for invalid curves and invalid evaluation requests."""


class MalformedCurveError(SplineError):
    """The knot vector, degree or dimension of a curve is invalid."""


class UnsortedInputError(SplineError):
    """The requested parameter values are not strictly increasing."""


class InsufficientCoefficientsError(SplineError):
    """The number of coefficients does not match the knot vector.

    Attributes:
        expected (int): Coefficient count implied by the knot vector length,
            the degree and the dimension.
        actual (int): Coefficient count stored in the curve.
    """

    def __init__(self, expected: int, actual: int) -> None:
        """Initialize the error with the expected and actual counts.

        Args:
            expected (int): Expected number of coefficients.
            actual (int): Number of coefficients found.
        """
        super().__init__(f"Expected {expected} coefficient values, got {actual}")
        self.expected = expected
        self.actual = actual


__all__ = [
    "InsufficientCoefficientsError",
    "MalformedCurveError",
    "SplineError",
    "UnsortedInputError",
]
