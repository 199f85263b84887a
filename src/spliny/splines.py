"""Curve types with a fixed degree and dimension.

Each class fixes the polynomial degree and the number of output channels, so
only the knot vector and the coefficients are passed on construction:

    >>> curve = CubicSpline2D(
    ...     [1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 2.0],
    ...     [0.0, 0.5, 1.0, 3.0, 2.0, -3.0, 3.0, -3.0],
    ... )
    >>> curve.evaluate([1.0, 2.0])
    array([ 0.,  2.,  3., -3.])
"""

from typing import ClassVar

from numpy import typing as npt

from .curve import SplineCurve


class _FixedSplineCurve(SplineCurve):
    """Base class for curves whose degree and dimension are set by the class."""

    DEGREE: ClassVar[int]
    DIMENSION: ClassVar[int]

    def __init__(self, knots: npt.ArrayLike, coefficients: npt.ArrayLike) -> None:
        """Initialize the curve with the class degree and dimension.

        Args:
            knots (npt.ArrayLike): Non-decreasing knot vector.
            coefficients (npt.ArrayLike): Control coefficients in block layout.

        Raises:
            MalformedCurveError: If the knot vector is invalid for the class degree.
        """
        super().__init__(knots, coefficients, self.DEGREE, self.DIMENSION)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(knots={self.knots.tolist()}, "
            f"coefficients={self.coefficients.tolist()})"
        )


class LinearSpline(_FixedSplineCurve):
    """Scalar curve of degree 1."""

    DEGREE = 1
    DIMENSION = 1


class CubicSpline(_FixedSplineCurve):
    """Scalar curve of degree 3."""

    DEGREE = 3
    DIMENSION = 1


class QuinticSpline(_FixedSplineCurve):
    """Scalar curve of degree 5."""

    DEGREE = 5
    DIMENSION = 1


class LinearSpline2D(_FixedSplineCurve):
    """Planar curve of degree 1."""

    DEGREE = 1
    DIMENSION = 2


class CubicSpline2D(_FixedSplineCurve):
    """Planar curve of degree 3."""

    DEGREE = 3
    DIMENSION = 2


class QuinticSpline2D(_FixedSplineCurve):
    """Planar curve of degree 5."""

    DEGREE = 5
    DIMENSION = 2


class LinearSpline3D(_FixedSplineCurve):
    """Spatial curve of degree 1."""

    DEGREE = 1
    DIMENSION = 3


class CubicSpline3D(_FixedSplineCurve):
    """Spatial curve of degree 3."""

    DEGREE = 3
    DIMENSION = 3


class QuinticSpline3D(_FixedSplineCurve):
    """Spatial curve of degree 5."""

    DEGREE = 5
    DIMENSION = 3


__all__ = [
    "CubicSpline",
    "CubicSpline2D",
    "CubicSpline3D",
    "LinearSpline",
    "LinearSpline2D",
    "LinearSpline3D",
    "QuinticSpline",
    "QuinticSpline2D",
    "QuinticSpline3D",
]
