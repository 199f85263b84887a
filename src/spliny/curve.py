"""SplineCurve class: knot vector and coefficients of a B-spline curve."""

from __future__ import annotations

import functools
import logging

import numpy as np
from numpy import typing as npt

from ._curve_impl import (
    _check_num_coefficients,
    _create_curve_arrays,
    _evaluate_curve_impl,
    _validate_degree_and_dimension,
)
from .tolerance import get_strict_tolerance

_logger = logging.getLogger(__name__)


class SplineCurve:
    """A B-spline curve of fixed degree and output dimension.

    The curve is an immutable value: the knot vector and the coefficients are
    copied on construction and exposed as read-only arrays. Degree and
    dimension cannot be changed afterwards.

    Coefficients are stored as `dimension` concatenated blocks, each holding
    the `num_control_points` values of one output channel. For a planar curve
    this is ``[x0, x1, ..., xn, y0, y1, ..., yn]``.

    Attributes:
        _knots (npt.NDArray[np.float32 | np.float64]): Knot vector.
        _coefficients (npt.NDArray[np.float32 | np.float64]): Coefficients in
            block layout.
        _degree (int): Polynomial degree.
        _dimension (int): Number of output channels.
    """

    _knots: npt.NDArray[np.float32 | np.float64]
    _coefficients: npt.NDArray[np.float32 | np.float64]
    _degree: int
    _dimension: int

    def __init__(
        self,
        knots: npt.ArrayLike,
        coefficients: npt.ArrayLike,
        degree: int,
        dimension: int = 1,
    ) -> None:
        """Initialize a B-spline curve.

        The knot vector is validated eagerly. The coefficient count is only
        checked when the curve is evaluated.

        Args:
            knots (npt.ArrayLike): Non-decreasing knot vector with at least
                `2*degree+2` entries. Integer knots are promoted to float64.
            coefficients (npt.ArrayLike): Control coefficients in block layout.
                Any shape is accepted and flattened in C order, so an array of
                shape (dimension, num_control_points) can be passed directly.
                Converted to the dtype of the knots.
            degree (int): Non-negative polynomial degree.
            dimension (int): Number of output channels. Defaults to 1.

        Raises:
            MalformedCurveError: If degree, dimension or the knot vector are
                invalid, or the coefficients are not numeric.

        Example:
            >>> curve = SplineCurve([0, 0, 0, 1, 2, 3, 3, 3], [0, 0, 1, 0, 0], 2)
            >>> curve.domain
            (0.0, 3.0)
        """
        self._degree, self._dimension = _validate_degree_and_dimension(degree, dimension)
        self._knots, self._coefficients = _create_curve_arrays(knots, coefficients, self._degree)
        _logger.debug(
            "Created degree %d curve of dimension %d with %d knots and %d coefficients",
            self._degree,
            self._dimension,
            self._knots.size,
            self._coefficients.size,
        )

    @property
    def knots(self) -> npt.NDArray[np.float32 | np.float64]:
        """Get the knot vector.

        Returns:
            npt.NDArray[np.float32 | np.float64]: The (read-only) knot vector.
        """
        return self._knots

    @property
    def coefficients(self) -> npt.NDArray[np.float32 | np.float64]:
        """Get the control coefficients in block layout.

        Returns:
            npt.NDArray[np.float32 | np.float64]: The (read-only) coefficients.
        """
        return self._coefficients

    @property
    def degree(self) -> int:
        """Get the polynomial degree of the curve.

        Returns:
            int: The degree.
        """
        return self._degree

    @property
    def dimension(self) -> int:
        """Get the number of output channels of the curve.

        Returns:
            int: The dimension.
        """
        return self._dimension

    @property
    def dtype(self) -> np.dtype[np.float32 | np.float64]:
        """Get the data type of the knots, coefficients and evaluated values."""
        return self._knots.dtype

    @functools.cached_property
    def tolerance(self) -> float:
        """Get the tolerance used to detect zero-width knot intervals.

        Returns:
            float: Strict tolerance for the curve dtype.
        """
        return get_strict_tolerance(self.dtype)

    @functools.cached_property
    def num_control_points(self) -> int:
        """Get the number of control points implied by the knot vector.

        This is the number of knots minus the degree minus 1, and the number of
        coefficients per channel.

        Returns:
            int: Number of control points.
        """
        return int(self._knots.size - self._degree - 1)

    @functools.cached_property
    def domain(self) -> tuple[float, float]:
        """Get the parameter domain of the curve.

        Parameter values outside this interval are clamped to it during
        evaluation.

        Returns:
            tuple[float, float]: Tuple of (start_value, end_value), given by
            `knots[degree]` and `knots[-degree - 1]`.
        """
        return (float(self._knots[self._degree]), float(self._knots[-self._degree - 1]))

    @functools.cached_property
    def control_points(self) -> npt.NDArray[np.float32 | np.float64]:
        """Get the control points, one row per point.

        Returns:
            npt.NDArray[np.float32 | np.float64]: Read-only array of shape
            (num_control_points, dimension).

        Raises:
            InsufficientCoefficientsError: If the coefficient count does not
                match the knot vector.
        """
        _check_num_coefficients(self)
        return self._coefficients.reshape(self._dimension, self.num_control_points).T

    def evaluate(
        self,
        parameters: npt.ArrayLike,
        out: npt.NDArray[np.float32 | np.float64] | None = None,
    ) -> npt.NDArray[np.float32 | np.float64]:
        """Evaluate the curve at strictly increasing parameter values.

        The coordinates are returned as a flat array: the `dimension`
        coordinates of the first point, followed by those of the next points.
        For a planar curve this is ``[x0, y0, x1, y1, ...]``. Use
        :func:`spliny.reshape.transpose` to split them into one array per
        channel.

        Args:
            parameters (npt.ArrayLike): Strictly increasing parameter values.
                Values outside the domain are clamped to it.
            out (npt.NDArray[np.float32 | np.float64] | None): Optional output
                array of length `dimension * num_parameters` and the curve dtype.

        Returns:
            npt.NDArray[np.float32 | np.float64]: Flat curve coordinates.

        Raises:
            InsufficientCoefficientsError: If the coefficient count does not match.
            UnsortedInputError: If the parameters are not strictly increasing.
            SplineError: If there are no parameters or any of them is NaN.

        Example:
            >>> curve = SplineCurve([0, 0, 1, 1], [0, 1], 1)
            >>> curve.evaluate([0.0, 0.5, 2.0])
            array([0. , 0.5, 1. ])
        """
        return _evaluate_curve_impl(self, parameters, out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplineCurve):
            return NotImplemented
        return (
            self._degree == other._degree
            and self._dimension == other._dimension
            and self.dtype == other.dtype
            and np.array_equal(self._knots, other._knots)
            and np.array_equal(self._coefficients, other._coefficients)
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._degree,
                self._dimension,
                self.dtype.str,
                tuple(self._knots.tolist()),
                tuple(self._coefficients.tolist()),
            )
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(knots={self._knots.tolist()}, "
            f"coefficients={self._coefficients.tolist()}, "
            f"degree={self._degree}, dimension={self._dimension})"
        )
