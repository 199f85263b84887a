"""Implementation functions for curve validation and evaluation.

This module validates curve data and evaluation requests, raising the
exceptions of :mod:`spliny.errors`, and dispatches to the Numba kernels of
:mod:`spliny._curve_kernels`, which assume validated input.
"""

from __future__ import annotations

import logging
import numbers
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from ._curve_kernels import (
    _evaluate_curve_core,
    _find_first_unsorted_impl,
    _locate_knot_spans_core,
)
from ._utils import _normalize_values_1D, _validate_out_array_1D
from .errors import (
    InsufficientCoefficientsError,
    MalformedCurveError,
    SplineError,
    UnsortedInputError,
)

if TYPE_CHECKING:
    from .curve import SplineCurve

_logger = logging.getLogger(__name__)


def _validate_degree_and_dimension(degree: int, dimension: int) -> tuple[int, int]:
    """Check that degree and dimension are integers in their valid ranges.

    Args:
        degree (int): Polynomial degree. Must be non-negative.
        dimension (int): Number of output channels. Must be positive.

    Returns:
        tuple[int, int]: The degree and dimension as Python integers.

    Raises:
        MalformedCurveError: If either value is not an integer or is out of range.
    """
    for name, value in (("degree", degree), ("dimension", dimension)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise MalformedCurveError(f"{name} must be an integer, got {value!r}")

    if degree < 0:
        raise MalformedCurveError("degree must be non-negative")
    if dimension < 1:
        raise MalformedCurveError("dimension must be positive")

    return int(degree), int(dimension)


def _validate_knots(
    knots: npt.ArrayLike, degree: int
) -> npt.NDArray[np.float32 | np.float64]:
    """Convert a knot sequence into a float array and check its structure.

    Integer (and boolean) knots are promoted to float64.

    Args:
        knots (npt.ArrayLike): Knot sequence.
        degree (int): Non-negative curve degree.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Contiguous 1D knot array.

    Raises:
        MalformedCurveError: If knots are not 1D, not float32/float64, not
            finite, fewer than `2*degree+2`, or not non-decreasing.
    """
    knots_arr = np.asarray(knots)

    if knots_arr.ndim != 1:
        raise MalformedCurveError("knots must be a 1D array")

    if knots_arr.dtype.kind in "biu":
        knots_arr = knots_arr.astype(np.float64)

    if knots_arr.dtype not in (np.float32, np.float64):
        raise MalformedCurveError("knots type must be float (32 or 64 bits)")

    if knots_arr.size < (2 * degree + 2):
        raise MalformedCurveError(
            f"knots must have at least 2*degree+2 = {2 * degree + 2} elements, "
            f"got {knots_arr.size}"
        )

    if not np.all(np.isfinite(knots_arr)):
        raise MalformedCurveError("knots must be finite")

    if not np.all(np.diff(knots_arr) >= 0):
        raise MalformedCurveError("knots must be non-decreasing")

    return np.ascontiguousarray(knots_arr)


def _create_curve_arrays(
    knots: npt.ArrayLike,
    coefficients: npt.ArrayLike,
    degree: int,
) -> tuple[npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]]:
    """Build the private, read-only knot and coefficient arrays of a curve.

    Coefficients are flattened in C order and converted to the knots dtype.
    Their count is not checked here.

    Args:
        knots (npt.ArrayLike): Knot sequence.
        coefficients (npt.ArrayLike): Coefficients in block layout.
        degree (int): Validated curve degree.

    Returns:
        tuple[npt.NDArray[np.float32 | np.float64], npt.NDArray[np.float32 | np.float64]]:
            Read-only copies of the knots and the coefficients.

    Raises:
        MalformedCurveError: If the knot vector is invalid or the coefficients
            are not numeric.
    """
    knots_arr = _validate_knots(knots, degree).copy()

    try:
        coefs_arr = np.array(coefficients, dtype=knots_arr.dtype).ravel()
    except (TypeError, ValueError) as exc:
        raise MalformedCurveError(f"coefficients must be numeric: {exc}") from exc

    knots_arr.setflags(write=False)
    coefs_arr.setflags(write=False)
    return knots_arr, coefs_arr


def _check_num_coefficients(curve: SplineCurve) -> None:
    """Check that the coefficient count matches knots, degree and dimension.

    Raises:
        InsufficientCoefficientsError: If `coefficients.size` differs from
            `dimension * (knots.size - degree - 1)`.
    """
    expected = curve.dimension * curve.num_control_points
    actual = int(curve.coefficients.size)
    if actual != expected:
        raise InsufficientCoefficientsError(expected, actual)


def _prepare_parameters(
    curve: SplineCurve, parameters: npt.ArrayLike
) -> npt.NDArray[np.float32 | np.float64]:
    """Normalize evaluation parameters and check the ordering precondition.

    The ordering is checked on the values as given, before they are cast to
    the curve dtype. Distinct values that round to the same float32 number
    are therefore accepted.

    Args:
        curve (SplineCurve): Curve the parameters refer to.
        parameters (npt.ArrayLike): Scalar or sequence of parameter values.

    Returns:
        npt.NDArray[np.float32 | np.float64]: 1D array in the curve dtype.

    Raises:
        SplineError: If there are no parameters or any of them is NaN.
        UnsortedInputError: If the parameters are not strictly increasing.
    """
    pts = _normalize_values_1D(parameters)

    if pts.size == 0:
        raise SplineError("parameters must have at least one element")

    if np.any(np.isnan(pts)):
        raise SplineError("parameters must not contain NaN values")

    first_unsorted = _find_first_unsorted_impl(pts)
    if first_unsorted >= 0:
        raise UnsortedInputError(
            "parameters must be sorted in strictly increasing order: "
            f"got {pts[first_unsorted]} followed by {pts[first_unsorted + 1]} "
            f"at index {first_unsorted}"
        )

    return pts.astype(curve.dtype, copy=False)


def _locate_knot_spans_impl(
    curve: SplineCurve, parameters: npt.ArrayLike
) -> npt.NDArray[np.int_]:
    """Find the knot span of each (clamped) parameter value.

    Args:
        curve (SplineCurve): Curve whose knot vector is searched.
        parameters (npt.ArrayLike): Strictly increasing parameter values.

    Returns:
        npt.NDArray[np.int_]: Span index for every parameter value.

    Raises:
        SplineError: If there are no parameters or any of them is NaN.
        UnsortedInputError: If the parameters are not strictly increasing.
    """
    pts = _prepare_parameters(curve, parameters)
    spans = np.empty(pts.size, dtype=np.int_)
    _locate_knot_spans_core(curve.knots, curve.degree, pts, spans)
    return spans


def _evaluate_curve_impl(
    curve: SplineCurve,
    parameters: npt.ArrayLike,
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Evaluate a curve at strictly increasing parameter values.

    Args:
        curve (SplineCurve): Curve to evaluate.
        parameters (npt.ArrayLike): Strictly increasing parameter values.
        out (npt.NDArray[np.float32 | np.float64] | None): Optional output array
            of length `dimension * num_parameters` and the curve dtype.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Flat, interleaved coordinates.
            If `out` was provided, returns the same array.

    Raises:
        InsufficientCoefficientsError: If the coefficient count does not match.
        SplineError: If there are no parameters or any of them is NaN.
        UnsortedInputError: If the parameters are not strictly increasing.
        ValueError: If `out` has the wrong shape, dtype or is not writeable.
    """
    _check_num_coefficients(curve)
    pts = _prepare_parameters(curve, parameters)

    expected_shape = (pts.size * curve.dimension,)
    if out is None:
        out = np.empty(expected_shape, dtype=curve.dtype)
    else:
        _validate_out_array_1D(out, expected_shape, curve.dtype)

    _logger.debug(
        "Evaluating degree %d curve of dimension %d at %d parameter values",
        curve.degree,
        curve.dimension,
        pts.size,
    )

    _evaluate_curve_core(
        curve.knots,
        curve.coefficients,
        curve.degree,
        curve.dimension,
        pts,
        curve.tolerance,
        out,
    )
    return out


__all__ = [
    "_check_num_coefficients",
    "_create_curve_arrays",
    "_evaluate_curve_impl",
    "_locate_knot_spans_impl",
    "_prepare_parameters",
    "_validate_degree_and_dimension",
    "_validate_knots",
]
