"""Evaluation of B-spline curves with de Boor's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy import typing as npt

from ._curve_impl import _evaluate_curve_impl, _locate_knot_spans_impl

if TYPE_CHECKING:
    from .curve import SplineCurve


def evaluate(
    curve: SplineCurve,
    parameters: npt.ArrayLike,
    out: npt.NDArray[np.float32 | np.float64] | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Evaluate a B-spline curve at strictly increasing parameter values.

    Each parameter value is first clamped into the curve domain
    `[knots[degree], knots[-degree - 1]]`. The knot span containing it is then
    located by a cursor that only moves forward through the knot vector, which
    is why the parameters must be strictly increasing. Finally the
    `degree + 1` coefficients acting on that span are blended with the de Boor
    recursion, once per output channel.

    The cursor starts past zero-width spans at the domain start, so the value
    there is the limit from the right. Knot intervals shorter than the curve
    tolerance get a zero blending weight, so repeated knots never produce NaN
    values.

    Args:
        curve (SplineCurve): Curve to evaluate.
        parameters (npt.ArrayLike): Strictly increasing parameter values
            (scalar, sequence or array; flattened to 1D and cast to the curve
            dtype).
        out (npt.NDArray[np.float32 | np.float64] | None): Optional output array
            where the result will be stored. It must be a writeable, contiguous
            1D array of length `curve.dimension * num_parameters` with the curve
            dtype. This follows NumPy's style for output arrays. Defaults to None.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Flat array of length
        `curve.dimension * num_parameters`; the coordinates of point `i` are
        `result[i * dimension : (i + 1) * dimension]`. If `out` was provided,
        returns the same array.

    Raises:
        InsufficientCoefficientsError: If the number of coefficients differs
            from `dimension * (len(knots) - degree - 1)`.
        UnsortedInputError: If the parameters are not strictly increasing.
        SplineError: If there are no parameters or any of them is NaN.
        ValueError: If `out` is provided and has incorrect shape or dtype.

    Example:
        >>> curve = SplineCurve([0, 0, 0, 1, 2, 3, 3, 3], [0, 0, 1, 0, 0], 2)
        >>> evaluate(curve, [0.5, 1.5, 2.5])
        array([0.125, 0.75 , 0.125])
    """
    return _evaluate_curve_impl(curve, parameters, out)


def locate_knot_spans(
    curve: SplineCurve,
    parameters: npt.ArrayLike,
) -> npt.NDArray[np.int_]:
    """Find the knot span used to evaluate each parameter value.

    The span of a (clamped) parameter value `u` is the index `i`, with
    `degree <= i <= len(knots) - degree - 2`, such that
    `knots[i] <= u <= knots[i + 1]`. The coefficients
    `coefficients[i - degree : i + 1]` of every channel act on it. Values lying
    on a knot shared by two spans are assigned to the first one.

    Args:
        curve (SplineCurve): Curve whose knot vector is searched.
        parameters (npt.ArrayLike): Strictly increasing parameter values.

    Returns:
        npt.NDArray[np.int_]: Span index for every parameter value.

    Raises:
        UnsortedInputError: If the parameters are not strictly increasing.
        SplineError: If there are no parameters or any of them is NaN.

    Example:
        >>> curve = SplineCurve([0, 0, 0, 1, 2, 3, 3, 3], [0, 0, 1, 0, 0], 2)
        >>> locate_knot_spans(curve, [-1.0, 1.0, 1.5, 3.0])
        array([2, 2, 3, 4])
    """
    return _locate_knot_spans_impl(curve, parameters)
