"""Numba kernels for B-spline curve evaluation.

This module provides the low-level pieces of curve evaluation: ordering checks
on parameter batches, knot-span location with a forward-only cursor, and the
de Boor recursion that blends control coefficients into curve values.

All kernels expect validated, contiguous inputs of a single floating dtype
(float32 or float64). Validation and error reporting live in
:mod:`spliny._curve_impl`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import numba as nb
import numpy as np
import numpy.typing as npt

_logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

if TYPE_CHECKING:
    # During type-checking, make the decorator a no-op that preserves types.
    def nb_jit(*args: object, **kwargs: object) -> Callable[[F], F]:
        def decorator(func: F) -> F:
            return func

        return decorator
else:
    # At runtime, use the real Numba decorator.
    nb_jit = nb.jit  # type: ignore[attr-defined]


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _find_first_unsorted_impl(values: npt.NDArray[np.float32 | np.float64]) -> int:
    """Find the first position where a sequence stops being strictly increasing.

    Args:
        values (npt.NDArray[np.float32 | np.float64]): 1D array of values.

    Returns:
        int: Smallest index `i` such that `values[i] < values[i + 1]` does not
            hold, or -1 if the sequence is strictly increasing. NaN values
            always break the ordering.

    Note:
        Inputs are assumed to be correct (no validation performed).
    """
    for i in range(values.size - 1):
        if not values[i] < values[i + 1]:
            return i
    return -1


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _first_span_impl(knots: npt.NDArray[np.float32 | np.float64], degree: int) -> int:
    """Get the first knot span of the domain with non-zero width.

    Knots repeated more than `degree + 1` times at the domain start create
    leading zero-width spans. Starting the cursor past them makes the value
    at the domain start the limit from the right.

    Args:
        knots (npt.NDArray[np.float32 | np.float64]): Non-decreasing knot vector.
        degree (int): Curve degree.

    Returns:
        int: Span index. It is the last span of the domain if every span has
            zero width.

    Note:
        Inputs are assumed to be correct (no validation performed).
    """
    last_span = knots.size - degree - 2
    span = degree
    while span < last_span and knots[span] == knots[span + 1]:
        span += 1
    return span


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _locate_knot_spans_core(
    knots: npt.NDArray[np.float32 | np.float64],
    degree: int,
    pts: npt.NDArray[np.float32 | np.float64],
    out_spans: npt.NDArray[np.int_],
) -> None:
    """Clamp points into the domain and find the knot span containing each one.

    The span of a point `arg` is the index `i`, with
    `degree <= i <= knots.size - degree - 2`, such that
    `knots[i] <= arg <= knots[i + 1]`. The search cursor starts at the first
    span of non-zero width and only moves forward, so the whole batch is
    located in a single pass over the knot vector.

    Args:
        knots (npt.NDArray[np.float32 | np.float64]): Non-decreasing knot vector.
        degree (int): Curve degree.
        pts (npt.NDArray[np.float32 | np.float64]): Non-decreasing points.
        out_spans (npt.NDArray[np.int_]): Output array for span indices.
            Must have the same length as `pts`.

    Note:
        Inputs are assumed to be correct (no validation performed).
    """
    knot_begin = knots[degree]
    knot_end = knots[knots.size - degree - 1]
    last_span = knots.size - degree - 2

    span = _first_span_impl(knots, degree)
    for pt_id in range(pts.size):
        arg = min(max(pts[pt_id], knot_begin), knot_end)
        while span < last_span and not (knots[span] <= arg and arg <= knots[span + 1]):
            span += 1
        out_spans[pt_id] = span


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _de_Boor_impl(  # noqa: PLR0913
    knots: npt.NDArray[np.float32 | np.float64],
    coefs: npt.NDArray[np.float32 | np.float64],
    first_coef: int,
    degree: int,
    span: int,
    arg: float,
    tol: float,
    work: npt.NDArray[np.float32 | np.float64],
) -> float:
    """Blend `degree + 1` coefficients into one curve value with de Boor's algorithm.

    Args:
        knots (npt.NDArray[np.float32 | np.float64]): Knot vector.
        coefs (npt.NDArray[np.float32 | np.float64]): Flat coefficient array.
        first_coef (int): Offset of the channel block inside `coefs`.
        degree (int): Curve degree.
        span (int): Knot span containing `arg`.
        arg (float): Parameter value, already clamped into the domain.
        tol (float): Knot intervals shorter than this have zero weight.
        work (npt.NDArray[np.float32 | np.float64]): Scratch buffer of length
            at least `degree + 1`. Overwritten.

    Returns:
        float: Curve value for the channel.

    Note:
        Inputs are assumed to be correct (no validation performed).
    """
    dtype = knots.dtype
    zero = dtype.type(0.0)
    one = dtype.type(1.0)

    offset = first_coef + span - degree
    for j in range(degree + 1):
        work[j] = coefs[offset + j]

    for r in range(1, degree + 1):
        # Descending j so work[j - 1] still holds the previous level.
        for j in range(degree, r - 1, -1):
            k0 = knots[j + span - degree]
            diff = knots[j + 1 + span - r] - k0
            alpha = zero if diff < tol else (arg - k0) / diff
            work[j] = (one - alpha) * work[j - 1] + alpha * work[j]

    return work[degree]  # type: ignore[no-any-return]


@nb_jit(
    nopython=True,
    cache=True,
    parallel=False,
)
def _evaluate_curve_core(  # noqa: PLR0913
    knots: npt.NDArray[np.float32 | np.float64],
    coefs: npt.NDArray[np.float32 | np.float64],
    degree: int,
    dimension: int,
    pts: npt.NDArray[np.float32 | np.float64],
    tol: float,
    out: npt.NDArray[np.float32 | np.float64],
) -> None:
    """Evaluate a B-spline curve at a batch of non-decreasing points.

    Values are written interleaved: the `dimension` coordinates of point `i`
    occupy `out[i * dimension : (i + 1) * dimension]`.

    Args:
        knots (npt.NDArray[np.float32 | np.float64]): Knot vector.
        coefs (npt.NDArray[np.float32 | np.float64]): Coefficients stored as
            `dimension` concatenated blocks of `knots.size - degree - 1` values.
        degree (int): Curve degree.
        dimension (int): Number of output channels.
        pts (npt.NDArray[np.float32 | np.float64]): Non-decreasing points.
        tol (float): Zero-width threshold for knot intervals.
        out (npt.NDArray[np.float32 | np.float64]): Output array of length
            `dimension * pts.size` and the knots dtype.

    Note:
        Inputs are assumed to be correct (no validation performed).
    """
    num_coefs = knots.size - degree - 1
    knot_begin = knots[degree]
    knot_end = knots[knots.size - degree - 1]
    last_span = knots.size - degree - 2

    work = np.empty(degree + 1, dtype=knots.dtype)

    span = _first_span_impl(knots, degree)
    for pt_id in range(pts.size):
        arg = min(max(pts[pt_id], knot_begin), knot_end)
        while span < last_span and not (knots[span] <= arg and arg <= knots[span + 1]):
            span += 1

        for dim in range(dimension):
            out[pt_id * dimension + dim] = _de_Boor_impl(
                knots, coefs, dim * num_coefs, degree, span, arg, tol, work
            )


def _warmup_numba_functions() -> None:
    """Precompile numba functions with float64 signatures for faster first call.

    This function triggers compilation of the numba-decorated functions
    with float64 arrays, ensuring they are cached and ready for use.
    """
    knots_dummy = np.array([0.0, 0.0, 0.0, 1.0, 1.0, 1.0], dtype=np.float64)
    coefs_dummy = np.array([0.0, 1.0, 0.0, 1.0, 0.0, 1.0], dtype=np.float64)
    pts_dummy = np.array([0.25, 0.5], dtype=np.float64)
    tol_dummy = 1e-15
    degree_dummy = 2
    dimension_dummy = 2

    _find_first_unsorted_impl(pts_dummy)

    spans_dummy = np.empty(pts_dummy.size, dtype=np.int_)
    _locate_knot_spans_core(knots_dummy, degree_dummy, pts_dummy, spans_dummy)

    out_dummy = np.empty(pts_dummy.size * dimension_dummy, dtype=np.float64)
    _evaluate_curve_core(
        knots_dummy, coefs_dummy, degree_dummy, dimension_dummy, pts_dummy, tol_dummy, out_dummy
    )
    _logger.debug("Compiled curve evaluation kernels for float64 inputs")


# Precompile numba functions on module import (skip during type checking)
if not TYPE_CHECKING:
    _warmup_numba_functions()


__all__ = [
    "_de_Boor_impl",
    "_evaluate_curve_core",
    "_find_first_unsorted_impl",
    "_first_span_impl",
    "_locate_knot_spans_core",
]
