"""Knot vector utilities for B-spline curves.

This module provides functions to create uniform knot vectors (clamped at the
ends or extended beyond them) and to place control coefficients along the
parameter axis.
"""

from typing import Any, cast

import numpy as np
import numpy.typing as npt


def _get_domain_and_dtype(
    domain: tuple[float, float] | None,
    dtype: npt.DTypeLike | None,
) -> tuple[np.floating[Any], np.floating[Any], np.dtype[np.floating[Any]]]:
    """Resolve the domain ends and dtype of a knot vector.

    Args:
        domain (tuple[float, float] | None): Domain as (start, end).
            Defaults to (0.0, 1.0).
        dtype (npt.DTypeLike | None): Requested dtype. If None, float32 is kept
            when both ends are float32 scalars, otherwise float64 is used.

    Returns:
        tuple[np.floating, np.floating, np.dtype]: Tuple of (start, end, dtype).

    Raises:
        ValueError: If the dtype is not float32/float64, the ends are not
            scalars, or end <= start.
    """
    start_raw, end_raw = (0.0, 1.0) if domain is None else domain
    start_arr, end_arr = np.asarray(start_raw), np.asarray(end_raw)

    if start_arr.ndim != 0 or end_arr.ndim != 0:
        raise ValueError("domain ends must be scalar values")

    if dtype is None:
        both_float32 = start_arr.dtype == np.float32 and end_arr.dtype == np.float32
        dtype = np.float32 if both_float32 else np.float64

    dtype_obj = np.dtype(dtype)
    if dtype_obj not in (np.dtype(np.float32), np.dtype(np.float64)):
        raise ValueError("dtype must be float64 or float32")

    start = dtype_obj.type(start_arr.item())
    end = dtype_obj.type(end_arr.item())
    if not start < end:
        raise ValueError("domain[0] must be less than domain[1]")

    return start, end, cast(np.dtype[np.floating[Any]], dtype_obj)


def _validate_intervals_and_degree(num_intervals: int, degree: int) -> None:
    if num_intervals < 1:
        raise ValueError("num_intervals must be at least 1")
    if degree < 0:
        raise ValueError("degree must be non-negative")


def create_uniform_open_knot_vector(
    num_intervals: int,
    degree: int,
    continuity: int | None = None,
    domain: tuple[float, float] | None = None,
    dtype: npt.DTypeLike | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Create a uniform open (clamped) knot vector.

    An open knot vector has the first and last knots repeated (degree+1) times,
    so the curve starts at the first control point and ends at the last one.

    Args:
        num_intervals (int): Number of intervals in the domain. Must be at least 1.
        degree (int): Curve degree. Must be non-negative.
        continuity (int | None): Continuity level at interior knots.
            Must be between -1 and degree-1. Defaults to degree-1 (maximum
            continuity). Interior knots are repeated (degree - continuity) times.
        domain (tuple[float, float] | None): Domain as (start, end).
            Defaults to (0.0, 1.0).
        dtype (npt.DTypeLike | None): float32 or float64. If None, inferred
            from the domain ends.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Open knot vector with uniform spacing.

    Raises:
        ValueError: If any parameter is invalid.

    Example:
        >>> create_uniform_open_knot_vector(2, 2)
        array([0. , 0. , 0. , 0.5, 1. , 1. , 1. ])
    """
    _validate_intervals_and_degree(num_intervals, degree)

    continuity = degree - 1 if continuity is None else continuity
    if continuity < -1 or continuity >= degree:
        raise ValueError(f"Continuity must be between -1 and {degree - 1} for degree {degree}.")

    start, end, dtype_obj = _get_domain_and_dtype(domain, dtype)

    breaks = np.linspace(start, end, num_intervals + 1, dtype=dtype_obj)
    multiplicities = np.full(num_intervals + 1, degree - continuity, dtype=np.int_)
    multiplicities[[0, -1]] = degree + 1

    return np.repeat(breaks, multiplicities)


def create_uniform_unclamped_knot_vector(
    num_intervals: int,
    degree: int,
    domain: tuple[float, float] | None = None,
    dtype: npt.DTypeLike | None = None,
) -> npt.NDArray[np.float32 | np.float64]:
    """Create a uniform unclamped knot vector.

    All knots are simple and equally spaced. The vector extends `degree`
    intervals beyond each end of the domain, so that `knots[degree]` and
    `knots[-degree - 1]` are the domain ends.

    Args:
        num_intervals (int): Number of intervals in the domain. Must be at least 1.
        degree (int): Curve degree. Must be non-negative.
        domain (tuple[float, float] | None): Domain as (start, end).
            Defaults to (0.0, 1.0).
        dtype (npt.DTypeLike | None): float32 or float64. If None, inferred
            from the domain ends.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Unclamped knot vector with
        `num_intervals + 2*degree + 1` entries.

    Raises:
        ValueError: If any parameter is invalid.

    Example:
        >>> create_uniform_unclamped_knot_vector(2, 2)
        array([-1. , -0.5,  0. ,  0.5,  1. ,  1.5,  2. ])
    """
    _validate_intervals_and_degree(num_intervals, degree)
    start, end, dtype_obj = _get_domain_and_dtype(domain, dtype)

    length = (end - start) / num_intervals
    return np.linspace(
        start - degree * length,
        end + degree * length,
        num_intervals + 2 * degree + 1,
        dtype=dtype_obj,
    )


def compute_greville_abscissae(
    knots: npt.ArrayLike, degree: int
) -> npt.NDArray[np.float32 | np.float64]:
    """Compute the Greville abscissae of a knot vector.

    The Greville abscissa of control point `i` is the average of the knots
    `knots[i + 1], ..., knots[i + degree]`. It is the parameter value a
    control coefficient is naturally attached to, e.g. when drawing the
    control polygon of a scalar curve. For degree 0 the midpoint of
    `[knots[i], knots[i + 1]]` is used instead.

    Args:
        knots (npt.ArrayLike): Non-decreasing knot vector with at least
            `degree + 2` entries.
        degree (int): Curve degree. Must be non-negative.

    Returns:
        npt.NDArray[np.float32 | np.float64]: One abscissa per control point,
        i.e. `len(knots) - degree - 1` values.

    Raises:
        ValueError: If degree is negative or there are too few knots.

    Example:
        >>> compute_greville_abscissae([0, 0, 0, 1, 2, 3, 3, 3], 2)
        array([0. , 0.5, 1.5, 2.5, 3. ])
    """
    if degree < 0:
        raise ValueError("degree must be non-negative")

    knots_arr = np.asarray(knots)
    if knots_arr.dtype not in (np.float32, np.float64):
        knots_arr = knots_arr.astype(np.float64)
    if knots_arr.ndim != 1 or knots_arr.size < degree + 2:
        raise ValueError("knots must be a 1D array with at least degree+2 elements")

    num_points = knots_arr.size - degree - 1
    if degree == 0:
        return (knots_arr[:-1] + knots_arr[1:]) / knots_arr.dtype.type(2.0)

    windows = np.lib.stride_tricks.sliding_window_view(knots_arr[1:-1], degree)
    return cast(
        npt.NDArray[np.float32 | np.float64],
        windows[:num_points].mean(axis=1, dtype=knots_arr.dtype),
    )


__all__ = [
    "compute_greville_abscissae",
    "create_uniform_open_knot_vector",
    "create_uniform_unclamped_knot_vector",
]
