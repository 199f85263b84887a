"""Zero-width threshold for knot intervals."""

from functools import cache
from typing import Any, NamedTuple, cast

import numpy as np
from numpy import typing as npt


@cache
def _ensure_float_dtype_by_name(name: str) -> np.dtype[np.floating[Any]]:
    """Cached validator returning a supported floating dtype from its name.

    Args:
        name (str): Canonical NumPy dtype name (e.g., "float64").

    Returns:
        np.dtype[np.floating[Any]]: Validated floating-point dtype.

    Raises:
        ValueError: If dtype is neither float32 nor float64.
    """
    dtype_obj = np.dtype(name)
    if dtype_obj.type not in (np.float32, np.float64):
        raise ValueError(f"Unsupported dtype: {name}")
    return cast(np.dtype[np.floating[Any]], dtype_obj)


class _TolerancePreset(NamedTuple):
    """Tolerance values for the floating-point types curves can be built on."""

    float32: float
    float64: float


_STRICT_TOLERANCE = _TolerancePreset(1e-7, 1e-15)


def get_strict_tolerance(dtype: npt.DTypeLike) -> float:
    """Get the threshold below which a knot interval has zero width.

    During the de Boor recursion, a knot difference smaller than this value
    gets a zero blending weight.

    Args:
        dtype (npt.DTypeLike): float32 or float64 dtype (or its name).

    Returns:
        float: Strict tolerance value for the given dtype.

    Raises:
        ValueError: If dtype is not float32 or float64.

    Example:
        >>> get_strict_tolerance("float64")
        1e-15
    """
    dtype_obj = _ensure_float_dtype_by_name(np.dtype(dtype).name)
    if dtype_obj.type == np.float32:
        return _STRICT_TOLERANCE.float32
    return _STRICT_TOLERANCE.float64


__all__ = ["get_strict_tolerance"]
