"""Utility functions for normalizing curve inputs and outputs."""

import numpy as np
from numpy import typing as npt


def _normalize_values_1D(values: npt.ArrayLike) -> npt.NDArray[np.float32 | np.float64]:
    """Normalize values to a contiguous 1D float array.

    Converts input values (scalar, list, or numpy array) to a 1D numpy array.
    Types different from float32 or float64 are converted to float64.
    Zero-dimensional arrays (scalars) become 1D arrays with a single element.
    Multi-dimensional arrays are flattened in C order.

    Returns:
        A contiguous 1D numpy array with dtype np.float32 or np.float64.
    """
    arr = np.asarray(values)

    if arr.dtype not in (np.float32, np.float64):
        arr = arr.astype(np.float64)

    return np.ascontiguousarray(arr.ravel())


def _validate_out_array_1D(
    out: npt.NDArray[np.float32 | np.float64],
    expected_shape: tuple[int, ...],
    expected_dtype: npt.DTypeLike,
) -> None:
    """Validate that the output array has the correct shape and dtype.

    This function follows NumPy's style for output array validation.

    Args:
        out (npt.NDArray[np.float32 | np.float64]): The output array to validate.
        expected_shape (tuple[int, ...]): The expected shape of the output array.
        expected_dtype (npt.DTypeLike): The expected dtype (np.float32 or np.float64).

    Raises:
        ValueError: If the array shape, dtype, layout or writeability does not
            match expectations.
    """
    if out.shape != expected_shape:
        raise ValueError(f"Output array has shape {out.shape}, but expected shape {expected_shape}")
    if out.dtype != expected_dtype:
        raise ValueError(f"Output array has dtype {out.dtype}, but expected dtype {expected_dtype}")
    if not out.flags.c_contiguous:
        raise ValueError("Output array must be C-contiguous")
    if not out.flags.writeable:
        raise ValueError("Output array is not writeable")
