"""Conversion between interleaved curve coordinates and per-channel arrays."""

import numbers

import numpy as np
from numpy import typing as npt


def transpose(flat: npt.ArrayLike, dimension: int) -> npt.NDArray[np.generic]:
    """Split interleaved coordinates into one array per channel.

    Args:
        flat (npt.ArrayLike): Interleaved coordinates
            ``[x0, y0, z0, x1, y1, z1, ...]`` of length `m * dimension`.
        dimension (int): Number of channels per point.

    Returns:
        npt.NDArray[np.generic]: Array of shape (dimension, m) whose row `k`
        holds channel `k` of every point. Unpacking gives the channels, e.g.
        ``x, y = transpose(xy, 2)``.

    Raises:
        ValueError: If `dimension` is not a positive integer or the number of
            values is not a multiple of it.

    Example:
        >>> transpose([0.0, 1.0, 2.0, 3.0, 4.0, 5.0], 2)
        array([[0., 2., 4.],
               [1., 3., 5.]])
    """
    if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral):
        raise ValueError(f"dimension must be an integer, got {dimension!r}")
    if dimension < 1:
        raise ValueError("dimension must be positive")

    flat_arr = np.asarray(flat).ravel()
    if flat_arr.size % dimension != 0:
        raise ValueError(
            f"The number of values must be a multiple of the dimension. "
            f"Got {flat_arr.size} values and dimension {dimension}."
        )

    return np.ascontiguousarray(flat_arr.reshape(-1, dimension).T)


def interleave(channels: npt.ArrayLike) -> npt.NDArray[np.generic]:
    """Merge per-channel arrays into interleaved coordinates.

    This is the inverse of :func:`transpose`.

    Args:
        channels (npt.ArrayLike): Sequence of `dimension` arrays of equal
            length `m`, or an array of shape (dimension, m).

    Returns:
        npt.NDArray[np.generic]: Flat array ``[x0, y0, ..., x1, y1, ...]`` of
        length `m * dimension`.

    Raises:
        ValueError: If the channels do not form a 2D array.
    """
    channels_arr = np.asarray(channels)
    if channels_arr.ndim != 2:  # noqa: PLR2004
        raise ValueError(
            f"channels must be a sequence of equally long 1D arrays. "
            f"Got an array with {channels_arr.ndim} dimensions."
        )
    return np.ascontiguousarray(channels_arr.T).ravel()


__all__ = ["interleave", "transpose"]
