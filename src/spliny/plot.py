"""Plotting of scalar and planar B-spline curves with matplotlib.

This module only relies on :meth:`SplineCurve.evaluate` and the read-only
curve accessors. It requires the optional ``plot`` extra
(``pip install spliny[plot]``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from numpy import typing as npt

from .knots import compute_greville_abscissae
from .reshape import transpose

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from .curve import SplineCurve

_logger = logging.getLogger(__name__)

_SPLINE_COLOR = "#337f99"
_MARGIN_FRACTION = 0.1


def _check_plot_dimension(curve: SplineCurve) -> None:
    if curve.dimension not in (1, 2):
        raise ValueError(
            f"Only one and two dimensional curves can be plotted. Got dimension {curve.dimension}."
        )


def compute_plot_range(curve: SplineCurve) -> tuple[float, float, float, float]:
    """Compute the axis ranges enclosing a curve and its control points.

    For a scalar curve the horizontal range is spanned by the knots and the
    vertical range by the coefficients. For a planar curve the ranges are
    spanned by the x and y coefficient blocks. By the convex hull property the
    curve lies inside these ranges.

    Args:
        curve (SplineCurve): Curve of dimension 1 or 2.

    Returns:
        tuple[float, float, float, float]: Tuple of (x_min, x_max, y_min, y_max).

    Raises:
        ValueError: If the curve dimension is not 1 or 2.
        InsufficientCoefficientsError: If the coefficient count does not match.
    """
    _check_plot_dimension(curve)

    if curve.dimension == 1:
        xs, ys = curve.knots, curve.control_points[:, 0]
    else:
        xs, ys = curve.control_points[:, 0], curve.control_points[:, 1]

    return (float(xs.min()), float(xs.max()), float(ys.min()), float(ys.max()))


def compute_control_polygon(curve: SplineCurve) -> npt.NDArray[np.float32 | np.float64]:
    """Compute the vertices of the control polygon of a curve.

    For a scalar curve each coefficient is placed at its Greville abscissa.
    For a planar curve the vertices are the control points.

    Args:
        curve (SplineCurve): Curve of dimension 1 or 2.

    Returns:
        npt.NDArray[np.float32 | np.float64]: Array of shape (num_control_points, 2).

    Raises:
        ValueError: If the curve dimension is not 1 or 2.
        InsufficientCoefficientsError: If the coefficient count does not match.

    Example:
        >>> curve = SplineCurve([0, 0, 0, 1, 2, 3, 3, 3], [0, 0, 1, 0, 0], 2)
        >>> compute_control_polygon(curve)
        array([[0. , 0. ],
               [0.5, 0. ],
               [1.5, 1. ],
               [2.5, 0. ],
               [3. , 0. ]])
    """
    _check_plot_dimension(curve)

    if curve.dimension == 2:  # noqa: PLR2004
        return np.array(curve.control_points)

    abscissae = compute_greville_abscissae(curve.knots, curve.degree)
    return np.column_stack((abscissae, curve.control_points[:, 0]))


def plot_curve(  # noqa: PLR0913
    curve: SplineCurve,
    filepath: str | Path | None = None,
    *,
    ax: Axes | None = None,
    parameters: npt.ArrayLike | None = None,
    num_samples: int = 200,
    show_control_points: bool = False,
    data: npt.ArrayLike | None = None,
    figsize: tuple[float, float] = (8.0, 6.0),
) -> Axes:
    """Draw a scalar or planar curve.

    A scalar curve is drawn as its value against the parameter; a planar curve
    as its y coordinate against its x coordinate.

    Args:
        curve (SplineCurve): Curve of dimension 1 or 2.
        filepath (str | Path | None): If given, the figure is saved to this
            file (format deduced from the extension).
        ax (Axes | None): Axes to draw into. If None, a new figure is created
            (and closed after saving when `filepath` is given).
        parameters (npt.ArrayLike | None): Strictly increasing parameter values
            to sample the curve at. Defaults to `num_samples` values uniformly
            spread over the curve domain.
        num_samples (int): Number of samples used when `parameters` is None.
            Defaults to 200.
        show_control_points (bool): Whether to draw the control polygon.
            Defaults to False.
        data (npt.ArrayLike | None): Reference points as interleaved
            ``[x0, y0, x1, y1, ...]`` values, drawn as a thin black line.
        figsize (tuple[float, float]): Size of a newly created figure in inches.

    Returns:
        Axes: The axes the curve was drawn into.

    Raises:
        ValueError: If the curve dimension is not 1 or 2, or `data` does not
            hold (x, y) pairs.
        UnsortedInputError: If the parameters are not strictly increasing
            (also the case for the default sampling of a zero-width domain).
        InsufficientCoefficientsError: If the coefficient count does not match.
    """
    _check_plot_dimension(curve)

    if parameters is None:
        parameters = np.linspace(*curve.domain, num_samples)
    params = np.asarray(parameters, dtype=curve.dtype).ravel()
    values = curve.evaluate(params)

    owns_figure = ax is None
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    if curve.dimension == 1:
        xs, ys = np.clip(params, *curve.domain), values
    else:
        xs, ys = transpose(values, 2)
    ax.plot(xs, ys, color=_SPLINE_COLOR, linewidth=2.5, label="curve")

    if show_control_points:
        polygon = compute_control_polygon(curve)
        ax.plot(
            polygon[:, 0],
            polygon[:, 1],
            "o--",
            color=_SPLINE_COLOR,
            alpha=0.6,
            label="control points",
        )

    if data is not None:
        data_x, data_y = transpose(data, 2)
        ax.plot(data_x, data_y, color="black", linewidth=1.0, label="data")

    x_min, x_max, y_min, y_max = compute_plot_range(curve)
    x_margin = _MARGIN_FRACTION * (x_max - x_min) or 0.5
    y_margin = _MARGIN_FRACTION * (y_max - y_min) or 0.5
    ax.set_xlim(x_min - x_margin, x_max + x_margin)
    ax.set_ylim(y_min - y_margin, y_max + y_margin)
    ax.grid(True)
    ax.legend()

    if filepath is not None:
        fig.tight_layout()
        fig.savefig(filepath, dpi=150)
        _logger.debug("Saved curve plot to %s", filepath)
        if owns_figure:
            plt.close(fig)

    return ax


__all__ = ["compute_control_polygon", "compute_plot_range", "plot_curve"]
