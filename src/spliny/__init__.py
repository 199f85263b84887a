"""Public API surface for Spliny.

Defines package metadata and exported interfaces. The matplotlib based
plotting helpers live in :mod:`spliny.plot` and are not imported here.
"""

import logging
from typing import Final

# Private API imports (accessible but not in __all__)
# Users can access private functions via: spliny._curve_impl._function_name, etc.
from . import (
    _curve_impl,  # noqa: F401
    _curve_kernels,  # noqa: F401
)

# Public API imports
from .curve import SplineCurve
from .errors import (
    InsufficientCoefficientsError,
    MalformedCurveError,
    SplineError,
    UnsortedInputError,
)
from .evaluation import evaluate, locate_knot_spans
from .knots import (
    compute_greville_abscissae,
    create_uniform_open_knot_vector,
    create_uniform_unclamped_knot_vector,
)
from .reshape import interleave, transpose
from .splines import (
    CubicSpline,
    CubicSpline2D,
    CubicSpline3D,
    LinearSpline,
    LinearSpline2D,
    LinearSpline3D,
    QuinticSpline,
    QuinticSpline2D,
    QuinticSpline3D,
)
from .tolerance import get_strict_tolerance

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package metadata
__version__: Final[str] = "0.1.0"
__license__: Final[str] = "MIT"
__author__: Final[str] = "Spliny developers"

# Public interface: only functions/classes that don't start with _
__all__ = [
    "CubicSpline",
    "CubicSpline2D",
    "CubicSpline3D",
    "InsufficientCoefficientsError",
    "LinearSpline",
    "LinearSpline2D",
    "LinearSpline3D",
    "MalformedCurveError",
    "QuinticSpline",
    "QuinticSpline2D",
    "QuinticSpline3D",
    "SplineCurve",
    "SplineError",
    "UnsortedInputError",
    "__author__",
    "__license__",
    "__version__",
    "compute_greville_abscissae",
    "create_uniform_open_knot_vector",
    "create_uniform_unclamped_knot_vector",
    "evaluate",
    "get_strict_tolerance",
    "interleave",
    "locate_knot_spans",
    "transpose",
]
