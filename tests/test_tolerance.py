"""Tests for tolerance utilities."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from spliny.curve import SplineCurve
from spliny.tolerance import get_strict_tolerance


class TestTolerance:
    """Test suite for tolerance utilities."""

    @pytest.mark.parametrize(
        ("dtype", "expected"),
        [
            (np.float32, 1e-7),
            ("float32", 1e-7),
            (np.float64, 1e-15),
            ("float64", 1e-15),
            (np.dtype(np.float64), 1e-15),
        ],
    )
    def test_get_strict_tolerance(
        self, dtype: np.dtype[np.floating[Any]] | type[np.floating[Any]], expected: float
    ) -> None:
        """Test get_strict_tolerance with various dtypes."""
        assert get_strict_tolerance(dtype) == expected

    @pytest.mark.parametrize("dtype", [np.int32, "int64", np.float16, np.complex64])
    def test_invalid_dtype_raises_error(self, dtype: Any) -> None:
        """Test that an unsupported dtype raises a ValueError."""
        with pytest.raises(ValueError, match="Unsupported dtype"):
            get_strict_tolerance(dtype)

    @pytest.mark.parametrize("dtype", [np.float32, np.float64])
    def test_curve_uses_strict_tolerance(self, dtype: type[np.floating[Any]]) -> None:
        """A curve takes its zero-width threshold from its dtype."""
        curve = SplineCurve(np.array([0.0, 0.0, 1.0, 1.0], dtype=dtype), [0.0, 1.0], 1)
        assert curve.tolerance == get_strict_tolerance(dtype)
