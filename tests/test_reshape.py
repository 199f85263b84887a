"""Tests for reshape utilities."""

import numpy as np
import numpy.testing as nptest
import pytest

from spliny.curve import SplineCurve
from spliny.reshape import interleave, transpose


class TestTranspose:
    """Tests for `transpose`."""

    def test_three_channels(self) -> None:
        """Split xyz coordinates into x, y and z arrays."""
        flat = [0.0, 1.0, 2.0, 10.0, 11.0, 12.0, 20.0, 21.0, 22.0, 30.0, 31.0, 32.0]
        x, y, z = transpose(flat, 3)
        nptest.assert_array_equal(x, [0.0, 10.0, 20.0, 30.0])
        nptest.assert_array_equal(y, [1.0, 11.0, 21.0, 31.0])
        nptest.assert_array_equal(z, [2.0, 12.0, 22.0, 32.0])

    def test_single_channel(self) -> None:
        """A single channel is returned as a (1, m) array."""
        channels = transpose([1.0, 2.0, 3.0], 1)
        assert channels.shape == (1, 3)
        nptest.assert_array_equal(channels[0], [1.0, 2.0, 3.0])

    def test_result_is_contiguous(self) -> None:
        """Each channel is a contiguous array."""
        channels = transpose(np.arange(8.0), 2)
        assert channels.flags.c_contiguous

    def test_empty(self) -> None:
        """Empty input gives empty channels."""
        assert transpose([], 2).shape == (2, 0)

    def test_length_not_multiple(self) -> None:
        """Reject inputs whose length is not a multiple of the dimension."""
        with pytest.raises(ValueError, match="multiple of the dimension"):
            transpose([0.0, 1.0, 2.0], 2)

    @pytest.mark.parametrize("dimension", [0, -1])
    def test_invalid_dimension(self, dimension: int) -> None:
        """Reject non-positive dimensions."""
        with pytest.raises(ValueError, match="dimension must be positive"):
            transpose([0.0, 1.0], dimension)

    @pytest.mark.parametrize("dimension", [2.0, "2", True, None])
    def test_non_integer_dimension(self, dimension: object) -> None:
        """Reject dimensions that are not integers."""
        with pytest.raises(ValueError, match="dimension must be an integer"):
            transpose([0.0, 1.0], dimension)  # type: ignore[arg-type]

    def test_numpy_integer_dimension(self) -> None:
        """NumPy integers are accepted."""
        assert transpose([0.0, 1.0, 2.0, 3.0], np.int64(2)).shape == (2, 2)


class TestInterleave:
    """Tests for `interleave`."""

    def test_interleave(self) -> None:
        """Merge channels point by point."""
        flat = interleave([[0.0, 1.0, 2.0], [10.0, 11.0, 12.0]])
        nptest.assert_array_equal(flat, [0.0, 10.0, 1.0, 11.0, 2.0, 12.0])

    def test_invalid_channels(self) -> None:
        """Reject inputs that are not a sequence of 1D arrays."""
        with pytest.raises(ValueError, match="channels"):
            interleave([1.0, 2.0, 3.0])

    @pytest.mark.parametrize("dimension", [1, 2, 3, 4])
    def test_round_trip_of_evaluated_curve(self, dimension: int) -> None:
        """Interleaving transposed curve values reconstructs them exactly."""
        rng = np.random.default_rng(dimension)
        knots = [0.0, 0.0, 0.0, 0.25, 0.5, 0.75, 1.0, 1.0, 1.0]
        curve = SplineCurve(knots, rng.standard_normal(6 * dimension), 2, dimension=dimension)

        flat = curve.evaluate(np.linspace(0.0, 1.0, 17))
        nptest.assert_array_equal(interleave(transpose(flat, dimension)), flat)
