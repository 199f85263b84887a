"""Tests for the low-level numba curve kernels."""

import numpy as np
import numpy.testing as nptest
import pytest

from spliny._curve_kernels import (
    _de_Boor_impl,
    _evaluate_curve_core,
    _find_first_unsorted_impl,
    _first_span_impl,
    _locate_knot_spans_core,
)


class TestFindFirstUnsorted:
    """Tests for `_find_first_unsorted_impl`."""

    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ([0.0, 1.0, 2.0], -1),
            ([3.0], -1),
            ([0.0, 1.0, 1.0, 2.0], 1),
            ([2.0, 1.0], 0),
            ([0.0, 0.5, np.nan, 1.0], 1),
        ],
    )
    def test_first_unsorted(self, values: list[float], expected: int) -> None:
        """Return the index of the first pair that is not strictly increasing."""
        assert _find_first_unsorted_impl(np.array(values)) == expected


class TestFirstSpan:
    """Tests for `_first_span_impl`."""

    @pytest.mark.parametrize(
        ("knots", "degree", "expected"),
        [
            ([0.0, 0.0, 0.0, 1.0, 2.0, 2.0, 2.0], 2, 2),
            ([0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 2.0, 2.0], 2, 3),
            ([0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0], 1, 4),
            ([0.0, 0.0, 0.0, 1.0], 1, 1),
        ],
    )
    def test_first_span(self, knots: list[float], degree: int, expected: int) -> None:
        """Skip leading zero-width spans, stopping at the last span of the domain."""
        assert _first_span_impl(np.array(knots), degree) == expected


class TestLocateKnotSpansCore:
    """Tests for `_locate_knot_spans_core`."""

    def test_quadratic(self) -> None:
        """Points are clamped and located in a single forward pass."""
        knots = np.array([0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 3.0, 3.0])
        pts = np.array([-1.0, 0.0, 0.5, 1.0, 1.5, 2.0, 3.0, 4.0])
        spans = np.empty(pts.size, dtype=np.int_)

        _locate_knot_spans_core(knots, 2, pts, spans)

        nptest.assert_array_equal(spans, [2, 2, 2, 2, 3, 3, 4, 4])

    def test_repeated_interior_knot(self) -> None:
        """Zero-width spans are skipped."""
        knots = np.array([0.0, 0.0, 1.0, 1.0, 2.0, 2.0])
        pts = np.array([0.5, 1.5])
        spans = np.empty(pts.size, dtype=np.int_)

        _locate_knot_spans_core(knots, 1, pts, spans)

        nptest.assert_array_equal(spans, [1, 3])


class TestDeBoor:
    """Tests for `_de_Boor_impl`."""

    def test_linear(self) -> None:
        """Degree one blends two coefficients linearly."""
        knots = np.array([0.0, 0.0, 1.0, 1.0])
        coefs = np.array([0.0, 1.0])
        work = np.empty(2)
        assert _de_Boor_impl(knots, coefs, 0, 1, 1, 0.25, 1e-15, work) == pytest.approx(0.25)

    def test_zero_width_interval(self) -> None:
        """A zero-width interval gives a finite value instead of dividing by zero."""
        knots = np.array([0.0, 0.0, 1.0, 1.0, 2.0, 2.0])
        coefs = np.array([0.0, 5.0, 7.0, 9.0])
        work = np.empty(2)
        value = _de_Boor_impl(knots, coefs, 0, 1, 2, 1.0, 1e-15, work)
        assert np.isfinite(value)
        assert value == 5.0  # noqa: PLR2004

    def test_block_offset(self) -> None:
        """The coefficient offset selects the channel block."""
        knots = np.array([0.0, 0.0, 1.0, 1.0])
        coefs = np.array([0.0, 1.0, 10.0, 20.0])
        work = np.empty(2)
        assert _de_Boor_impl(knots, coefs, 2, 1, 1, 0.5, 1e-15, work) == pytest.approx(15.0)


class TestEvaluateCurveCore:
    """Tests for `_evaluate_curve_core`."""

    def test_interleaved_output(self) -> None:
        """Values of all channels of a point are stored contiguously."""
        knots = np.array([0.0, 0.0, 1.0, 1.0])
        coefs = np.array([0.0, 1.0, 10.0, 20.0])
        pts = np.array([0.0, 0.5, 1.0])
        out = np.empty(6)

        _evaluate_curve_core(knots, coefs, 1, 2, pts, 1e-15, out)

        nptest.assert_allclose(out, [0.0, 10.0, 0.5, 15.0, 1.0, 20.0])

    def test_float32(self) -> None:
        """Kernels also compile for float32 inputs."""
        knots = np.array([0.0, 0.0, 0.0, 1.0, 1.0, 1.0], dtype=np.float32)
        coefs = np.array([0.0, 1.0, 0.0], dtype=np.float32)
        pts = np.array([0.5], dtype=np.float32)
        out = np.empty(1, dtype=np.float32)

        _evaluate_curve_core(knots, coefs, 2, 1, pts, 1e-7, out)

        nptest.assert_allclose(out, [0.5], rtol=1e-6)
