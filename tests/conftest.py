"""Pytest configuration to make `src` importable without installing the package.

Also provides the reference curves shared by several test modules.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NamedTuple

import pytest


def _ensure_src_on_sys_path() -> None:
    """Prepend the repository `src` directory to `sys.path` if missing."""
    repo_root: Path = Path(__file__).resolve().parents[1]
    src_path: Path = repo_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_ensure_src_on_sys_path()


class ReferenceCase(NamedTuple):
    """A scalar curve together with known values at given parameters."""

    knots: list[float]
    coefficients: list[float]
    degree: int
    parameters: list[float]
    values: list[float]
    atol: float


REFERENCE_CASES: dict[str, ReferenceCase] = {
    "linear": ReferenceCase(
        knots=[0.0, 0.0, 1.0, 1.0],
        coefficients=[0.0, 1.0],
        degree=1,
        parameters=[0.0, 0.2, 0.4, 0.6, 0.8, 1.0],
        values=[0.0, 0.2, 0.4, 0.6, 0.8, 1.0],
        atol=1e-8,
    ),
    "quadratic": ReferenceCase(
        knots=[0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 3.0, 3.0],
        coefficients=[0.0, 0.0, 1.0, 0.0, 0.0],
        degree=2,
        parameters=[0.0, 0.5, 1.0, 1.4, 1.5, 1.6, 2.0, 2.5, 3.0],
        values=[0.0, 0.125, 0.5, 0.74, 0.75, 0.74, 0.5, 0.125, 0.0],
        atol=1e-8,
    ),
    "cubic": ReferenceCase(
        knots=[-2.0, -2.0, -2.0, -2.0, -1.0, 0.0, 1.0, 2.0, 2.0, 2.0, 2.0],
        coefficients=[0.0, 0.0, 0.0, 6.0, 0.0, 0.0, 0.0],
        degree=3,
        parameters=[-2.0, -1.5, -1.0, -0.6, 0.0, 0.5, 1.5, 2.0],
        values=[0.0, 0.125, 1.0, 2.488, 4.0, 2.875, 0.125, 0.0],
        atol=1e-7,
    ),
    "quartic": ReferenceCase(
        knots=[0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 5.0, 5.0, 5.0, 5.0],
        coefficients=[0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0],
        degree=4,
        parameters=[0.0, 0.4, 1.0, 1.5, 2.0, 2.5, 3.0, 3.2, 4.1, 4.5, 5.0],
        values=[
            0.0,
            0.0010666668,
            0.041666668,
            0.19791667,
            0.4583333,
            0.5989583,
            0.4583333,
            0.35206667,
            0.02733751,
            0.002604167,
            0.0,
        ],
        atol=1e-7,
    ),
}


@pytest.fixture(params=sorted(REFERENCE_CASES))
def reference_case(request: pytest.FixtureRequest) -> ReferenceCase:
    """Each scalar reference curve with its expected values."""
    return REFERENCE_CASES[request.param]
