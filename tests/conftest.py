"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.core.precision import FP32, FP64
from pylinalg.core.tolerances import select_tolerance


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[FP64, FP32], ids=['fp64', 'fp32'])
def precision(request):
    """Run a test once per supported precision."""
    return request.param


@pytest.fixture
def tol(precision):
    """Tolerance tier matching the precision under test."""
    return select_tolerance(precision)


@pytest.fixture
def well_conditioned_3x3(rng):
    """Random 3x3 matrix pushed away from singularity."""
    return rng.standard_normal((3, 3)) + 3.0 * np.eye(3)
