"""
Pytest configuration and shared fixtures for smath tests.
"""

import pytest

from smath.numerics.backend import FLOAT16, FLOAT32, FLOAT64, LONGDOUBLE, PYFLOAT
from smath.numerics.constants import ToleranceConstants


@pytest.fixture(params=[FLOAT32, FLOAT64, LONGDOUBLE, PYFLOAT], ids=lambda backend: backend.name)
def backend(request):
    """Every backend precise enough for identity checks."""
    return request.param


@pytest.fixture(params=[FLOAT16, FLOAT32, FLOAT64, LONGDOUBLE, PYFLOAT], ids=lambda backend: backend.name)
def any_backend(request):
    """Every built-in backend, including half precision."""
    return request.param


@pytest.fixture
def tolerances(backend):
    return ToleranceConstants(backend)


@pytest.fixture
def sample_xs(backend):
    """Inputs spread over a few periods, in the backend's scalar type."""
    return [backend.coerce(x) for x in (-7.5, -3.0, -1.25, -0.5, 0.0, 0.3, 1.0, 2.2, 4.9, 9.0)]
