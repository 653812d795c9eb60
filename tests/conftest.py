"""
Shared pytest fixtures for cfloss tests.
"""
import numpy as np
import pytest

from cfloss import LossKind, create


# one (pred, truth) pair inside every loss's domain
VALID_INPUTS = {
    LossKind.SQUARE: (3.0, 5.0),
    LossKind.LOGISTIC: (0.3, 1.0),
    LossKind.LOG: (0.7, -1.0),
    LossKind.HINGE: (0.2, 1.0),
    LossKind.SQUARED_HINGE: (-0.4, 1.0),
    LossKind.CROSS_ENTROPY: (1.3, 0.25),
}


@pytest.fixture(params=list(LossKind), ids=lambda k: k.display_name)
def loss_kind(request):
    """Every LossKind in turn."""
    return request.param


@pytest.fixture
def loss(loss_kind):
    return create(loss_kind)


@pytest.fixture
def valid_input(loss_kind):
    return VALID_INPUTS[loss_kind]


@pytest.fixture
def rng():
    """Seeded generator for reproducible sampling."""
    return np.random.default_rng(42)
