"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Simple regression dataset for basic tests."""
    n, p = 100, 3
    X = rng.standard_normal((n, p))
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.1
    return X, y, beta_true


@pytest.fixture
def collinear_data(rng):
    """Dataset with two identical feature columns."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    X = np.column_stack([x1, x2, x1])
    y = 2.0 * x1 - x2 + rng.standard_normal(n) * 0.1
    return X, y


@pytest.fixture
def exact_linear_data():
    """Four rows, one feature, y = 2x exactly, two disjoint folds."""
    X = np.array([[1.0], [2.0], [3.0], [4.0]])
    y = np.array([2.0, 4.0, 6.0, 8.0])
    folds = [[0, 1], [2, 3]]
    return X, y, folds


@pytest.fixture
def cv_data(rng):
    """Noisy three-feature dataset with strictly positive labels, 5 folds."""
    n = 60
    X = rng.standard_normal((n, 3))
    y = 10.0 + X @ np.array([1.5, -0.5, 2.0]) + rng.standard_normal(n) * 0.3
    folds = [np.arange(i, n, 5) for i in range(5)]
    return X, y, folds
