"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from __future__ import annotations

from typing import Literal, Sequence
from numpy.typing import ArrayLike

from pycrossval.core.exceptions import ConfigurationError
from pycrossval.regression.design import RegressionDesign
from pycrossval.regression.solution import LinearSolution
from pycrossval.regression.backends.cpu import CPUQRBackend, CPUSVDBackend


# Type alias for backend selection
BackendChoice = Literal['cpu', 'cpu_qr', 'cpu_svd']

BACKEND_CHOICES: tuple[str, ...] = ('cpu', 'cpu_qr', 'cpu_svd')


def fit(
    X: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    intercept: bool = False,
    feature_names: Sequence[str] | None = None,
    backend: BackendChoice = 'cpu_qr',
) -> LinearSolution:
    """
    Fit a linear regression model.

    Solves the ordinary least squares problem:
        min_β ||y - Xβ||²

    All input validation, backend selection, and result wrapping happens here.

    Args:
        X: Feature matrix (n x p) or a prebuilt RegressionDesign
        y: Response vector (n,). Required unless X is a RegressionDesign.
        intercept: Model an intercept term (prepended column of ones)
        feature_names: Names of the p feature columns
        backend: Computational backend to use:
            - 'cpu' / 'cpu_qr': pivoted QR, raises on rank deficiency
            - 'cpu_svd': SVD, minimum-norm solution on rank deficiency

    Returns:
        LinearSolution with coefficients, diagnostics, and summary methods

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If X and y have inconsistent dimensions
        SingularMatrixError: If X is rank-deficient (QR backend)

    Example:
        >>> import numpy as np
        >>> from pycrossval.regression import fit
        >>>
        >>> X = np.random.default_rng(0).standard_normal((100, 2))
        >>> y = X @ [2.0, 3.0] + 1.0
        >>> result = fit(X, y, intercept=True)
        >>> print(result.summary())
    """
    if isinstance(X, RegressionDesign):
        design = X
    else:
        if y is None:
            raise ValueError("y required when X is not a RegressionDesign")
        design = RegressionDesign.build(
            X, y, intercept=intercept, feature_names=feature_names,
        )

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)

    return LinearSolution(
        _result=result,
        _names=design.names,
        _intercept=design.intercept,
        _n=design.n,
    )


def _get_backend(choice: str):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ConfigurationError: If unknown backend specified
    """
    if choice in ('cpu', 'cpu_qr'):
        return CPUQRBackend()

    elif choice == 'cpu_svd':
        return CPUSVDBackend()

    else:
        raise ConfigurationError(
            f"backend: got {choice!r}, expected one of {BACKEND_CHOICES}"
        )
