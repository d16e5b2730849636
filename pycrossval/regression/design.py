"""
Regression Design.

Design holds X (design matrix) and y (response) for one least-squares
problem, together with the names of the columns of X. In cross-validation
one Design is built per fold from that fold's training rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycrossval.core.exceptions import ValidationError
from pycrossval.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
)

INTERCEPT_NAME = '(Intercept)'


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression design matrix specification.

    Immutable after construction. When built with intercept=True a column
    of ones is prepended to X and named '(Intercept)'.

    Construction:
        RegressionDesign.build(X, y)
        RegressionDesign.build(X, y, intercept=True, feature_names=['a', 'b'])
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _names: tuple[str, ...]
    _intercept: bool

    @classmethod
    def build(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        *,
        intercept: bool = False,
        feature_names: Sequence[str] | None = None,
    ) -> RegressionDesign:
        """
        Build and validate a design.

        Args:
            X: Feature matrix (n x p), or a 1D array for a single feature
            y: Response vector (n,)
            intercept: Prepend a column of ones
            feature_names: Names of the p feature columns. Defaults to x1..xp.

        Raises:
            ValidationError: Non-numeric or non-finite input, or no rows
            DimensionError: Shapes are wrong or inconsistent
        """
        X = check_array(X, 'X')
        y = check_array(y, 'y')

        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        check_2d(X, 'X')
        check_1d(y, 'y')
        check_finite(X, 'X')
        check_finite(y, 'y')
        check_consistent_length(X, y, names=('X', 'y'))

        n, p = X.shape
        if n < 1:
            raise ValidationError("X: requires at least 1 observation, got 0")

        if feature_names is None:
            names = tuple(f"x{j + 1}" for j in range(p))
        else:
            names = tuple(str(name) for name in feature_names)
            if len(names) != p:
                raise ValidationError(
                    f"feature_names: expected {p} names, got {len(names)}"
                )

        if intercept:
            X = np.column_stack([np.ones(n), X])
            names = (INTERCEPT_NAME,) + names

        return cls(
            _X=X, _y=y, _n=n, _p=X.shape[1], _names=names, _intercept=intercept,
        )

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p), including the intercept column if any."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of columns of the design matrix."""
        return self._p

    @property
    def names(self) -> tuple[str, ...]:
        """Column names, intercept first when modeled."""
        return self._names

    @property
    def intercept(self) -> bool:
        return self._intercept
