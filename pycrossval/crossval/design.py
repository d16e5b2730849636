"""
Design classes for cross-validation.

CrossValidationOptions holds every keyword option of cross_validate().
CrossValidationDesign holds the preprocessed feature matrix, the labels,
the validated fold partition and the options. Both are immutable and
validated at construction, so backends trust them without re-checking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycrossval.core.exceptions import ConfigurationError, ValidationError
from pycrossval.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_choice,
    check_fold_indices,
)
from pycrossval.crossval._preprocess import FILL_STRATEGIES, fill_missing, normalize_minmax
from pycrossval.regression.design import INTERCEPT_NAME
from pycrossval.regression.solvers import BACKEND_CHOICES


@dataclass(frozen=True)
class CrossValidationOptions:
    """
    Frozen options for one cross-validation run.

    Attributes:
        normalize: Min-max scale every feature column to [0, 1]
        cleaning: Fill NaN features before fitting (see fill)
        fill: NA fill strategy, 'mean', 'median' or 'zero'
        intercept: Model an intercept term in every fold
        backend: OLS backend, 'cpu_qr' (fails on rank deficiency) or
            'cpu_svd' (minimum-norm fallback)
        stats: Show global metrics in summary()
        coefficients: Show the coefficient table in summary()
        plots: Mark observed-vs-predicted data for an external plotter
        adv_stats: Show the per-fold metrics table in summary()
        deficiency: Run and show the full-data rank diagnostic
        n_jobs: Parallel fold workers (joblib semantics, -1 = all cores)
        timeout: Per-fold deadline in seconds, enforced when n_jobs != 1
    """
    normalize: bool = False
    cleaning: bool = False
    fill: str = 'mean'
    intercept: bool = False
    backend: str = 'cpu_qr'
    stats: bool = True
    coefficients: bool = True
    plots: bool = False
    adv_stats: bool = False
    deficiency: bool = False
    n_jobs: int = 1
    timeout: float | None = None

    def __post_init__(self):
        check_choice(self.fill, FILL_STRATEGIES, 'fill')
        check_choice(self.backend, BACKEND_CHOICES, 'backend')
        if not isinstance(self.n_jobs, (int, np.integer)) or self.n_jobs == 0:
            raise ConfigurationError(
                f"n_jobs: expected a non-zero integer, got {self.n_jobs!r}"
            )
        if self.timeout is not None and not self.timeout > 0:
            raise ConfigurationError(
                f"timeout: expected a positive number of seconds, got {self.timeout!r}"
            )


@dataclass(frozen=True)
class CrossValidationDesign:
    """
    Frozen design for k-fold cross-validated OLS.

    Attributes:
        X: Preprocessed feature matrix (n x p), read-only, no intercept column
        y: Labels (n,), read-only
        folds: Sorted holdout index arrays, one per fold
        feature_names: Names of the p feature columns, in dataset order
        options: Run options
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    folds: tuple[NDArray[np.intp], ...]
    feature_names: tuple[str, ...]
    options: CrossValidationOptions

    @classmethod
    def for_cross_validation(
        cls,
        data,
        labels: ArrayLike | str,
        folds: Sequence[ArrayLike],
        options: CrossValidationOptions | None = None,
        *,
        feature_names: Sequence[str] | None = None,
    ) -> CrossValidationDesign:
        """
        Create a cross-validation design with validation.

        Args:
            data: pandas DataFrame (feature names from its columns) or a
                2D array-like of features
            labels: Label vector, or the name of a DataFrame column holding
                the labels (that column is then excluded from the features)
            folds: Ordered sequence of zero-based holdout index collections
            options: Run options, defaults if None
            feature_names: Names for array input. Defaults to x1..xp.

        Returns:
            Validated CrossValidationDesign.

        Raises:
            ConfigurationError: Label/dataset length mismatch or invalid folds
            ValidationError: Non-numeric data, NaN labels, or NaN features
                with cleaning disabled
        """
        if options is None:
            options = CrossValidationOptions()

        X, y, names = _split_features_labels(data, labels, feature_names)

        check_2d(X, 'data')
        check_1d(y, 'labels')
        check_finite(y, 'labels')

        n, p = X.shape
        if y.shape[0] != n:
            raise ConfigurationError(
                f"labels: length {y.shape[0]} does not match dataset row count {n}"
            )
        if n < 2:
            raise ConfigurationError(f"data: need at least 2 rows, got {n}")
        if p < 1:
            raise ConfigurationError("data: no feature columns")
        if len(names) != p:
            raise ConfigurationError(
                f"feature_names: expected {p} names, got {len(names)}"
            )
        if options.intercept and INTERCEPT_NAME in names:
            raise ConfigurationError(
                f"feature_names: {INTERCEPT_NAME!r} is reserved when intercept=True"
            )

        if options.cleaning:
            X = fill_missing(X, options.fill)
        elif np.isnan(X).any():
            raise ValidationError(
                f"data: contains {int(np.isnan(X).sum())} NaN values; "
                f"pass cleaning=True to fill them"
            )
        if options.normalize:
            X = normalize_minmax(X)
        check_finite(X, 'data')

        checked_folds = check_fold_indices(folds, n)

        X = np.array(X, dtype=np.float64, copy=True)
        y = np.array(y, dtype=np.float64, copy=True)
        X.setflags(write=False)
        y.setflags(write=False)

        return cls(
            X=X,
            y=y,
            folds=checked_folds,
            feature_names=names,
            options=options,
        )

    @property
    def n(self) -> int:
        return self.X.shape[0]

    @property
    def p(self) -> int:
        return self.X.shape[1]

    @property
    def n_folds(self) -> int:
        return len(self.folds)

    @property
    def model_names(self) -> tuple[str, ...]:
        """Coefficient names, intercept first when modeled."""
        if self.options.intercept:
            return (INTERCEPT_NAME,) + self.feature_names
        return self.feature_names

    def model_matrix(self) -> NDArray[np.floating[Any]]:
        """Full design matrix as the OLS backend sees it."""
        if self.options.intercept:
            return np.column_stack([np.ones(self.n), self.X])
        return self.X


def _split_features_labels(data, labels, feature_names):
    """Pull features, labels and feature names out of a DataFrame or arrays."""
    if hasattr(data, 'columns') and hasattr(data, 'to_numpy'):
        if isinstance(labels, str):
            if labels not in data.columns:
                raise ConfigurationError(
                    f"labels: column {labels!r} not found in data"
                )
            y = check_array(data[labels].to_numpy(), 'labels')
            data = data.drop(columns=[labels])
        else:
            y = check_array(labels, 'labels')
        names = tuple(str(c) for c in data.columns)
        X = check_array(data.to_numpy(), 'data')
        if feature_names is not None:
            names = tuple(str(name) for name in feature_names)
        return X, y, names

    if isinstance(labels, str):
        raise ConfigurationError(
            "labels: a column name is only accepted with DataFrame input"
        )

    X = check_array(data, 'data')
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    y = check_array(labels, 'labels')
    if y.ndim == 2 and y.shape[1] == 1:
        y = y.ravel()

    if feature_names is not None:
        names = tuple(str(name) for name in feature_names)
    else:
        names = tuple(f"x{j + 1}" for j in range(X.shape[1] if X.ndim == 2 else 0))
    return X, y, names
