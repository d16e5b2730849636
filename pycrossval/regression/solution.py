"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycrossval.core.result import Result
from pycrossval.core.validation import check_array, check_2d
from pycrossval.core.exceptions import DimensionError


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    df_residual: int


@dataclass
class LinearSolution:
    """
    User-facing regression results: one fitted model.

    Wraps the backend Result and keeps only the column names and intercept
    flag of the design, not the design matrix itself, so models retained
    across many folds do not keep every training matrix alive.
    """
    _result: Result[LinearParams]
    _names: tuple[str, ...]
    _intercept: bool
    _n: int

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def feature_names(self) -> tuple[str, ...]:
        """Names matching coefficients, intercept first when modeled."""
        return self._names

    @property
    def intercept(self) -> bool:
        return self._intercept

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        """In-sample R² = 1 - RSS/TSS."""
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def residual_std_error(self) -> float:
        df = self._result.params.df_residual
        if df <= 0:
            return 0.0
        return float(np.sqrt(self.rss / df))

    @property
    def n_observations(self) -> int:
        return self._n

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, X: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Apply the fitted coefficients to new feature rows.

        Args:
            X: Feature matrix (m x p) WITHOUT the intercept column

        Returns:
            Predictions (m,)
        """
        X_arr = check_array(X, 'X')
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        check_2d(X_arr, 'X')

        beta = self.coefficients
        n_features = len(beta) - (1 if self._intercept else 0)
        if X_arr.shape[1] != n_features:
            raise DimensionError(
                f"X: expected {n_features} columns, got {X_arr.shape[1]}"
            )

        if self._intercept:
            return beta[0] + X_arr @ beta[1:]
        return X_arr @ beta

    def summary(self) -> str:
        """Generate plain-text summary output."""
        lines = [
            "Linear Regression Results",
            "=" * 60,
            f"Observations: {self._n}",
            f"Columns: {len(self.coefficients)}",
            f"Rank: {self.rank}",
            f"R-squared: {self.r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
        ]

        width = max(len(name) for name in self._names)
        for name, coef in zip(self._names, self.coefficients):
            lines.append(f"  {name:<{width}} {coef:14.6f}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._n}, p={len(self.coefficients)}, "
            f"rank={self.rank}, r_squared={self.r_squared:.4f})"
        )
