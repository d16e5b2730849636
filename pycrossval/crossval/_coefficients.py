"""
Coefficient aggregation across folds.

Builds a features x folds matrix from the per-fold models and summarizes
each feature's weight by its mean and sample SD across folds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pycrossval.crossval._metrics import mean_sd

if TYPE_CHECKING:
    import pandas as pd
    from pycrossval.regression.solution import LinearSolution


@dataclass(frozen=True)
class CoefficientTable:
    """
    Per-fold coefficients with per-feature mean and SD.

    Attributes:
        feature_names: Row labels in dataset column order (intercept first
            when modeled)
        values: (P, F) matrix; column j holds fold j's coefficients, NaN
            for folds that failed to fit
        mean: (P,) mean over the successful fold columns
        sd: (P,) sample SD (n - 1) over the successful fold columns

    All arrays are read-only.
    """
    feature_names: tuple[str, ...]
    values: NDArray[np.floating[Any]]
    mean: NDArray[np.floating[Any]]
    sd: NDArray[np.floating[Any]]

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    @property
    def fold_columns(self) -> tuple[str, ...]:
        return tuple(f"fold_{j + 1}" for j in range(self.values.shape[1]))

    def to_frame(self) -> 'pd.DataFrame':
        """Coefficients as a DataFrame: fold_1..fold_F, mean, sd."""
        import pandas as pd

        df = pd.DataFrame(
            self.values, index=list(self.feature_names), columns=list(self.fold_columns),
        )
        df['mean'] = self.mean
        df['sd'] = self.sd
        df.index.name = 'feature'
        return df


def aggregate_coefficients(
    models: Sequence['LinearSolution | None'],
    feature_names: Sequence[str],
) -> CoefficientTable:
    """
    Assemble the coefficient matrix and its per-feature summary.

    Args:
        models: One entry per fold in fold order, None for failed folds
        feature_names: Names matching each model's coefficient vector

    Returns:
        CoefficientTable of shape (len(feature_names), len(models))
    """
    p = len(feature_names)
    values = np.full((p, len(models)), np.nan, dtype=np.float64)
    fitted = []
    for j, model in enumerate(models):
        if model is None:
            continue
        values[:, j] = model.coefficients
        fitted.append(j)

    mean = np.full(p, np.nan, dtype=np.float64)
    sd = np.full(p, np.nan, dtype=np.float64)
    for i in range(p):
        mean[i], sd[i] = mean_sd(values[i, fitted])

    for arr in (values, mean, sd):
        arr.setflags(write=False)

    return CoefficientTable(
        feature_names=tuple(feature_names),
        values=values,
        mean=mean,
        sd=sd,
    )
