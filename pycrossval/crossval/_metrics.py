"""
Held-out scoring and cross-fold metric aggregation.

score_fold() reduces one fold's observed and predicted labels to
FoldMetrics. aggregate_metrics() reduces the per-fold values to a mean
and sample standard deviation per statistic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray


METRIC_NAMES: tuple[str, ...] = ('pearson_r', 'r_squared', 'mae', 'mse', 'rmse', 'mape')


@dataclass(frozen=True)
class FoldMetrics:
    """
    Out-of-sample accuracy of one fold.

    mape is NaN when any held-out label is exactly zero; pearson_r and
    r_squared are NaN when either side has no variance.
    """
    pearson_r: float
    r_squared: float
    mae: float
    mse: float
    rmse: float
    mape: float
    n_test: int

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in METRIC_NAMES}


@dataclass(frozen=True)
class GlobalMetrics:
    """
    Mean and sample standard deviation of each statistic across folds.

    Attributes:
        mean: Statistic name -> mean over the folds that produced metrics
        sd: Statistic name -> sample SD (n - 1), NaN with fewer than 2 folds
        n_folds: Number of folds the reduction used
    """
    mean: dict[str, float]
    sd: dict[str, float]
    n_folds: int


def pearson_r(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """
    Pearson correlation from centered data (two-pass).

    Returns NaN for fewer than 2 points or a zero-variance input.
    """
    if len(x) < 2:
        return float('nan')

    dx = x - np.mean(x)
    dy = y - np.mean(y)
    sxx = float(dx @ dx)
    syy = float(dy @ dy)
    if sxx == 0.0 or syy == 0.0:
        return float('nan')

    r = float(dx @ dy) / math.sqrt(sxx * syy)
    return min(1.0, max(-1.0, r))


def score_fold(
    y_test: NDArray[np.floating[Any]],
    predicted: NDArray[np.floating[Any]],
) -> FoldMetrics:
    """
    Compute held-out accuracy statistics.

    Args:
        y_test: Observed held-out labels (m,)
        predicted: Predictions for the same rows (m,)

    Returns:
        FoldMetrics. MAPE divides by the observed label as-is; a zero
        label anywhere in the fold makes the fold's MAPE NaN.
    """
    abs_diff = np.abs(y_test - predicted)
    sq_diff = abs_diff ** 2

    r = pearson_r(y_test, predicted)
    mse = float(np.mean(sq_diff))

    if np.any(y_test == 0):
        mape = float('nan')
    else:
        mape = float(np.mean(abs_diff / y_test))

    return FoldMetrics(
        pearson_r=r,
        r_squared=r * r,
        mae=float(np.mean(abs_diff)),
        mse=mse,
        rmse=math.sqrt(mse),
        mape=mape,
        n_test=len(y_test),
    )


def mean_sd(values: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """
    Mean and sample SD by the corrected two-pass algorithm.

    The second pass sums squared deviations from the first-pass mean and
    subtracts (Σd)²/n, which cancels the rounding error of the mean
    itself. NaN anywhere in values propagates to both results.
    """
    n = len(values)
    if n == 0:
        return float('nan'), float('nan')

    mean = float(np.sum(values) / n)
    if n < 2:
        return mean, float('nan')

    d = values - mean
    var = (float(np.sum(d * d)) - float(np.sum(d)) ** 2 / n) / (n - 1)
    if math.isnan(var):
        return mean, float('nan')
    return mean, math.sqrt(max(var, 0.0))


def aggregate_metrics(fold_metrics: Sequence[FoldMetrics]) -> GlobalMetrics:
    """
    Reduce per-fold metrics to cross-fold mean and SD.

    Args:
        fold_metrics: Metrics of the folds that were scored, in fold order

    Returns:
        GlobalMetrics keyed by statistic name
    """
    means: dict[str, float] = {}
    sds: dict[str, float] = {}
    for name in METRIC_NAMES:
        values = np.array([getattr(m, name) for m in fold_metrics], dtype=np.float64)
        means[name], sds[name] = mean_sd(values)

    return GlobalMetrics(mean=means, sd=sds, n_folds=len(fold_metrics))
