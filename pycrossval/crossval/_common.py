"""
Common data structures for cross-validation.

FoldResult is what one fold task returns. CrossValidationParams is the
parameter payload wrapped by Result[P] and exposed through
CrossValidationSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pycrossval.crossval._metrics import FoldMetrics, GlobalMetrics
from pycrossval.crossval._coefficients import CoefficientTable
from pycrossval.crossval._deficiency import RankDiagnostic

if TYPE_CHECKING:
    from pycrossval.regression.solution import LinearSolution


@dataclass(frozen=True)
class FoldResult:
    """
    Outcome of one fold: a fitted and scored model, or a recorded failure.

    fold is zero-based. model, metrics and predictions are None exactly
    when failure_kind is set.
    """
    fold: int
    train_index: NDArray[np.intp]
    test_index: NDArray[np.intp]
    model: 'LinearSolution | None'
    metrics: FoldMetrics | None
    predictions: NDArray[np.floating[Any]] | None
    failure_kind: str | None = None
    failure_message: str | None = None

    @property
    def failed(self) -> bool:
        return self.failure_kind is not None

    def report_line(self) -> str:
        """One-line status, e.g. 'Fold 3: SingularMatrixError: ...'."""
        if self.failed:
            return f"Fold {self.fold + 1}: {self.failure_kind}: {self.failure_message}"
        return f"Fold {self.fold + 1}: ok ({len(self.test_index)} held out)"


@dataclass(frozen=True)
class CrossValidationParams:
    """
    Parameter payload for a cross-validation run.

    - fold_results: one FoldResult per fold, in fold order
    - global_metrics: mean/SD of each statistic over the scored folds
    - coefficient_table: features x folds coefficients with mean/SD
    - oof_predictions: (n,) out-of-fold predictions, NaN for rows never
      held out by a successful fold
    - deficiency: full-data rank diagnostic, None unless requested
    """
    fold_results: tuple[FoldResult, ...]
    global_metrics: GlobalMetrics
    coefficient_table: CoefficientTable
    oof_predictions: NDArray[np.floating[Any]]
    deficiency: RankDiagnostic | None = None
