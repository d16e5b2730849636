"""
Solution wrapper for cross-validation results.

CrossValidationSolution wraps Result[CrossValidationParams] and provides
accessors, pandas views and a plain-text summary whose sections follow
the presentation flags of the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pycrossval.core.result import Result
from pycrossval.crossval._common import CrossValidationParams, FoldResult
from pycrossval.crossval._coefficients import CoefficientTable
from pycrossval.crossval._deficiency import RankDiagnostic
from pycrossval.crossval._metrics import METRIC_NAMES, FoldMetrics, GlobalMetrics

if TYPE_CHECKING:
    from pycrossval.crossval.design import CrossValidationDesign, CrossValidationOptions
    from pycrossval.regression.solution import LinearSolution


@dataclass
class CrossValidationSolution:
    """
    User-facing cross-validation results.

    Per-fold sequences are in fold order and always have one entry per
    fold; failed folds hold None.
    """
    _result: Result[CrossValidationParams]
    _design: 'CrossValidationDesign'

    # --- Per-fold outputs ---

    @property
    def fold_results(self) -> tuple[FoldResult, ...]:
        return self._result.params.fold_results

    @property
    def models(self) -> tuple['LinearSolution | None', ...]:
        """Fitted model per fold, None where the fit failed."""
        return tuple(fr.model for fr in self.fold_results)

    @property
    def fold_metrics(self) -> tuple[FoldMetrics | None, ...]:
        """Held-out metrics per fold, None where the fit failed."""
        return tuple(fr.metrics for fr in self.fold_results)

    @property
    def failures(self) -> tuple[FoldResult, ...]:
        return tuple(fr for fr in self.fold_results if fr.failed)

    # --- Aggregates ---

    @property
    def global_metrics(self) -> GlobalMetrics:
        return self._result.params.global_metrics

    @property
    def coefficient_table(self) -> CoefficientTable:
        return self._result.params.coefficient_table

    @property
    def oof_predictions(self) -> NDArray[np.floating[Any]]:
        """Out-of-fold prediction per row, NaN if never held out."""
        return self._result.params.oof_predictions

    @property
    def deficiency(self) -> RankDiagnostic | None:
        return self._result.params.deficiency

    # --- Metadata ---

    @property
    def n_folds(self) -> int:
        return len(self.fold_results)

    @property
    def feature_names(self) -> tuple[str, ...]:
        return self._design.feature_names

    @property
    def options(self) -> 'CrossValidationOptions':
        return self._design.options

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

    # --- pandas views ---

    def metrics_frame(self) -> pd.DataFrame:
        """Per-fold metrics, one row per fold; failed folds are NaN."""
        rows = []
        for fr in self.fold_results:
            if fr.metrics is None:
                row = {name: np.nan for name in METRIC_NAMES}
            else:
                row = fr.metrics.as_dict()
            row['n_test'] = len(fr.test_index)
            rows.append(row)
        index = pd.Index([f"fold_{i + 1}" for i in range(self.n_folds)], name='fold')
        return pd.DataFrame(rows, index=index, columns=list(METRIC_NAMES) + ['n_test'])

    def global_frame(self) -> pd.DataFrame:
        """Mean and SD of each statistic across folds."""
        gm = self.global_metrics
        return pd.DataFrame(
            {
                'mean': [gm.mean[name] for name in METRIC_NAMES],
                'sd': [gm.sd[name] for name in METRIC_NAMES],
            },
            index=pd.Index(METRIC_NAMES, name='statistic'),
        )

    def coefficients_frame(self) -> pd.DataFrame:
        return self.coefficient_table.to_frame()

    def plot_data(self) -> pd.DataFrame:
        """
        Observed vs out-of-fold predicted labels for an external plotter.

        One row per held-out row per successful fold, in fold order.
        """
        frames = []
        for fr in self.fold_results:
            if fr.failed:
                continue
            frames.append(pd.DataFrame({
                'row': fr.test_index,
                'fold': fr.fold + 1,
                'observed': self._design.y[fr.test_index],
                'predicted': fr.predictions,
            }))
        if not frames:
            return pd.DataFrame(columns=['row', 'fold', 'observed', 'predicted'])
        return pd.concat(frames, ignore_index=True)

    # --- Display ---

    def summary(self) -> str:
        """
        Plain-text report.

        Sections shown depend on the run options: stats (global table),
        adv_stats (per-fold table), coefficients (coefficient table),
        deficiency (rank diagnostic). Failed folds are always listed.
        """
        opts = self.options
        n_failed = len(self.failures)
        lines = [
            "\nCROSS-VALIDATED LINEAR REGRESSION\n",
            f"Observations: {self._design.n}   Features: {self._design.p}   "
            f"Folds: {self.n_folds} ({n_failed} failed)",
            f"OLS backend: {opts.backend}   Intercept: {'yes' if opts.intercept else 'no'}",
        ]

        if opts.deficiency and self.deficiency is not None:
            lines.append("")
            lines.append(self.deficiency.describe())

        if n_failed:
            lines.append("")
            lines.append("Failed folds:")
            lines.extend(f"  {fr.report_line()}" for fr in self.failures)

        if opts.stats:
            gm = self.global_metrics
            lines.append("")
            lines.append(f"Global statistics ({gm.n_folds} folds):")
            lines.append(f"{'':>12s} {'mean':>14s} {'sd':>14s}")
            for name in METRIC_NAMES:
                lines.append(f"{name:>12s} {gm.mean[name]:14.6f} {gm.sd[name]:14.6f}")

        if opts.adv_stats:
            lines.append("")
            lines.append("Per-fold statistics:")
            header = f"{'fold':>6s}" + "".join(f" {name:>12s}" for name in METRIC_NAMES)
            lines.append(header)
            for fr in self.fold_results:
                if fr.metrics is None:
                    lines.append(f"{fr.fold + 1:>6d}   ({fr.failure_kind})")
                    continue
                values = fr.metrics.as_dict()
                lines.append(
                    f"{fr.fold + 1:>6d}"
                    + "".join(f" {values[name]:12.6f}" for name in METRIC_NAMES)
                )

        if opts.coefficients:
            table = self.coefficient_table
            width = max(12, max(len(name) for name in table.feature_names))
            lines.append("")
            lines.append("Coefficients:")
            columns = table.fold_columns + ('mean', 'sd')
            lines.append(f"{'':>{width}s}" + "".join(f" {c:>12s}" for c in columns))
            for i, name in enumerate(table.feature_names):
                row = list(table.values[i]) + [table.mean[i], table.sd[i]]
                lines.append(
                    f"{name:>{width}s}" + "".join(f" {v:12.6f}" for v in row)
                )

        if opts.plots:
            lines.append("")
            lines.append("Observed vs predicted values available from plot_data().")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CrossValidationSolution(n={self._design.n}, p={self._design.p}, "
            f"folds={self.n_folds}, failed={len(self.failures)})"
        )
