"""
CPU backend for cross-validated OLS.

Folds are independent tasks mapped through joblib; results come back in
submission order, so the per-fold list is indexed by fold number no
matter which fold finished first. Aggregation starts only once every
task has returned.
"""

from __future__ import annotations

import concurrent.futures
import multiprocessing
import threading
import warnings

import numpy as np
from joblib import Parallel, delayed

from pycrossval.core.result import Result
from pycrossval.core.compute.timing import Timer
from pycrossval.core.exceptions import CrossValidationCancelled, NumericalError
from pycrossval.crossval.design import CrossValidationDesign
from pycrossval.crossval._common import CrossValidationParams, FoldResult
from pycrossval.crossval._folds import extract_fold
from pycrossval.crossval._metrics import score_fold, aggregate_metrics
from pycrossval.crossval._coefficients import aggregate_coefficients
from pycrossval.crossval._deficiency import diagnose_rank
from pycrossval.regression.solvers import fit

_TIMEOUT_ERRORS = (
    TimeoutError,
    multiprocessing.TimeoutError,
    concurrent.futures.TimeoutError,
)


def run_fold(
    design: CrossValidationDesign,
    fold: int,
    cancel: threading.Event | None = None,
) -> FoldResult:
    """
    Extract, fit and score one fold.

    NumericalError from the OLS fit is recorded on the FoldResult instead
    of propagating. Everything else propagates.

    Raises:
        CrossValidationCancelled: If cancel is set before the fold starts
    """
    if cancel is not None and cancel.is_set():
        raise CrossValidationCancelled(
            f"cancelled before fold {fold + 1} started", reason='cancelled',
        )

    opts = design.options
    data = extract_fold(design.X, design.y, design.folds[fold])

    try:
        model = fit(
            data.X_train,
            data.y_train,
            intercept=opts.intercept,
            feature_names=design.feature_names,
            backend=opts.backend,
        )
    except NumericalError as e:
        return FoldResult(
            fold=fold,
            train_index=data.train_index,
            test_index=data.test_index,
            model=None,
            metrics=None,
            predictions=None,
            failure_kind=type(e).__name__,
            failure_message=str(e),
        )

    predictions = model.predict(data.X_test)
    return FoldResult(
        fold=fold,
        train_index=data.train_index,
        test_index=data.test_index,
        model=model,
        metrics=score_fold(data.y_test, predictions),
        predictions=predictions,
    )


class CPUCrossValidationBackend:
    """
    CPU backend for k-fold cross-validated OLS.

    Uses joblib's thread-based backend: the LAPACK calls release the GIL,
    and threads share the read-only design without copying it.
    """

    @property
    def name(self) -> str:
        return 'cpu_crossval'

    def solve(
        self,
        design: CrossValidationDesign,
        *,
        cancel: threading.Event | None = None,
    ) -> Result[CrossValidationParams]:
        """
        Run every fold, then aggregate metrics and coefficients.

        Raises:
            CrossValidationCancelled: cancel was set or a fold exceeded
                options.timeout; no partial results are returned
        """
        timer = Timer()
        timer.start()
        opts = design.options

        deficiency = None
        if opts.deficiency:
            with timer.section('rank_diagnostic'):
                deficiency = diagnose_rank(design.model_matrix(), design.model_names)

        with timer.section('folds'):
            parallel = Parallel(
                n_jobs=opts.n_jobs, prefer='threads', timeout=opts.timeout,
            )
            try:
                fold_results = parallel(
                    delayed(run_fold)(design, i, cancel)
                    for i in range(design.n_folds)
                )
            except _TIMEOUT_ERRORS as e:
                raise CrossValidationCancelled(
                    f"a fold exceeded the {opts.timeout}s deadline",
                    reason='deadline',
                ) from e

        if cancel is not None and cancel.is_set():
            raise CrossValidationCancelled(
                "cancelled while folds were running", reason='cancelled',
            )

        warnings_list: list[str] = []
        for fr in fold_results:
            if fr.failed:
                line = fr.report_line()
                warnings_list.append(line)
                warnings.warn(line, RuntimeWarning, stacklevel=2)
            elif fr.model.warnings:
                warnings_list.extend(
                    f"Fold {fr.fold + 1}: {w}" for w in fr.model.warnings
                )

        with timer.section('aggregation'):
            global_metrics = aggregate_metrics(
                [fr.metrics for fr in fold_results if not fr.failed]
            )
            coefficient_table = aggregate_coefficients(
                [fr.model for fr in fold_results], design.model_names,
            )
            oof = np.full(design.n, np.nan, dtype=np.float64)
            for fr in fold_results:
                if not fr.failed:
                    oof[fr.test_index] = fr.predictions

        timer.stop()

        params = CrossValidationParams(
            fold_results=tuple(fold_results),
            global_metrics=global_metrics,
            coefficient_table=coefficient_table,
            oof_predictions=oof,
            deficiency=deficiency,
        )

        return Result(
            params=params,
            info={
                'n': design.n,
                'p': design.p,
                'n_folds': design.n_folds,
                'n_failed': sum(fr.failed for fr in fold_results),
                'ols_backend': opts.backend,
                'intercept': opts.intercept,
                'n_jobs': opts.n_jobs,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
