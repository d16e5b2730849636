"""
Solver dispatch for cross-validation.

Provides cross_validate() as the public entry point.
"""

from __future__ import annotations

import threading
from typing import Literal, Sequence

from numpy.typing import ArrayLike

from pycrossval.crossval.design import CrossValidationDesign, CrossValidationOptions
from pycrossval.crossval.solution import CrossValidationSolution
from pycrossval.crossval.backends.cpu import CPUCrossValidationBackend


FillStrategy = Literal['mean', 'median', 'zero']
OLSBackend = Literal['cpu', 'cpu_qr', 'cpu_svd']


def cross_validate(
    data,
    labels: ArrayLike | str,
    folds: Sequence[ArrayLike],
    *,
    feature_names: Sequence[str] | None = None,
    normalize: bool = False,
    cleaning: bool = False,
    fill: FillStrategy = 'mean',
    intercept: bool = False,
    backend: OLSBackend = 'cpu_qr',
    stats: bool = True,
    coefficients: bool = True,
    plots: bool = False,
    adv_stats: bool = False,
    deficiency: bool = False,
    n_jobs: int = 1,
    timeout: float | None = None,
    cancel: threading.Event | None = None,
) -> CrossValidationSolution:
    """
    k-fold cross-validated ordinary least squares.

    For every fold the rows it holds out are scored by a model fitted on
    all other rows. Per-fold metrics are reduced to a cross-fold mean and
    SD, and per-fold coefficients to a features x folds table.

    Parameters
    ----------
    data : DataFrame or array-like
        Features (n x p). DataFrame columns give feature names.
    labels : array-like or str
        Labels (n,), or the name of a DataFrame column.
    folds : sequence of array-like
        Zero-based row indices to hold out, one collection per fold.
        Coverage and disjointness are not checked.
    feature_names : sequence of str, optional
        Names for array input; default x1..xp.
    normalize : bool
        Min-max scale features to [0, 1] before splitting.
    cleaning : bool
        Fill NaN features using ``fill`` before splitting.
    fill : str
        'mean', 'median' or 'zero'.
    intercept : bool
        Model an intercept in every fold.
    backend : str
        'cpu_qr' (default): rank-deficient folds fail with
        SingularMatrixError. 'cpu_svd': minimum-norm solution instead.
    stats, coefficients, plots, adv_stats : bool
        Which sections summary() renders. Values are computed regardless.
    deficiency : bool
        Run the full-data rank diagnostic once and show it in summary().
    n_jobs : int
        Parallel fold workers (joblib semantics).
    timeout : float, optional
        Per-fold deadline in seconds; only enforced when n_jobs != 1.
    cancel : threading.Event, optional
        Set it to stop the run; checked before each fold starts.

    Returns
    -------
    CrossValidationSolution

    Raises
    ------
    ConfigurationError
        Invalid folds, label length mismatch, unknown options.
    ValidationError
        Non-numeric input, NaN labels, NaN features without cleaning.
    CrossValidationCancelled
        cancel was set or a fold exceeded the deadline.

    Examples
    --------
    >>> from pycrossval import cross_validate, make_folds
    >>> folds = make_folds(len(df), 5, seed=1)
    >>> cv = cross_validate(df, 'price', folds, intercept=True)
    >>> print(cv.summary())
    """
    options = CrossValidationOptions(
        normalize=normalize,
        cleaning=cleaning,
        fill=fill,
        intercept=intercept,
        backend=backend,
        stats=stats,
        coefficients=coefficients,
        plots=plots,
        adv_stats=adv_stats,
        deficiency=deficiency,
        n_jobs=n_jobs,
        timeout=timeout,
    )
    design = CrossValidationDesign.for_cross_validation(
        data, labels, folds, options, feature_names=feature_names,
    )

    result = CPUCrossValidationBackend().solve(design, cancel=cancel)

    return CrossValidationSolution(_result=result, _design=design)
