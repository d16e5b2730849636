"""
k-fold cross-validated OLS regression.

Usage:
    from pycrossval.crossval import cross_validate, make_folds

    folds = make_folds(n, 5, seed=42)
    cv = cross_validate(X, y, folds)
    cv.global_metrics.mean['rmse']
    cv.coefficient_table.to_frame()
"""

from pycrossval.crossval.solvers import cross_validate
from pycrossval.crossval.design import CrossValidationDesign, CrossValidationOptions
from pycrossval.crossval.solution import CrossValidationSolution
from pycrossval.crossval._common import FoldResult, CrossValidationParams
from pycrossval.crossval._folds import FoldData, extract_fold, make_folds
from pycrossval.crossval._metrics import (
    METRIC_NAMES,
    FoldMetrics,
    GlobalMetrics,
    score_fold,
    aggregate_metrics,
)
from pycrossval.crossval._coefficients import CoefficientTable, aggregate_coefficients
from pycrossval.crossval._deficiency import RankDiagnostic, diagnose_rank
from pycrossval.crossval._preprocess import fill_missing, normalize_minmax

__all__ = [
    "cross_validate",
    "make_folds",
    "extract_fold",
    "score_fold",
    "aggregate_metrics",
    "aggregate_coefficients",
    "diagnose_rank",
    "fill_missing",
    "normalize_minmax",
    "CrossValidationDesign",
    "CrossValidationOptions",
    "CrossValidationSolution",
    "CrossValidationParams",
    "FoldResult",
    "FoldData",
    "FoldMetrics",
    "GlobalMetrics",
    "CoefficientTable",
    "RankDiagnostic",
    "METRIC_NAMES",
]
