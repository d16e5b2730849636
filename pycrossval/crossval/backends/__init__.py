"""
Cross-validation backends.

Available backends:
    CPUCrossValidationBackend: joblib thread pool over folds, CPU OLS per fold
"""

from pycrossval.crossval.backends.cpu import CPUCrossValidationBackend, run_fold

__all__ = [
    "CPUCrossValidationBackend",
    "run_fold",
]
