"""
PyCrossval: cross-validated linear regression diagnostics.

Fits ordinary least squares on every fold of a user-supplied partition,
scores the held-out rows, and summarizes accuracy (R, R², MAE, MSE, RMSE,
MAPE) and coefficient stability across folds.

Submodules:
    regression: Ordinary least squares (QR and SVD backends)
    crossval: Fold extraction, scoring and cross-fold aggregation
"""

__version__ = "0.1.0"

from pycrossval import regression
from pycrossval import crossval
from pycrossval.crossval import cross_validate, make_folds

__all__ = [
    "__version__",
    "regression",
    "crossval",
    "cross_validate",
    "make_folds",
]
