"""
Ordinary least-squares linear regression.

Public API:
    fit(X, y, ...) -> LinearSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pycrossval.regression import fit
    >>> result = fit(X, y)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pycrossval.regression.design import RegressionDesign, INTERCEPT_NAME
from pycrossval.regression.solution import LinearSolution, LinearParams
from pycrossval.regression.solvers import fit

__all__ = [
    "fit",
    "RegressionDesign",
    "INTERCEPT_NAME",
    "LinearSolution",
    "LinearParams",
]
