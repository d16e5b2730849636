"""
Core infrastructure for PyCrossval.

This module provides shared abstractions and utilities used by the
regression and crossval submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and linear algebra kernels
"""

from pycrossval.core.result import Result
from pycrossval.core.exceptions import (
    PyCrossvalError,
    ValidationError,
    DimensionError,
    ConfigurationError,
    NumericalError,
    SingularMatrixError,
    CrossValidationCancelled,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyCrossvalError",
    "ValidationError",
    "DimensionError",
    "ConfigurationError",
    "NumericalError",
    "SingularMatrixError",
    "CrossValidationCancelled",
]
