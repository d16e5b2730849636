"""
Exception hierarchy for PyCrossval.

All exceptions inherit from PyCrossvalError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyCrossvalError(Exception):
    """Base exception for all PyCrossval errors."""
    pass


class ValidationError(PyCrossvalError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class ConfigurationError(ValidationError):
    """
    Cross-validation inputs are inconsistent with each other.

    Raised before any fold is fitted: fold indices outside the row range,
    empty holdouts, label/dataset length mismatches, unknown options.

    Attributes:
        fold: Zero-based fold number the problem was found in, if any
    """

    def __init__(self, message: str, fold: int | None = None):
        super().__init__(message)
        self.fold = fold


class NumericalError(PyCrossvalError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a least-squares solve requires full column rank but the
    matrix is numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of columns)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class CrossValidationCancelled(PyCrossvalError):
    """
    A cross-validation run was stopped before every fold finished.

    Results of folds that did complete are discarded.

    Attributes:
        reason: 'cancelled' (cancel event set) or 'deadline' (timeout hit)
    """

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason
