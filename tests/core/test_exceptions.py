"""
Tests for PyCrossval exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyCrossvalError)
    - Diagnostic attributes on SingularMatrixError, ConfigurationError,
      CrossValidationCancelled
    - Default attribute values (None for optional attributes)
"""

import pytest

from pycrossval.core.exceptions import (
    ConfigurationError,
    CrossValidationCancelled,
    DimensionError,
    NumericalError,
    PyCrossvalError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyCrossvalError."""

    def test_validation_error_is_base_error(self):
        with pytest.raises(PyCrossvalError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_configuration_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ConfigurationError("fold out of range")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_numerical_error_is_not_validation_error(self):
        assert not isinstance(NumericalError("x"), ValidationError)

    def test_cancelled_is_base_error(self):
        with pytest.raises(PyCrossvalError):
            raise CrossValidationCancelled("stopped", reason='cancelled')

    def test_cancelled_is_not_numerical_error(self):
        err = CrossValidationCancelled("stopped", reason='deadline')
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_singular_matrix_defaults(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_singular_matrix_all_attributes(self):
        err = SingularMatrixError(
            "singular", matrix_name='X', condition_number=1e18,
            rank=2, expected_rank=3,
        )
        assert err.matrix_name == 'X'
        assert err.condition_number == 1e18
        assert err.rank == 2
        assert err.expected_rank == 3
        assert str(err) == "singular"

    def test_configuration_error_fold(self):
        assert ConfigurationError("bad").fold is None
        assert ConfigurationError("bad", fold=3).fold == 3

    def test_cancelled_reason(self):
        err = CrossValidationCancelled("too slow", reason='deadline')
        assert err.reason == 'deadline'
        assert "too slow" in str(err)
