"""
Input validation utilities for PyCrossval.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pycrossval.core.exceptions import (
    ValidationError,
    DimensionError,
    ConfigurationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_choice(value: Any, choices: Iterable[Any], name: str) -> None:
    """
    Verify an option value is one of the allowed choices.

    Raises:
        ConfigurationError: If value is not among choices
    """
    allowed = tuple(choices)
    if value not in allowed:
        raise ConfigurationError(
            f"{name}: got {value!r}, expected one of {allowed}"
        )


def check_fold_indices(
    folds: Iterable[ArrayLike],
    n: int,
) -> tuple[NDArray[np.intp], ...]:
    """
    Validate a fold partition against the number of rows.

    Each fold is a collection of zero-based row indices to hold out.
    Coverage and disjointness across folds are NOT checked.

    Args:
        folds: Ordered sequence of index collections
        n: Number of rows in the dataset

    Returns:
        Tuple of sorted, de-duplicated integer index arrays, one per fold

    Raises:
        ConfigurationError: If there are no folds, a fold is empty, holds out
            every row, contains non-integer values, or references rows
            outside [0, n)
    """
    if isinstance(folds, (str, bytes)):
        raise ConfigurationError("folds: expected a sequence of index collections")

    checked = []
    for i, fold in enumerate(folds):
        # np.asarray wraps a set in a 0-d object array
        if isinstance(fold, (set, frozenset)):
            fold = sorted(fold)
        arr = np.asarray(fold)
        if arr.ndim != 1:
            arr = arr.ravel()
        if arr.size == 0:
            raise ConfigurationError(f"folds[{i}]: holds out no rows", fold=i)
        if not np.issubdtype(arr.dtype, np.integer):
            if np.issubdtype(arr.dtype, np.floating) and np.all(arr == np.round(arr)):
                arr = arr.astype(np.intp)
            else:
                raise ConfigurationError(
                    f"folds[{i}]: indices must be integers, got dtype {arr.dtype}",
                    fold=i,
                )
        lo, hi = int(arr.min()), int(arr.max())
        if lo < 0 or hi >= n:
            raise ConfigurationError(
                f"folds[{i}]: indices must lie in [0, {n}), got range [{lo}, {hi}]",
                fold=i,
            )
        arr = np.unique(arr.astype(np.intp))
        if arr.size == n:
            raise ConfigurationError(
                f"folds[{i}]: holds out all {n} rows, leaving nothing to train on",
                fold=i,
            )
        checked.append(arr)

    if not checked:
        raise ConfigurationError("folds: at least one fold is required")

    return tuple(checked)
