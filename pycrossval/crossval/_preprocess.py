"""
Optional preprocessing for cross-validation inputs.

Implements the two column-wise transforms applied to the feature matrix
before folds are built:
- NA filling ('mean', 'median' or 'zero'), enabled by cleaning=True
- min-max normalization to [0, 1], enabled by normalize=True

Filling runs first so normalization never sees NaN. Both return new
arrays and leave their input untouched.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pycrossval.core.exceptions import ValidationError


FILL_STRATEGIES = ('mean', 'median', 'zero')


def fill_missing(X: NDArray, strategy: str = 'mean') -> NDArray:
    """
    Replace NaN entries column by column.

    Parameters
    ----------
    X : NDArray
        (n, p) feature matrix, may contain NaN.
    strategy : str
        'mean' or 'median' of the column's observed values, or 'zero'.

    Returns
    -------
    filled : NDArray
        Copy of X without NaN.

    Raises
    ------
    ValidationError
        Unknown strategy, or a column with no observed values under
        'mean'/'median'.
    """
    if strategy not in FILL_STRATEGIES:
        raise ValidationError(
            f"Invalid fill strategy: {strategy!r}. Must be one of {FILL_STRATEGIES}."
        )

    filled = np.array(X, dtype=np.float64, copy=True)
    missing = np.isnan(filled)
    if not missing.any():
        return filled

    if strategy == 'zero':
        filled[missing] = 0.0
        return filled

    empty = np.where(missing.all(axis=0))[0]
    if len(empty) > 0:
        raise ValidationError(
            f"columns {empty.tolist()} contain only NaN; cannot fill with the {strategy}"
        )

    if strategy == 'mean':
        fill_values = np.nanmean(filled, axis=0)
    else:
        fill_values = np.nanmedian(filled, axis=0)

    rows, cols = np.nonzero(missing)
    filled[rows, cols] = fill_values[cols]
    return filled


def normalize_minmax(X: NDArray) -> NDArray:
    """
    Rescale each column to [0, 1] via (x - min) / (max - min).

    Parameters
    ----------
    X : NDArray
        (n, p) feature matrix.

    Returns
    -------
    scaled : NDArray
        Copy of X. Constant columns become all zeros; NaN stays NaN.
    """
    data = np.asarray(X, dtype=np.float64)
    col_min = np.nanmin(data, axis=0)
    col_max = np.nanmax(data, axis=0)
    span = col_max - col_min
    span = np.where(span > 0, span, 1.0)
    return (data - col_min) / span
