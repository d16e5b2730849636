"""
Fold data extraction and fold generation.

extract_fold() turns one holdout index set into training and test slices.
make_folds() builds a balanced k-fold partition for callers that do not
bring their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pycrossval.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class FoldData:
    """
    Training and test slices for one fold.

    All arrays are copies of the source rows; row order within each
    partition follows the source (ascending row index).
    """
    train_index: NDArray[np.intp]
    test_index: NDArray[np.intp]
    X_train: NDArray[np.floating[Any]]
    y_train: NDArray[np.floating[Any]]
    X_test: NDArray[np.floating[Any]]
    y_test: NDArray[np.floating[Any]]


def extract_fold(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    holdout: NDArray[np.intp],
) -> FoldData:
    """
    Split rows into held-in (training) and held-out (test) partitions.

    Args:
        X: Full feature matrix (n x p), not modified
        y: Full label vector (n,), not modified
        holdout: Row indices to hold out, already validated to lie in [0, n)

    Returns:
        FoldData whose train and test indices partition range(n)
    """
    mask = np.zeros(X.shape[0], dtype=bool)
    mask[holdout] = True

    test_index = np.flatnonzero(mask)
    train_index = np.flatnonzero(~mask)

    # Integer-array indexing copies, so folds never alias the source
    return FoldData(
        train_index=train_index,
        test_index=test_index,
        X_train=X[train_index],
        y_train=y[train_index],
        X_test=X[test_index],
        y_test=y[test_index],
    )


def make_folds(
    n: int,
    k: int,
    *,
    shuffle: bool = True,
    seed: int | None = None,
) -> list[NDArray[np.intp]]:
    """
    Partition range(n) into k disjoint holdout sets of near-equal size.

    Args:
        n: Number of rows
        k: Number of folds, 2 <= k <= n
        shuffle: Randomly assign rows to folds (otherwise contiguous blocks)
        seed: Random seed for reproducibility

    Returns:
        List of k sorted index arrays whose union is range(n)

    Raises:
        ConfigurationError: If k is outside [2, n]
    """
    if k < 2 or k > n:
        raise ConfigurationError(f"k must be between 2 and n={n}, got {k}")

    if shuffle:
        order = np.random.default_rng(seed).permutation(n)
    else:
        order = np.arange(n)

    return [np.sort(part).astype(np.intp) for part in np.array_split(order, k)]
