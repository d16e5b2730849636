"""
Rank-deficiency diagnostic over the full design matrix.

Run once before any fold is fitted. It reports and never raises; whether
a fold actually fails is decided by the OLS backend on that fold's rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pycrossval.core.compute.linalg.qr import qr_cpu, condition_number


@dataclass(frozen=True)
class RankDiagnostic:
    """
    Conditioning of the full design matrix.

    Attributes:
        condition_number: s_max / s_min of X (inf when singular)
        rank: Numerical rank from pivoted QR
        n_columns: Number of columns of X
        aliased: Names of columns the pivoted QR found linearly dependent
            on earlier ones, in pivot order
    """
    condition_number: float
    rank: int
    n_columns: int
    aliased: tuple[str, ...]

    @property
    def is_deficient(self) -> bool:
        return self.rank < self.n_columns

    def describe(self) -> str:
        status = "rank-deficient" if self.is_deficient else "full rank"
        line = (
            f"Design matrix: rank {self.rank} of {self.n_columns} ({status}), "
            f"condition number {self.condition_number:.4g}"
        )
        if self.aliased:
            line += f"; aliased: {', '.join(self.aliased)}"
        return line


def diagnose_rank(
    X: NDArray[np.floating[Any]],
    names: Sequence[str],
) -> RankDiagnostic:
    """
    Condition number, numerical rank and aliased columns of X.

    Args:
        X: Full design matrix (n x p), intercept column included if modeled
        names: Column names of X
    """
    qr_result = qr_cpu(X)
    aliased = tuple(names[j] for j in qr_result.pivot[qr_result.rank:])
    return RankDiagnostic(
        condition_number=condition_number(X),
        rank=qr_result.rank,
        n_columns=X.shape[1],
        aliased=aliased,
    )
