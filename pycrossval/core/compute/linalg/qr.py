"""
Least-squares decompositions.

Provides a rank-revealing QR path (the default OLS solver) and an SVD path
that yields the minimum-norm solution for rank-deficient matrices. Neither
forms X'X: the condition number of the normal equations is cond(X)², which
is exactly the amplification these routines exist to avoid.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import qr, solve_triangular, lstsq, svdvals

from pycrossval.core.exceptions import SingularMatrixError


# Relative tolerance on |diag(R)| (and on singular values) below which a
# column is treated as linearly dependent. Same value as R's lm().
RANK_TOLERANCE = 1e-7


@dataclass(frozen=True)
class QRResult:
    """
    Result of a column-pivoted QR decomposition, X[:, pivot] = Q R.

    Attributes:
        Q: Orthonormal columns (n x k, k = min(n, p))
        R: Upper triangular factor (k x p)
        pivot: Column permutation (p,)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    pivot: NDArray[np.intp]
    rank: int


@dataclass(frozen=True)
class LstsqResult:
    """
    Least-squares solution with the rank information that produced it.

    Attributes:
        coefficients: Solution vector (p,)
        rank: Numerical rank of X
        singular_values: Singular values of X, or None for the QR path
    """
    coefficients: NDArray[np.floating[Any]]
    rank: int
    singular_values: NDArray[np.floating[Any]] | None = None


def qr_cpu(
    X: NDArray[np.floating[Any]],
    tol: float = RANK_TOLERANCE,
) -> QRResult:
    """
    Column-pivoted economy QR decomposition using LAPACK (via SciPy).

    Pivoting moves the largest remaining column forward at each step,
    so the diagonal of R is non-increasing in magnitude and the rank can
    be read off it.

    Args:
        X: Matrix to decompose (n x p)
        tol: Relative tolerance against |R[0, 0]|

    Returns:
        QRResult with Q, R, pivot and numerical rank
    """
    Q, R, pivot = qr(X, mode='economic', pivoting=True)

    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R[0] > 0:
        rank = int(np.sum(diag_R > tol * diag_R[0]))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, pivot=pivot, rank=rank)


def qr_solve_cpu(
    qr_result: QRResult,
    y: NDArray[np.floating[Any]],
) -> LstsqResult:
    """
    Solve least squares from a pivoted QR decomposition.

    Solves min_β ||y - Xβ||² as
        X P = Q R
        β[P] = R⁻¹ Q'y

    Args:
        qr_result: Decomposition of the design matrix X (n x p)
        y: Response vector (n,)

    Returns:
        LstsqResult with β in the original column order

    Raises:
        SingularMatrixError: If X is rank-deficient
    """
    p = qr_result.R.shape[1]
    rank = qr_result.rank

    if rank < p:
        raise SingularMatrixError(
            f"Design matrix is rank-deficient: rank={rank}, expected={p}. "
            f"This indicates perfect multicollinearity or fewer rows than columns.",
            matrix_name='X',
            rank=rank,
            expected_rank=p,
        )

    Qty = qr_result.Q.T @ y
    beta_pivoted = solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)

    beta = np.empty(p, dtype=np.float64)
    beta[qr_result.pivot] = beta_pivoted

    return LstsqResult(coefficients=beta, rank=rank)


def svd_solve_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    tol: float = RANK_TOLERANCE,
) -> LstsqResult:
    """
    Minimum-norm least squares via SVD (LAPACK gelsd).

    Singular values below tol * s_max are treated as zero, so a
    rank-deficient X yields the unique minimum-norm solution instead
    of an error.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)
        tol: Relative singular value cutoff

    Returns:
        LstsqResult with coefficients, rank and singular values
    """
    beta, _, rank, sv = lstsq(X, y, cond=tol, lapack_driver='gelsd')
    return LstsqResult(
        coefficients=np.asarray(beta, dtype=np.float64),
        rank=int(rank),
        singular_values=sv,
    )


def condition_number(X: NDArray[np.floating[Any]]) -> float:
    """
    2-norm condition number of X, s_max / s_min.

    Returns inf when X has fewer rows than columns or a zero singular value.
    """
    n, p = X.shape
    if n < p or p == 0:
        return float('inf')
    sv = svdvals(X)
    if sv[-1] == 0:
        return float('inf')
    return float(sv[0] / sv[-1])
