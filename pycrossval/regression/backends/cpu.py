"""
CPU backends for linear regression.

CPUQRBackend: column-pivoted QR, refuses rank-deficient designs.
CPUSVDBackend: SVD minimum-norm solution, accepts rank-deficient designs.

Both solve the least-squares problem directly on X and never form X'X.
"""

from typing import Any
import numpy as np

from pycrossval.core.result import Result
from pycrossval.core.compute.timing import Timer
from pycrossval.core.compute.linalg.qr import qr_cpu, qr_solve_cpu, svd_solve_cpu
from pycrossval.regression.design import RegressionDesign
from pycrossval.regression.solution import LinearParams


def _linear_params(design: RegressionDesign, coefficients, rank: int) -> LinearParams:
    """Residuals, fitted values and sums of squares for a coefficient vector."""
    fitted_values = design.X @ coefficients
    residuals = design.y - fitted_values
    rss = float(residuals @ residuals)
    y_centered = design.y - np.mean(design.y)
    tss = float(y_centered @ y_centered)

    return LinearParams(
        coefficients=coefficients,
        residuals=residuals,
        fitted_values=fitted_values,
        rss=rss,
        tss=tss,
        rank=rank,
        df_residual=design.n - rank,
    )


class CPUQRBackend:
    """
    CPU backend using column-pivoted QR decomposition.

    Implements the Backend protocol for RegressionDesign -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve OLS via pivoted QR decomposition.

        Algorithm:
            1. Compute QR decomposition: X P = QR
            2. Read the numerical rank off diag(R)
            3. Solve: β[P] = R⁻¹ Q'y
            4. Compute residuals, fitted values, and sums of squares

        Raises:
            SingularMatrixError: If X is rank-deficient
        """
        timer = Timer()
        timer.start()

        with timer.section('qr_decomposition'):
            qr_result = qr_cpu(design.X)

        with timer.section('solve'):
            solved = qr_solve_cpu(qr_result, design.y)
        # Q is n x p; drop it before the residual pass
        del qr_result

        with timer.section('residuals'):
            params = _linear_params(design, solved.coefficients, solved.rank)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': solved.rank,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


class CPUSVDBackend:
    """
    CPU backend using SVD (LAPACK gelsd).

    Rank-deficient designs yield the minimum-norm least-squares solution
    and a warning rather than an error.
    """

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """Solve OLS via SVD, minimum-norm when X is rank-deficient."""
        timer = Timer()
        timer.start()

        with timer.section('svd_solve'):
            solved = svd_solve_cpu(design.X, design.y)

        with timer.section('residuals'):
            params = _linear_params(design, solved.coefficients, solved.rank)

        timer.stop()

        sv = solved.singular_values
        if sv is not None and len(sv) == design.p and sv[-1] > 0:
            cond = float(sv[0] / sv[-1])
        else:
            cond = float('inf')

        warnings_list = []
        if solved.rank < design.p:
            warnings_list.append(
                f"Design matrix is rank-deficient (rank={solved.rank}, "
                f"p={design.p}). Returned the minimum-norm solution."
            )

        return Result(
            params=params,
            info={
                'method': 'svd',
                'rank': solved.rank,
                'condition_number': cond,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
