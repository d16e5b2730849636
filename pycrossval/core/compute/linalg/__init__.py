"""
Linear algebra kernels for PyCrossval.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    qr: Pivoted QR, QR least squares, SVD least squares, condition number
"""

from pycrossval.core.compute.linalg.qr import (
    RANK_TOLERANCE,
    QRResult,
    LstsqResult,
    qr_cpu,
    qr_solve_cpu,
    svd_solve_cpu,
    condition_number,
)

__all__ = [
    "RANK_TOLERANCE",
    "QRResult",
    "LstsqResult",
    "qr_cpu",
    "qr_solve_cpu",
    "svd_solve_cpu",
    "condition_number",
]
