"""
Regression backends.

Available backends:
    CPUQRBackend: Pivoted QR decomposition, fails on rank deficiency
    CPUSVDBackend: SVD minimum-norm solution for rank-deficient designs
"""

from pycrossval.regression.backends.cpu import CPUQRBackend, CPUSVDBackend

__all__ = [
    "CPUQRBackend",
    "CPUSVDBackend",
]
