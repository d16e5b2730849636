"""
Shared compute infrastructure for PyCrossval.

This module provides timing utilities and linear algebra kernels that are
shared across domain-specific backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Linear algebra kernels (QR, SVD)
"""

from pycrossval.core.compute.timing import Timer

__all__ = [
    "Timer",
]
