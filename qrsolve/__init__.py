# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
qrsolve
=======

Householder QR decomposition of tall or square matrices (real or complex)
and the square / least-squares solvers built on it.

Public API
~~~~~~~~~~
- Decomposition
    - `decompose` -> `HouseholderQR`
- Factor operations
    - `HouseholderQR.apply_qh`, `HouseholderQR.back_substitute`,
      `HouseholderQR.solve`
- Linear systems
    - `least_squares_solve`
- Norms
    - `stable_norm`, `real_norm`, `complex_norm`
- Errors
    - `QRError`, `UnderdeterminedError`, `ZeroColumnError`,
      `DimensionMismatchError`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import numpy as np, qrsolve
>>> A = np.array([[1.0, 0.0], [1.0, 1.0], [1.0, 2.0]])
>>> b = np.array([6.0, 0.0, 0.0])
>>> np.allclose(qrsolve.least_squares_solve(A, b), [5.0, -3.0])
True
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    DimensionMismatchError,
    QRError,
    UnderdeterminedError,
    ZeroColumnError,
)
from .norms import complex_norm, real_norm, stable_norm

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .qr import HouseholderQR, decompose, least_squares_solve

__all__ = [
    "decompose",
    "HouseholderQR",
    "least_squares_solve",
    "stable_norm",
    "real_norm",
    "complex_norm",
    "QRError",
    "UnderdeterminedError",
    "ZeroColumnError",
    "DimensionMismatchError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show qrsolve”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see debug
# records only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
