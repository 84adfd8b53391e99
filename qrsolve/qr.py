# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Householder QR decomposition in compact storage.

Reference:
    W. Gander, M. J. Gander, F. Kwok, Scientific Computing, an Introduction
    Using Maple and Matlab, Springer 2014, pp. 359-361.

The factor keeps a single (n, m) workspace, the transpose of A:

    workspace[j, j:]   Householder vector v_j       (rows j..m-1 of column j)
    workspace[j, :j]   column j of R above the diagonal
    rdiag[j]           R[j, j]

Neither Q nor R is ever formed. Q^H is applied one reflection at a time and
R is read straight out of the workspace during back substitution.
"""

import logging
import math
from typing import Tuple

import numpy as np

from .errors import UnderdeterminedError, ZeroColumnError
from .norms import complex_norm, real_norm
from .utils import as_matrix, as_rhs

logger = logging.getLogger(__name__)


def _unit_phase(z) -> complex:
    if z == 0:
        return 1.0 + 0.0j
    return z / abs(z)


def _diagonal_entry(head, s: float, is_complex: bool):
    """
    R[j, j] for a column whose active part has norm ``s`` and leading
    entry ``head``. Its sign (phase) is opposite to ``head`` so that
    ``head - R[j, j]`` never cancels.
    """
    if is_complex:
        return -s * _unit_phase(complex(head))
    return -s if head > 0 else s


class HouseholderQR:
    """
    Compact QR factor produced by :func:`decompose`.

    The factor is read-only once built: its arrays are flagged
    non-writeable and every method works on a private copy of its input, so
    one factor can serve any number of right-hand sides, from any number of
    threads.
    """

    def __init__(self, workspace: np.ndarray, rdiag: np.ndarray):
        workspace.setflags(write=False)
        rdiag.setflags(write=False)
        self._h = workspace
        self._rdiag = rdiag
        self.n, self.m = workspace.shape

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(m={self.m}, n={self.n}, dtype={self.dtype})"

    @property
    def shape(self) -> Tuple[int, int]:
        return self.m, self.n

    @property
    def dtype(self) -> np.dtype:
        return self._h.dtype

    @property
    def workspace(self) -> np.ndarray:
        return self._h

    @property
    def rdiag(self) -> np.ndarray:
        return self._rdiag

    # ------------------------------------------------------------------
    # Kernels. Both work in place on a private (m, k) array.
    # ------------------------------------------------------------------
    def _reflect(self, Y: np.ndarray) -> None:
        H = self._h
        for j in range(self.n):
            v = H[j, j:]
            inner = v.conj() @ Y[j:]
            Y[j:] -= np.outer(v, inner)

    def _back_substitute(self, Y: np.ndarray) -> np.ndarray:
        H, n = self._h, self.n
        for i in reversed(range(n)):
            # R[i, i+1:] lives in column i of rows i+1.. of the workspace
            Y[i] = (Y[i] - H[i + 1 :, i] @ Y[i + 1 : n]) / self._rdiag[i]
        return Y[:n]

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def apply_qh(self, x) -> np.ndarray:
        """
        Multiply ``x`` by Q^H (the conjugate transpose of Q).

        The reflections are applied for j = 0..n-1, each one touching rows
        j.. only. Applying twice does not give ``x`` back.

        Parameters
        ----------
        x : (m,) or (m, k) array_like

        Returns
        -------
        y : ndarray, same shape as ``x``
            The first n rows are the coordinates used by back substitution.
        """
        Y = as_rhs(x, self.m, self.dtype, "apply_qh input")
        self._reflect(Y)
        return Y.ravel() if np.ndim(x) == 1 else Y

    def back_substitute(self, b) -> np.ndarray:
        """
        Solve R x = b[:n] with the triangular factor held in the workspace.

        ``b`` must have m rows even though only the first n are used. No
        tolerance is applied to the diagonal: ill-conditioned R gives
        large, inaccurate results rather than an error.

        Parameters
        ----------
        b : (m,) or (m, k) array_like

        Returns
        -------
        x : (n,) or (n, k) ndarray
        """
        Y = as_rhs(b, self.m, self.dtype, "back_substitute input")
        X = self._back_substitute(Y)
        return X.ravel() if np.ndim(b) == 1 else X

    def solve(self, b) -> np.ndarray:
        """
        Solve min ‖A x − b‖₂ (exactly when A is square).

        Returns
        -------
        x : (n,) or (n, k) ndarray
        """
        Y = as_rhs(b, self.m, self.dtype, "solve input")
        self._reflect(Y)
        X = self._back_substitute(Y)
        return X.ravel() if np.ndim(b) == 1 else X


def decompose(A) -> HouseholderQR:
    """
    Householder QR decomposition of an m-by-n matrix A (m ≥ n).

    Real input uses the scaled real norm and a ± sign for R's diagonal;
    complex input uses the hypot norm and the opposite phase of the
    leading entry.

    Parameters
    ----------
    A : (m, n) array_like, real or complex

    Returns
    -------
    factor : HouseholderQR

    Raises
    ------
    UnderdeterminedError : if m < n (checked before any work).
    ZeroColumnError : if an active sub-column is exactly zero.
    DimensionMismatchError : if A is not 2-D.
    """
    A = as_matrix(A)
    m, n = A.shape
    if m < n:
        raise UnderdeterminedError(m, n)

    is_complex = np.iscomplexobj(A)
    norm = complex_norm if is_complex else real_norm

    # working copy of A in column major order: row j of H is column j of A
    H = np.ascontiguousarray(A.T)
    rdiag = np.zeros(n, dtype=A.dtype)

    for j in range(n):
        s = norm(H[j, j:])
        if s == 0:
            raise ZeroColumnError(j)

        head = H[j, j]
        rdiag[j] = _diagonal_entry(head, s, is_complex)
        # sqrt(s * (s + |head|)) without squaring s
        f = math.sqrt(s) * math.sqrt(s + abs(head))
        H[j, j] -= rdiag[j]
        H[j, j:] /= f

        # reflect the remaining columns; rows < j+1 are final from here on
        v = H[j, j:]
        inner = H[j + 1 :, j:] @ v.conj()
        H[j + 1 :, j:] -= np.outer(inner, v)

    logger.debug(f"Householder QR of a {m}x{n} {A.dtype} matrix")
    return HouseholderQR(H, rdiag)


def least_squares_solve(A, b) -> np.ndarray:
    """
    Solve min ‖A x − b‖₂ using Householder QR. Works for tall or square
    full-rank A.

    Returns
    -------
    x : (n, ) ndarray
        The least squares solution to Ax = b
    """
    return decompose(A).solve(b)
