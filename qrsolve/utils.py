# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .errors import DimensionMismatchError
from .norms import stable_norm


def working_dtype(*arrays) -> np.dtype:
    """float64 for real input, complex128 as soon as one operand is complex."""
    if any(np.iscomplexobj(a) for a in arrays):
        return np.dtype(np.complex128)
    return np.dtype(np.float64)


def as_matrix(A) -> np.ndarray:
    """Return a private float64/complex128 copy of the 2-D array ``A``."""
    A = np.asarray(A)
    if A.ndim != 2:
        raise DimensionMismatchError(
            "matrix must be 2-D", expected=(2,), actual=(A.ndim,)
        )
    return np.array(A, dtype=working_dtype(A), copy=True)


def as_rhs(b, m: int, dtype: np.dtype, what: str = "vector") -> np.ndarray:
    """
    Copy a right-hand side into a fresh (m, k) array.

    Parameters
    ----------
    b : (m,) or (m, k) array_like
    m : int
        Required leading dimension.
    dtype : np.dtype
        Dtype of the factor; promoted to complex if ``b`` is complex.

    Returns
    -------
    B : (m, k) ndarray
        Owned by the caller, safe to overwrite.
    """
    b = np.asarray(b)
    if b.ndim not in (1, 2) or b.shape[0] != m:
        raise DimensionMismatchError(
            f"{what} has the wrong length", expected=(m,), actual=b.shape
        )
    B = np.array(b, dtype=np.result_type(dtype, working_dtype(b)), copy=True)
    if B.ndim == 1:
        # (m,)  →  (m,1)
        B = B[:, None]
    return B


def residual_norm(A, x, b) -> float:
    """‖A x − b‖₂, computed with the overflow-safe norm."""
    A = np.asarray(A)
    return stable_norm(A @ np.asarray(x) - np.asarray(b))


def random_full_rank(m: int, n: int, complex_: bool = False, seed=None) -> np.ndarray:
    """
    Random m-by-n matrix (m ≥ n) with linearly independent columns.

    Columns are drawn from a standard normal distribution and redrawn until
    NumPy reports full column rank.

    Returns
    -------
    Matrix with float64 (or complex128) dtype
    """
    rng = np.random.default_rng(seed)
    while True:
        A = rng.standard_normal((m, n))
        if complex_:
            A = A + 1j * rng.standard_normal((m, n))
        if np.linalg.matrix_rank(A) == n:
            return np.asarray(A)


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.uniform(low, high, size=(n, n)))
    # magnitudes in [1, high) with a random sign
    diag = rng.uniform(1, high, size=n) * rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(U)
