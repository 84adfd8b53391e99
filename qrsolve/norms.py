# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Euclidean norms that neither overflow nor underflow.

Two strategies are kept on purpose:

- ``real_norm`` carries a running scale ``s`` and a ratio ``r`` so that
  ``norm = s * sqrt(r)``. Every element is divided by the largest magnitude
  seen so far, squares never leave [0, 1].
- ``complex_norm`` folds the magnitudes together with ``hypot``. It avoids
  overflow as well but rounds once per element, so it is slightly less
  accurate for long vectors.
"""

import math

import numpy as np


def real_norm(x) -> float:
    """
    Scaled 2-norm of a real vector.

    Parameters
    ----------
    x : (n,) array_like

    Returns
    -------
    norm : float
        0.0 for an empty or all-zero vector.
    """
    s = 0.0
    r = 0.0
    for value in np.asarray(x).ravel():
        if value == 0:
            continue
        a = float(abs(value))
        if s < a:
            t = s / a
            r = 1.0 + r * t * t
            s = a
        else:
            t = a / s
            r += t * t
    return s * math.sqrt(r)


def complex_norm(x) -> float:
    """2-norm of a (complex) vector, accumulated as ``hypot(norm, |x_i|)``."""
    norm = 0.0
    for value in np.asarray(x).ravel():
        norm = math.hypot(norm, abs(complex(value)))
    return norm


def stable_norm(x) -> float:
    """
    Euclidean norm of ``x`` without over/underflow.

    Complex input goes through ``complex_norm``, everything else through
    ``real_norm``.
    """
    x = np.asarray(x)
    if np.iscomplexobj(x):
        return complex_norm(x)
    return real_norm(x)
