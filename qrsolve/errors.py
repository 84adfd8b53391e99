# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the QR decomposition and solvers.

All of them derive from ``ValueError``: every failure here is caused by the
shape or content of the input, never by a transient condition.
"""

from typing import Optional, Tuple


class QRError(ValueError):
    """Base class for every error raised by qrsolve."""


class UnderdeterminedError(QRError):
    """The matrix has fewer rows than columns."""

    def __init__(self, m: int, n: int):
        self.m = m
        self.n = n
        super().__init__(f"matrix is underdetermined ({m} rows < {n} columns)")


class ZeroColumnError(QRError):
    """An active sub-column was exactly zero when its reflection was formed."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"matrix contains a zero column (column {column})")


class DimensionMismatchError(QRError):
    def __init__(
        self,
        what: str,
        expected: Optional[Tuple[int, ...]] = None,
        actual: Optional[Tuple[int, ...]] = None,
    ):
        self.expected = expected
        self.actual = actual
        msg = what
        if expected is not None or actual is not None:
            msg = f"{what}: expected {expected}, got {actual}"
        super().__init__(msg)
