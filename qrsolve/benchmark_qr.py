#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Compare qrsolve against numpy.linalg.lstsq.

Run with ``python -m qrsolve.benchmark_qr`` (needs the ``bench`` extra).
"""

import time

import numpy as np
import pandas as pd

from qrsolve import decompose, least_squares_solve
from qrsolve.utils import random_full_rank, residual_norm

REPEATS = 5  # best of 5 runs leads to stable numbers
SIZES = [(50, 50), (200, 50), (300, 300), (1000, 200)]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run(sizes=SIZES, repeats=REPEATS, seed=0) -> pd.DataFrame:
    records = []
    for complex_ in (False, True):
        for m, n in sizes:
            A = random_full_rank(m, n, complex_=complex_, seed=seed)
            b = A @ np.ones(n)
            kind = "complex" if complex_ else "real"

            # reference
            t_np = min(wall(np.linalg.lstsq, A, b, rcond=None) for _ in range(repeats))
            x_ref, *_ = np.linalg.lstsq(A, b, rcond=None)
            r_ref = residual_norm(A, x_ref, b)

            t_qr = min(wall(decompose, A) for _ in range(repeats))
            factor = decompose(A)
            t_solve = min(wall(factor.solve, b) for _ in range(repeats))
            x_hh = least_squares_solve(A, b)
            r_hh = residual_norm(A, x_hh, b)
            err = np.max(np.abs(x_hh - 1.0))

            records.append(
                (
                    kind,
                    f"{m}×{n}",
                    t_qr,
                    t_solve,
                    (t_qr + t_solve) / t_np,
                    r_hh / r_ref if r_ref > 0 else np.nan,
                    err,
                )
            )

    return pd.DataFrame(
        records,
        columns=[
            "dtype",
            "size",
            "decompose sec",
            "solve sec",
            "sec/NumPy",
            "residual/NumPy",
            "max |x - 1|",
        ],
    )


if __name__ == "__main__":
    df = run()
    print(df.to_markdown(index=False))
    df.to_csv("bench_results.csv", index=False)
