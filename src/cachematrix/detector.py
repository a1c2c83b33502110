"""
Matrix detector: structure report for inversion.

Analyzes a matrix and returns a report with:
  - Shape, density, non-zero count
  - Whether the matrix is a candidate for inversion (square, non-empty,
    finite)
  - Dense or sparse inversion strategy
  - Memory estimates

Usage:
    import cachematrix
    report = cachematrix.detect_matrix(A)
    print(report)
"""

import numpy as np
from scipy import sparse

from cachematrix.exceptions import NonInvertibleMatrixError


def detect_matrix(A):
    """
    Analyze matrix structure and pick an inversion strategy.

    Parameters
    ----------
    A : array_like or scipy.sparse matrix
        The matrix to analyze. Must be 2-D.

    Returns
    -------
    dict
        Structure report with shape, density, nnz, strategy.

    Raises
    ------
    NonInvertibleMatrixError
        If ``A`` is not two-dimensional.
    """
    if sparse.issparse(A):
        A_sp = A.tocsr()
        m, n = A_sp.shape
        nnz = A_sp.nnz
        total = m * n
        density = nnz / total if total > 0 else 0
        is_finite = bool(np.all(np.isfinite(A_sp.data)))
        ram_sparse = A_sp.data.nbytes + A_sp.indices.nbytes + A_sp.indptr.nbytes
        ram_dense = m * n * A_sp.dtype.itemsize
    else:
        A_arr = np.asarray(A)
        if A_arr.ndim != 2:
            raise NonInvertibleMatrixError(
                f"Expected a 2-D matrix, got {A_arr.ndim}-D input",
                shape=A_arr.shape,
            )
        m, n = A_arr.shape
        nnz = int(np.count_nonzero(A_arr))
        total = m * n
        density = nnz / total if total > 0 else 0
        is_finite = bool(np.all(np.isfinite(A_arr)))
        ram_sparse = None
        ram_dense = A_arr.nbytes

    is_square = (m == n)
    is_empty = (m == 0 or n == 0)
    is_sparse = ram_sparse is not None

    if is_empty:
        reason = f"Empty matrix ({m} x {n}), nothing to invert"
    elif not is_square:
        reason = f"Rectangular ({m} x {n}), no inverse"
    elif not is_finite:
        reason = "Contains NaN or inf, no inverse"
    elif is_sparse:
        reason = f"Sparse ({density:.2%}), SuperLU"
    else:
        reason = f"Dense ({density:.1%}), LAPACK"

    report = {
        "shape": (m, n),
        "nnz": nnz,
        "density": round(density, 6),
        "is_square": is_square,
        "is_empty": is_empty,
        "is_finite": is_finite,
        "is_sparse": is_sparse,
        "strategy": "sparse" if is_sparse else "dense",
        "reason": reason,
        "ram_dense_mb": round(ram_dense / 1e6, 1),
    }

    if is_sparse:
        report["ram_sparse_mb"] = round(ram_sparse / 1e6, 1)

    return report
