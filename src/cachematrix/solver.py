"""
Inverse solver: auto-routing matrix inversion.

Detects matrix structure and routes to the matching backend:
  - Square dense  -> scipy.linalg.inv (LAPACK getrf/getri)
  - Square dense with right-hand side -> scipy.linalg.solve
  - Square sparse -> scipy.sparse.linalg.spsolve (SuperLU) against the
    identity, or against the given right-hand side

Every way a matrix can fail to have an inverse (rectangular, empty,
singular) comes out as NonInvertibleMatrixError.

Usage:
    import cachematrix
    A_inv = cachematrix.invert(A)
    x = cachematrix.invert(A, b)   # A^-1 b without forming A^-1
"""

import logging
import time
import warnings

import numpy as np
from scipy import linalg, sparse
from scipy.sparse.linalg import spsolve, MatrixRankWarning

from cachematrix.detector import detect_matrix
from cachematrix.exceptions import NonInvertibleMatrixError

logger = logging.getLogger(__name__)


def _invert_dense(A, b, **options):
    A_arr = np.asarray(A)
    # Promote integer input to float, keep complex as complex
    A_arr = A_arr.astype(np.result_type(A_arr.dtype, float), copy=False)
    try:
        if b is None:
            return linalg.inv(A_arr, **options)
        return linalg.solve(A_arr, b, **options)
    except linalg.LinAlgError as exc:
        raise NonInvertibleMatrixError(
            f"Matrix is singular: {exc}", shape=A_arr.shape
        ) from exc


def _invert_sparse(A, b, **options):
    A_csc = A.tocsc()
    n = A_csc.shape[0]
    rhs = b if b is not None else sparse.identity(n, dtype=float, format="csc")

    # SuperLU reports exact singularity as a warning plus a NaN-filled result
    with warnings.catch_warnings():
        warnings.simplefilter("error", MatrixRankWarning)
        try:
            result = spsolve(A_csc, rhs, **options)
        except (MatrixRankWarning, RuntimeError) as exc:
            raise NonInvertibleMatrixError(
                f"Matrix is singular: {exc}", shape=A_csc.shape
            ) from exc

    # spsolve reads a 1 x 1 identity as a vector right-hand side
    if b is None and not sparse.issparse(result):
        result = sparse.csc_matrix(np.reshape(result, (n, n)))

    values = result.data if sparse.issparse(result) else np.asarray(result)
    if not np.all(np.isfinite(values)):
        raise NonInvertibleMatrixError(
            "Matrix is singular: factorization produced non-finite values",
            shape=A_csc.shape,
        )
    return result


def invert(A, b=None, verbose=False, **options):
    """
    Compute the inverse of A, or A^-1 b when a right-hand side is given.

    Parameters
    ----------
    A : array_like or scipy.sparse matrix
        Square, non-singular matrix.
    b : array_like or scipy.sparse matrix, optional
        Right-hand side. When given the result is the solution x of
        ``A x = b`` rather than the full inverse.
    verbose : bool
        Print shape, strategy and timing info.
    **options
        Forwarded to the backend routine (``check_finite``, ``overwrite_a``,
        ``assume_a`` for dense input; ``permc_spec`` for sparse input).

    Returns
    -------
    numpy.ndarray or scipy.sparse matrix
        The inverse (same shape as A) or the solution of ``A x = b``.
        Sparse input without ``b`` gives a sparse inverse.

    Raises
    ------
    NonInvertibleMatrixError
        If A is not 2-D, empty, rectangular, non-finite, or singular.
    """
    report = detect_matrix(A)
    m, n = report["shape"]

    if report["is_empty"] or not report["is_square"] or not report["is_finite"]:
        raise NonInvertibleMatrixError(
            f"Cannot invert {m} x {n} matrix: {report['reason']}",
            shape=(m, n),
        )

    strategy = report["strategy"] + ("_inv" if b is None else "_solve")

    if verbose:
        print(f"  [cachematrix] {m:,} x {n:,}, "
              f"density={report['density']:.4%}, strategy={strategy}")

    t0 = time.time()
    if report["is_sparse"]:
        result = _invert_sparse(A, b, **options)
    else:
        result = _invert_dense(A, b, **options)
    elapsed = time.time() - t0

    logger.debug("Inverted %d x %d matrix via %s in %.4fs", m, n, strategy, elapsed)
    if verbose:
        print(f"  [cachematrix] done [{elapsed:.3f}s]")

    return result
