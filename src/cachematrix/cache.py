"""
cache_solve: inverse lookup-or-compute for a CacheMatrix.

The first call on a cell computes the inverse of its matrix and stores it
in the cell. Later calls return the stored inverse without touching the
solver, until ``set_value`` replaces the matrix.

Usage:
    cell = cachematrix.make_cache_matrix(A)
    A_inv = cachematrix.cache_solve(cell)
"""

import logging

from cachematrix.solver import invert

logger = logging.getLogger(__name__)


def cache_solve(x, *args, **kwargs):
    """
    Return the inverse of a CacheMatrix's matrix, computing it only once.

    Parameters
    ----------
    x : CacheMatrix
        Cell whose matrix should be inverted.
    *args, **kwargs
        Forwarded to ``invert`` on a cache miss (right-hand side ``b``,
        ``verbose``, backend options). Ignored when the inverse is cached.

    Returns
    -------
    numpy.ndarray or scipy.sparse matrix
        The cached or freshly computed inverse.

    Raises
    ------
    NonInvertibleMatrixError
        If the matrix cannot be inverted. Nothing is cached in that case.
    """
    inv = x.get_cached_inverse()
    if inv is not None:
        logger.info("Getting cached inverse")
        return inv

    y = x.get_value()
    inv = invert(y, *args, **kwargs)

    x.set_cached_inverse(inv)
    return inv
