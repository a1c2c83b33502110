"""
CacheMatrix: a matrix slot that remembers its inverse.

The cell holds one matrix and, once computed, its inverse. Replacing the
matrix drops the inverse in the same call, so a cached inverse always
belongs to the current matrix.

Example:
    from cachematrix import make_cache_matrix, cache_solve

    m = np.array([[1, 2, 3], [4, 0, 2], [5, 8, 5]], dtype=float)
    cell = make_cache_matrix(m)
    m_inv = cache_solve(cell)    # computed and stored
    m_inv2 = cache_solve(cell)   # returned from the cell
"""

import numpy as np


class CacheMatrix:
    """
    Holder for a matrix and its (cached) inverse.

    The cell does not check shapes or verify inverses; that happens in
    ``cache_solve`` when an inverse is actually needed.

    Parameters
    ----------
    x : array_like or scipy.sparse matrix, optional
        Initial matrix. Defaults to an empty 0 x 0 placeholder.

    Examples
    --------
    >>> cell = CacheMatrix(np.eye(2))
    >>> cell.get_cached_inverse() is None
    True
    >>> cell.set_cached_inverse(np.eye(2))
    >>> cell.has_cached_inverse
    True
    >>> cell.set_value(2 * np.eye(2))
    >>> cell.get_cached_inverse() is None
    True
    """

    def __init__(self, x=None):
        self._value = np.empty((0, 0)) if x is None else x
        self._inverse = None

    def set_value(self, new_matrix):
        """Replace the matrix and forget any cached inverse."""
        self._value = new_matrix
        self._inverse = None

    def get_value(self):
        """Return the current matrix."""
        return self._value

    def set_cached_inverse(self, inverse):
        """Store the inverse of the current matrix. Not re-verified."""
        self._inverse = inverse

    def get_cached_inverse(self):
        """Return the cached inverse, or None if it has not been computed."""
        return self._inverse

    @property
    def has_cached_inverse(self):
        """True once an inverse has been stored for the current matrix."""
        return self._inverse is not None

    @property
    def shape(self):
        """Shape of the current matrix."""
        return np.shape(self._value)

    def __repr__(self):
        state = "cached" if self.has_cached_inverse else "empty"
        return f"CacheMatrix(shape={self.shape}, inverse={state})"


def make_cache_matrix(x=None):
    """
    Create a CacheMatrix holding ``x``.

    Parameters
    ----------
    x : array_like or scipy.sparse matrix, optional
        Initial matrix. Defaults to an empty 0 x 0 placeholder.

    Returns
    -------
    CacheMatrix
    """
    return CacheMatrix(x)
