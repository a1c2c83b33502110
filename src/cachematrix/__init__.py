"""
cachematrix - Cached matrix inversion
=====================================

Keeps a matrix together with its inverse so the inverse is computed once
and reused until the matrix changes.

Quick start:
    import numpy as np
    import cachematrix

    m = np.array([[1, 2, 3], [4, 0, 2], [5, 8, 5]], dtype=float)
    cell = cachematrix.make_cache_matrix(m)
    m_inv = cachematrix.cache_solve(cell)    # compute and cache
    m_inv2 = cachematrix.cache_solve(cell)   # cached, no recomputation

    cell.set_value(np.eye(3))                # drops the cached inverse

    # Structure report and one-off inversion
    report = cachematrix.detect_matrix(m)
    m_inv = cachematrix.invert(m)

License: MIT
"""

__version__ = "0.1.0"

from cachematrix.exceptions import NonInvertibleMatrixError
from cachematrix.detector import detect_matrix
from cachematrix.solver import invert
from cachematrix.cell import CacheMatrix, make_cache_matrix
from cachematrix.cache import cache_solve

__all__ = [
    "CacheMatrix", "make_cache_matrix", "cache_solve",
    "invert", "detect_matrix", "NonInvertibleMatrixError",
]
