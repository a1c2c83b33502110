"""
Errors raised by cachematrix.

Subclasses numpy's LinAlgError so existing ``except LinAlgError`` blocks
still catch failures coming out of the cache layer.
"""

import numpy as np


class NonInvertibleMatrixError(np.linalg.LinAlgError):
    """The matrix is singular, not square, empty, or not 2-D."""

    def __init__(self, message, shape=None):
        super().__init__(message)
        self.shape = shape
