"""
Cached inversion walkthrough
============================

Inverts a 3 x 3 matrix through a CacheMatrix, shows the second call
coming from the cache, then replaces the matrix and inverts again.

Usage:
  pip install -e .
  python examples/run_cachematrix_demo.py
"""

import logging
import time

import numpy as np

from cachematrix import make_cache_matrix, cache_solve

logging.basicConfig(level=logging.INFO, format="  [%(name)s] %(message)s")

m = np.array([[1, 4, 5], [2, 0, 8], [3, 2, 5]], dtype=float)
cell = make_cache_matrix(m)
print(cell)

# ── First call: computed ──
t0 = time.time()
m_inv = cache_solve(cell, verbose=True)
print(f"Inverse [{time.time() - t0:.4f}s]:")
print(m_inv)
print("Check (m @ m_inv):")
print(np.round(m @ m_inv, 12))

# ── Second call: cached ──
t0 = time.time()
m_inv2 = cache_solve(cell)
print(f"Second call [{time.time() - t0:.4f}s], same object: {m_inv2 is m_inv}")
print(cell)

# ── Replace the matrix ──
cell.set_value(np.array([[2, 0, 1], [1, 3, 2], [1, 1, 3]], dtype=float))
print(cell)
print("New inverse:")
print(cache_solve(cell, verbose=True))
