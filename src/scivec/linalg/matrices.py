# src/scivec/linalg/matrices.py
"""
Matrices as sequences of row vectors.

There is no matrix type: a matrix is any sequence of rows, assumed (not
checked) to be rectangular. Out-of-range indices raise :class:`IndexError`
straight from sequence indexing.
"""

from __future__ import annotations

from typing import Callable, Tuple

from .._typing import Matrix, MatrixLike, T, Vector, VectorLike

__all__ = ["shape", "get_row", "get_column", "make_matrix"]


def shape(matrix: MatrixLike) -> Tuple[int, int]:
	"""
	Return ``(rows, cols)``; ``cols`` is the length of the first row.

	>>> shape([[0, 1, 2], [0, 1, 2]])
	(2, 3)
	>>> shape([])
	(0, 0)
	"""
	num_rows = len(matrix)
	num_cols = len(matrix[0]) if num_rows > 0 else 0
	return num_rows, num_cols


def get_row(matrix: MatrixLike, i: int) -> VectorLike:
	"""Return row ``i`` itself (not a copy)."""
	return matrix[i]


def get_column(matrix: MatrixLike, j: int) -> Vector:
	"""Return a new vector holding element ``j`` of every row."""
	return [row[j] for row in matrix]


def make_matrix(num_rows: int, num_cols: int, entry_fn: Callable[[int, int], T]) -> Matrix:
	"""
	Build a ``num_rows x num_cols`` matrix whose ``(r, c)`` entry is ``entry_fn(r, c)``.

	Cells are generated in row-major order.

	:param num_rows: Number of rows (``>= 0``).
	:param num_cols: Number of columns (``>= 0``).
	:param entry_fn: Function of the row and column index.
	:return: New matrix as a list of lists.
	:raises ValueError: If a dimension is negative.
	"""
	if num_rows < 0 or num_cols < 0:
		raise ValueError(f"matrix dimensions must be non-negative, got {num_rows}x{num_cols}")
	return [[entry_fn(r, c) for c in range(num_cols)] for r in range(num_rows)]
