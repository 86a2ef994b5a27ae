# src/scivec/linalg/vectors.py
"""
Elementwise vector arithmetic and reductions over plain Python sequences.

Every function is generic over the element type: anything supporting the
operators it uses works (``int``, ``float``, ``Fraction``, ``Decimal``, numpy
scalars). Binary operations pair elements with :func:`zip`, so the result is as
long as the *shorter* input; a length mismatch is logged at DEBUG level and is
not an error.
"""

from __future__ import annotations

import math
from typing import Callable, Iterator, Optional, Sequence, Tuple

from .._typing import SupportsSqrt, T, Vector, VectorLike
from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = [
	"add", "subtract", "reduce", "vector_sum", "scalar_multiply", "vector_mean",
	"dot", "sum_of_squares", "magnitude", "distance",
]

Combine = Callable[[VectorLike, VectorLike], Vector]


def _pairs(v: VectorLike, w: VectorLike, op: str) -> Iterator[Tuple[T, T]]:
	if len(v) != len(w):
		LOG.debug("%s: length mismatch %d vs %d, truncating to %d", op, len(v), len(w), min(len(v), len(w)))
	return zip(v, w)


def _sqrt(x):
	if isinstance(x, SupportsSqrt):
		return x.sqrt()
	return math.sqrt(x)


def add(v: VectorLike, w: VectorLike) -> Vector:
	"""Elementwise ``v + w``."""
	return [a + b for a, b in _pairs(v, w, "add")]


def subtract(v: VectorLike, w: VectorLike) -> Vector:
	"""Elementwise ``v - w``."""
	return [a - b for a, b in _pairs(v, w, "subtract")]


def reduce(vectors: Sequence[VectorLike], combine: Combine) -> Optional[Vector]:
	"""
	Left-fold ``vectors`` with a binary ``combine`` function.

	:param vectors: Vectors to fold, in order.
	:param combine: Function of two vectors returning a new vector.
	:return: ``None`` for no vectors, a copy of the only vector for one,
	         otherwise ``combine(...combine(combine(v0, v1), v2)..., vn)``.
	"""
	if len(vectors) == 0:
		return None
	if len(vectors) == 1:
		return list(vectors[0])

	acc = combine(vectors[0], vectors[1])
	for v in vectors[2:]:
		acc = combine(acc, v)
	return acc


def vector_sum(vectors: Sequence[VectorLike]) -> Optional[Vector]:
	"""Elementwise sum of all ``vectors``; ``None`` when there are none."""
	return reduce(vectors, add)


def scalar_multiply(c: T, v: VectorLike) -> Vector:
	"""Multiply every element of ``v`` by ``c``."""
	return [x * c for x in v]


def vector_mean(vectors: Sequence[VectorLike]) -> Optional[Vector]:
	"""
	Vector whose i-th element is the mean of the i-th elements of ``vectors``.

	The result is always computed in double precision (``sum * (1 / n)``), so
	elements must be float-compatible.

	:param vectors: Equally shaped vectors.
	:return: The mean vector, or ``None`` when ``vectors`` is empty.
	"""
	total = vector_sum(vectors)
	if total is None:
		return None
	return scalar_multiply(1.0 / float(len(vectors)), total)


def dot(v: VectorLike, w: VectorLike) -> T:
	"""Sum of elementwise products; ``0`` for empty input."""
	return sum((a * b for a, b in _pairs(v, w, "dot")), 0)


def sum_of_squares(v: VectorLike) -> T:
	return dot(v, v)


def magnitude(v: VectorLike):
	"""
	Euclidean length of ``v``.

	Uses the element's own ``sqrt()`` where it has one (``Decimal``), otherwise
	:func:`math.sqrt`, which returns a float.
	"""
	return _sqrt(sum_of_squares(v))


def distance(v: VectorLike, w: VectorLike):
	"""Euclidean distance between ``v`` and ``w``."""
	return magnitude(subtract(v, w))
