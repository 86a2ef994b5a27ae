# src/scivec/stats/central.py

from __future__ import annotations

import numbers
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional

from .._typing import T
from ..logutil import get_logger

LOG = get_logger(__name__)

__all__ = ["mean", "median"]


def _as_type_of(like: Any, count: int) -> Optional[Any]:
	"""Convert ``count`` into the numeric type of ``like``; ``None`` if impossible."""
	try:
		return type(like)(count)
	except (TypeError, ValueError, ArithmeticError) as exc:
		LOG.debug("cannot convert count %d to %s: %s", count, type(like).__name__, exc)
		return None


def _divide(total: T, count: T) -> T:
	# integral types truncate toward zero: 6 / 4 -> 1, -3 / 2 -> -1
	if isinstance(total, numbers.Integral) and isinstance(count, numbers.Integral):
		q = abs(total) // abs(count)
		return q if (total < 0) == (count < 0) else -q
	return total / count


def mean(values: Iterable[T]) -> Optional[T]:
	"""
	Arithmetic mean in the numeric type of the data.

	Integer data uses division truncated toward zero
	(``mean([0, 1, 2, 3]) == 1``, ``mean([-1, -2]) == -1``); floats,
	``Fraction`` and ``Decimal`` use true division. When the count is zero in
	the value type, which is the case for empty input, the plain sum is returned
	(``mean([]) == 0``).

	:param values: Numbers to average.
	:return: The mean, or ``None`` when the count cannot be represented in the
	         type of the sum.
	"""
	data = list(values)
	total = sum(data, 0)
	count = _as_type_of(total, len(data))
	if count is None:
		return None
	if count == 0:
		return total
	return _divide(total, count)


def median(values: Iterable[T], *, in_place: bool = True) -> Optional[T]:
	"""
	Middle value of the data, or the mean of the two middle values.

	A ``list`` is sorted in place unless ``in_place`` is False; any other
	iterable is copied first. If any comparison made while sorting is undefined
	(a NaN is involved), the result is ``None`` and the order left behind in the
	list is unspecified.

	:param values: Numbers to take the median of.
	:param in_place: Sort a list argument in place (default) instead of a copy.
	:return: The median, or ``None`` for empty input or NaN-contaminated data.

	>>> median([1.0, 2.0, 666.0])
	2.0
	>>> median([1.0, float("nan"), 666.0]) is None
	True
	"""
	buf: List[T] = values if in_place and isinstance(values, list) else list(values)
	n = len(buf)
	if n == 0:
		return None

	found_nan = False

	def compare(a: T, b: T) -> int:
		nonlocal found_nan
		if a < b:
			return -1
		if b < a:
			return 1
		if a == b:
			return 0
		found_nan = True
		return 0

	buf.sort(key=cmp_to_key(compare))
	if found_nan:
		LOG.debug("median(): unordered values (NaN) found while sorting %d values", n)
		return None

	mid = n // 2
	if n % 2 == 1:
		return buf[mid]
	pair = buf[mid] + buf[mid - 1]
	return _divide(pair, type(pair)(2))
