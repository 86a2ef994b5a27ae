# src/scivec/stats/sample.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..linalg.coerce import coerce_vector
from .central import mean, median

__all__ = ["Sample"]


@dataclass
class Sample:
	"""
	Optional thin wrapper for stateful workflows.

	Examples
	--------
	>>> s = Sample([3, 1, 2, 100])
	>>> s.describe()
	{'count': 4, 'sum': 106, 'mean': 26, 'median': 2}
	>>> Sample([1.0, 2.0]).median()
	1.5

	Notes
	-----
	- ``data`` may be anything :func:`~scivec.linalg.coerce.coerce_vector`
	  accepts (sequence, mapping, numpy array, pandas Series); it is copied into
	  a list on construction.
	- ``median()`` sorts the stored values in place when ``in_place`` is true,
	  which changes the order :meth:`values` reports afterwards. The default
	  comes from ``settings.median_in_place`` when settings are given.
	- For stateless usage call :func:`~scivec.stats.central.mean` and
	  :func:`~scivec.stats.central.median` directly.
	"""

	data: Any
	settings: Optional[Any] = None
	_values: List[Any] = field(init=False, repr=False)

	def __post_init__(self) -> None:
		self._values = coerce_vector(self.data)

	def values(self) -> List[Any]:
		"""Return a copy of the stored values in their current order."""
		return list(self._values)

	def count(self) -> int:
		return len(self._values)

	def total(self) -> Any:
		return sum(self._values, 0)

	def mean(self) -> Optional[Any]:
		"""Arithmetic mean (see :func:`~scivec.stats.central.mean`)."""
		return mean(self._values)

	def median(self, *, in_place: Optional[bool] = None) -> Optional[Any]:
		"""Median (see :func:`~scivec.stats.central.median`); ``None`` for empty or NaN data."""
		if in_place is None:
			in_place = self.settings.median_in_place if self.settings is not None else False
		return median(self._values, in_place=in_place)

	def describe(self) -> Dict[str, Any]:
		"""Return count, sum, mean and median of the stored values."""
		return {
			"count": self.count(),
			"sum": self.total(),
			"mean": self.mean(),
			"median": self.median(),
		}
