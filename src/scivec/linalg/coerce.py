# src/scivec/linalg/coerce.py

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional, Union

from .._typing import Matrix, Vector
from ..logutil import get_logger
from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore

LOG = get_logger(__name__)

__all__ = ["coerce_vector", "coerce_matrix", "as_float_vector"]

ColumnSelector = Optional[Union[int, str]]


def _from_library(obj: Any, library: str) -> bool:
	return type(obj).__module__.split(".")[0] == library


def _is_ndarray(obj: Any) -> bool:
	return _from_library(obj, "numpy") and isinstance(obj, np.ndarray)


def _is_pandas(obj: Any, kind: str) -> bool:
	return _from_library(obj, "pandas") and isinstance(obj, getattr(pd, kind))


def _to_python(x: Any) -> Any:
	# numpy scalars (np.float64, np.int64, ...) become builtin numbers
	if _from_library(x, "numpy") and hasattr(x, "item"):
		return x.item()
	return x


def _ensure_numeric(values: List[Any]) -> List[Any]:
	"""Raise a user-friendly error if any element is not a number."""
	for i, x in enumerate(values):
		if isinstance(x, bool) or not isinstance(x, numbers.Number):
			raise ValueError(f"Expected numeric data, got {type(x).__name__} at index {i}")
	return values


def _from_ndarray(a: "np.ndarray", ndim: int) -> list:
	if a.ndim != ndim:
		raise ValueError(f"Expected {ndim}D array; got ndim={a.ndim}")
	if a.size and not np.issubdtype(a.dtype, np.number):
		raise ValueError(f"Expected numeric data, got dtype={a.dtype!r}")
	return a.tolist()


def _column_of(df: "pd.DataFrame", column: ColumnSelector) -> "pd.Series":
	if column is None:
		if df.shape[1] != 1:
			raise ValueError(
				f"DataFrame has {df.shape[1]} columns; please specify `column` (name or 0-based index)."
			)
		return df.iloc[:, 0]
	try:
		return df.iloc[:, column] if isinstance(column, int) else df[column]
	except (IndexError, KeyError) as exc:
		LOG.error("Failed to select column %r: %s", column, exc)
		raise ValueError(f"Invalid column selector: {column!r}") from exc


def coerce_vector(data: Any, *, column: ColumnSelector = None) -> Vector:
	"""
	Convert a 1D container into a plain Python list (a Vector).

	Accepts lists, tuples and other sequences, 1D numpy arrays, pandas Series,
	a DataFrame column (``column`` by name or position; optional for single-column
	frames) and mappings (values in insertion order). numpy scalars, inside arrays
	or plain containers, become Python numbers. An empty container gives an empty vector.

	:param data: Input container.
	:param column: Column selector when ``data`` is a DataFrame.
	:return: New list of numbers.
	:raises ValueError: On unsupported types, wrong dimensionality or non-numeric data.
	"""
	if _is_pandas(data, "DataFrame"):
		return coerce_vector(_column_of(data, column).to_numpy())
	if _is_pandas(data, "Series"):
		return coerce_vector(data.to_numpy())
	if _is_ndarray(data):
		return _ensure_numeric(_from_ndarray(data, 1))
	if isinstance(data, Mapping):
		return _ensure_numeric([_to_python(x) for x in data.values()])
	if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
		return _ensure_numeric([_to_python(x) for x in data])
	raise ValueError(f"Unsupported data type: {type(data)}")


def coerce_matrix(data: Any) -> Matrix:
	"""
	Convert a 2D container into a list of row lists (a Matrix).

	Accepts sequences of 1D containers, 2D numpy arrays and DataFrames (rows of
	the frame become rows of the matrix).

	:param data: Input container.
	:return: New rectangular list of lists.
	:raises ValueError: On ragged rows, wrong dimensionality or non-numeric data.
	"""
	if _is_pandas(data, "DataFrame"):
		data = data.to_numpy()
	if _is_ndarray(data):
		rows = _from_ndarray(data, 2)
		for row in rows:
			_ensure_numeric(row)
		return rows
	if not isinstance(data, Sequence) or isinstance(data, (str, bytes, bytearray)):
		raise ValueError(f"Unsupported data type: {type(data)}")

	rows = [coerce_vector(row) for row in data]
	widths = {len(row) for row in rows}
	if len(widths) > 1:
		LOG.error("coerce_matrix() got ragged rows with lengths %s", sorted(widths))
		raise ValueError(f"Matrix rows must share one length, got lengths {sorted(widths)}")
	return rows


def as_float_vector(data: Any, *, column: ColumnSelector = None) -> List[float]:
	"""Coerce ``data`` and convert every element to a double-precision float."""
	return [float(x) for x in coerce_vector(data, column=column)]
