# src/scivec/_typing.py

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, TypeVar, Union, runtime_checkable


class SupportsArithmetic(Protocol):
	"""Numbers closed under ``+``, ``-`` and ``*`` (int, float, Fraction, Decimal, numpy scalars)."""

	def __add__(self, other: Any) -> Any: ...

	def __radd__(self, other: Any) -> Any: ...

	def __sub__(self, other: Any) -> Any: ...

	def __mul__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsSqrt(Protocol):
	"""Numbers carrying their own square root (``decimal.Decimal``)."""

	def sqrt(self) -> Any: ...


T = TypeVar("T", bound=SupportsArithmetic)

Scalar = Union[int, float]
Vector = List[T]
VectorLike = Sequence[T]
Matrix = List[List[T]]
MatrixLike = Sequence[Sequence[T]]

__all__ = ["SupportsArithmetic", "SupportsSqrt", "T", "Scalar", "Vector", "VectorLike", "Matrix", "MatrixLike"]
