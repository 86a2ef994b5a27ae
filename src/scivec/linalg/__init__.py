# src/scivec/linalg/__init__.py
"""
Vector and matrix building blocks over plain Python sequences.
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	# vectors
	"add", "subtract", "reduce", "vector_sum", "scalar_multiply", "vector_mean",
	"dot", "sum_of_squares", "magnitude", "distance",
	# matrices
	"shape", "get_row", "get_column", "make_matrix",
	# interop
	"coerce_vector", "coerce_matrix", "as_float_vector",
]

_MODULE_OF = {
	"add": "scivec.linalg.vectors",
	"subtract": "scivec.linalg.vectors",
	"reduce": "scivec.linalg.vectors",
	"vector_sum": "scivec.linalg.vectors",
	"scalar_multiply": "scivec.linalg.vectors",
	"vector_mean": "scivec.linalg.vectors",
	"dot": "scivec.linalg.vectors",
	"sum_of_squares": "scivec.linalg.vectors",
	"magnitude": "scivec.linalg.vectors",
	"distance": "scivec.linalg.vectors",
	"shape": "scivec.linalg.matrices",
	"get_row": "scivec.linalg.matrices",
	"get_column": "scivec.linalg.matrices",
	"make_matrix": "scivec.linalg.matrices",
	"coerce_vector": "scivec.linalg.coerce",
	"coerce_matrix": "scivec.linalg.coerce",
	"as_float_vector": "scivec.linalg.coerce",
}


def __getattr__(name: str):
	if name in _MODULE_OF:
		return getattr(import_module(_MODULE_OF[name]), name)
	raise AttributeError(f"module 'scivec.linalg' has no attribute {name!r}")


if TYPE_CHECKING:
	from .vectors import (
		add, subtract, reduce, vector_sum, scalar_multiply, vector_mean,
		dot, sum_of_squares, magnitude, distance,
	)
	from .matrices import shape, get_row, get_column, make_matrix
	from .coerce import coerce_vector, coerce_matrix, as_float_vector
