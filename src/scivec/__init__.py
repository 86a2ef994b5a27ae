"""
scivec: small vector, matrix and descriptive-statistics toolkit.

Top-level API keeps imports lazy:

    from scivec import vector_sum, dot, distance
    vector_sum([[1, 2], [3, 4]])      # [4, 6]

    from scivec import shape, make_matrix
    make_matrix(2, 3, lambda r, c: r + c)

    from scivec import mean, median, Sample
    median([1.0, 2.0, 666.0])         # 2.0

    # numpy/pandas interop stays optional
    from scivec import coerce_vector
    coerce_vector(some_series)
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("scivec")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# namespaces
	"linalg", "stats", "config", "imports", "logutil",
	# vectors
	"add", "subtract", "reduce", "vector_sum", "scalar_multiply", "vector_mean",
	"dot", "sum_of_squares", "magnitude", "distance",
	# matrices
	"shape", "get_row", "get_column", "make_matrix",
	# interop
	"coerce_vector", "coerce_matrix", "as_float_vector",
	# statistics
	"mean", "median", "Sample",
	# config / logging
	"Settings", "load_settings", "configure_logging",
]

_NAMESPACES = {"linalg", "stats", "config", "imports", "logutil"}

_LINALG_EXPORTS = {
	"add", "subtract", "reduce", "vector_sum", "scalar_multiply", "vector_mean",
	"dot", "sum_of_squares", "magnitude", "distance",
	"shape", "get_row", "get_column", "make_matrix",
	"coerce_vector", "coerce_matrix", "as_float_vector",
}
_STATS_EXPORTS = {"mean", "median", "Sample"}
_CONFIG_EXPORTS = {"Settings", "load_settings"}


def __getattr__(name: str):
	if name in _NAMESPACES:
		return import_module(f"scivec.{name}")
	if name == "configure_logging":
		return import_module("scivec.logutil").configure_logging
	if name in _LINALG_EXPORTS:
		return getattr(import_module("scivec.linalg"), name)
	if name in _STATS_EXPORTS:
		return getattr(import_module("scivec.stats"), name)
	if name in _CONFIG_EXPORTS:
		return getattr(import_module("scivec.config"), name)

	raise AttributeError(f"module 'scivec' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import linalg, stats, config, imports, logutil  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .linalg import (  # noqa: F401
		add, subtract, reduce, vector_sum, scalar_multiply, vector_mean,
		dot, sum_of_squares, magnitude, distance,
		shape, get_row, get_column, make_matrix,
		coerce_vector, coerce_matrix, as_float_vector,
	)
	from .stats import mean, median, Sample  # noqa: F401
	from .config import Settings, load_settings  # noqa: F401
