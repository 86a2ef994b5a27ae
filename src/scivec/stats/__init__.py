# src/scivec/stats/__init__.py
"""
Descriptive statistics over plain numeric sequences.
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	# functions
	"mean", "median",
	# class
	"Sample",
]


def __getattr__(name: str):
	mod_of = {
		"mean": "scivec.stats.central",
		"median": "scivec.stats.central",
		"Sample": "scivec.stats.sample",
	}
	if name in mod_of:
		mod = import_module(mod_of[name])
		return getattr(mod, name)
	raise AttributeError(f"module 'scivec.stats' has no attribute {name!r}")


if TYPE_CHECKING:
	from .central import mean, median
	from .sample import Sample
