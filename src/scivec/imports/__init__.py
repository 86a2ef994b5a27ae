# src/scivec/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

np = numpy = lazy_module("numpy", install="pip install scivec[array]", reason="numpy array interop")
pd = pandas = lazy_module("pandas", install="pip install scivec[array]", reason="pandas Series/DataFrame interop")

__all__ = ["LazyModule", "lazy_module", "np", "numpy", "pd", "pandas"]
