"""Top-level lazy exports of :mod:`scivec`."""

from __future__ import annotations

import pytest

import scivec


def test_lazy_reexports_resolve_to_module_functions():
	from scivec.linalg import vectors, matrices
	from scivec.stats import central

	assert scivec.vector_sum is vectors.vector_sum
	assert scivec.make_matrix is matrices.make_matrix
	assert scivec.median is central.median
	assert scivec.linalg.dot is vectors.dot


def test_top_level_workflow():
	m = scivec.make_matrix(2, 3, lambda r, c: float(r + c))
	assert scivec.shape(m) == (2, 3)
	assert scivec.vector_mean(m) == [0.5, 1.5, 2.5]
	assert scivec.distance(scivec.get_row(m, 0), scivec.get_row(m, 1)) == pytest.approx(3 ** 0.5)
	assert scivec.median(scivec.get_column(m, 2)) == 2.5


def test_unknown_attribute_raises():
	with pytest.raises(AttributeError):
		scivec.does_not_exist  # noqa: B018
	assert isinstance(scivec.__version__, str)


def test_imports_proxy_reports_missing_module():
	from scivec.imports import lazy_module

	proxy = lazy_module("scivec_no_such_module", install="pip install nothing", reason="testing")
	assert not proxy.available
	with pytest.raises(ImportError, match="pip install nothing"):
		proxy.anything
