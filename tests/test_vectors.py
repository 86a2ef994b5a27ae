"""Tests for :mod:`scivec.linalg.vectors`."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from scivec.linalg.vectors import (
	add,
	distance,
	dot,
	magnitude,
	reduce,
	scalar_multiply,
	subtract,
	sum_of_squares,
	vector_mean,
	vector_sum,
)


@pytest.mark.parametrize(
	("v", "w", "expected"),
	[
		([0, 1, 2], [1, 2, 3], [1, 3, 5]),
		([0.0, 2.0, 4.0], [1.0, 2.0, 3.0], [1.0, 4.0, 7.0]),
		([Fraction(1, 2)], [Fraction(1, 3)], [Fraction(5, 6)]),
		([], [], []),
	],
)
def test_add_elementwise(v, w, expected):
	assert add(v, w) == expected


def test_subtract_elementwise_and_via_negated_scale():
	assert subtract([0, 1, 2], [1, 2, 3]) == [-1, -1, -1]
	assert subtract([0.0, 2.0, 4.0], [1.0, 2.0, 3.0]) == [-1.0, 0.0, 1.0]

	v, w = [3, -1, 7], [2, 5, 11]
	assert subtract(v, w) == add(v, scalar_multiply(-1, w))


def test_binary_ops_truncate_to_shorter_vector(caplog):
	caplog.set_level(logging.DEBUG, logger="scivec")
	assert add([1, 2, 3, 4], [10, 20]) == [11, 22]
	assert subtract([1], [1, 2, 3]) == [0]
	assert dot([1, 2, 3], [1, 1]) == 3
	assert "length mismatch 4 vs 2" in caplog.text


def test_inputs_are_not_mutated():
	v, w = [1, 2, 3], [4, 5, 6]
	add(v, w)
	scalar_multiply(2, v)
	assert v == [1, 2, 3]
	assert w == [4, 5, 6]


def test_sum_empty_single_pair_and_truncation():
	assert vector_sum([]) is None
	assert vector_sum([[0, 1, 2]]) == [0, 1, 2]
	assert vector_sum([[1, 2], [3, 4]]) == add([1, 2], [3, 4])
	assert vector_sum([
		[0, 1, 2, 3, 4, 5],
		[1, 2, 3, 4],
		[2, 3, 4, 5, 5],
	]) == [3, 6, 9, 12]


def test_sum_of_single_vector_is_a_copy():
	v = [0, 1, 2]
	out = vector_sum([v])
	assert out == v
	assert out is not v


def test_sum_of_zero_vector_is_not_no_result():
	assert vector_sum([[0, 0]]) == [0, 0]
	assert vector_sum([[0, 0]]) is not None


def test_reduce_folds_left_to_right():
	calls = []

	def combine(a, b):
		calls.append((list(a), list(b)))
		return subtract(a, b)

	assert reduce([[10], [3], [2]], combine) == [5]
	assert calls == [([10], [3]), ([7], [2])]
	assert reduce([], combine) is None


def test_scalar_multiply():
	assert scalar_multiply(3, [0, 1, 2, 3]) == [0, 3, 6, 9]
	assert scalar_multiply(0.5, []) == []


def test_vector_mean():
	vs = [[0.0, 2.0, 4.0], [1.0, 3.0, 8.0]]
	assert vector_sum(vs) == [1.0, 5.0, 12.0]
	assert vector_mean(vs) == [0.5, 2.5, 6.0]
	assert vector_mean([[1, 2]]) == [1.0, 2.0]
	assert vector_mean([]) is None


def test_dot_and_sum_of_squares():
	assert dot([1, 2, 3], [4, 5, 6]) == 32
	assert dot([], []) == 0
	assert sum_of_squares([3, 4]) == 25


def test_magnitude_and_distance():
	assert magnitude([3.0, 4.0]) == 5.0
	assert distance([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 0.0
	assert math.isclose(distance([0.0, 0.0], [1.0, 1.0]), math.sqrt(2.0))


def test_magnitude_uses_decimal_sqrt():
	out = magnitude([Decimal("3"), Decimal("4")])
	assert isinstance(out, Decimal)
	assert out == Decimal("5")
