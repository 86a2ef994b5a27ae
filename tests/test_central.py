"""Tests for :mod:`scivec.stats.central`."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from fractions import Fraction

import pytest

from scivec.stats.central import mean, median

NAN = float("nan")


@pytest.mark.parametrize(
	("values", "expected"),
	[
		([], 0),
		([0, 1, 2, 3], 6 // 4),
		([0.0, 1.0, 2.0, 3.0, 4.0], 10.0 / 5.0),
		([Fraction(1), Fraction(2)], Fraction(3, 2)),
		([Decimal("1"), Decimal("2")], Decimal("1.5")),
		((x for x in (2.0, 4.0)), 3.0),
	],
)
def test_mean(values, expected):
	assert mean(values) == expected


def test_mean_of_integers_keeps_integer_type():
	out = mean([1, 2])
	assert out == 1
	assert isinstance(out, int)


def test_mean_returns_none_when_count_cannot_be_converted(caplog):
	class Money:
		"""Addable number that cannot be built from a count."""

		def __init__(self, cents, currency):
			self.cents = cents
			self.currency = currency

		def __add__(self, other):
			return Money(self.cents + getattr(other, "cents", other), self.currency)

		__radd__ = __add__

	caplog.set_level(logging.DEBUG, logger="scivec")
	assert mean([Money(1, "EUR"), Money(2, "EUR")]) is None
	assert "cannot convert count 2" in caplog.text


def test_median_empty_and_single():
	assert median([]) is None
	assert median([1]) == 1


@pytest.mark.parametrize(
	("values", "expected"),
	[
		([1.0, 2.0], 1.5),
		([1.0, 2.0, 666.0], 2.0),
		([666.0, 1.0, 2.0], 2.0),
		([4, 1, 3, 2], 2),
		([Fraction(1), Fraction(2)], Fraction(3, 2)),
	],
)
def test_median_values(values, expected):
	assert median(values) == expected


@pytest.mark.parametrize(
	"values",
	[
		[1.0, NAN, 666.0],
		[NAN, 1.0, 2.0],
		[5.0, 4.0, 3.0, 2.0, NAN],
		[NAN, NAN],
	],
)
def test_median_with_nan_is_no_result(values):
	assert median(values) is None


def test_median_nan_logged_at_debug(caplog):
	caplog.set_level(logging.DEBUG, logger="scivec")
	assert median([1.0, NAN, 3.0]) is None
	assert "NaN" in caplog.text


def test_median_sorts_list_in_place_by_default():
	data = [3.0, 1.0, 2.0]
	assert median(data) == 2.0
	assert data == [1.0, 2.0, 3.0]


def test_median_can_leave_input_untouched():
	data = [3.0, 1.0, 2.0]
	assert median(data, in_place=False) == 2.0
	assert data == [3.0, 1.0, 2.0]

	frozen = (3, 1, 2)
	assert median(frozen) == 2


def test_median_is_idempotent_on_sorted_copy():
	data = [9.0, -1.0, 4.5, 3.0]
	first = median(list(data))
	ordered = sorted(data)
	assert median(ordered) == first
	assert median(ordered) == first
	assert ordered == sorted(data)


def test_median_infinities_are_ordered():
	assert median([math.inf, -math.inf, 0.0]) == 0.0


@pytest.mark.parametrize(
	("values", "expected"),
	[
		([-1, -2], -1),
		([-7, 0], -3),
		([-6, -6], -6),
		([5, -10], -2),
		([10 ** 30 + 1, 10 ** 30], 10 ** 30),
		([-(10 ** 30) - 1, -(10 ** 30)], -(10 ** 30)),
	],
)
def test_integer_mean_truncates_toward_zero(values, expected):
	out = mean(values)
	assert out == expected
	assert isinstance(out, int)


@pytest.mark.parametrize(
	("values", "expected"),
	[
		([-3, 0], -1),
		([0, -5, -2, 7], -1),
		([-4, -1], -2),
	],
)
def test_integer_median_truncates_toward_zero(values, expected):
	assert median(values) == expected


def test_median_of_bools_divides_by_int_two():
	out = median([True, False])
	assert out == 0
	assert type(out) is int
