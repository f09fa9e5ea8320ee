"""Tests for absence-aware equality and ordering."""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from fluentcheck.comparator import Ordering, compare, equals, is_member
from fluentcheck.errors import UsageError


# --- equals ---


@pytest.mark.parametrize("value", [0, 5, -3.25, Decimal("1.10"), Fraction(1, 3), np.int64(7)])
def test_equals_is_reflexive(value):
    assert equals(value, value) is True


def test_equals_both_absent():
    assert equals(None, None) is True


def test_equals_absent_vs_present_is_never_equal():
    assert equals(None, 0) is False
    assert equals(0, None) is False


def test_equals_across_numeric_kinds():
    assert equals(5, 5.0) is True
    assert equals(Decimal("5"), 5) is True
    assert equals(np.float64(2.5), 2.5) is True
    assert equals(Fraction(1, 2), 0.5) is True


def test_equals_different_values():
    assert equals(5, 6) is False


def test_equals_nan_only_by_identity():
    nan = float("nan")
    assert equals(nan, nan) is True
    assert equals(float("nan"), float("nan")) is False
    assert equals(nan, 1.0) is False


@pytest.mark.parametrize(
    "subject,target",
    [(1, 2), (2, 1), (3, 3), (1.5, 1.5), (Decimal("2"), 2), (-1, 0)],
)
def test_equals_agrees_with_compare(subject, target):
    assert equals(subject, target) == (compare(subject, target) is Ordering.EQUAL)


# --- compare ---


def test_compare_orderings():
    assert compare(1, 2) is Ordering.LESS
    assert compare(2, 1) is Ordering.GREATER
    assert compare(2, 2) is Ordering.EQUAL


def test_compare_nan_is_unordered():
    assert compare(float("nan"), 1.0) is Ordering.UNORDERED
    assert compare(1.0, float("nan")) is Ordering.UNORDERED


def test_compare_absent_subject_raises():
    with pytest.raises(UsageError, match="absent"):
        compare(None, 1)


def test_compare_absent_target_raises():
    with pytest.raises(UsageError, match="absent"):
        compare(1, None)


def test_compare_unorderable_target_raises():
    with pytest.raises(UsageError, match="int against str"):
        compare(1, "1")


def test_compare_array_target_raises():
    with pytest.raises(UsageError, match="ndarray"):
        compare(1, np.array([1, 2]))


def test_equals_unorderable_target_raises():
    with pytest.raises(UsageError):
        equals(5, "5")


# --- is_member ---


def test_is_member_finds_candidate():
    assert is_member(2, [3, 1, 2]) is True


def test_is_member_empty_candidates():
    assert is_member(2, []) is False


def test_is_member_absent_subject():
    assert is_member(None, [1, None]) is True
    assert is_member(None, [1, 2]) is False


def test_is_member_short_circuits():
    seen = []

    def candidates():
        for value in (1, 2, 3):
            seen.append(value)
            yield value

    assert is_member(2, candidates()) is True
    assert seen == [1, 2]
