"""Tests for soft assertion scopes."""

import pytest

from fluentcheck import SoftAssertions
from fluentcheck.config import FormatterConfig
from fluentcheck.errors import AssertionFailure, UsageError
from fluentcheck.scope import FailureRecord


def test_failures_are_collected_not_raised(soft):
    soft.should(5).be(6)
    soft.should(-1).be_positive()
    assert [f.message for f in soft.failures] == [
        "Expected value to be 6, but found 5.",
        "Expected positive value, but found -1",
    ]


def test_chain_continues_after_collected_failure(soft):
    soft.should(5).be(6).and_.be_positive().and_.be_greater_than(10)
    assert len(soft.failures) == 2


def test_failure_records_call_site(soft):
    soft.should(1).be(2)
    record = soft.failures[0]
    assert isinstance(record, FailureRecord)
    assert record.location is not None
    assert "test_scope.py:" in record.location


def test_failures_property_is_a_copy(soft):
    soft.should(1).be(2)
    failures = soft.failures
    soft.should(1).be(3)
    assert len(failures) == 1
    assert len(soft.failures) == 2


def test_exit_raises_aggregated_failure():
    with pytest.raises(AssertionFailure) as exc_info:
        with SoftAssertions() as scope:
            scope.should(5, "total").be(6)
            scope.should(11).be_in_range(1, 10)
    assert exc_info.value.message.splitlines() == [
        "2 failure(s) in soft assertions:",
        "Expected total to be 6, but found 5.",
        "Expected value to be between 1 and 10, but found 11.",
    ]


def test_exit_without_failures_does_not_raise():
    with SoftAssertions() as scope:
        scope.should(5).be(5).and_.be_positive()
    assert scope.failures == ()


def test_in_flight_exception_is_not_replaced():
    with pytest.raises(ValueError, match="boom"):
        with SoftAssertions() as scope:
            scope.should(5).be(6)
            raise ValueError("boom")


def test_usage_errors_are_raised_immediately():
    with pytest.raises(UsageError):
        with SoftAssertions() as scope:
            scope.should(None).be_positive()


def test_assert_all_explicitly(soft):
    soft.assert_all()
    soft.should(1).be_negative()
    with pytest.raises(AssertionFailure, match="1 failure"):
        soft.assert_all()


def test_scope_config_and_name():
    scope = SoftAssertions(config=FormatterConfig(null_literal="None"), name="checkout")
    scope.should(None).be(1)
    with pytest.raises(AssertionFailure) as exc_info:
        scope.assert_all()
    assert exc_info.value.message.splitlines() == [
        "1 failure(s) in checkout:",
        "Expected value to be 1, but found None.",
    ]


def test_failure_record_to_dict():
    record = FailureRecord(message="m", location="a.py:1")
    assert record.to_dict() == {"message": "m", "location": "a.py:1"}
