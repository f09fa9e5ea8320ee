"""Fluent assertions over a single numeric subject."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Sequence

import numpy as np

from fluentcheck.chain import AndConstraint
from fluentcheck.comparator import Ordering, compare, equals, is_member
from fluentcheck.config import FormatterConfig
from fluentcheck.errors import ConstructionError, UsageError
from fluentcheck.evaluator import AssertionEvaluator, FailureHandler

_AT_LEAST = (Ordering.EQUAL, Ordering.GREATER)
_AT_MOST = (Ordering.LESS, Ordering.EQUAL)
_NOT_CANDIDATE_SEQUENCES = (str, bytes, bytearray)


def _is_candidate_sequence(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, _NOT_CANDIDATE_SEQUENCES)


def _validate_subject(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, np.ndarray):
        raise ConstructionError(
            f"Cannot assert on a numpy array of shape {value.shape}; "
            "numeric assertions only support scalar values"
        )
    if isinstance(value, (numbers.Real, Decimal)):
        return value
    raise ConstructionError(
        f"Numeric assertions only support ordered numbers, got {type(value).__name__}: {value!r}"
    )


class NumericAssertions:
    """Assertions about a number that may be absent (``None``).

    Every assertion accepts an optional ``because`` phrase, with positional
    ``reason_args`` substituted into it, explaining why the expectation
    matters. The phrase gets "because" prepended if it does not start with
    it already.

    Ordering assertions (positive, negative, less/greater, range) raise
    UsageError when the subject is absent; ``be`` and ``not_be`` treat two
    absent values as equal.
    """

    def __init__(
        self,
        value: Any,
        *,
        context: str | None = None,
        handler: FailureHandler | None = None,
        config: FormatterConfig | None = None,
    ):
        self._subject = _validate_subject(value)
        self._context = context
        self._handler = handler
        self._config = config

    @property
    def subject(self) -> Any:
        return self._subject

    def __repr__(self) -> str:
        return f"NumericAssertions({self._subject!r})"

    def _execute(self) -> AssertionEvaluator[NumericAssertions]:
        return AssertionEvaluator(
            self, context=self._context, handler=self._handler, config=self._config
        )

    def _require_subject(self, operation: str) -> Any:
        if self._subject is None:
            raise UsageError(
                f"Cannot evaluate {operation}() because the subject is <null>; "
                "assert be(None) or not_be(None) instead"
            )
        return self._subject

    # --- equality ---

    def be(
        self, expected: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        """Assert that the subject equals ``expected`` (which may be None)."""
        return (
            self._execute()
            .for_condition(equals(self._subject, expected))
            .because_of(because, *reason_args)
            .fail_with(
                "Expected {context:value} to be {0}{reason}, but found {1}.",
                expected,
                self._subject,
            )
        )

    def not_be(
        self, unexpected: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        """Assert that the subject differs from ``unexpected`` (which may be None)."""
        return (
            self._execute()
            .for_condition(not equals(self._subject, unexpected))
            .because_of(because, *reason_args)
            .fail_with("Did not expect {context:value} to be {0}{reason}.", unexpected)
        )

    # --- sign ---

    def be_positive(
        self, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        subject = self._require_subject("be_positive")
        return (
            self._execute()
            .for_condition(compare(subject, 0) is Ordering.GREATER)
            .because_of(because, *reason_args)
            .fail_with("Expected positive value{reason}, but found {0}", subject)
        )

    def be_negative(
        self, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        subject = self._require_subject("be_negative")
        return (
            self._execute()
            .for_condition(compare(subject, 0) is Ordering.LESS)
            .because_of(because, *reason_args)
            .fail_with("Expected negative value{reason}, but found {0}", subject)
        )

    # --- ordering ---

    def be_less_than(
        self, expected: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        subject = self._require_subject("be_less_than")
        return (
            self._execute()
            .for_condition(compare(subject, expected) is Ordering.LESS)
            .because_of(because, *reason_args)
            .fail_with(
                "Expected a value less than {0}{reason}, but found {1}.",
                expected,
                subject,
            )
        )

    def be_less_or_equal_to(
        self, expected: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        subject = self._require_subject("be_less_or_equal_to")
        return (
            self._execute()
            .for_condition(compare(subject, expected) in _AT_MOST)
            .because_of(because, *reason_args)
            .fail_with(
                "Expected a value less or equal to {0}{reason}, but found {1}.",
                expected,
                subject,
            )
        )

    def be_greater_than(
        self, expected: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        subject = self._require_subject("be_greater_than")
        return (
            self._execute()
            .for_condition(compare(subject, expected) is Ordering.GREATER)
            .because_of(because, *reason_args)
            .fail_with(
                "Expected a value greater than {0}{reason}, but found {1}.",
                expected,
                subject,
            )
        )

    def be_greater_or_equal_to(
        self, expected: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        subject = self._require_subject("be_greater_or_equal_to")
        return (
            self._execute()
            .for_condition(compare(subject, expected) in _AT_LEAST)
            .because_of(because, *reason_args)
            .fail_with(
                "Expected a value greater or equal to {0}{reason}, but found {1}.",
                expected,
                subject,
            )
        )

    def be_in_range(
        self, minimum: Any, maximum: Any, because: str = "", *reason_args: Any
    ) -> AndConstraint[NumericAssertions]:
        """Assert that minimum <= subject <= maximum.

        Reversed bounds are not an error; the assertion simply cannot pass.
        """
        subject = self._require_subject("be_in_range")
        against_minimum = compare(subject, minimum)
        against_maximum = compare(subject, maximum)
        in_range = against_minimum in _AT_LEAST and against_maximum in _AT_MOST
        return (
            self._execute()
            .for_condition(in_range)
            .because_of(because, *reason_args)
            .fail_with(
                "Expected value to be between {0} and {1}{reason}, but found {2}.",
                minimum,
                maximum,
                subject,
            )
        )

    # --- membership ---

    def be_one_of(
        self,
        *valid_values: Any,
        because: str = "",
        reason_args: Sequence[Any] = (),
    ) -> AndConstraint[NumericAssertions]:
        """Assert that the subject equals one of ``valid_values``.

        Accepts either the candidates as separate arguments or a single
        iterable of candidates (list, set, array, generator, ...). An empty
        candidate set never passes.
        """
        if len(valid_values) == 1 and _is_candidate_sequence(valid_values[0]):
            candidates = valid_values[0]
            if isinstance(candidates, np.ndarray):
                candidates = candidates.ravel().tolist()
            # Materialized once; the message lists the same candidates
            valid_values = tuple(candidates)

        return (
            self._execute()
            .for_condition(is_member(self._subject, valid_values))
            .because_of(because, *reason_args)
            .fail_with(
                "Expected value to be one of {0}{reason}, but found {1}.",
                list(valid_values),
                self._subject,
            )
        )
