"""Single-use builder that turns a predicate result into pass or failure."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from fluentcheck.chain import AndConstraint
from fluentcheck.config import DEFAULT_CONFIG, FormatterConfig
from fluentcheck.errors import AssertionFailure, UsageError
from fluentcheck.formatting import normalize_reason, render

logger = logging.getLogger(__name__)

TOwner = TypeVar("TOwner")

FailureHandler = Callable[[str], None]


def raise_failure(message: str) -> None:
    """Default failure handler: propagate the failure to the caller."""
    raise AssertionFailure(message)


class AssertionEvaluator(Generic[TOwner]):
    """Evaluates one expectation on behalf of an assertions object.

    Usage:
        AssertionEvaluator(owner)
            .for_condition(subject > 0)
            .because_of(because, *reason_args)
            .fail_with("Expected positive value{reason}, but found {0}", subject)

    ``for_condition`` and ``because_of`` may be called in any order.
    ``fail_with`` is terminal: the message is only rendered (and Deferred
    arguments only resolved) when the condition is false. The evaluator
    cannot be reused afterwards.
    """

    def __init__(
        self,
        owner: TOwner,
        *,
        context: str | None = None,
        handler: FailureHandler | None = None,
        config: FormatterConfig | None = None,
    ):
        self._owner = owner
        self._context = context
        self._handler = handler or raise_failure
        self._config = config or DEFAULT_CONFIG
        self._condition: bool | None = None
        self._because = ""
        self._reason_args: tuple[Any, ...] = ()
        self._consumed = False

    def for_condition(self, condition: bool) -> "AssertionEvaluator[TOwner]":
        self._condition = bool(condition)
        return self

    def because_of(self, because: str = "", *reason_args: Any) -> "AssertionEvaluator[TOwner]":
        self._because = because or ""
        self._reason_args = reason_args
        return self

    def with_context(self, label: str | None) -> "AssertionEvaluator[TOwner]":
        self._context = label
        return self

    def fail_with(self, template: str, *args: Any) -> AndConstraint[TOwner]:
        if self._consumed:
            raise UsageError("An assertion evaluator can only be used once")
        if self._condition is None:
            raise UsageError("for_condition() must be called before fail_with()")
        self._consumed = True

        logger.debug(f"Evaluated {template!r}: passed={self._condition}")
        if not self._condition:
            reason = normalize_reason(self._because, self._reason_args, self._config)
            message = render(
                template,
                args,
                reason,
                self._context,
                config=self._config,
            )
            logger.info(f"Assertion failed: {message}")
            self._handler(message)

        return AndConstraint(self._owner)
