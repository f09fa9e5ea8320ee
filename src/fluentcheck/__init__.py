"""Fluent, readable assertions for numeric values."""

from __future__ import annotations

from typing import Any

from fluentcheck.chain import AndConstraint
from fluentcheck.config import FormatterConfig, load_config
from fluentcheck.errors import (
    AssertionFailure,
    ConstructionError,
    FluentCheckError,
    TemplateError,
    UsageError,
)
from fluentcheck.evaluator import AssertionEvaluator
from fluentcheck.formatting import defer, format_value, normalize_reason, render
from fluentcheck.numeric import NumericAssertions
from fluentcheck.scope import FailureRecord, SoftAssertions


def should(
    value: Any, context: str | None = None, *, config: FormatterConfig | None = None
) -> NumericAssertions:
    """Start a chain of assertions about ``value``."""
    return NumericAssertions(value, context=context, config=config)


__all__ = [
    "AndConstraint",
    "AssertionEvaluator",
    "AssertionFailure",
    "ConstructionError",
    "FailureRecord",
    "FluentCheckError",
    "FormatterConfig",
    "NumericAssertions",
    "SoftAssertions",
    "TemplateError",
    "UsageError",
    "defer",
    "format_value",
    "load_config",
    "normalize_reason",
    "render",
    "should",
]
