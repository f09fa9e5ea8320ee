"""Exception types raised by the assertion pipeline."""

from __future__ import annotations


class FluentCheckError(Exception):
    """Base class for every error raised by fluentcheck."""


class AssertionFailure(FluentCheckError, AssertionError):
    """An expectation did not hold.

    This is the only error a test runner should report as a failing test.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(FluentCheckError, RuntimeError):
    """An assertion was called in a way that can never be evaluated."""


class TemplateError(UsageError):
    """A message template is malformed or references a missing argument."""


class ConstructionError(FluentCheckError, TypeError):
    """The subject cannot be treated as an ordered value."""
