"""Absence-aware equality and ordering between a subject and a target."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Protocol, TypeVar

from fluentcheck.errors import UsageError


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


class Ordering(str, Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    # Neither <, > nor == holds, e.g. NaN
    UNORDERED = "unordered"


def compare(subject: T | None, target: T | None) -> Ordering:
    """Order a present subject against a present target.

    Raises UsageError when either side is absent or the two values cannot
    be ordered against each other (e.g. a number and a string or an array).
    """
    if subject is None:
        raise UsageError("Cannot compare an absent (<null>) subject")
    if target is None:
        raise UsageError("Cannot compare against an absent (<null>) value")

    if subject is target:
        return Ordering.EQUAL
    try:
        if subject == target:
            return Ordering.EQUAL
        if subject < target:
            return Ordering.LESS
        if subject > target:
            return Ordering.GREATER
    except (TypeError, ValueError) as e:
        raise UsageError(
            f"Cannot order {type(subject).__name__} against {type(target).__name__}: {e}"
        ) from e
    return Ordering.UNORDERED


def equals(subject: T | None, target: T | None) -> bool:
    if subject is None or target is None:
        return subject is None and target is None
    if subject is target:
        return True
    return compare(subject, target) is Ordering.EQUAL


def is_member(subject: T | None, candidates: Iterable[T | None]) -> bool:
    return any(equals(subject, candidate) for candidate in candidates)
