from __future__ import annotations

from typing import Generic, TypeVar

TAssertions = TypeVar("TAssertions")


class AndConstraint(Generic[TAssertions]):
    """Returned by a successful assertion so another can follow on the same subject.

    Example:
        should(7).be_positive().and_.be_less_than(10)
    """

    __slots__ = ("_parent",)

    def __init__(self, parent: TAssertions):
        self._parent = parent

    @property
    def and_(self) -> TAssertions:
        return self._parent

    def __repr__(self) -> str:
        return f"AndConstraint({self._parent!r})"
