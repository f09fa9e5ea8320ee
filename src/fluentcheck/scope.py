"""Soft assertions: collect failures instead of stopping at the first one."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any

from fluentcheck.config import FormatterConfig
from fluentcheck.errors import AssertionFailure
from fluentcheck.numeric import NumericAssertions

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class FailureRecord:
    """A failed expectation captured by a SoftAssertions scope.

    Attributes:
        message: The fully rendered failure message.
        location: "path:line" of the call site outside fluentcheck, if known.
    """

    message: str
    location: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _call_site() -> str | None:
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = Path(frame.f_code.co_filename).resolve()
            if _PACKAGE_DIR not in filename.parents:
                return f"{filename}:{frame.f_lineno}"
            frame = frame.f_back
        return None
    finally:
        del frame


class SoftAssertions:
    """Context manager that aggregates failures and reports them on exit.

    Example:
        with SoftAssertions() as soft:
            soft.should(total).be_positive()
            soft.should(count).be_in_range(1, 10)

    Leaving the block raises one AssertionFailure listing every collected
    message in order. If the block is already raising, that exception wins.
    """

    def __init__(self, config: FormatterConfig | None = None, name: str = "soft assertions"):
        self.name = name
        self._config = config
        self._failures: list[FailureRecord] = []

    @property
    def failures(self) -> tuple[FailureRecord, ...]:
        return tuple(self._failures)

    def should(self, value: Any, context: str | None = None) -> NumericAssertions:
        return NumericAssertions(
            value, context=context, handler=self._collect, config=self._config
        )

    def _collect(self, message: str) -> None:
        record = FailureRecord(message=message, location=_call_site())
        logger.debug(f"Collected failure #{len(self._failures) + 1} in {self.name}: {message}")
        self._failures.append(record)

    def assert_all(self) -> None:
        if not self._failures:
            return
        lines = [f"{len(self._failures)} failure(s) in {self.name}:"]
        lines.extend(record.message for record in self._failures)
        raise AssertionFailure("\n".join(lines))

    def __enter__(self) -> "SoftAssertions":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.assert_all()
