"""Pytest configuration and fixtures."""

import logging

import pytest

from fluentcheck import SoftAssertions


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from fluentcheck loggers after each test.

    The loggers themselves stay registered because the library's modules hold
    references to them.
    """
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("fluentcheck")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def soft() -> SoftAssertions:
    """A soft-assertion scope used without ``with`` so failures stay inspectable."""
    return SoftAssertions()
