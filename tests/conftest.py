"""Pytest fixtures for person record tests."""

import logging

import pytest
from user_record.logging_setup import PACKAGE_LOGGER
from user_record.models import SealedUser, new_user


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers and level set by setup_logging after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    for handler in [h for h in logger.handlers if getattr(h, "_user_record", False)]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


@pytest.fixture
def ann():
    """Public record for Ann Lee."""
    return new_user("Ann", "Lee", "2000-01-01")


@pytest.fixture
def sealed_ann():
    """Sealed record for Ann Lee."""
    return SealedUser.create("Ann", "Lee", "2000-01-01")
