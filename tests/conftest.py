"""
Shared fixtures for the message renderer tests.
"""

import sys

import pytest
from loguru import logger


@pytest.fixture
def restore_logger_sinks():
    """Reset loguru to a single stderr sink after a test reconfigures it."""
    yield
    logger.remove()
    logger.add(sys.__stderr__, level="DEBUG")
