"""Test configuration and fixtures for gsm_arfcn tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def disable_logging():
    """Disable logging messages during tests."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)
