"""Pytest configuration for resolution strategy tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture debug output from the package in every test."""
    caplog.set_level(logging.DEBUG, logger="resolution_strategy")
