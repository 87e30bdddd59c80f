"""Test configuration and fixtures."""

import os

import logfire

# Settings read the environment lazily; pin the test profile before any are built
os.environ.setdefault("ENVIRONMENT", "test")


def pytest_configure(config):
    """Keep Logfire local and quiet for the test run."""
    logfire.configure(send_to_logfire=False, console=False)
