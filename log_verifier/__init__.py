"""Verify test execution and pass/fail status from raw test-runner logs."""

__version__ = "0.1.0"
