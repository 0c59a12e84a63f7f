"""Titanic API integration-test harness."""

__version__ = "1.0.0"
