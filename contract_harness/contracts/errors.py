"""Exceptions raised while executing and checking a contract case."""

from typing import Any


class HarnessError(Exception):
    """Base exception for contract harness operations."""
    pass


class NetworkError(HarnessError):
    """Transport-level failure (connection refused, timeout)."""
    pass


class MalformedResponse(HarnessError):
    """Response body is not valid JSON or lacks an expected field."""
    pass


class AssertionFailure(HarnessError, AssertionError):
    """Decoded response does not match the expected contract.

    Subclasses ``AssertionError`` so pytest reports it as a test failure
    rather than an error.
    """

    def __init__(self, path: str, expected: Any, actual: Any):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"{path}: expected {expected}, got {actual!r}")
