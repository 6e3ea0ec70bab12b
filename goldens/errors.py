"""Exception types raised by the golden comparison layer."""

from __future__ import annotations


class GoldenError(Exception):
    """Base class for environment-level golden comparison faults."""


class ImageDecodeError(GoldenError, ValueError):
    """Raised when encoded image bytes cannot be decoded."""


class ComparatorNotInitializedError(GoldenError, RuntimeError):
    """Raised when an update is requested from a comparator that cannot persist."""


class GoldenFileNotFoundError(GoldenError, FileNotFoundError):
    """Raised when a golden file referenced by a test does not exist."""


class GoldenMismatchError(AssertionError):
    """Raised at the test boundary when an image does not match its golden."""

    def __init__(self, golden: str, result):
        self.golden = golden
        self.result = result
        super().__init__(f"Golden file mismatch for '{golden}': {result.error}")
