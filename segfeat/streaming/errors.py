from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a window engine is constructed with invalid parameters."""


class DimensionMismatchError(ValueError):
    """Raised when a sample does not have the configured number of channels."""

    def __init__(self, expected: int, actual: int):
        self.expected = int(expected)
        self.actual = int(actual)
        super().__init__(f"sample of wrong size ({self.actual} != {self.expected})")
