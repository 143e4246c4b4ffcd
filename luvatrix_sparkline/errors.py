from __future__ import annotations


class SparklineError(Exception):
    """Base class for sparkline rendering failures."""


class InvalidInputError(SparklineError, ValueError):
    """Raised when samples, region size or style violate a precondition."""
