"""Custom exception types used across :mod:`airpath`.

Each error also derives from the closest builtin so callers may catch either
the package type or the builtin one.
"""

from __future__ import annotations


class AirpathError(Exception):
    """Base class for all package-specific errors."""


class EmptyHeapError(AirpathError, IndexError):
    """Raised when reading or extracting the minimum of an empty heap."""


class InvalidKeyError(AirpathError, ValueError):
    """Raised when a heap key is NaN or a decrease-key does not decrease."""


class InvalidHandleError(AirpathError, KeyError):
    """Raised when a heap handle is stale or belongs to another heap."""


class GraphFormatError(AirpathError, ValueError):
    """Raised for malformed flight data such as bad lines or negative fares."""


class AlgorithmError(AirpathError, RuntimeError):
    """Raised when a traversal invariant is violated at runtime."""


__all__ = [
    "AirpathError",
    "EmptyHeapError",
    "InvalidKeyError",
    "InvalidHandleError",
    "GraphFormatError",
    "AlgorithmError",
]
