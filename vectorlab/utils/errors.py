"""Custom exceptions for vectorlab.

This module defines application-specific errors so callers can tell an
uninitialized buffer, a bad worker count and an out-of-range index apart
without parsing messages.
"""


class VectorLabError(Exception):
    """Base exception for all vectorlab errors."""

    pass


class UninitializedBufferError(VectorLabError):
    """Raised when a read-type operation runs on a buffer that was never filled."""

    pass


class InvalidArgumentError(VectorLabError, ValueError):
    """Raised when an argument is outside its accepted domain."""

    pass


class InvalidWorkerCountError(InvalidArgumentError):
    """Raised when a reduction is requested with fewer than one worker."""

    pass


class IndexOutOfRangeError(VectorLabError, IndexError):
    """Raised when an element index falls outside [0, n)."""

    pass


class SizeMismatchError(VectorLabError, ValueError):
    """Raised when two buffers (or a buffer and a file) disagree on length."""

    pass


class BufferFormatError(VectorLabError, ValueError):
    """Raised when a text vector file cannot be parsed."""

    pass


class ConfigError(VectorLabError):
    """Raised when configuration is invalid or a required config file is missing."""

    pass
