"""
Custom exception classes for the objectwriter package.

Every failure the package raises on purpose derives from
ObjectWriterException, so callers that run a write plan can catch one type.
"""

from typing import Optional


class ObjectWriterException(Exception):
    """Base exception class for all objectwriter exceptions."""

    pass


class IOFailure(ObjectWriterException):
    """
    Raised when a file cannot be opened, written, read or closed.

    Wraps the underlying OSError (available as ``__cause__``) and keeps the
    path that was being accessed.

    Example:
        >>> raise IOFailure("1-integers.obj", "Permission denied")
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if path else reason)


class EncodingError(ObjectWriterException):
    """Raised when a value cannot be encoded in the binary object format."""

    pass


class DecodingError(ObjectWriterException):
    """
    Raised when a byte stream is not a valid object stream.

    Args:
        reason: What was wrong with the stream.
        offset: Byte offset at which the problem was detected, if known.
    """

    def __init__(self, reason: str, offset: Optional[int] = None):
        self.reason = reason
        self.offset = offset
        message = reason
        if offset is not None:
            message += f" (at byte {offset})"
        super().__init__(message)


class ConfigError(ObjectWriterException):
    """Raised when a generator configuration file cannot be loaded."""

    pass
