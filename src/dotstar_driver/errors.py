"""
Error types for the DotStar driver.

Provides:
- Error classification (configuration vs transport)
- Specific exception types for each failure mode

Out-of-range LED positions are not errors; the controller ignores them.
"""

from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Classification of error types."""
    CONFIG = "config"        # Bad configuration, raised before the controller exists
    TRANSPORT = "transport"  # Byte sink rejected or truncated a frame


class DotstarError(Exception):
    """Base class for all driver errors."""
    error_type: Optional[ErrorType] = None


class ConfigurationError(DotstarError, ValueError):
    """Invalid configuration (channel order, LED count, config file values)."""
    error_type = ErrorType.CONFIG


class TransportError(DotstarError, OSError):
    """The byte sink failed to accept a full frame.

    Attributes:
        written: Bytes the sink reported as accepted (None if it raised or returned nothing)
        expected: Length of the frame handed to the sink
    """
    error_type = ErrorType.TRANSPORT

    def __init__(self, message: str, written: Optional[int] = None, expected: Optional[int] = None):
        super().__init__(message)
        self.written = written
        self.expected = expected
