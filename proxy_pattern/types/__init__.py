"""
Shared types for the proxy pattern package.
"""

from .errors import (
    ErrorCode,
    ProxyPatternError,
    ConfigurationError,
    InvalidSubjectError,
)

__all__ = [
    "ErrorCode",
    "ProxyPatternError",
    "ConfigurationError",
    "InvalidSubjectError",
]
