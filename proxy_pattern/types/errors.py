"""
Error types and error codes for the proxy pattern package.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Error codes used across the package."""
    INVALID_SUBJECT = "invalid_subject"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
INVALID_SUBJECT = ErrorCode.INVALID_SUBJECT
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class ProxyPatternError(Exception):
    """Base exception for all package errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ConfigurationError(ProxyPatternError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value

        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)


class InvalidSubjectError(ProxyPatternError):
    """Raised when a proxy is handed an object that is not a Subject."""

    def __init__(
        self,
        message: str,
        subject_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, INVALID_SUBJECT, details)
        self.subject_type = subject_type

        if subject_type:
            self.details['subject_type'] = subject_type
