"""
Proxy Pattern Python Package

A small demonstration of the Proxy design pattern
"""

__version__ = "0.1.0"
__author__ = "Mauricio Fernandez"
__email__ = "mauricio.fernandez@siemens.com"

from .core.config import Config
from .core.subject import Subject, RealSubject, Proxy
from .core.client import Client
from .types.errors import (
    ErrorCode,
    ProxyPatternError,
    ConfigurationError,
    InvalidSubjectError,
)

__all__ = [
    "Config",
    "Subject",
    "RealSubject",
    "Proxy",
    "Client",
    "ErrorCode",
    "ProxyPatternError",
    "ConfigurationError",
    "InvalidSubjectError",
]
