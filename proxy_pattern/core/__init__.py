"""
Core components of the proxy pattern demonstration.
"""

from .config import Config
from .subject import Subject, RealSubject, Proxy
from .client import Client

__all__ = ["Config", "Subject", "RealSubject", "Proxy", "Client"]
