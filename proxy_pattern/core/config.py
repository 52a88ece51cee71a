"""
Configuration module for the proxy pattern demonstration.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

from dataclasses import dataclass
import logging
import os

from ..types.errors import ConfigurationError


PACKAGE_LOGGER = "proxy_pattern"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Config:
    """Runtime settings for the demo driver"""
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self):
        self.log_level = self.log_level.strip().upper()

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        return cls(
            log_level=os.getenv("PROXY_PATTERN_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("PROXY_PATTERN_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )

    def validate(self) -> bool:
        """Validate the configuration"""
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"unknown log level: {self.log_level}",
                config_key="log_level",
                config_value=self.log_level,
            )
        if not self.log_format:
            raise ConfigurationError("log_format is required", config_key="log_format")
        return True

    def configure_logging(self) -> None:
        """Apply the logging settings to the package logger"""
        self.validate()
        level = getattr(logging, self.log_level)
        # basicConfig is a no-op once the root logger has handlers
        logging.basicConfig(level=level, format=self.log_format)
        logging.getLogger(PACKAGE_LOGGER).setLevel(level)
