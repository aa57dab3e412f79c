"""Utility functions and helpers.

- security: Secret redaction
- logging: Structured logging with secret sanitization
"""

from slackit.utils.logging import (
    LogFormat,
    LogLevel,
    configure_logging,
    get_logger,
)
from slackit.utils.security import (
    RedactionError,
    SecretRedactor,
    SecurityError,
)

__all__ = [
    # Logging
    "LogFormat",
    "LogLevel",
    "configure_logging",
    "get_logger",
    # Security
    "RedactionError",
    "SecretRedactor",
    "SecurityError",
]
