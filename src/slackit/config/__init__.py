"""Configuration resolution and validation."""

from .resolver import (
    TOKEN_ENV_VAR,
    format_message,
    resolve_message,
    resolve_request,
    resolve_target,
    resolve_token,
)
from .schema import CliOptions, SlackitSettings

__all__ = [
    # Schema
    "CliOptions",
    "SlackitSettings",
    # Resolver
    "TOKEN_ENV_VAR",
    "format_message",
    "resolve_message",
    "resolve_request",
    "resolve_target",
    "resolve_token",
]
