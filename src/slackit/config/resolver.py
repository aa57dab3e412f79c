"""Resolve command-line options and process state into a SendRequest.

Resolution runs in a fixed order: token, target, message body, then
formatting. Nothing here touches the network; the only side effects are a
single environment lookup and draining standard input.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import TextIO

import structlog

from ..errors import IoError, MissingTokenError
from ..models.request import Channel, SendRequest, Target, User
from .schema import CliOptions

log = structlog.get_logger()

TOKEN_ENV_VAR = "SLACK_API_TOKEN"

EnvLookup = Callable[[str], str | None]


def resolve_target(channel: str | None, user: str | None) -> Target:
    """
    Map whichever of channel or user is present to its Target variant.

    Args:
        channel: Channel name without the ``#`` sigil
        user: User name without the ``@`` sigil

    Returns:
        Channel or User target

    Raises:
        ValueError: If both or neither are given
    """
    if channel is not None and user is None:
        return Channel(channel)
    if user is not None and channel is None:
        return User(user)
    raise ValueError("Exactly one of channel or user is required")


def resolve_token(cli_token: str | None, env_lookup: EnvLookup = os.environ.get) -> str:
    """
    Return the CLI token, else the value of SLACK_API_TOKEN.

    Empty strings count as absent.

    Raises:
        MissingTokenError: If neither source yields a token
    """
    if cli_token:
        log.debug("token_resolved", source="cli")
        return cli_token

    env_token = env_lookup(TOKEN_ENV_VAR)
    if env_token:
        log.debug("token_resolved", source="env")
        return env_token

    raise MissingTokenError("No token found") from LookupError(
        f"environment variable {TOKEN_ENV_VAR} is not set or empty"
    )


def resolve_message(cli_message: str | None, stdin: TextIO) -> str:
    """
    Concatenate the CLI message with everything on standard input.

    Blocks until *stdin* reaches end-of-stream. No separator is inserted
    and nothing is trimmed; an empty result is allowed.

    Raises:
        IoError: If reading standard input fails
    """
    message = cli_message or ""
    try:
        piped = stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoError("Failed to read standard input") from e

    log.debug("stdin_read", length=len(piped))
    return message + piped


def format_message(raw: str) -> str:
    """Apply Slack markup conventions to outgoing text.

    Currently the identity transform. Link and newline rewriting belong
    here once their rules are decided.
    """
    return raw


def resolve_request(
    options: CliOptions,
    *,
    env_lookup: EnvLookup = os.environ.get,
    stdin: TextIO | None = None,
) -> SendRequest:
    """
    Build the SendRequest for this run.

    Args:
        options: Validated command-line options
        env_lookup: Environment accessor used for the token fallback
        stdin: Text stream to drain (defaults to ``sys.stdin``)

    Returns:
        Immutable request consumed by the dispatcher

    Raises:
        MissingTokenError: If no token is available
        IoError: If standard input cannot be read
    """
    token = resolve_token(options.token, env_lookup)
    target = resolve_target(options.channel, options.user)
    log.debug("resolving_request", target=str(target), sender_name=options.name)

    raw = resolve_message(options.message, stdin if stdin is not None else sys.stdin)

    return SendRequest(
        target=target,
        token=token,
        text=format_message(raw),
        sender_name=options.name,
    )
