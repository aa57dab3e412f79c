"""Error taxonomy and cause-chain rendering.

Every failure that reaches the CLI boundary is a :class:`SlackitError`
carrying an :class:`ErrorKind`. The underlying failure is linked as the
exception's ``__cause__`` (``raise ... from exc``) and exposed as
``source``, so the full chain can be printed as::

    error: Failed to post message to #general
    caused by: The request to the Slack API failed. ...
"""

from __future__ import annotations

import traceback
from collections.abc import Iterator
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Category of a reported failure."""

    MISSING_TOKEN = "missing_token"
    IO = "io"
    SERVICE = "service"


class SlackitError(Exception):
    """Base exception for all slackit errors."""

    kind: ClassVar[ErrorKind]

    @property
    def source(self) -> BaseException | None:
        """The linked underlying exception, if any."""
        return self.__cause__


class MissingTokenError(SlackitError):
    """Raised when no token is given on the command line or in the environment."""

    kind = ErrorKind.MISSING_TOKEN


class IoError(SlackitError):
    """Raised when standard input cannot be read."""

    kind = ErrorKind.IO


class ServiceError(SlackitError):
    """Raised when the Slack API rejects the request or cannot be reached."""

    kind = ErrorKind.SERVICE


def iter_causes(exc: BaseException) -> Iterator[BaseException]:
    """Yield the causes of *exc*, most recent first, excluding *exc* itself.

    Explicit causes (``raise ... from``) are followed first; an implicit
    ``__context__`` is followed only when it was not suppressed.
    """
    seen = {id(exc)}
    current: BaseException | None = exc
    while current is not None:
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
        if current is None or id(current) in seen:
            return
        seen.add(id(current))
        yield current


def _describe(exc: BaseException) -> str:
    message = str(exc)
    return message if message else type(exc).__name__


def render_error_report(exc: BaseException, *, backtrace: bool = False) -> list[str]:
    """Render *exc* and its cause chain as stderr lines.

    Args:
        exc: The error that terminated the run.
        backtrace: Append a ``backtrace:`` line when a traceback is attached.

    Returns:
        Lines without trailing newlines.
    """
    lines = [f"error: {_describe(exc)}"]
    lines.extend(f"caused by: {_describe(cause)}" for cause in iter_causes(exc))

    if backtrace and exc.__traceback__ is not None:
        frames = "".join(traceback.format_tb(exc.__traceback__)).rstrip()
        lines.append(f"backtrace:\n{frames}")

    return lines
