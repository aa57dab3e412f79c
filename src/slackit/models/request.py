"""Data models for an outbound message request."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Channel:
    """A channel target, named without its ``#`` sigil."""

    name: str

    sigil: ClassVar[str] = "#"

    def __str__(self) -> str:
        return f"{self.sigil}{self.name}"


@dataclass(frozen=True)
class User:
    """A user target, named without its ``@`` sigil."""

    name: str

    sigil: ClassVar[str] = "@"

    def __str__(self) -> str:
        return f"{self.sigil}{self.name}"


Target = Channel | User


@dataclass(frozen=True)
class SendRequest:
    """A fully resolved message, ready for a single dispatch."""

    target: Target
    token: str = field(repr=False)
    text: str
    sender_name: str | None = None  # None uses the bot's default identity
