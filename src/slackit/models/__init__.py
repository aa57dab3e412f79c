"""Data models and transfer objects."""

from .request import Channel, SendRequest, Target, User

__all__ = [
    "Channel",
    "SendRequest",
    "Target",
    "User",
]
