"""Abstract interface for message delivery backends."""

from typing import Protocol

from ..models.request import SendRequest


class MessageDispatcher(Protocol):
    """Contract for posting a resolved message to a chat platform.

    Implementations make exactly one delivery attempt per call and
    never retry.
    """

    def dispatch(self, request: SendRequest) -> None:
        """
        Post the message described by *request*.

        The platform's response (e.g. a message timestamp) is not returned.

        Args:
            request: Fully resolved message request

        Raises:
            ServiceError: If the platform rejects the message or cannot be reached
        """
        ...
