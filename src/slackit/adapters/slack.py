"""Slack message dispatcher using slack-sdk.

This module implements the MessageDispatcher protocol with the synchronous
``slack_sdk.WebClient``. Each dispatch makes a single ``chat.postMessage``
call; there is no retry policy.

Failures are reported uniformly as ServiceError:
- API rejections (invalid_auth, channel_not_found, ratelimited, ...)
- Client-side errors raised by slack-sdk
- Transport errors (connection refused, TLS, timeouts)
"""

from __future__ import annotations

from typing import Any

import structlog
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from ..errors import ServiceError
from ..models.request import SendRequest

log = structlog.get_logger()


class SlackDispatcher:
    """Slack dispatcher implementing the MessageDispatcher protocol.

    Example:
        dispatcher = SlackDispatcher()
        dispatcher.dispatch(
            SendRequest(target=Channel("general"), token="xoxb-...", text="hi")
        )
    """

    def __init__(self, base_url: str = WebClient.BASE_URL) -> None:
        """Initialize the dispatcher.

        Args:
            base_url: Slack Web API root URL.
        """
        self._base_url = base_url

    @staticmethod
    def build_payload(request: SendRequest) -> dict[str, Any]:
        """Build chat.postMessage arguments for *request*.

        Args:
            request: Resolved message request.

        Returns:
            Keyword arguments for ``WebClient.chat_postMessage``.
        """
        payload: dict[str, Any] = {
            "channel": str(request.target),
            "text": request.text,
        }

        if request.sender_name is not None:
            payload["username"] = request.sender_name

        return payload

    def dispatch(self, request: SendRequest) -> None:
        """Post the message described by *request*.

        Args:
            request: Resolved message request.

        Raises:
            ServiceError: If Slack rejects the message or cannot be reached.
        """
        target = str(request.target)
        # slack-sdk retries dropped connections by default; one message, one call
        client = WebClient(token=request.token, base_url=self._base_url, retry_handlers=[])

        try:
            result = client.chat_postMessage(**self.build_payload(request))
        except SlackApiError as e:
            log.debug(
                "send_message_failed",
                target=target,
                error=e.response.get("error"),
            )
            raise ServiceError(f"Failed to post message to {target}") from e
        except (SlackClientError, OSError) as e:
            log.debug("send_message_failed", target=target, error=str(e))
            raise ServiceError(f"Failed to post message to {target}") from e

        log.debug(
            "message_sent",
            target=target,
            message_ts=result.get("ts"),
        )
