"""
Slack response_url client.

This module posts JSON replies to the response_url Slack hands out with
every slash command. The HTTP transport is injectable so tests can swap in
a fake.
"""

from typing import Optional, Protocol

import httpx

from config import settings
from modules.slack_gateway.exceptions import DeliveryError
from utils.logging import get_logger, log_slack_event

logger = get_logger("slack.client")


class HttpPoster(Protocol):
    """Anything that can POST a body and report the status code."""

    async def post(self, url: str, content: bytes, content_type: str) -> int:
        ...


class HttpxPoster:
    """HttpPoster backed by httpx."""

    def __init__(self, timeout: float = 30):
        self.timeout = timeout

    async def post(self, url: str, content: bytes, content_type: str) -> int:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                url,
                content=content,
                headers={"Content-Type": content_type},
                timeout=self.timeout
            )
        return response.status_code


class ResponseURLClient:
    """
    Sends serialized replies to a Slack response_url.

    A single attempt is made per call; failures surface as DeliveryError.
    """

    def __init__(self, poster: Optional[HttpPoster] = None):
        """
        Initialize the client.

        Args:
            poster: HTTP transport (defaults to httpx with the configured timeout)
        """
        self.poster = poster or HttpxPoster(timeout=settings.response_timeout_seconds)

    async def send_json(self, response_url: str, payload: bytes) -> None:
        """
        POST a JSON payload to the response_url.

        Args:
            response_url: Response URL from the slash command
            payload: Serialized reply

        Raises:
            DeliveryError: If the request fails or Slack does not answer 200
        """
        try:
            status_code = await self.poster.post(response_url, payload, "application/json")
        except Exception as e:
            logger.error(f"Error submitting response to Slack: {e}", exc_info=True)
            log_slack_event("response_failed", error=str(e))
            raise DeliveryError(f"Error submitting response to Slack: {e}") from e

        if status_code != 200:
            logger.error(f"Received status code {status_code} when submitting response to Slack")
            log_slack_event("response_failed", status_code=status_code)
            raise DeliveryError(
                f"Slack answered with status {status_code}",
                status_code=status_code
            )

        logger.debug("Response sent back to Slack")
        log_slack_event("response_sent", status_code=status_code)
