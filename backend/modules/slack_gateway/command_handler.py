"""
Slack slash command handler for /justin commands.

This module turns the text after /justin into a search link and posts it
back to the channel. The reply is delivered either synchronously, before
the HTTP request is answered, or by a deferred job that fires shortly
after an immediate acknowledgment.
"""

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from config import DeliveryMode
from schemas.slack import ResponseType, SlackCommandSchema, SlackResponseSchema
from utils.logging import get_logger, log_slack_event
from utils.slack_client import ResponseURLClient
from utils.slack_formatter import DEFAULT_SEARCH_URL_TEMPLATE, format_search_reply

from .deferred import DelayedTaskExecutor, DeliveryJob
from .exceptions import AuthorizationError, DeliveryError, SerializationError
from .verification import verify_command_request

logger = get_logger("slack.commands")

DEFERRED_ACK = {"response_type": ResponseType.IN_CHANNEL.value}


def build_reply_json(text: str, is_public: bool = True) -> bytes:
    """
    Serialize a reply for Slack.

    Args:
        text: Reply text
        is_public: In-channel reply when True, ephemeral otherwise

    Returns:
        bytes: JSON body

    Raises:
        SerializationError: If the reply cannot be encoded
    """
    reply = SlackResponseSchema(
        response_type=ResponseType.IN_CHANNEL if is_public else ResponseType.EPHEMERAL,
        text=text,
    )
    logger.debug("Marshalling reply", reply=repr(reply))
    try:
        payload = reply.model_dump_json().encode("utf-8")
    except ValueError as e:
        logger.error(f"Error marshalling JSON for reply: {e}", reply=repr(reply))
        raise SerializationError(str(e)) from e

    logger.debug("Slack response", payload=payload.decode("utf-8"))
    return payload


class CommandHandler:
    """
    Handles /justin slash commands.

    The handler holds configuration only and is safe to share between
    concurrent requests.
    """

    def __init__(
        self,
        client: ResponseURLClient,
        expected_command: str = "",
        expected_token: str = "",
        delivery_mode: DeliveryMode = DeliveryMode.DEFERRED,
        deferred_delay: float = 0.5,
        search_url_template: str = DEFAULT_SEARCH_URL_TEMPLATE
    ):
        """
        Initialize the handler.

        Args:
            client: Client used to post replies to the response_url
            expected_command: Required command name, or empty to accept any
            expected_token: Required verification token, or empty to accept any
            delivery_mode: Synchronous post or ack followed by a deferred post
            deferred_delay: Seconds the deferred job waits before posting
            search_url_template: Search link template with a {query} placeholder
        """
        self.client = client
        self.expected_command = expected_command
        self.expected_token = expected_token
        self.delivery_mode = delivery_mode
        self.deferred_delay = deferred_delay
        self.search_url_template = search_url_template

    async def handle(
        self,
        command_data: SlackCommandSchema,
        executor: DelayedTaskExecutor
    ) -> Response:
        """
        Handle one slash command request.

        Args:
            command_data: Decoded slash command form
            executor: Background executor used in deferred mode

        Returns:
            Response: HTTP response for Slack
        """
        logger.debug(
            "Request",
            user_name=command_data.user_name,
            token=command_data.token,
            command=command_data.command,
            text=command_data.text,
            team_id=command_data.team_id,
            team_domain=command_data.team_domain,
            channel_id=command_data.channel_id,
            channel_name=command_data.channel_name,
            user_id=command_data.user_id,
            response_url=command_data.response_url
        )

        try:
            verify_command_request(command_data, self.expected_command, self.expected_token)
        except AuthorizationError:
            return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content="Forbidden")

        log_slack_event(
            "justin_command_received",
            channel_id=command_data.channel_id,
            user_id=command_data.user_id,
            text=command_data.text[:100]
        )

        reply_text = format_search_reply(
            command_data.user_name,
            command_data.text,
            self.search_url_template
        )

        try:
            payload = build_reply_json(reply_text, is_public=True)
        except SerializationError:
            return PlainTextResponse("Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if self.delivery_mode == DeliveryMode.DEFERRED:
            executor.submit(DeliveryJob(command_data.response_url, payload), self.deferred_delay)
            return JSONResponse(content=DEFERRED_ACK)

        try:
            await self.client.send_json(command_data.response_url, payload)
        except DeliveryError:
            return PlainTextResponse("Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.debug("Success! Response sent back to Slack")
        return Response(status_code=status.HTTP_200_OK)
