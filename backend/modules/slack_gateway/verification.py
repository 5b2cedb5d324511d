"""
Slack slash command verification.

Slash commands carry the command name and the app's verification token in
the form body. Both are compared against the configured values; an empty
configured value disables that check.

Plain equality is used here. Request signatures are not verified.
"""

from schemas.slack import SlackCommandSchema
from utils.logging import get_logger

from .exceptions import AuthorizationError

logger = get_logger("slack.verification")


def verify_command_request(
    command_data: SlackCommandSchema,
    expected_command: str = "",
    expected_token: str = ""
) -> None:
    """
    Check the submitted command name and token.

    Args:
        command_data: Decoded slash command form
        expected_command: Required command name, or empty to accept any
        expected_token: Required verification token, or empty to accept any

    Raises:
        AuthorizationError: If either configured value does not match
    """
    if expected_command and command_data.command != expected_command:
        logger.error(
            "Forbidden - invalid command",
            command=command_data.command,
            expected_command=expected_command
        )
        raise AuthorizationError(f"Invalid command '{command_data.command}'")

    if expected_token and command_data.token != expected_token:
        logger.error(
            "Forbidden - invalid token",
            token=command_data.token,
            expected_token=expected_token
        )
        raise AuthorizationError("Invalid token")
