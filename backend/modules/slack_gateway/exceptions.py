"""Errors raised while handling a slash command."""


class CommandError(Exception):
    """Base class for slash command handling failures."""


class AuthorizationError(CommandError):
    """The command or token did not match the configured value."""


class SerializationError(CommandError):
    """The reply could not be encoded as JSON."""


class DeliveryError(CommandError):
    """The post to the response_url failed or returned a non-200 status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
