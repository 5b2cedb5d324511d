"""
Slack Gateway HTTP endpoint handlers.

This module contains the FastAPI endpoint that receives /justin slash
commands. It decodes the form body and hands it to the CommandHandler
built from application settings.
"""

from urllib.parse import parse_qs

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import Response

from config import settings
from schemas.slack import SlackCommandSchema
from utils.logging import get_logger
from utils.slack_client import ResponseURLClient

from .command_handler import CommandHandler
from .deferred import BackgroundTasksExecutor, DelayedTaskExecutor

logger = get_logger("slack.gateway")

# Create router for Slack endpoints
slack_router = APIRouter()


def get_command_handler() -> CommandHandler:
    """Build the /justin handler from application settings."""
    return CommandHandler(
        client=ResponseURLClient(),
        expected_command=settings.justin_command,
        expected_token=settings.justin_token,
        delivery_mode=settings.delivery_mode,
        deferred_delay=settings.deferred_delay_seconds,
        search_url_template=settings.search_url_template,
    )


def get_delivery_executor(
    background_tasks: BackgroundTasks,
    handler: CommandHandler = Depends(get_command_handler)
) -> DelayedTaskExecutor:
    """Run deferred deliveries as background tasks of the current request."""
    return BackgroundTasksExecutor(background_tasks, handler.client)


async def parse_command_form(request: Request) -> SlackCommandSchema:
    """
    Decode a form-encoded slash command body.

    Missing fields become empty strings; repeated fields keep the first value.
    """
    body = await request.body()
    parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
    return SlackCommandSchema.model_validate({k: v[0] for k, v in parsed.items() if v})


@slack_router.get("/health")
async def slack_health():
    """Health check for Slack Gateway module."""
    return {"status": "healthy", "module": "slack_gateway"}


@slack_router.post("/justin")
async def handle_justin_command(
    command_data: SlackCommandSchema = Depends(parse_command_form),
    handler: CommandHandler = Depends(get_command_handler),
    executor: DelayedTaskExecutor = Depends(get_delivery_executor)
) -> Response:
    """
    Handle the /justin slash command.

    Slack posts the command as application/x-www-form-urlencoded and
    expects an answer within 3 seconds.
    """
    return await handler.handle(command_data, executor)
