"""
Deferred delivery of slash command replies.

A DeliveryJob is handed to a DelayedTaskExecutor, which runs it after the
HTTP acknowledgment has gone out. Jobs wait a short delay, then make a
single attempt to post the reply. Nothing is retried or persisted.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol

from fastapi import BackgroundTasks

from utils.logging import get_logger
from utils.slack_client import ResponseURLClient

from .exceptions import DeliveryError

logger = get_logger("slack.deferred")

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class DeliveryJob:
    """A serialized reply waiting to be posted to a response_url."""

    response_url: str
    payload: bytes


class DelayedTaskExecutor(Protocol):
    """Runs delivery jobs in the background after a delay."""

    def submit(self, job: DeliveryJob, delay: float) -> None:
        ...


async def run_delivery_job(
    job: DeliveryJob,
    delay: float,
    client: ResponseURLClient,
    sleep: Sleep = asyncio.sleep
) -> None:
    """
    Wait, then post the job's payload once.

    Delivery failures are logged and dropped; the original request has
    already been answered.
    """
    await sleep(delay)
    try:
        await client.send_json(job.response_url, job.payload)
    except DeliveryError as e:
        logger.error(f"Deferred delivery failed: {e}")
    except Exception as e:
        logger.error(f"Unexpected error in deferred delivery: {e}", exc_info=True)


class BackgroundTasksExecutor:
    """DelayedTaskExecutor on top of FastAPI's per-request BackgroundTasks."""

    def __init__(
        self,
        background_tasks: BackgroundTasks,
        client: ResponseURLClient,
        sleep: Sleep = asyncio.sleep
    ):
        self.background_tasks = background_tasks
        self.client = client
        self.sleep = sleep

    def submit(self, job: DeliveryJob, delay: float) -> None:
        logger.debug(f"Scheduling deferred delivery in {delay}s")
        self.background_tasks.add_task(
            run_delivery_job,
            job,
            delay,
            self.client,
            self.sleep
        )
