import pytest
from fastapi import BackgroundTasks

from modules.slack_gateway.deferred import BackgroundTasksExecutor, DeliveryJob, run_delivery_job
from utils.slack_client import ResponseURLClient

from conftest import FakePoster, FakeSleep


@pytest.mark.asyncio
async def test_job_waits_then_posts_once():
    events = []
    poster = FakePoster(events=events)
    sleep = FakeSleep(events=events)
    job = DeliveryJob("https://hooks.slack.test/1", b'{"text":"hi"}')

    await run_delivery_job(job, 0.5, ResponseURLClient(poster=poster), sleep=sleep)

    assert events == [("sleep", 0.5), ("post", "https://hooks.slack.test/1")]
    assert poster.calls == [("https://hooks.slack.test/1", b'{"text":"hi"}', "application/json")]


@pytest.mark.asyncio
async def test_failed_delivery_is_not_raised_or_retried():
    poster = FakePoster(status_code=502)
    job = DeliveryJob("https://hooks.slack.test/1", b"{}")

    await run_delivery_job(job, 0.5, ResponseURLClient(poster=poster), sleep=FakeSleep())

    assert len(poster.calls) == 1


@pytest.mark.asyncio
async def test_executor_defers_until_background_tasks_run():
    poster = FakePoster()
    sleep = FakeSleep()
    background_tasks = BackgroundTasks()
    executor = BackgroundTasksExecutor(background_tasks, ResponseURLClient(poster=poster), sleep=sleep)

    executor.submit(DeliveryJob("https://hooks.slack.test/1", b"{}"), 0.25)
    assert poster.calls == []
    assert sleep.delays == []

    await background_tasks()

    assert sleep.delays == [0.25]
    assert len(poster.calls) == 1


@pytest.mark.asyncio
async def test_unexpected_transport_error_is_dropped():
    poster = FakePoster(error=OverflowError("connect(): port must be 0-65535."))
    job = DeliveryJob("http://localhost:99999/x", b"{}")

    await run_delivery_job(job, 0, ResponseURLClient(poster=poster), sleep=FakeSleep())

    assert len(poster.calls) == 1


@pytest.mark.asyncio
async def test_unexpected_client_error_is_dropped():
    class BrokenClient:
        async def send_json(self, response_url, payload):
            raise RuntimeError("boom")

    await run_delivery_job(DeliveryJob("https://hooks.slack.test/1", b"{}"), 0, BrokenClient(), sleep=FakeSleep())
