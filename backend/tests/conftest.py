"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from config import DeliveryMode
from modules.slack_gateway.command_handler import CommandHandler
from modules.slack_gateway.deferred import DeliveryJob
from utils.slack_client import ResponseURLClient


class FakePoster:
    """Records posts instead of sending them."""

    def __init__(self, status_code=200, error=None, events=None):
        self.status_code = status_code
        self.error = error
        self.calls = []
        self.events = events if events is not None else []

    async def post(self, url, content, content_type):
        self.calls.append((url, content, content_type))
        self.events.append(("post", url))
        if self.error is not None:
            raise self.error
        return self.status_code


class FakeSleep:
    """Records requested delays without waiting."""

    def __init__(self, events=None):
        self.delays = []
        self.events = events if events is not None else []

    async def __call__(self, delay):
        self.delays.append(delay)
        self.events.append(("sleep", delay))


class RecordingExecutor:
    """Collects submitted jobs without running them."""

    def __init__(self):
        self.jobs = []

    def submit(self, job: DeliveryJob, delay: float) -> None:
        self.jobs.append((job, delay))


@pytest.fixture
def poster():
    return FakePoster()


@pytest.fixture
def client(poster):
    return ResponseURLClient(poster=poster)


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def make_handler(client):
    def _make(**kwargs):
        kwargs.setdefault("delivery_mode", DeliveryMode.SYNC)
        return CommandHandler(client=client, **kwargs)
    return _make


@pytest.fixture
def form():
    return {
        "token": "tok",
        "team_id": "T1",
        "team_domain": "example",
        "channel_id": "C1",
        "channel_name": "general",
        "user_id": "U1",
        "user_name": "alice",
        "command": "/justin",
        "text": "capital of france",
        "response_url": "https://hooks.slack.test/commands/1",
    }
