# tests/conftest.py
import os
import tempfile

# keep the import-time app away from the real store folder
os.environ.setdefault("STORE_DIR", tempfile.mkdtemp(prefix="eventflow-test-store-"))

import json
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from eventflow.features.events.schemas import EventPlan
from eventflow.lib.kv_store import MemoryKeyValueStore
from eventflow.main import create_app

FULL_PLAN = {
    "theme_suggestions": ["Under the Sea", "Space Odyssey", "Garden Party"],
    "activities": ["Treasure hunt", "Face painting", "Karaoke", "Piñata"],
    "todo_list": ["Send invites", "Order cake", "Book venue", "Buy decorations", "Plan playlist"],
    "gift_ideas": ["Telescope", "Art kit", "Board game", "Headphones"],
}

MIA_FENCED = (
    '```json {"theme_suggestions":["Unicorns"],"activities":["Cake"],'
    '"todo_list":["Buy balloons"],"gift_ideas":["Doll"]} ```'
)

# -------- Mock text generator --------
class FakeGenerator:
    """
    Stands in for the model backend: hands out queued replies in order
    (an Exception instance is raised instead of returned) and records every prompt.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if self.replies else json.dumps(FULL_PLAN)
        if isinstance(reply, Exception):
            raise reply
        return reply

class SequentialIds:
    def __init__(self, start: int = 1000):
        self.next_id = start

    def __call__(self) -> int:
        self.next_id += 1
        return self.next_id

class RecordingKeyValueStore(MemoryKeyValueStore):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)

# -------- Fixtures --------
@pytest.fixture
def fake_generator():
    return FakeGenerator()

@pytest.fixture
def kv():
    return RecordingKeyValueStore()

@pytest.fixture
def fixed_clock():
    return lambda: datetime(2025, 3, 7, 18, 30)

@pytest.fixture
def make_plan():
    def _make(plan_id=1, **overrides):
        data = {
            "id": plan_id,
            "name": "Noah",
            "age": "30",
            "gender": "Male",
            "eventType": "Graduation",
            "createdAt": "3/7/2025",
            **FULL_PLAN,
        }
        data.update(overrides)
        return EventPlan(**data)
    return _make

@pytest.fixture
def app(kv, fake_generator, fixed_clock):
    return create_app(kv=kv, generator=fake_generator, id_factory=SequentialIds(), clock=fixed_clock)

@pytest.fixture
def client(app):
    return TestClient(app)

class FailingKeyValueStore(MemoryKeyValueStore):
    """Reads work, every write fails like a full disk."""

    def set(self, key, value):
        raise OSError(28, "No space left on device")
