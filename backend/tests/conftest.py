from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from toneswap.models.transformation import Transformation
from toneswap.services.openai_client import OpenAIResult


class FakeOpenAI:
    """Stands in for OpenAIService. ``reply`` may be a string or a callable(prompt)."""

    model = "fake-model"

    def __init__(self, reply="ok", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> OpenAIResult:
        self.prompts.append(prompt)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        text = self.reply(prompt) if callable(self.reply) else self.reply
        return OpenAIResult(text=text, model=self.model, response_id="resp_test")


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def scalars(self):
        return self

    def all(self):
        return list(self._rows)


class _Tx:
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    def __init__(self, db: "FakeDB"):
        self.db = db
        self._pending: list = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def begin(self):
        return _Tx()

    def add(self, obj):
        self._pending.append(obj)

    async def flush(self):
        await asyncio.sleep(0)
        if self.db.fail is not None:
            raise self.db.fail
        for obj in self._pending:
            self.db.next_id += 1
            obj.id = self.db.next_id
            self.db.rows.append(obj)
        self._pending.clear()

    async def execute(self, stmt):
        await asyncio.sleep(0)
        if self.db.fail is not None:
            raise self.db.fail
        self.db.statements.append(stmt)
        rows = sorted(self.db.rows, key=lambda r: (r.created_at, r.id), reverse=True)
        return FakeResult(rows)


class FakeDB:
    """Callable like an async_sessionmaker; every session shares the same rows."""

    def __init__(self, fail: Exception | None = None):
        self.fail = fail
        self.rows: list[Transformation] = []
        self.statements: list = []
        self.next_id = 0

    def __call__(self):
        return FakeSession(self)

    def seed(self, count: int, *, tone: str = "pirate") -> list[Transformation]:
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        for i in range(count):
            self.next_id += 1
            self.rows.append(
                Transformation(
                    id=self.next_id,
                    original_text=f"original {i}",
                    transformed_text=f"transformed {i}",
                    tone=tone,
                    created_at=base + timedelta(minutes=i),
                )
            )
        return self.rows


@pytest.fixture
def fake_db():
    return FakeDB()
