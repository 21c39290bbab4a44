"""Request orchestration for the transform and community-feed actions.

A successful transform schedules the community write as its own asyncio task
and returns without awaiting it. The write's outcome is logged only.
"""

from __future__ import annotations

import asyncio
import logging

from toneswap.core.errors import PersistenceError
from toneswap.models.transformation import Transformation
from toneswap.services.community_store import CommunityStore, MAX_FEED_LIMIT
from toneswap.services.tone_catalog import Tone
from toneswap.services.transformer import TransformationService, TransformResult


log = logging.getLogger(__name__)


class TransformationOrchestrator:
    def __init__(self, transformer: TransformationService, store: CommunityStore):
        self.transformer = transformer
        self.store = store
        # Strong refs so the event loop does not drop running writes.
        self._pending: set[asyncio.Task] = set()

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    async def transform(self, text: str, tone: Tone) -> TransformResult:
        result = await self.transformer.transform(text, tone)
        if result.ok:
            self._schedule_persist(text, result.transformed_text, tone)
        return result

    async def list_community(self, limit: int | None = MAX_FEED_LIMIT) -> list[Transformation]:
        return await self.store.list_recent(limit)

    def _schedule_persist(self, original_text: str, transformed_text: str, tone: Tone) -> None:
        task = asyncio.create_task(self._persist(original_text, transformed_text, tone))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _persist(self, original_text: str, transformed_text: str, tone: Tone) -> None:
        try:
            await self.store.append(
                original_text=original_text,
                transformed_text=transformed_text,
                tone=tone,
            )
        except PersistenceError as e:
            log.warning("[orchestrator] community write dropped tone=%s: %s", tone.value, e)
        except Exception:
            log.exception("[orchestrator] unexpected community write error tone=%s", tone.value)

    async def drain(self, timeout: float | None = None) -> None:
        """Wait for in-flight community writes. Anything still running after ``timeout`` keeps running."""
        if not self._pending:
            return
        pending = list(self._pending)
        _, not_done = await asyncio.wait(pending, timeout=timeout)
        if not_done:
            log.warning("[orchestrator] %s community writes still running after drain", len(not_done))
