from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from toneswap.core.errors import PersistenceError
from toneswap.models.transformation import Transformation
from toneswap.repos.transformation_repo import TransformationRepo
from toneswap.services.tone_catalog import Tone


log = logging.getLogger(__name__)

MAX_FEED_LIMIT = 50


class CommunityStore:
    """Append-only store behind the community feed.

    ``append`` raises PersistenceError; ``list_recent`` never raises and
    degrades to an empty list.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession], *, max_limit: int = MAX_FEED_LIMIT):
        self._session_maker = session_maker
        self.max_limit = max(1, min(int(max_limit), MAX_FEED_LIMIT))

    def clamp_limit(self, limit: int | None) -> int:
        if limit is None:
            return self.max_limit
        return max(1, min(int(limit), self.max_limit))

    async def append(self, *, original_text: str, transformed_text: str, tone: Tone) -> Transformation:
        try:
            async with self._session_maker() as session:
                async with session.begin():
                    row = await TransformationRepo(session).create(
                        original_text=original_text,
                        transformed_text=transformed_text,
                        tone=tone.value,
                    )
        except Exception as e:
            log.warning("[community-store] append failed tone=%s: %s: %s", tone.value, type(e).__name__, e)
            raise PersistenceError(f"{type(e).__name__}: {e}") from e
        log.info("[community-store] stored transformation id=%s tone=%s", row.id, row.tone)
        return row

    async def list_recent(self, limit: int | None = MAX_FEED_LIMIT) -> list[Transformation]:
        n = self.clamp_limit(limit)
        try:
            async with self._session_maker() as session:
                rows = await TransformationRepo(session).list_recent(n)
        except Exception as e:
            log.warning("[community-store] list_recent failed: %s: %s", type(e).__name__, e)
            return []
        return rows[:n]
