from __future__ import annotations

from datetime import datetime, timezone
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from toneswap.models.transformation import Transformation


class TransformationRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, original_text: str, transformed_text: str, tone: str) -> Transformation:
        row = Transformation(
            original_text=original_text,
            transformed_text=transformed_text,
            tone=tone,
            created_at=datetime.now(timezone.utc),
        )
        self.session.add(row)
        await self.session.flush()
        return row

    async def list_recent(self, limit: int) -> list[Transformation]:
        res = await self.session.execute(
            select(Transformation)
            .order_by(Transformation.created_at.desc(), Transformation.id.desc())
            .limit(limit)
        )
        return list(res.scalars().all())
