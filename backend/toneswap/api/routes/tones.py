from __future__ import annotations

from fastapi import APIRouter

from toneswap.core.config import settings
from toneswap.schemas.transformation import ClientConfigOut, ToneOptionOut
from toneswap.services.tone_catalog import tone_options

router = APIRouter()


@router.get("/tones", response_model=list[ToneOptionOut])
async def list_tones():
    return tone_options()


@router.get("/config", response_model=ClientConfigOut)
async def client_config():
    """UI knobs: feed size, polling interval and the preselected tone."""
    return ClientConfigOut(
        feed_limit=settings.COMMUNITY_FEED_LIMIT,
        feed_refresh_interval_sec=settings.FEED_REFRESH_INTERVAL_SEC,
        default_tone=settings.DEFAULT_TONE,
    )
