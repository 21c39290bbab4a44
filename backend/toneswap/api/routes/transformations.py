from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from toneswap.api.deps import get_orchestrator
from toneswap.core.config import settings
from toneswap.core.errors import TransformValidationError
from toneswap.schemas.transformation import (
    CommunityGenerationOut,
    ErrorOut,
    ShareOut,
    ShareRequest,
    TransformOut,
    TransformRequest,
)
from toneswap.services.community_store import MAX_FEED_LIMIT
from toneswap.services.orchestrator import TransformationOrchestrator
from toneswap.services.share import build_share_url, resolve_deep_link_tone
from toneswap.services.tone_catalog import Tone
from toneswap.services.transformer import TransformResult, validate_input


log = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorOut}, 503: {"model": ErrorOut}}


def _default_tone() -> Tone:
    return Tone.parse(settings.DEFAULT_TONE) or Tone.gen_z


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _to_response(result: TransformResult):
    if result.ok:
        return TransformOut(transformed_text=result.transformed_text)
    status_code = 400 if result.is_validation_error else 503
    return _error(status_code, result.error)


@router.post("/transform", response_model=TransformOut, responses=_ERROR_RESPONSES)
async def transform(
    payload: TransformRequest,
    orchestrator: TransformationOrchestrator = Depends(get_orchestrator),
):
    result = await orchestrator.transform(payload.text, payload.tone)
    return _to_response(result)


@router.get("/transform", response_model=TransformOut, responses=_ERROR_RESPONSES)
async def transform_deep_link(
    text: str = Query(default=""),
    tone: str | None = Query(default=None),
    orchestrator: TransformationOrchestrator = Depends(get_orchestrator),
):
    """Shared-link entry point: ?text=...&tone=... pre-fills and runs a transform.

    Any of the known tones is accepted; unknown or missing tones use DEFAULT_TONE.
    """
    resolved = resolve_deep_link_tone(tone, _default_tone())
    if tone and resolved.value != tone.strip().lower():
        log.info("[transform] deep link with unknown tone=%r, using %s", tone, resolved.value)
    result = await orchestrator.transform(text, resolved)
    return _to_response(result)


@router.get("/community", response_model=list[CommunityGenerationOut])
async def list_community(
    limit: int | None = Query(default=None, ge=1, le=MAX_FEED_LIMIT),
    orchestrator: TransformationOrchestrator = Depends(get_orchestrator),
):
    """Newest community transformations.

    The store clamps ``limit`` to COMMUNITY_FEED_LIMIT; omitted means that cap.
    """
    rows = await orchestrator.list_community(limit)
    return [CommunityGenerationOut.from_row(r) for r in rows]


@router.post("/share", response_model=ShareOut, responses={400: {"model": ErrorOut}})
async def share(payload: ShareRequest):
    try:
        validate_input(payload.text)
    except TransformValidationError as e:
        return _error(400, e.message)
    return ShareOut(url=build_share_url(settings.PUBLIC_BASE_URL, payload.text, payload.tone))
