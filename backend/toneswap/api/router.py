from __future__ import annotations

from fastapi import APIRouter

from toneswap.api.routes import health, tones, transformations

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(tones.router, tags=["tones"])
router.include_router(transformations.router, tags=["transformations"])
