from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from toneswap.core.config import Settings, settings as default_settings
from toneswap.core.db import build_engine, build_session_maker
from toneswap.api.router import router as api_router
from toneswap.services.community_store import CommunityStore
from toneswap.services.openai_client import OpenAIService
from toneswap.services.orchestrator import TransformationOrchestrator
from toneswap.services.transformer import TransformationService


log = logging.getLogger(__name__)


def _lifespan(cfg: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Build the generation client and the store once; share them for the process lifetime."""
        openai = OpenAIService(
            api_key=cfg.OPENAI_API_KEY,
            model=cfg.OPENAI_MODEL,
            timeout_sec=cfg.OPENAI_TIMEOUT_SEC,
        )
        engine = build_engine(cfg.DATABASE_URL)
        orchestrator = TransformationOrchestrator(
            TransformationService(openai),
            CommunityStore(build_session_maker(engine), max_limit=cfg.COMMUNITY_FEED_LIMIT),
        )
        app.state.orchestrator = orchestrator
        log.info("[startup] %s ready (model=%s)", cfg.APP_NAME, cfg.OPENAI_MODEL)

        yield

        await orchestrator.drain(timeout=cfg.PERSIST_DRAIN_TIMEOUT_SEC)
        await openai.close()
        await engine.dispose()
        log.info("[shutdown] %s stopped", cfg.APP_NAME)

    return lifespan


def create_app(cfg: Settings | None = None) -> FastAPI:
    cfg = cfg or default_settings
    logging.basicConfig(
        level=(cfg.LOG_LEVEL or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=cfg.APP_NAME, lifespan=_lifespan(cfg))

    origins = [o.strip() for o in (cfg.CORS_ORIGINS or "*").split(",") if o.strip()] or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=cfg.API_PREFIX)
    return app


app = create_app()
