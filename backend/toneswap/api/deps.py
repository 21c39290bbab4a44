from __future__ import annotations

from fastapi import Request

from toneswap.services.orchestrator import TransformationOrchestrator


def get_orchestrator(request: Request) -> TransformationOrchestrator:
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise RuntimeError("orchestrator is not initialised; is the app lifespan running?")
    return orchestrator
