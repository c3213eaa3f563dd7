from __future__ import annotations

from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from openai import OpenAI

from . import __version__
from .api import router
from .config import Settings, load_settings
from .logging_config import get_logger, setup_json_logging
from .services.document import build_openai_client
from .services.pipeline import SummaryPipeline

log = get_logger("newsdigest.main")


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Callable[[Settings], OpenAI] = build_openai_client,
) -> FastAPI:
    settings = settings or load_settings()
    setup_json_logging(settings.log_level)

    app = FastAPI(title="NewsDigest", version=__version__)
    app.state.settings = settings
    app.state.pipeline = SummaryPipeline(settings, client_factory=client_factory)
    app.include_router(router)

    if settings.is_summarizer_enabled:
        log.info("summarizer enabled (model=%s)", settings.openai_model)
    else:
        # app still serves /healthz, but every summarize call will answer 500
        log.warning("OPENAI_API_KEY missing -> summarizer disabled")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"ok": True, "service": "newsdigest"}

    @app.get("/ready")
    def ready() -> JSONResponse:
        if not app.state.settings.is_summarizer_enabled:
            return JSONResponse(
                status_code=503,
                content={
                    "ready": False,
                    "reason": "summarizer_disabled",
                    "detail": "OPENAI_API_KEY missing",
                },
            )
        return JSONResponse(content={"ready": True})

    return app


app = create_app()
