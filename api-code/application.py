from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from env_loader import load_local_env
from routers import build_health_router, build_page_router, build_reply_router
from services import GeminiTextGenerator, SarcasticReplyService
from settings import Settings, get_settings


logger = logging.getLogger("eehsawa")


def create_app(
    app_settings: Settings | None = None,
    reply_service: SarcasticReplyService | None = None,
) -> FastAPI:
    app_settings = app_settings or get_settings()
    if reply_service is None:
        generator = GeminiTextGenerator(
            api_key=app_settings.gemini_api_key,
            model_name=app_settings.reply_llm_model,
            request_timeout=app_settings.gemini_request_timeout,
        )
        reply_service = SarcasticReplyService(generator)

    app = FastAPI(
        title="EehSawa AI",
        version="0.1.0",
        description="Your friendly neighborhood sarcastic AI.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(build_page_router())
    app.include_router(build_reply_router(reply_service))
    app.include_router(build_health_router(reply_service))

    @app.on_event("startup")
    async def on_startup() -> None:
        if app_settings.gemini_api_key:
            logger.info("Reply generation ready (model=%s).", reply_service.model_name)
        else:
            logger.warning("GEMINI_API_KEY missing; reply requests will fail until it is set.")

    return app


def build_default_app(env_path: Path | str = Path(".env")) -> FastAPI:
    """Load .env, configure logging and build the app.

    Installed copies can serve it with ``uvicorn --factory application:build_default_app``.
    """
    load_local_env(env_path)
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    return create_app(settings)
