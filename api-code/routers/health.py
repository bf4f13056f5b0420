from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter

from services import SarcasticReplyService


def build_health_router(reply_service: SarcasticReplyService) -> APIRouter:
    router = APIRouter()

    @router.get("/healthz")
    async def healthcheck() -> Dict[str, Any]:
        issues: List[str] = []
        # substitute generators without the attribute are assumed ready
        llm_ready = bool(getattr(reply_service.generator, "configured", True))
        if not llm_ready:
            issues.append("GEMINI_API_KEY is not configured.")

        return {
            "status": "healthy" if not issues else "degraded",
            "model": reply_service.model_name,
            "llm": "configured" if llm_ready else "missing_api_key",
            "issues": issues,
        }

    return router
