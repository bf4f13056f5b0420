from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException

from domain import (
    DEFAULT_LANGUAGE,
    DEFAULT_SARCASM_LEVEL,
    MAX_MESSAGE_LENGTH,
    GenerationError,
    Language,
    SarcasmLevel,
    ValidationError,
)
from schemas import ReplyOptionsResponse, ReplyResponse
from services import SarcasticReplyService, validate_reply_input


GENERATION_FAILED_DETAIL = (
    "Uh oh! The AI is sulking. Something went wrong. Please try again later."
)


def build_reply_router(reply_service: SarcasticReplyService) -> APIRouter:
    """Create the reply router wired to the provided reply service."""
    router = APIRouter(prefix="/api/v1", tags=["reply"])

    @router.post(
        "/reply",
        response_model=ReplyResponse,
        summary="Generate a sarcastic reply for a message.",
    )
    async def reply_endpoint(payload: Any = Body(None)) -> ReplyResponse:
        try:
            request = validate_reply_input(payload)
        except ValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail={"errors": exc.errors},
            ) from exc

        try:
            return await reply_service.generate(request)
        except GenerationError as exc:
            raise HTTPException(
                status_code=502,
                detail=GENERATION_FAILED_DETAIL,
            ) from exc

    @router.get(
        "/reply/options",
        response_model=ReplyOptionsResponse,
        summary="List the languages and sarcasm levels the form may submit.",
    )
    async def reply_options() -> ReplyOptionsResponse:
        return ReplyOptionsResponse(
            languages=list(Language),
            sarcasm_levels=list(SarcasmLevel),
            max_message_length=MAX_MESSAGE_LENGTH,
            default_language=DEFAULT_LANGUAGE,
            default_sarcasm_level=DEFAULT_SARCASM_LEVEL,
        )

    return router
