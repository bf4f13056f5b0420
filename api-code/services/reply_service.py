from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from domain import GenerationError
from schemas import ReplyRequest, ReplyResponse

from .reply_prompt import build_reply_prompt
from .text_generation import TextGenerator


logger = logging.getLogger("eehsawa.reply")


class SarcasticReplyService:
    """Turns a validated ReplyRequest into a single sarcastic reply.

    One outbound call per request: no retry, no caching, no fallback text.
    Every failure of the generator, including a result that does not match
    ReplyResponse, surfaces as GenerationError.
    """

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    @property
    def model_name(self) -> str:
        return getattr(self.generator, "model_name", "unknown")

    async def generate(self, request: ReplyRequest) -> ReplyResponse:
        prompt = build_reply_prompt(request)
        logger.info(
            "Generating reply language=%s sarcasm_level=%s message_chars=%d model=%s",
            request.language.value,
            request.sarcasm_level.value,
            len(request.message),
            self.model_name,
        )

        try:
            result = await self.generator.generate(prompt, ReplyResponse)
        except GenerationError:
            logger.exception("Reply generation failed.")
            raise
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Reply generation failed: %s", exc)
            raise GenerationError("Reply generation failed.") from exc

        if isinstance(result, ReplyResponse):
            return result

        try:
            return ReplyResponse.model_validate(result)
        except PydanticValidationError as exc:
            logger.error("Generator output did not match the reply shape: %s", exc)
            raise GenerationError("Generator returned a malformed reply.") from exc
