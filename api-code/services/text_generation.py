from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional, Protocol, Type

import google.generativeai as genai
from pydantic import BaseModel

from domain import GenerationError


logger = logging.getLogger("eehsawa.gemini")

GEMINI_MODEL_NAME = "gemini-2.5-flash"


class TextGenerator(Protocol):
    """Capability that turns a prompt into a structured result matching ``output_shape``."""

    model_name: str

    async def generate(self, prompt: str, output_shape: Type[BaseModel]) -> Any:
        ...


class GeminiTextGenerator:
    """Gemini-backed TextGenerator asking for JSON output that matches the given shape."""

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = GEMINI_MODEL_NAME,
        request_timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.request_timeout = request_timeout

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, output_shape: Type[BaseModel]) -> Any:
        if not prompt:
            raise ValueError("Prompt must be a non-empty string.")

        if not self.api_key:
            raise GenerationError("GEMINI_API_KEY is not configured.")

        response_text = await asyncio.to_thread(self._call_gemini, prompt, output_shape)
        if not response_text:
            raise GenerationError("Gemini returned an empty response.")

        try:
            return json.loads(response_text)
        except json.JSONDecodeError as exc:
            raise GenerationError("Gemini returned a response that is not valid JSON.") from exc

    def _call_gemini(self, prompt: str, output_shape: Type[BaseModel]) -> str:
        genai.configure(api_key=self.api_key)
        model = genai.GenerativeModel(self.model_name)
        generation_config = genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=output_shape,
        )
        request_options: Dict[str, Any] = {}
        if self.request_timeout:
            request_options["timeout"] = self.request_timeout

        response: Any = model.generate_content(
            prompt,
            generation_config=generation_config,
            request_options=request_options or None,
        )
        if hasattr(response, "text") and response.text:
            return response.text.strip()

        # walk candidates/parts when the text shortcut is empty
        candidates = getattr(response, "candidates", None) or []
        for candidate in candidates:
            parts = getattr(candidate, "content", None)
            if not parts:
                continue
            for part in getattr(parts, "parts", []):
                text = getattr(part, "text", None)
                if text:
                    return text.strip()

        return ""
