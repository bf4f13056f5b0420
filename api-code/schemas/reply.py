from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from domain import MAX_MESSAGE_LENGTH, Language, SarcasmLevel


class ReplyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(
        ...,
        min_length=1,
        max_length=MAX_MESSAGE_LENGTH,
        description="Message the assistant should answer sarcastically.",
    )
    language: Language = Field(..., description="Language of the reply.")
    sarcasm_level: SarcasmLevel = Field(
        ..., alias="sarcasmLevel", description="How sarcastic the reply should be."
    )


class ReplyResponse(BaseModel):
    reply: str = Field(..., description="The generated sarcastic reply.")


class ReplyOptionsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    languages: List[Language]
    sarcasm_levels: List[SarcasmLevel] = Field(..., alias="sarcasmLevels")
    max_message_length: int = Field(..., alias="maxMessageLength")
    default_language: Language = Field(..., alias="defaultLanguage")
    default_sarcasm_level: SarcasmLevel = Field(..., alias="defaultSarcasmLevel")
